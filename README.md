# cellsim

Building blocks for an artificial-chemistry simulation of simple cells.
The package is a library; it has no command-line entry point.

## What it offers

- `cellsim.element` — `Element`, a particle with mass (`red`), desired bond
  count (`green`) and charge (`blue`), plus `current_green` and
  `current_blue` for its present neighbourhood. `instability()` measures
  how far it is from its preferred state. `PeriodicTable` holds named
  elements: `add` appends one, `get` looks one up by name and raises
  `KeyError` when there is none; the table also supports `len`, iteration
  and `in`.
- `cellsim.compound` — `Compound`, a count of four element kinds weighted
  by the primes 2, 3, 5 and 7. Build one from a single byte with
  `Compound.from_code` (0 to 3 of each element), or a fit mask from two
  bytes with `Compound.mask` (-3 to 4 of each element). The `sum` and
  `element_count` properties, and the methods `total_instability()`,
  `activation_instability()` and `product()`, describe it.
- `cellsim.fitness` — `difference` (what must be added to one compound to
  reach another), `fit_score` (lower means a better fit between a compound
  and a mask) and `color` (an RGBA tuple for drawing a compound).
- `cellsim.hexgrids` — neighbour tables for a hexagonal plane numbered as an
  outward spiral (`build_neighbor_grid`), ring numbers and drawing positions
  (`build_distance_and_xy_grids`, `build_sector_xy_grid`), wrapped world
  grids (`build_world_grid`, `build_sector_neighbor_grid`), spiral walks
  (`spiral_from_point`), and `HexGrids.build`, which builds them all at once.
- `cellsim.genetics` — random chromosomes (`randomize_chromosome`),
  `copy_chromosome`, `mutate_chromosome`, decoding a compound from DNA
  (`parse_compound_from_genetic_code`), and the layered genetic code format:
  `create_random_code`, `disassemble_code`, `concat_code_layers`,
  `mutate_code`, the `CodeLayers` dataclass and `construct_links`.

## Example

```python
import random

from cellsim.compound import Compound
from cellsim.fitness import fit_score
from cellsim.genetics import randomize_chromosome, parse_compound_from_genetic_code

rng = random.Random(40)
dna = randomize_chromosome(rng)
structure = parse_compound_from_genetic_code(dna, 0)
mask = Compound.mask(dna[1], dna[2])

print(structure.total_instability(), fit_score(structure, mask))
```

## What it does not do

The package supplies the pieces only. It has no simulation loop that runs
reactions or moves compounds between sectors, no organelles or organisms,
no window or on-screen display, and no command to start anything. Random
choices are made through a `random.Random` instance you pass in.

## Running the tests

```
pip install -e .[test]
pytest
```