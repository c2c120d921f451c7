"""Chromosomes, genetic code layers and the link structure read from them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from .compound import Compound

CHROMOSOME_LENGTH = 256

COMPOUND_SEPARATOR = 254
LAYER_SEPARATOR = 255

COMPOUND_COUNT = 150
PARTS_LENGTH = 250 + 64
LINKS_LENGTH = 30


def _random_code_byte(rng: random.Random) -> int:
    # Never zero and never one of the reserved marker values.
    return 1 + rng.randrange(250)


def randomize_chromosome(rng: random.Random) -> bytearray:
    """Return a fresh chromosome of random nucleotides, each from 0 to 254."""
    return bytearray(rng.randrange(255) for _ in range(CHROMOSOME_LENGTH))


def copy_chromosome(dna: Sequence[int]) -> bytearray:
    """Return an independent copy of a chromosome."""
    if len(dna) != CHROMOSOME_LENGTH:
        raise ValueError(f"a chromosome has {CHROMOSOME_LENGTH} nucleotides, got {len(dna)}")
    return bytearray(dna)


def mutate_chromosome(dna: bytearray, rng: random.Random) -> None:
    """Overwrite between zero and three random nucleotides in place."""
    if len(dna) != CHROMOSOME_LENGTH:
        raise ValueError(f"a chromosome has {CHROMOSOME_LENGTH} nucleotides, got {len(dna)}")
    for _ in range(rng.randrange(7) - 3, 0, -1):
        position = rng.randrange(CHROMOSOME_LENGTH)
        dna[position] = rng.randrange(256)


def parse_compound_from_genetic_code(dna: Sequence[int], location: int) -> Compound:
    """Read the first non-empty compound found from ``location`` onwards, wrapping round."""
    if len(dna) != CHROMOSOME_LENGTH:
        raise ValueError(f"a chromosome has {CHROMOSOME_LENGTH} nucleotides, got {len(dna)}")
    for offset in range(CHROMOSOME_LENGTH):
        code = dna[(location + offset) % CHROMOSOME_LENGTH] % 256
        compound = Compound.from_code(code)
        if compound.sum != 0:
            return compound
    raise ValueError("chromosome encodes no non-empty compound")


@dataclass
class CodeLayers:
    """The four layers of a genetic code: compounds, parts, links and neural net."""

    compounds: list[bytes] = field(default_factory=list)
    parts: bytes = b""
    links: bytes = b""
    neural_net: bytes = b""


def create_random_code(
    universe_comps: Sequence[bytes], nn_size: int, rng: random.Random
) -> bytes:
    """Build a random genetic code from compound strings found in the universe.

    The code ends at its first zero byte, as a C string would.
    """
    if not universe_comps:
        raise ValueError("at least one compound string is needed")
    buf = bytearray()
    for _ in range(COMPOUND_COUNT):
        buf += universe_comps[rng.randrange(len(universe_comps))]
        buf.append(COMPOUND_SEPARATOR)
    buf.append(LAYER_SEPARATOR)
    buf += bytes(_random_code_byte(rng) for _ in range(PARTS_LENGTH))
    buf.append(LAYER_SEPARATOR)
    buf += bytes(_random_code_byte(rng) for _ in range(LINKS_LENGTH))
    buf.append(LAYER_SEPARATOR)
    buf += bytes(_random_code_byte(rng) for _ in range(nn_size))
    end = buf.find(0)
    return bytes(buf if end < 0 else buf[:end])


def disassemble_code(code: bytes) -> CodeLayers:
    """Split a genetic code into its layers; anything after the fourth layer is dropped."""
    sections = bytes(code).split(bytes([LAYER_SEPARATOR]))
    sections += [b""] * (4 - len(sections))
    compounds = sections[0].split(bytes([COMPOUND_SEPARATOR]))
    if compounds[-1] == b"":
        compounds.pop()
    return CodeLayers(
        compounds=compounds,
        parts=sections[1],
        links=sections[2],
        neural_net=sections[3],
    )


def concat_code_layers(layers: CodeLayers) -> bytes:
    """Join code layers back into one genetic code."""
    compound_layer = b"".join(c + bytes([COMPOUND_SEPARATOR]) for c in layers.compounds)
    separator = bytes([LAYER_SEPARATOR])
    return separator.join((compound_layer, layers.parts, layers.links, layers.neural_net))


def mutate_code(code: bytes) -> bytes:
    """Return the code after passing it through its layers once."""
    return concat_code_layers(disassemble_code(code))


def _read(data: bytes, index: int) -> int:
    """Read a byte, treating the position just past the end as a terminating zero."""
    if index == len(data):
        return 0
    if not 0 <= index < len(data):
        raise IndexError(f"code position {index} out of range")
    return data[index]


def construct_links(
    parts: bytes, links: bytes, num_links: int, idx: int
) -> tuple[list[int], list[int]]:
    """Walk the link layer from ``idx`` and return the links and their branch behaviour.

    A positive branch value means that many new parts follow; a negative one
    means looping back by its magnitude less ten.
    """
    link_list = [idx, idx + 1]
    branches = [1]
    position = 1
    while position < len(link_list):
        link_idx = link_list[position]
        link = _read(links, link_idx)
        operation = (_read(parts, link) % 8 + 3) // 5
        if operation == 0:
            target = _read(parts, link + 1) % 4 - _read(parts, link + 2) % 4 + 10
            branches.append(-target)
        elif operation == 1:
            first = _read(parts, link + 1)
            target = ((first % 2 + 1) * first) % 4 + 1
            branches.append(0)
            for step in range(target):
                link_idx += (_read(parts, (link + 2 + 2 * step) % 250) % 8) * (
                    _read(parts, (link + 3 + 2 * step) % 250) % 8
                )
                if link_idx >= num_links:
                    break
                branches[-1] += 1
                link_list.append(link_idx + 1)
        else:
            branches.append(0)
        position += 1
    return link_list, branches