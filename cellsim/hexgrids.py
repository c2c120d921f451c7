"""Hexagonal neighbour grids numbered as an outward spiral, and wrapped worlds."""

from __future__ import annotations

from dataclasses import dataclass

GRID_SIZE = 5000

Grid = list[list[int]]


def _open_slot(row: list[int]) -> int:
    """Return the first empty direction that follows a filled one, going round."""
    found_filled = False
    j = 0
    for _ in range(12):
        if found_filled and row[j] == -1:
            return j
        if row[j] != -1:
            found_filled = True
        j = (j + 1) % 6
    raise RuntimeError("hex cell has no open slot next to a filled one")


def build_neighbor_grid(size: int) -> Grid:
    """Return the six neighbours of every cell of a spiral-numbered hex plane.

    Entry ``[i][d]`` is the cell next to ``i`` in direction ``d``, or -1
    where that cell lies beyond ``size``.
    """
    if size < 2:
        raise ValueError("a neighbour grid needs at least two cells")
    grid = [[-1] * 6 for _ in range(size)]
    grid[0][0] = 1
    grid[1][3] = 0
    for i in range(1, size - 1):
        current = grid[i]
        j = _open_slot(current)
        k = (j + 5) % 6
        nxt = i + 1
        current[j] = nxt
        grid[nxt][(j + 3) % 6] = i
        grid[current[k]][(j + 1) % 6] = nxt
        grid[nxt][(j + 4) % 6] = current[k]
        beyond = grid[current[k]][j]
        if beyond != -1:
            grid[beyond][(k + 3) % 6] = nxt
            grid[nxt][k] = beyond
    return grid


def _spiral_positions(size, start, steps):
    """Walk the spiral numbering, yielding positions built from ``steps``.

    ``start`` is the offset applied when a new ring begins and ``steps``
    holds the offset for each of the six sides.
    """
    positions = [(0, 0)] * size
    rings = [0] * size
    side = 0
    drawn = 0
    side_len = 1
    x, y = start
    for i in range(1, size - 1):
        if drawn == side_len:
            drawn = 0
            side += 1
            if side == 6:
                side = 0
                side_len += 1
                x += start[0]
                y += start[1]
        dx, dy = steps[side]
        x += dx
        y += dy
        positions[i] = (x, y)
        rings[i] = side_len
        drawn += 1
    return positions, rings


_XY_STEPS = ((4, 0), (2, 4), (-2, 4), (-4, 0), (-2, -4), (2, -4))
_SECTOR_XY_STEPS = ((0, 4), (4, 2), (4, -2), (0, -4), (-4, -2), (-4, 2))


def build_distance_and_xy_grids(size: int) -> tuple[list[int], list[tuple[int, int]]]:
    """Return each cell's ring number and its drawing position."""
    if size < 1:
        raise ValueError("grid size must be positive")
    positions, rings = _spiral_positions(size, (-2, -4), _XY_STEPS)
    return rings, positions


def build_sector_xy_grid(size: int) -> list[tuple[int, int]]:
    """Return each cell's drawing position with the hexagons turned on their side."""
    if size < 1:
        raise ValueError("grid size must be positive")
    positions, _ = _spiral_positions(size, (-4, -2), _SECTOR_XY_STEPS)
    return positions


def build_world_grid(world_size: int, neighbor_grid: Grid) -> tuple[Grid, int]:
    """Return a wrapped hex grid of roughly ``world_size`` cells and its cell count.

    The grid has as many rows as ``neighbor_grid``; rows past the count are
    all zero.  Cells on the edge link round to the opposite side.
    """
    remaining = world_size - 1
    used = 1
    rings = 1
    while remaining > rings * 6:
        used += rings * 6
        remaining -= rings * 6
        rings += 1
    count = used + rings * 3 - 1
    if count > len(neighbor_grid):
        raise ValueError("neighbour grid too small for the requested world")

    grid: Grid = [[0] * 6 for _ in range(len(neighbor_grid))]

    def place(i: int, j: int, direction: int) -> None:
        grid[i][(direction + 6) % 6] = j
        grid[j][(direction + 9) % 6] = i

    for i in range(used):
        grid[i] = list(neighbor_grid[i])

    direction = 1
    reverse_i = used - 1 - (rings - 1) * 2
    for i in range(used, count):
        grid[i] = list(neighbor_grid[i])
        place(i, reverse_i, direction)
        reverse_i -= 1
        if (i - used + 1) % rings == 0:
            if direction == 1:
                place(i, i + rings * 2 - 1, direction - 1)
            else:
                place(i, i - rings * 2 + 1, direction - 1)
            direction -= 1
            reverse_i += rings * 2 - 1
        place(i, reverse_i, direction - 1)
        if i + 1 == count:
            grid[i][3] = used + rings - 1
    return grid, count


def build_sector_neighbor_grid(neighbor_grid: Grid, sector_grid: Grid) -> list[int]:
    """Mark sector cells by how many wrap-around edges a spiral walk had crossed.

    The spiral of the open plane is followed on the wrapped sector; each
    time the two grids disagree an edge has been crossed.  The walk stops
    after the sixth crossing.
    """
    result = [0] * len(sector_grid)
    neighbor_number = -1
    current = 0
    sector_pos = 0
    while neighbor_number != 6:
        result[sector_pos] = neighbor_number
        try:
            direction = neighbor_grid[current].index(current + 1)
        except (ValueError, IndexError):
            raise RuntimeError("neighbour grid too small to finish the walk") from None
        current = neighbor_grid[current][direction]
        if sector_grid[sector_pos][direction] != neighbor_grid[sector_pos][direction]:
            neighbor_number += 1
        sector_pos = sector_grid[sector_pos][direction]
    return result


def spiral_from_point(center: int, places: int, grid: Grid) -> list[int]:
    """Return ``places`` cells spiralling out from ``center``; never fewer than two."""
    result = [center]
    direction = 4
    ring = 1
    recorded = 0
    go_outward = False
    position = grid[center][0]
    result.append(position)
    for _ in range(places - 2):
        if go_outward:
            go_outward = False
            position = grid[position][0]
        else:
            position = grid[position][direction]
        recorded += 1
        result.append(position)
        if recorded == ring:
            recorded = 0
            if direction == 0:
                go_outward = True
                ring += 1
            direction = (direction + 5) % 6
    return result


def _edge_rings(cells: int) -> int:
    rings = 1
    while cells > 0:
        cells -= rings * 6
        rings += 1
    return rings


@dataclass(frozen=True)
class HexGrids:
    """All grids describing a wrapped world made of wrapped sectors."""

    neighbor: Grid
    distance: list[int]
    xy: list[tuple[int, int]]
    sector_xy: list[tuple[int, int]]
    world: Grid
    sector: Grid
    sector_neighbor: list[int]
    num_sectors: int
    total_sector_positions: int
    sector_edge_positions: int
    world_edge_positions: int

    @classmethod
    def build(cls, sector_size: int, world_sectors: int) -> "HexGrids":
        """Build every grid for a world of ``world_sectors`` sectors of ``sector_size`` cells."""
        neighbor = build_neighbor_grid(GRID_SIZE)
        distance, xy = build_distance_and_xy_grids(GRID_SIZE)
        sector_xy = build_sector_xy_grid(GRID_SIZE)
        world, num_sectors = build_world_grid(world_sectors, neighbor)
        sector, sector_positions = build_world_grid(sector_size, neighbor)
        sector_neighbor = build_sector_neighbor_grid(neighbor, sector)
        return cls(
            neighbor=neighbor,
            distance=distance,
            xy=xy,
            sector_xy=sector_xy,
            world=world,
            sector=sector,
            sector_neighbor=sector_neighbor,
            num_sectors=num_sectors,
            total_sector_positions=sector_positions,
            sector_edge_positions=_edge_rings(sector_size),
            world_edge_positions=_edge_rings(num_sectors),
        )