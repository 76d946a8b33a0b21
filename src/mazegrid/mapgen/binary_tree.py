# src/mazegrid/mapgen/binary_tree.py
# Binary-tree carve: every cell opens either east or north, whichever the
# boundary allows. The north-east corner has no choice and is left alone.

import logging
from typing import List

from ..grid import Grid
from ..primitives import Direction
from ..rng import RandomSource, pick

log = logging.getLogger(__name__)


def run_binary_tree(grid: Grid, rng: RandomSource) -> Grid:
    for row in grid.rows():
        for pos in row:
            choices: List[Direction] = []
            if not grid.at_eastern_boundary(pos):
                choices.append(Direction.EAST)
            if not grid.at_northern_boundary(pos):
                choices.append(Direction.NORTH)
            if not choices:
                continue
            grid = grid.link(pos, pick(rng, choices))

    log.debug("binary tree carved %dx%d grid", grid.column_count, grid.row_count)
    return grid
