# src/mazegrid/mapgen/sidewinder.py
# Sidewinder carve: rows are processed south to north, each row split into runs
# that are linked east and closed out with a single carve north.

import logging
from typing import List

from ..grid import Grid
from ..primitives import Direction, GridPos
from ..rng import RandomSource, coin, pick

log = logging.getLogger(__name__)


def run_sidewinder(grid: Grid, rng: RandomSource) -> Grid:
    """
    Return a new grid carved into a perfect maze.

    Per cell: append it to the run, then close the run if the cell is on the
    eastern boundary or (outside the top row) a coin says so. Closing links a
    random run member north, unless this is the top row; otherwise the cell is
    linked east. The top row therefore becomes one long east-west corridor.
    """
    for row in grid.rows():
        run: List[GridPos] = []
        for pos in row:
            run.append(pos)
            top_row = grid.at_northern_boundary(pos)
            # coin() is only drawn outside the top row, so scripted sources line up
            close_out = grid.at_eastern_boundary(pos) or (not top_row and coin(rng))

            if close_out:
                chosen = pick(rng, run)
                run = []
                if not top_row:
                    grid = grid.link(chosen, Direction.NORTH)
            else:
                grid = grid.link(pos, Direction.EAST)

    log.debug("sidewinder carved %dx%d grid", grid.column_count, grid.row_count)
    return grid
