# src/mazegrid/analysis.py
# Structural checks on carved grids (used by tests and tools/mazetool.py).

from .engine.distances import DistanceField
from .grid import Grid
from .primitives import Col, Direction, GridPos, Row


def passage_count(grid: Grid) -> int:
    return sum(1 for _ in grid.passages())

def is_connected(grid: Grid) -> bool:
    field = DistanceField.new(GridPos(Row(0), Col(0))).run_to_completion(grid)
    return field.visited_count == len(grid)

def is_perfect(grid: Grid) -> bool:
    """
    A perfect maze is a spanning tree of the cell graph: connected, and with
    exactly one passage fewer than cells (so no cycles).
    """
    return passage_count(grid) == len(grid) - 1 and is_connected(grid)

def is_symmetric(grid: Grid) -> bool:
    """Every open flag is mirrored by its neighbor; none opens to the outside."""
    for cell in grid.cells():
        for direction in Direction:
            if not cell.is_open_to(direction):
                continue
            other = grid.relative_position(cell.pos, direction)
            if other is None or not grid.get(other).is_open_to(direction.reverse):
                return False
    return True
