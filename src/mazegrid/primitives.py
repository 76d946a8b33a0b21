# src/mazegrid/primitives.py
# Position/direction vocabulary shared by the grid, the generators and the
# distance field. Row 0 is the southern (bottom) row.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NewType, Tuple

Row = NewType("Row", int)
Col = NewType("Col", int)


@dataclass(frozen=True, order=True)
class GridPos:
    # Field order gives the (row, then col) total order.
    row: Row
    col: Col

    @classmethod
    def at(cls, row: int, col: int) -> "GridPos":
        return cls(Row(row), Col(col))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


class Direction(Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def reverse(self) -> "Direction":
        return _REVERSE[self]

    @property
    def flag(self) -> str:
        """Name of the Cell field holding the open/closed state for this side."""
        return f"{self.value}_open"


_REVERSE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}
