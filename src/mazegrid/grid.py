# src/mazegrid/grid.py
# Immutable maze grid: a flat tuple of cells addressed by row * column_count + col.
# Every update returns a new Grid; older values keep their own tuple.

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Tuple

from .primitives import Col, Direction, GridPos, Row


@dataclass(frozen=True)
class Cell:
    pos: GridPos
    north_open: bool = False
    east_open: bool = False
    south_open: bool = False
    west_open: bool = False

    def is_open_to(self, direction: Direction) -> bool:
        return getattr(self, direction.flag)

    def opened(self, direction: Direction) -> "Cell":
        return replace(self, **{direction.flag: True})


@dataclass(frozen=True)
class Grid:
    column_count: int
    row_count: int
    buf: Tuple[Cell, ...] = field(repr=False)

    @classmethod
    def new(cls, columns: int, rows: int) -> "Grid":
        """Return a columns x rows grid with every wall closed."""
        if columns < 1 or rows < 1:
            raise ValueError(f"grid needs at least one row and column, got {columns}x{rows}")
        buf = tuple(
            Cell(GridPos(Row(row), Col(col)))
            for row in range(rows)
            for col in range(columns)
        )
        return cls(column_count=columns, row_count=rows, buf=buf)

    # --- addressing ---

    def contains(self, pos: GridPos) -> bool:
        return 0 <= pos.row < self.row_count and 0 <= pos.col < self.column_count

    def idx(self, pos: GridPos) -> int:
        # Positions outside the rectangle are a programming error, never a lookup miss.
        if not self.contains(pos):
            raise IndexError(
                f"{pos} outside {self.column_count}x{self.row_count} grid"
            )
        return pos.row * self.column_count + pos.col

    def get(self, pos: GridPos) -> Cell:
        return self.buf[self.idx(pos)]

    # --- boundaries ---

    def at_northern_boundary(self, pos: GridPos) -> bool:
        return pos.row == self.row_count - 1

    def at_eastern_boundary(self, pos: GridPos) -> bool:
        return pos.col == self.column_count - 1

    def at_southern_boundary(self, pos: GridPos) -> bool:
        return pos.row == 0

    def at_western_boundary(self, pos: GridPos) -> bool:
        return pos.col == 0

    def at_boundary(self, pos: GridPos, direction: Direction) -> bool:
        if direction is Direction.NORTH:
            return self.at_northern_boundary(pos)
        if direction is Direction.EAST:
            return self.at_eastern_boundary(pos)
        if direction is Direction.SOUTH:
            return self.at_southern_boundary(pos)
        return self.at_western_boundary(pos)

    def relative_position(self, pos: GridPos, direction: Direction) -> Optional[GridPos]:
        """
        Neighbor of pos in the given direction, or None when pos sits on that
        boundary. The boundary check runs before any subtraction so row/col
        never go negative.
        """
        if self.at_boundary(pos, direction):
            return None
        if direction is Direction.NORTH:
            return GridPos(Row(pos.row + 1), pos.col)
        if direction is Direction.EAST:
            return GridPos(pos.row, Col(pos.col + 1))
        if direction is Direction.SOUTH:
            return GridPos(Row(pos.row - 1), pos.col)
        return GridPos(pos.row, Col(pos.col - 1))

    # --- updates ---

    def _with_cells(self, *cells: Cell) -> "Grid":
        buf = list(self.buf)
        for cell in cells:
            buf[self.idx(cell.pos)] = cell
        return replace(self, buf=tuple(buf))

    def link(self, pos: GridPos, direction: Direction) -> "Grid":
        """
        Open the wall between pos and its neighbor in direction, on both sides.
        Linking toward the outside of the rectangle raises ValueError and leaves
        the grid untouched.
        """
        other = self.relative_position(pos, direction)
        if other is None:
            raise ValueError(f"cannot link {pos} {direction.value}: no neighbor")
        return self._with_cells(
            self.get(pos).opened(direction),
            self.get(other).opened(direction.reverse),
        )

    # --- iteration ---

    def cells(self) -> Iterator[Cell]:
        # Fresh iterator per call, so callers can walk the grid repeatedly.
        return iter(self.buf)

    def __iter__(self) -> Iterator[Cell]:
        return self.cells()

    def __len__(self) -> int:
        return len(self.buf)

    def positions(self) -> List[GridPos]:
        return sorted(cell.pos for cell in self.buf)

    def rows(self) -> List[List[GridPos]]:
        """Positions grouped by row, southern row first, columns ascending."""
        return [
            [GridPos(Row(row), Col(col)) for col in range(self.column_count)]
            for row in range(self.row_count)
        ]

    def passages(self) -> Iterator[Tuple[GridPos, Direction]]:
        """Each open shared edge once, reported from its southern/western cell."""
        for cell in self.buf:
            if cell.east_open and not self.at_eastern_boundary(cell.pos):
                yield cell.pos, Direction.EAST
            if cell.north_open and not self.at_northern_boundary(cell.pos):
                yield cell.pos, Direction.NORTH
