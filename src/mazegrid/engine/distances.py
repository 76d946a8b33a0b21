# src/mazegrid/engine/distances.py
# Breadth-first distance field over a maze, one immutable snapshot per step.
# The grid is passed to every call rather than stored, so one grid can feed any
# number of independent runs.

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..grid import Grid
from ..primitives import Direction, GridPos

log = logging.getLogger(__name__)


def _expand(grid: Grid, pos: GridPos, distances: Dict[GridPos, int]) -> Iterator[GridPos]:
    """Record and yield every unvisited open neighbor of pos (N, E, S, W order)."""
    cell = grid.get(pos)
    d = distances[pos] + 1
    for direction in Direction:
        if not cell.is_open_to(direction):
            continue
        linked = grid.relative_position(pos, direction)
        if linked is None or linked in distances:
            continue
        distances[linked] = d
        yield linked


@dataclass(frozen=True)
class DistanceField:
    root: GridPos
    distances: Mapping[GridPos, int]
    frontier: Tuple[GridPos, ...]
    max_distance: int = 0

    # distances is a read-only mapping view, which cannot be hashed
    __hash__ = None

    @classmethod
    def new(cls, root: GridPos) -> "DistanceField":
        return cls(
            root=root,
            distances=MappingProxyType({root: 0}),
            frontier=(root,),
            max_distance=0,
        )

    @property
    def is_terminal(self) -> bool:
        return not self.frontier

    @property
    def visited_count(self) -> int:
        return len(self.distances)

    def distance(self, pos: GridPos) -> Optional[int]:
        """Distance to pos, or None while the fill has not reached it yet."""
        return self.distances.get(pos)

    def step(self, grid: Grid) -> Optional["DistanceField"]:
        """
        Expand the head of the frontier and return the resulting snapshot, or
        None once the frontier is empty. FIFO expansion keeps distances equal
        to shortest-path lengths on the unweighted passage graph.
        """
        if not self.frontier:
            return None

        pos = self.frontier[0]
        distances = dict(self.distances)
        added = list(_expand(grid, pos, distances))
        max_distance = self.max_distance
        if added:
            max_distance = max(max_distance, distances[pos] + 1)

        return DistanceField(
            root=self.root,
            distances=MappingProxyType(distances),
            frontier=self.frontier[1:] + tuple(added),
            max_distance=max_distance,
        )

    def run_to_completion(self, grid: Grid) -> "DistanceField":
        """
        Same result as stepping until None, but in a single pass over one dict
        and one queue; only the terminal snapshot is built.
        """
        distances = dict(self.distances)
        queue = deque(self.frontier)
        max_distance = self.max_distance
        steps = 0
        while queue:
            pos = queue.popleft()
            for linked in _expand(grid, pos, distances):
                queue.append(linked)
                max_distance = max(max_distance, distances[linked])
            steps += 1

        log.debug(
            "distance field from %s finished after %d steps (visited=%d, max=%d)",
            self.root, steps, len(distances), max_distance,
        )
        return DistanceField(
            root=self.root,
            distances=MappingProxyType(distances),
            frontier=(),
            max_distance=max_distance,
        )

    def run_to_completion_all(self, grid: Grid) -> List["DistanceField"]:
        """Every snapshot from this one to the terminal state, in order."""
        states = [self]
        while True:
            nxt = states[-1].step(grid)
            if nxt is None:
                break
            states.append(nxt)
        log.debug("distance field from %s recorded %d snapshots", self.root, len(states))
        return states
