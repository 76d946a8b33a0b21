# src/mazegrid/mapgen/generator.py
# Canonical maze entry point: walled grid of the configured size, carved by the
# configured algorithm with a seeded (or caller-supplied) random source.

import logging
from typing import Callable, Dict, Optional

from ..config import MazeConfig
from ..grid import Grid
from ..rng import RandomSource, seeded
from .binary_tree import run_binary_tree
from .sidewinder import run_sidewinder

log = logging.getLogger(__name__)

Carver = Callable[[Grid, RandomSource], Grid]

ALGORITHMS: Dict[str, Carver] = {
    "sidewinder": run_sidewinder,
    "binary_tree": run_binary_tree,
}


def carver_for(name: str) -> Carver:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"unknown algorithm {name!r}; expected one of {sorted(ALGORITHMS)}") from None


def generate_grid(config: MazeConfig, rng: Optional[RandomSource] = None) -> Grid:
    carve = carver_for(config.algorithm)
    if rng is None:
        rng = seeded(config.seed)
    log.debug(
        "generating %dx%d maze with %s (seed=%s)",
        config.columns, config.rows, config.algorithm, config.seed,
    )
    return carve(Grid.new(config.columns, config.rows), rng)
