from dataclasses import dataclass
from typing import Optional

ALGORITHM_NAMES = ("sidewinder", "binary_tree")

@dataclass(frozen=True)
class MazeConfig:
    columns: int = 8
    rows: int = 8
    algorithm: str = "sidewinder"
    # None draws a clock-based seed at generation time.
    seed: Optional[int] = None

    def __post_init__(self):
        if self.columns < 1 or self.rows < 1:
            raise ValueError(f"maze needs at least 1x1 cells, got {self.columns}x{self.rows}")
        if self.algorithm not in ALGORITHM_NAMES:
            raise ValueError(f"unknown algorithm {self.algorithm!r}; expected one of {ALGORITHM_NAMES}")

# Defaults (tools override from the command line)
DEFAULTS = MazeConfig()
