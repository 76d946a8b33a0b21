# src/mazegrid/rng.py
# Explicit, seedable random sources. Generators never touch global random state;
# they take one of these as a parameter and only call bounded().

import time
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, TypeVar

A = 16807
M = 0x7FFFFFFF  # 2^31-1
LOW16_SPAN = 32769  # distinct values of low16_signed_abs

T = TypeVar("T")


class RandomExhausted(RuntimeError):
    """A scripted random source ran out of draws."""


class RandomSource(Protocol):
    def bounded(self, n: int) -> int:
        """Return an int in 1..n."""
        ...


def pm_next(state: int) -> int:
    return (state * A) % M

def low16_signed_abs(x32: int) -> int:
    w = x32 & 0xFFFF
    if w & 0x8000:
        w = -((~w + 1) & 0xFFFF)
    return abs(w)

@dataclass
class PMRandom:
    """Park-Miller minimal standard generator."""
    state: int

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"bounded() needs n > 0, got {n}")
        # low16_signed_abs spans 0..32768; redraw the uneven tail so every
        # result in 1..n is equally likely
        limit = LOW16_SPAN - LOW16_SPAN % n
        w = low16_signed_abs(self.next32())
        while w >= limit:
            w = low16_signed_abs(self.next32())
        return (w % n) + 1


def seeded(seed: Optional[int] = None) -> PMRandom:
    """
    Build a PMRandom from any int. State 0 is a fixed point of the LCG, so
    seeds are folded into 1..M-1. None seeds from the clock.
    """
    if seed is None:
        seed = time.time_ns()
    return PMRandom((seed % (M - 1)) + 1)


@dataclass
class SequenceRandom:
    """
    Replays scripted bounded() results, for tests that need an exact carve
    sequence. Running out is fatal to the caller.
    """
    draws: List[int]
    used: int = field(default=0)

    def bounded(self, n: int) -> int:
        if self.used >= len(self.draws):
            raise RandomExhausted(f"scripted source exhausted after {self.used} draws")
        v = self.draws[self.used]
        self.used += 1
        if not 1 <= v <= n:
            raise ValueError(f"scripted draw {v} outside 1..{n}")
        return v


def coin(rng: RandomSource) -> bool:
    return rng.bounded(2) == 1

def pick(rng: RandomSource, seq: Sequence[T]) -> T:
    if not seq:
        raise ValueError("pick() from an empty sequence")
    return seq[rng.bounded(len(seq)) - 1]
