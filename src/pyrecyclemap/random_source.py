"""Injectable randomness for the simulator.

Ticks only ever call ``randint`` and ``random``, so any object with
those two methods can drive a simulation. :class:`random.Random`
satisfies the protocol as-is; tests pass a scripted source to force
specific branches.
"""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...

    def random(self) -> float: ...


def create_random_source(seed: int | None = None) -> RandomSource:
    """Return a seedable generator. ``None`` seeds from the OS."""
    return random.Random(seed)  # noqa: S311
