"""Closed and open real intervals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tracer.vec3 import INFINITY


class IntervalWorldChoice(Enum):
    EMPTY = "empty"
    UNIVERSE = "universe"


@dataclass(frozen=True, slots=True)
class Interval:
    """A range of real numbers from ``min`` to ``max``."""

    min: float = INFINITY
    max: float = INFINITY

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        """True when ``x`` lies in the closed interval."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """True when ``x`` lies strictly inside the interval."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x


def world_choice(choice: IntervalWorldChoice) -> Interval:
    """The empty interval or the whole real line."""
    if choice is IntervalWorldChoice.EMPTY:
        return Interval(INFINITY, -INFINITY)
    if choice is IntervalWorldChoice.UNIVERSE:
        return Interval(-INFINITY, INFINITY)
    raise ValueError(f"unknown interval choice: {choice!r}")