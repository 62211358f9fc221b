"""Strength curves: how a hero's effect grows with its level."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LinearCurve:
    """``base + slope * level``."""

    base: float = 0.0
    slope: float = 1.0

    def value_for(self, level: int) -> float:
        return self.base + self.slope * level


@dataclass(frozen=True)
class QuadraticCurve:
    """``base + factor * level**2``."""

    base: float = 0.0
    factor: float = 1.0

    def value_for(self, level: int) -> float:
        return self.base + self.factor * level * level


@dataclass(frozen=True)
class ExponentialDecay:
    """``exp(-level / scale)``, starting at 1.0 and falling towards 0."""

    scale: float

    def value_for(self, level: int) -> float:
        return math.exp(-level / self.scale)


@dataclass(frozen=True)
class CountdownCurve:
    """``factor * (start - level)`` once the hero is present, 0 while absent.

    Used for intervals that shrink with every level (fewer ticks between
    two passive income events).
    """

    start: float
    factor: float

    def value_for(self, level: int) -> float:
        if level <= 0:
            return 0.0
        return self.factor * (self.start - level)


@dataclass(frozen=True)
class SteppedCurve:
    """``trunc((level + offset) * factor)``."""

    offset: float = 0.0
    factor: float = 1.0

    def value_for(self, level: int) -> float:
        return float(math.trunc((level + self.offset) * self.factor))


@dataclass(frozen=True)
class SaturatingRamp:
    """``slope * level`` below ``threshold``, ``ceiling`` from there on."""

    slope: float
    threshold: int
    ceiling: float

    def value_for(self, level: int) -> float:
        if level < self.threshold:
            return self.slope * level
        return self.ceiling


__all__ = [
    "LinearCurve",
    "QuadraticCurve",
    "ExponentialDecay",
    "CountdownCurve",
    "SteppedCurve",
    "SaturatingRamp",
]
