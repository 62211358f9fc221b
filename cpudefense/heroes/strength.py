"""Numeric effect ("strength") of a hero at a given level."""
from __future__ import annotations

from cpudefense.heroes.kinds import HeroKind
from cpudefense.heroes.specs import spec_for


def strength(kind: HeroKind, level: int) -> float:
    """Return the effect magnitude of ``kind`` at ``level``.

    Level 0 means "hero not present" and yields the kind's neutral value.
    Negative levels are treated as 0.
    """

    return spec_for(kind).curve.value_for(max(0, level))


def neutral_strength(kind: HeroKind) -> float:
    return strength(kind, 0)


def format_strength(kind: HeroKind, value: float) -> str:
    """Render ``value`` with the display precision used for ``kind``."""

    spec = spec_for(kind)
    if spec.whole_numbers:
        return spec.display.format(int(value))
    return spec.display.format(value)


__all__ = ["strength", "neutral_strength", "format_strength"]
