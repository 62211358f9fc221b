"""Text and numbers shown on a hero's card in the marketplace."""
from __future__ import annotations

from dataclasses import dataclass

from cpudefense.heroes.kinds import HeroKind
from cpudefense.heroes.strength import format_strength, strength


@dataclass(frozen=True)
class HeroDescription:
    strength_desc: str
    upgrade_desc: str
    cost_desc: str


@dataclass(frozen=True)
class HeroCardView:
    """Everything a renderer needs to draw one hero card."""

    kind: HeroKind
    name: str
    full_name: str
    category: str
    level: int
    max_level: int
    strength: float
    next_strength: float
    cost: int
    next_cost: int
    available: bool
    on_leave: bool
    description: HeroDescription

    @property
    def maxed(self) -> bool:
        return self.level >= self.max_level


def describe(kind: HeroKind, level: int, max_level: int, cost: int) -> HeroDescription:
    """Build the card text for ``kind`` at ``level``.

    Upgrade and cost text are blank once ``max_level`` is reached.
    """

    current = format_strength(kind, strength(kind, level))
    if level >= max_level:
        return HeroDescription(current, "", "")
    upcoming = format_strength(kind, strength(kind, level + 1))
    return HeroDescription(current, f"→ {upcoming}", f"[cost: {cost}]")


__all__ = ["HeroDescription", "HeroCardView", "describe"]
