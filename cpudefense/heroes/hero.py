"""Hero state and its persisted record."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cpudefense.heroes.cards import HeroDescription
from cpudefense.heroes.kinds import HeroKind


class PersistenceError(ValueError):
    """Raised when a saved record cannot be turned into hero state."""


@dataclass
class HeroData:
    """The part of a hero that survives a save/resume cycle."""

    kind: HeroKind
    level: int = 0
    # coins spent on all upgrades of this hero so far
    coins_spent: int = 0

    def as_dict(self) -> dict:
        return {"kind": self.kind.name, "level": self.level, "coinsSpent": self.coins_spent}

    @classmethod
    def from_dict(cls, data: dict) -> "HeroData":
        try:
            kind = HeroKind.from_name(str(data["kind"]))
        except KeyError as exc:
            raise PersistenceError(f"Unknown hero record {data!r}") from exc
        return cls(
            kind=kind,
            level=int(data.get("level", 0)),
            coins_spent=max(0, int(data.get("coinsSpent", 0))),
        )


@dataclass
class Hero:
    data: HeroData
    # only valid for the current stage
    is_on_leave: bool = False
    description: Optional[HeroDescription] = field(default=None, compare=False)

    @classmethod
    def create(cls, kind: HeroKind, level: int = 0, coins_spent: int = 0) -> "Hero":
        return cls(HeroData(kind, level, coins_spent))

    @property
    def kind(self) -> HeroKind:
        return self.data.kind

    @property
    def level(self) -> int:
        return self.data.level

    @property
    def coins_spent(self) -> int:
        return self.data.coins_spent


__all__ = ["Hero", "HeroData", "PersistenceError"]
