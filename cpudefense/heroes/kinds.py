"""Hero kinds, stage identifiers and game-wide constants."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SERIES_NORMAL = 1
SERIES_TURBO = 2
SERIES_ENDLESS = 3

# Starting cash every player gets before any hero bonus.
MINIMAL_AMOUNT_OF_CASH = 8
# Number of chip upgrades a memory chip can hold internally.
MAX_INTERNAL_CHIP_STORAGE = 3


class HeroKind(Enum):
    INCREASE_CHIP_SUB_SPEED = "INCREASE_CHIP_SUB_SPEED"
    INCREASE_CHIP_SUB_RANGE = "INCREASE_CHIP_SUB_RANGE"
    DOUBLE_HIT_SUB = "DOUBLE_HIT_SUB"
    INCREASE_CHIP_SHR_SPEED = "INCREASE_CHIP_SHR_SPEED"
    INCREASE_CHIP_SHR_RANGE = "INCREASE_CHIP_SHR_RANGE"
    INCREASE_CHIP_MEM_SPEED = "INCREASE_CHIP_MEM_SPEED"
    INCREASE_CHIP_MEM_RANGE = "INCREASE_CHIP_MEM_RANGE"
    ENABLE_MEM_UPGRADE = "ENABLE_MEM_UPGRADE"
    INCREASE_CHIP_RES_STRENGTH = "INCREASE_CHIP_RES_STRENGTH"
    INCREASE_CHIP_RES_DURATION = "INCREASE_CHIP_RES_DURATION"
    CONVERT_HEAT = "CONVERT_HEAT"
    DECREASE_ATT_FREQ = "DECREASE_ATT_FREQ"
    DECREASE_ATT_SPEED = "DECREASE_ATT_SPEED"
    DECREASE_ATT_STRENGTH = "DECREASE_ATT_STRENGTH"
    DECREASE_COIN_STRENGTH = "DECREASE_COIN_STRENGTH"
    REDUCE_HEAT = "REDUCE_HEAT"
    ADDITIONAL_LIVES = "ADDITIONAL_LIVES"
    INCREASE_MAX_HERO_LEVEL = "INCREASE_MAX_HERO_LEVEL"
    LIMIT_UNWANTED_CHIPS = "LIMIT_UNWANTED_CHIPS"
    INCREASE_STARTING_CASH = "INCREASE_STARTING_CASH"
    GAIN_CASH = "GAIN_CASH"
    DECREASE_REMOVAL_COST = "DECREASE_REMOVAL_COST"
    DECREASE_UPGRADE_COST = "DECREASE_UPGRADE_COST"
    INCREASE_REFUND = "INCREASE_REFUND"
    GAIN_CASH_ON_KILL = "GAIN_CASH_ON_KILL"

    @classmethod
    def from_name(cls, name: str) -> "HeroKind":
        return cls[name]


@dataclass(frozen=True)
class StageIdentifier:
    """Locates a stage: the series it belongs to and its number within it."""

    series: int = SERIES_NORMAL
    number: int = 1

    @property
    def is_endless(self) -> bool:
        return self.series == SERIES_ENDLESS

    def __str__(self) -> str:
        return f"{self.series}-{self.number}"


__all__ = [
    "HeroKind",
    "StageIdentifier",
    "SERIES_NORMAL",
    "SERIES_TURBO",
    "SERIES_ENDLESS",
    "MINIMAL_AMOUNT_OF_CASH",
    "MAX_INTERNAL_CHIP_STORAGE",
]
