"""Hero progression: strengths, prerequisites, levels, prices and leave."""

from .economy import Purse, UpgradeEconomy, get_price
from .events import HERO_DOWNGRADED, HERO_UPGRADED, HeroEventBus
from .hero import Hero, HeroData, PersistenceError
from .kinds import SERIES_ENDLESS, SERIES_NORMAL, SERIES_TURBO, HeroKind, StageIdentifier
from .leave import Holiday, LeaveScheduler
from .prerequisites import is_available
from .registry import HeroRegistry
from .specs import HERO_SPECS, HeroSpec, spec_for
from .strength import strength

__all__ = [
    "HERO_DOWNGRADED",
    "HERO_SPECS",
    "HERO_UPGRADED",
    "Hero",
    "HeroData",
    "HeroEventBus",
    "HeroKind",
    "HeroRegistry",
    "HeroSpec",
    "Holiday",
    "LeaveScheduler",
    "PersistenceError",
    "Purse",
    "SERIES_ENDLESS",
    "SERIES_NORMAL",
    "SERIES_TURBO",
    "StageIdentifier",
    "UpgradeEconomy",
    "get_price",
    "is_available",
    "spec_for",
    "strength",
]
