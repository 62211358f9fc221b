"""Level transitions, prices and level caps of heroes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from cpudefense.engine.logger import ChannelLogger
from cpudefense.heroes.cards import describe
from cpudefense.heroes.events import HeroEventBus
from cpudefense.heroes.hero import Hero
from cpudefense.heroes.kinds import HeroKind, StageIdentifier
from cpudefense.heroes.leave import LeaveScheduler
from cpudefense.heroes.prerequisites import is_available
from cpudefense.heroes.specs import LEVEL_CAP_BOOSTER, spec_for
from cpudefense.heroes.strength import strength


def get_price(level: int) -> int:
    """Coins needed to go from ``level`` to ``level + 1``."""

    return 1 if level == 0 else level


@dataclass
class Purse:
    """Coins of one game mode: everything gathered minus what went to heroes."""

    total_coins: int = 0
    spent_coins: int = 0

    def available_coins(self) -> int:
        return self.total_coins - self.spent_coins

    def can_afford(self, amount: int) -> bool:
        return self.available_coins() >= amount

    def add(self, amount: int) -> None:
        if amount > 0:
            self.total_coins += amount

    def spend(self, amount: int) -> bool:
        if amount < 0 or not self.can_afford(amount):
            return False
        self.spent_coins += amount
        return True

    def as_dict(self) -> dict:
        return {"totalCoins": self.total_coins, "spentCoins": self.spent_coins}

    @classmethod
    def from_dict(cls, data: dict) -> "Purse":
        return cls(
            total_coins=int(data.get("totalCoins", 0)),
            spent_coins=int(data.get("spentCoins", 0)),
        )


class UpgradeEconomy:
    """Applies upgrade rules to the heroes of one session.

    ``heroes`` is a read view of the session registry; cross-hero lookups
    (level cap bonus, prerequisites) always go through it by kind.
    """

    def __init__(
        self,
        heroes: Mapping[HeroKind, Hero],
        leave: LeaveScheduler,
        events: Optional[HeroEventBus] = None,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        self._heroes = heroes
        self._leave = leave
        self.events = events or HeroEventBus()
        self.logger = logger

    def level_of(self, kind: HeroKind) -> int:
        hero = self._heroes.get(kind)
        return hero.level if hero is not None else 0

    def cap_bonus(self) -> int:
        return int(strength(LEVEL_CAP_BOOSTER, self.level_of(LEVEL_CAP_BOOSTER)))

    def get_max_upgrade_level(self, kind: HeroKind) -> int:
        spec = spec_for(kind)
        if not spec.receives_cap_bonus:
            return spec.base_cap
        return spec.base_cap + self.cap_bonus()

    def get_price(self, level: int) -> int:
        return get_price(level)

    def refresh(self, hero: Hero) -> None:
        """Recompute the card text of ``hero`` after a level change."""

        hero.description = describe(
            hero.kind,
            hero.level,
            self.get_max_upgrade_level(hero.kind),
            get_price(hero.level),
        )

    def do_upgrade(self, hero: Hero) -> None:
        """Raise ``hero`` by one level unless it is already at its cap.

        Affordability is the caller's business; see :meth:`purchase`.
        """

        if hero.level >= self.get_max_upgrade_level(hero.kind):
            return
        old_level = hero.level
        hero.data.level += 1
        self.refresh(hero)
        if hero.kind == LEVEL_CAP_BOOSTER:
            self._refresh_all()
        logger = self.logger
        if logger and logger.enabled:
            logger.debug("%s upgraded %d -> %d", hero.kind.name, old_level, hero.level)
        self.events.upgraded(hero.kind, old_level, hero.level)

    def do_downgrade(self, hero: Hero) -> None:
        """Lower ``hero`` by one level. ``coins_spent`` is left untouched."""

        if hero.level <= 0:
            return
        old_level = hero.level
        hero.data.level -= 1
        self.refresh(hero)
        logger = self.logger
        if logger and logger.enabled:
            logger.debug("%s downgraded %d -> %d", hero.kind.name, old_level, hero.level)
        self.events.downgraded(hero.kind, old_level, hero.level)
        if hero.kind == LEVEL_CAP_BOOSTER:
            self._clamp_to_caps()

    def reset_upgrade(self, hero: Hero) -> None:
        hero.data.level = 0
        hero.data.coins_spent = 0
        self.refresh(hero)
        if hero.kind == LEVEL_CAP_BOOSTER:
            self._clamp_to_caps(notify=False)

    def purchase(self, hero: Hero, stage: StageIdentifier, purse: Purse) -> bool:
        """Buy the next level of ``hero`` with coins from ``purse``.

        Returns False, changing nothing, when the hero is locked, on leave,
        maxed out or too expensive.
        """

        kind = hero.kind
        reason = None
        price = get_price(hero.level)
        if hero.level >= self.get_max_upgrade_level(kind):
            reason = "at level cap"
        elif not is_available(kind, stage, self.level_of):
            reason = "locked"
        elif self._leave.is_on_leave(kind, stage):
            reason = "on leave"
        elif not purse.spend(price):
            reason = f"needs {price} coins, has {purse.available_coins()}"
        logger = self.logger
        if reason is not None:
            if logger and logger.enabled:
                logger.debug("Purchase of %s refused: %s", kind.name, reason)
            return False
        hero.data.coins_spent += price
        self.do_upgrade(hero)
        if logger and logger.enabled:
            logger.info("Bought %s level %d for %d coins", kind.name, hero.level, price)
        return True

    def _refresh_all(self) -> None:
        for hero in self._heroes.values():
            self.refresh(hero)

    def _clamp_to_caps(self, notify: bool = True) -> None:
        # A lower booster level shrinks the caps of the other heroes.
        for hero in self._heroes.values():
            cap = self.get_max_upgrade_level(hero.kind)
            if not notify:
                hero.data.level = min(hero.level, cap)
            while hero.level > cap:
                self.do_downgrade(hero)
        self._refresh_all()


__all__ = ["get_price", "Purse", "UpgradeEconomy"]
