"""Session-wide registry of heroes.

The registry is the single object the rest of the game talks to: it owns the
heroes, the holiday table and the upgrade economy, and answers the queries
of the marketplace and of stage transitions.
"""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from cpudefense.engine.logger import GameLogger
from cpudefense.heroes.cards import HeroCardView, describe
from cpudefense.heroes.economy import Purse, UpgradeEconomy, get_price
from cpudefense.heroes.events import HeroEventBus
from cpudefense.heroes.hero import Hero, HeroData
from cpudefense.heroes.kinds import HeroKind, StageIdentifier
from cpudefense.heroes.leave import Holiday, LeaveScheduler
from cpudefense.heroes.prerequisites import is_available
from cpudefense.heroes.specs import LEVEL_CAP_BOOSTER, spec_for
from cpudefense.heroes.strength import neutral_strength, strength


class HeroRegistry:
    def __init__(
        self,
        kinds: Optional[Iterable[HeroKind]] = None,
        logger: Optional[GameLogger] = None,
        events: Optional[HeroEventBus] = None,
    ) -> None:
        self._heroes: Dict[HeroKind, Hero] = {}
        self.logger = logger
        self.stage = StageIdentifier()
        self.leave = LeaveScheduler(logger.channel("leave") if logger else None)
        self.economy = UpgradeEconomy(
            self._heroes,
            self.leave,
            events=events,
            logger=logger.channel("economy") if logger else None,
        )
        if kinds is None:
            kinds = list(HeroKind)
        for kind in kinds:
            self._heroes[kind] = Hero.create(kind)
        for hero in self._heroes.values():
            self.economy.refresh(hero)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    @property
    def events(self) -> HeroEventBus:
        return self.economy.events

    def __contains__(self, kind: HeroKind) -> bool:
        return kind in self._heroes

    def __iter__(self) -> Iterator[Hero]:
        return iter(self._heroes.values())

    def __len__(self) -> int:
        return len(self._heroes)

    def get(self, kind: HeroKind) -> Optional[Hero]:
        return self._heroes.get(kind)

    def hero(self, kind: HeroKind) -> Hero:
        """Return the hero of ``kind``, registering a fresh one if missing."""

        hero = self._heroes.get(kind)
        if hero is None:
            hero = Hero.create(kind)
            self._heroes[kind] = hero
            self.economy.refresh(hero)
        return hero

    def level_of(self, kind: HeroKind) -> int:
        return self.economy.level_of(kind)

    def strength_of(self, kind: HeroKind, level: Optional[int] = None) -> float:
        return strength(kind, self.level_of(kind) if level is None else level)

    def hero_modifier(self, kind: HeroKind) -> float:
        """Effect of ``kind`` as seen by gameplay on the current stage."""

        hero = self._heroes.get(kind)
        if hero is None or hero.is_on_leave:
            return neutral_strength(kind)
        return strength(kind, hero.level)

    # ------------------------------------------------------------------
    # Economy
    # ------------------------------------------------------------------
    def max_upgrade_level(self, kind: HeroKind) -> int:
        return self.economy.get_max_upgrade_level(kind)

    def is_available(self, kind: HeroKind, stage: Optional[StageIdentifier] = None) -> bool:
        return is_available(kind, stage or self.stage, self.level_of)

    def upgrade(self, kind: HeroKind) -> None:
        self.economy.do_upgrade(self.hero(kind))

    def downgrade(self, kind: HeroKind) -> None:
        self.economy.do_downgrade(self.hero(kind))

    def purchase(self, kind: HeroKind, purse: Purse, stage: Optional[StageIdentifier] = None) -> bool:
        return self.economy.purchase(self.hero(kind), stage or self.stage, purse)

    def coins_spent(self) -> int:
        return sum(hero.coins_spent for hero in self._heroes.values())

    def reset(self) -> None:
        """Full-state reset: every hero back to level 0, no holidays."""

        for hero in self._heroes.values():
            self.economy.reset_upgrade(hero)
            hero.is_on_leave = False
        self.leave.clear()
        if self.logger:
            channel = self.logger.channel("heroes")
            if channel.enabled:
                channel.info("All heroes reset")

    # ------------------------------------------------------------------
    # Leave
    # ------------------------------------------------------------------
    def add_leave(self, kind: HeroKind, start: StageIdentifier, duration: int) -> Holiday:
        holiday = self.leave.add_leave(kind, start, duration)
        hero = self._heroes.get(kind)
        if hero is not None:
            hero.is_on_leave = self.leave.is_on_leave(kind, self.stage)
        return holiday

    def is_on_leave(
        self,
        kind: HeroKind,
        stage: Optional[StageIdentifier] = None,
        exact_start_only: bool = False,
    ) -> bool:
        return self.leave.is_on_leave(kind, stage or self.stage, exact_start_only)

    def enter_stage(self, stage: StageIdentifier) -> List[HeroKind]:
        """Make ``stage`` current and refresh every hero's on-leave flag.

        Returns the kinds that are absent on this stage.
        """

        self.stage = stage
        absent: List[HeroKind] = []
        for hero in self._heroes.values():
            hero.is_on_leave = self.leave.is_on_leave(hero.kind, stage)
            if hero.is_on_leave:
                absent.append(hero.kind)
        if self.logger:
            channel = self.logger.channel("heroes")
            if channel.enabled and absent:
                channel.info(
                    "Stage %s: on leave %s",
                    stage,
                    ", ".join(kind.name for kind in absent),
                )
        return absent

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def restore(self, records: Iterable[HeroData], holidays: Iterable[Holiday] = ()) -> None:
        """Load saved hero records and holidays into this registry.

        Levels are clamped into the valid range. The level-cap booster is
        restored first so that the other caps already include its bonus.
        """

        ordered = sorted(records, key=lambda record: record.kind != LEVEL_CAP_BOOSTER)
        for record in ordered:
            hero = self.hero(record.kind)
            cap = self.max_upgrade_level(record.kind)
            level = max(0, min(record.level, cap))
            if level != record.level and self.logger:
                channel = self.logger.channel("persistence")
                if channel.enabled:
                    channel.warning(
                        "Saved level %d of %s clamped to %d",
                        record.level,
                        record.kind.name,
                        level,
                    )
            hero.data = HeroData(record.kind, level, max(0, record.coins_spent))
        self.leave.restore(holidays)
        for hero in self._heroes.values():
            self.economy.refresh(hero)
            hero.is_on_leave = self.leave.is_on_leave(hero.kind, self.stage)

    def records(self) -> List[HeroData]:
        return [
            HeroData(hero.kind, hero.level, hero.coins_spent)
            for hero in self._heroes.values()
        ]

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def card(self, kind: HeroKind, stage: Optional[StageIdentifier] = None) -> HeroCardView:
        stage = stage or self.stage
        spec = spec_for(kind)
        level = self.level_of(kind)
        max_level = self.max_upgrade_level(kind)
        hero = self.get(kind)
        if hero is None:
            description = describe(kind, level, max_level, get_price(level))
        else:
            if hero.description is None:
                self.economy.refresh(hero)
            description = hero.description
        return HeroCardView(
            kind=kind,
            name=spec.name,
            full_name=spec.full_name,
            category=spec.category,
            level=level,
            max_level=max_level,
            strength=strength(kind, level),
            next_strength=strength(kind, level + 1),
            cost=get_price(level),
            next_cost=get_price(level + 1),
            available=self.is_available(kind, stage),
            on_leave=self.is_on_leave(kind, stage),
            description=description,
        )

    def cards(self, stage: Optional[StageIdentifier] = None) -> List[HeroCardView]:
        return [self.card(kind, stage) for kind in list(self._heroes)]


__all__ = ["HeroRegistry"]
