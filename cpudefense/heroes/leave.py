"""Scheduling of hero holidays in the endless series."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from cpudefense.engine.logger import ChannelLogger
from cpudefense.heroes.kinds import HeroKind, StageIdentifier


@dataclass(frozen=True)
class Holiday:
    """A hero's absence over an inclusive range of stage numbers."""

    kind: HeroKind
    from_stage: int
    to_stage: int

    def covers(self, number: int) -> bool:
        return self.from_stage <= number <= self.to_stage

    def as_dict(self) -> dict:
        return {
            "kind": self.kind.name,
            "fromStageNumber": self.from_stage,
            "toStageNumber": self.to_stage,
        }


class LeaveScheduler:
    """Holiday table keyed by the stage number on which each leave starts.

    Only one holiday can start on a given stage; registering another one on
    the same stage replaces it.
    """

    def __init__(self, logger: Optional[ChannelLogger] = None) -> None:
        self._holidays: Dict[int, Holiday] = {}
        self.logger = logger

    def add_leave(self, kind: HeroKind, start: StageIdentifier, duration: int) -> Holiday:
        """Send ``kind`` on leave for ``duration`` stages starting at ``start``."""

        holiday = Holiday(kind, start.number, start.number + duration - 1)
        replaced = self._holidays.get(start.number)
        self._holidays[start.number] = holiday
        logger = self.logger
        if logger and logger.enabled:
            if replaced is not None and replaced != holiday:
                logger.debug("Holiday of %s on stage %d replaced", replaced.kind.name, start.number)
            logger.info(
                "%s on leave for stages %d-%d",
                kind.name,
                holiday.from_stage,
                holiday.to_stage,
            )
        return holiday

    def restore(self, holidays: Iterable[Holiday]) -> None:
        for holiday in holidays:
            self._holidays[holiday.from_stage] = holiday

    def is_on_leave(self, kind: HeroKind, stage: StageIdentifier, exact_start_only: bool = False) -> bool:
        """Return whether ``kind`` is absent on ``stage``.

        With ``exact_start_only`` only a holiday that starts on this very
        stage counts; otherwise any holiday still running does.
        """

        if not stage.is_endless:
            return False
        if exact_start_only:
            holiday = self._holidays.get(stage.number)
            return holiday is not None and holiday.kind == kind
        return any(
            holiday.kind == kind and holiday.covers(stage.number)
            for holiday in self._holidays.values()
        )

    def heroes_on_leave(self, stage: StageIdentifier) -> List[HeroKind]:
        if not stage.is_endless:
            return []
        kinds: List[HeroKind] = []
        for holiday in self._holidays.values():
            if holiday.covers(stage.number) and holiday.kind not in kinds:
                kinds.append(holiday.kind)
        return kinds

    def holidays(self) -> List[Holiday]:
        return [self._holidays[start] for start in sorted(self._holidays)]

    def clear(self) -> None:
        self._holidays.clear()

    def __len__(self) -> int:
        return len(self._holidays)


__all__ = ["Holiday", "LeaveScheduler"]
