"""Conversion between hero state and flat saved records."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from cpudefense.engine.logger import GameLogger
from cpudefense.heroes.economy import Purse
from cpudefense.heroes.events import HeroEventBus
from cpudefense.heroes.hero import HeroData, PersistenceError
from cpudefense.heroes.kinds import HeroKind
from cpudefense.heroes.leave import Holiday
from cpudefense.heroes.registry import HeroRegistry


def holiday_from_dict(data: dict) -> Holiday:
    try:
        kind = HeroKind.from_name(str(data["kind"]))
        return Holiday(kind, int(data["fromStageNumber"]), int(data["toStageNumber"]))
    except KeyError as exc:
        raise PersistenceError(f"Malformed holiday record {data!r}") from exc


def hero_records(registry: HeroRegistry) -> List[dict]:
    return [record.as_dict() for record in registry.records()]


def holiday_records(registry: HeroRegistry) -> List[dict]:
    return [holiday.as_dict() for holiday in registry.leave.holidays()]


def registry_from_records(
    heroes: Iterable[dict],
    holidays: Iterable[dict] = (),
    logger: Optional[GameLogger] = None,
    events: Optional[HeroEventBus] = None,
) -> HeroRegistry:
    """Rebuild a registry; kinds missing from ``heroes`` start at level 0."""

    registry = HeroRegistry(logger=logger, events=events)
    registry.restore(
        [HeroData.from_dict(entry) for entry in heroes],
        [holiday_from_dict(entry) for entry in holidays],
    )
    return registry


def to_document(registry: HeroRegistry, purse: Optional[Purse] = None) -> dict:
    document = {
        "heroes": hero_records(registry),
        "holidays": holiday_records(registry),
    }
    if purse is not None:
        document["purse"] = purse.as_dict()
    return document


def from_document(
    document: dict,
    logger: Optional[GameLogger] = None,
    events: Optional[HeroEventBus] = None,
) -> Tuple[HeroRegistry, Purse]:
    registry = registry_from_records(
        document.get("heroes", []),
        document.get("holidays", []),
        logger=logger,
        events=events,
    )
    purse = Purse.from_dict(document.get("purse", {}))
    return registry, purse


def save_session(path: Path, registry: HeroRegistry, purse: Optional[Purse] = None) -> None:
    path.write_text(json.dumps(to_document(registry, purse), indent=2))


def load_session(
    path: Path,
    logger: Optional[GameLogger] = None,
    events: Optional[HeroEventBus] = None,
) -> Tuple[HeroRegistry, Purse]:
    """Load a saved session, or start a fresh one if there is nothing usable."""

    channel = logger.channel("persistence") if logger else None
    if not path.exists():
        if channel and channel.enabled:
            channel.info("No save file at %s, starting fresh", path)
        return HeroRegistry(logger=logger, events=events), Purse()
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        if channel and channel.enabled:
            channel.warning("Save file %s is not readable JSON, starting fresh", path)
        return HeroRegistry(logger=logger, events=events), Purse()
    if not isinstance(document, dict):
        raise PersistenceError(f"Save file {path} does not hold a session")
    return from_document(document, logger=logger, events=events)


__all__ = [
    "holiday_from_dict",
    "hero_records",
    "holiday_records",
    "registry_from_records",
    "to_document",
    "from_document",
    "save_session",
    "load_session",
]
