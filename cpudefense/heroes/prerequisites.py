"""Availability gates between heroes.

Each kind inspects at most one direct prerequisite. Chains such as
Lovelace -> LHC -> Vaughan -> Schneier emerge from players unlocking the
heroes one after the other, so no traversal happens here.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional

from cpudefense.heroes.kinds import SERIES_NORMAL, HeroKind, StageIdentifier
from cpudefense.heroes.specs import (
    HERO_SPECS,
    HeroLevelGate,
    Prerequisite,
    StageNumberGate,
    spec_for,
)

LevelLookup = Callable[[HeroKind], int]


def prerequisite_of(kind: HeroKind) -> Optional[Prerequisite]:
    return spec_for(kind).prerequisite


def gate_is_met(gate: Optional[Prerequisite], stage: StageIdentifier, level_of: LevelLookup) -> bool:
    if gate is None:
        return True
    if isinstance(gate, StageNumberGate):
        return stage.number >= gate.minimum_stage
    return level_of(gate.kind) >= gate.minimum_level


def is_available(kind: HeroKind, stage: StageIdentifier, level_of: LevelLookup) -> bool:
    """Return whether ``kind`` may be purchased on ``stage``.

    Restrictions only apply to the first series. ``level_of`` must return 0
    for kinds that are not registered.
    """

    if stage.series > SERIES_NORMAL:
        return True
    return gate_is_met(prerequisite_of(kind), stage, level_of)


def prerequisite_edges() -> Dict[HeroKind, HeroLevelGate]:
    """Hero-to-hero edges of the graph, keyed by the gated kind."""

    return {
        kind: spec.prerequisite
        for kind, spec in HERO_SPECS.items()
        if isinstance(spec.prerequisite, HeroLevelGate)
    }


def unlocked_by(kind: HeroKind) -> list[HeroKind]:
    """Kinds whose gate directly depends on ``kind``."""

    return [gated for gated, gate in prerequisite_edges().items() if gate.kind == kind]


__all__ = [
    "LevelLookup",
    "prerequisite_of",
    "gate_is_met",
    "is_available",
    "prerequisite_edges",
    "unlocked_by",
]
