from typing import Dict

import pytest

from cpudefense.heroes.kinds import SERIES_ENDLESS, SERIES_NORMAL, SERIES_TURBO, HeroKind, StageIdentifier
from cpudefense.heroes.prerequisites import (
    is_available,
    prerequisite_edges,
    prerequisite_of,
    unlocked_by,
)
from cpudefense.heroes.registry import HeroRegistry
from cpudefense.heroes.specs import HeroLevelGate, StageNumberGate


def _levels(**levels: int):
    table: Dict[HeroKind, int] = {HeroKind[name]: level for name, level in levels.items()}
    return lambda kind: table.get(kind, 0)


FIRST = StageIdentifier(SERIES_NORMAL, 1)


def test_gate_opens_at_threshold() -> None:
    kind = HeroKind.DECREASE_ATT_SPEED
    assert prerequisite_of(kind) == HeroLevelGate(HeroKind.DECREASE_ATT_FREQ, 3)
    assert not is_available(kind, FIRST, _levels(DECREASE_ATT_FREQ=2))
    assert is_available(kind, FIRST, _levels(DECREASE_ATT_FREQ=3))


def test_gate_with_higher_threshold() -> None:
    kind = HeroKind.ADDITIONAL_LIVES
    assert not is_available(kind, FIRST, _levels(DECREASE_ATT_SPEED=4))
    assert is_available(kind, FIRST, _levels(DECREASE_ATT_SPEED=5))


@pytest.mark.parametrize("series", [SERIES_TURBO, SERIES_ENDLESS])
@pytest.mark.parametrize("kind", list(HeroKind))
def test_later_series_are_never_gated(kind: HeroKind, series: int) -> None:
    assert is_available(kind, StageIdentifier(series, 1), _levels())


def test_stage_number_gates() -> None:
    assert prerequisite_of(HeroKind.INCREASE_CHIP_MEM_SPEED) == StageNumberGate(14)
    assert not is_available(HeroKind.INCREASE_CHIP_MEM_SPEED, StageIdentifier(1, 13), _levels())
    assert is_available(HeroKind.INCREASE_CHIP_MEM_SPEED, StageIdentifier(1, 14), _levels())
    assert not is_available(HeroKind.INCREASE_CHIP_RES_STRENGTH, StageIdentifier(1, 31), _levels())
    assert is_available(HeroKind.INCREASE_CHIP_RES_STRENGTH, StageIdentifier(1, 32), _levels())


def test_ungated_kinds_are_always_available() -> None:
    for kind in (
        HeroKind.INCREASE_CHIP_SUB_SPEED,
        HeroKind.INCREASE_CHIP_SHR_SPEED,
        HeroKind.INCREASE_STARTING_CASH,
    ):
        assert prerequisite_of(kind) is None
        assert is_available(kind, FIRST, _levels())


def test_only_direct_prerequisite_is_checked() -> None:
    # Schneier needs Vaughan at 3; Vaughan's own gate is not consulted.
    assert is_available(HeroKind.DECREASE_ATT_STRENGTH, FIRST, _levels(DECREASE_ATT_SPEED=3))


def test_absent_prerequisite_counts_as_level_zero() -> None:
    registry = HeroRegistry(kinds=[HeroKind.DOUBLE_HIT_SUB])
    assert not registry.is_available(HeroKind.DOUBLE_HIT_SUB, FIRST)
    assert registry.level_of(HeroKind.INCREASE_CHIP_SUB_RANGE) == 0


def test_graph_edges() -> None:
    edges = prerequisite_edges()
    assert len(edges) == 20
    assert edges[HeroKind.LIMIT_UNWANTED_CHIPS] == HeroLevelGate(HeroKind.INCREASE_MAX_HERO_LEVEL, 3)
    assert set(unlocked_by(HeroKind.GAIN_CASH)) == {
        HeroKind.DECREASE_UPGRADE_COST,
        HeroKind.DECREASE_REMOVAL_COST,
    }
    assert HeroKind.INCREASE_CHIP_MEM_SPEED not in edges


def test_unlocking_a_chain_step_by_step() -> None:
    registry = HeroRegistry()
    stage = StageIdentifier(SERIES_NORMAL, 5)
    chain = [
        HeroKind.INCREASE_CHIP_SHR_SPEED,
        HeroKind.DECREASE_ATT_FREQ,
        HeroKind.DECREASE_ATT_SPEED,
        HeroKind.DECREASE_ATT_STRENGTH,
        HeroKind.DECREASE_COIN_STRENGTH,
    ]
    for previous, current in zip(chain, chain[1:]):
        assert not registry.is_available(current, stage)
        for _ in range(3):
            registry.upgrade(previous)
        assert registry.is_available(current, stage)
