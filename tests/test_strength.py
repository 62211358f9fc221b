"""Unit tests for hero strength curves."""
from __future__ import annotations

from math import exp, isclose

import pytest

from cpudefense.heroes.curves import CountdownCurve, SaturatingRamp, SteppedCurve
from cpudefense.heroes.kinds import MINIMAL_AMOUNT_OF_CASH, HeroKind
from cpudefense.heroes.specs import HERO_SPECS, EffectFamily
from cpudefense.heroes.strength import format_strength, neutral_strength, strength


ABSOLUTE_BASELINES = {
    HeroKind.INCREASE_STARTING_CASH: float(MINIMAL_AMOUNT_OF_CASH),
    HeroKind.INCREASE_REFUND: 50.0,
    HeroKind.ENABLE_MEM_UPGRADE: 1.0,
}


def test_every_kind_has_a_spec() -> None:
    assert set(HERO_SPECS) == set(HeroKind)
    assert len(HERO_SPECS) == 25


@pytest.mark.parametrize("kind", list(HeroKind))
def test_level_zero_is_neutral(kind: HeroKind) -> None:
    family = HERO_SPECS[kind].family
    value = strength(kind, 0)
    if family is EffectFamily.RATE:
        assert value == pytest.approx(1.0)
    elif family is EffectFamily.ADDITIVE:
        assert value == pytest.approx(0.0)
    else:
        assert value == pytest.approx(ABSOLUTE_BASELINES[kind])
    assert neutral_strength(kind) == value


@pytest.mark.parametrize(
    "kind,level,expected",
    [
        (HeroKind.INCREASE_CHIP_SUB_SPEED, 3, 1.15),
        (HeroKind.INCREASE_CHIP_MEM_SPEED, 7, 1.35),
        (HeroKind.INCREASE_CHIP_SHR_RANGE, 4, 1.4),
        (HeroKind.INCREASE_CHIP_RES_STRENGTH, 2, 1.4),
        (HeroKind.INCREASE_CHIP_RES_DURATION, 5, 2.0),
        (HeroKind.INCREASE_STARTING_CASH, 3, MINIMAL_AMOUNT_OF_CASH + 9.0),
        (HeroKind.REDUCE_HEAT, 4, 40.0),
        (HeroKind.DECREASE_UPGRADE_COST, 5, 30.0),
        (HeroKind.DECREASE_REMOVAL_COST, 2, 16.0),
        (HeroKind.ADDITIONAL_LIVES, 3, 3.0),
        (HeroKind.DECREASE_ATT_FREQ, 4, 0.8),
        (HeroKind.DECREASE_ATT_SPEED, 5, 0.8),
        (HeroKind.DECREASE_ATT_STRENGTH, 3, exp(-1.0)),
        (HeroKind.DECREASE_COIN_STRENGTH, 2, 0.9),
        (HeroKind.INCREASE_MAX_HERO_LEVEL, 2, 2.0),
        (HeroKind.LIMIT_UNWANTED_CHIPS, 6, 6.0),
        (HeroKind.ENABLE_MEM_UPGRADE, 2, 3.0),
        (HeroKind.GAIN_CASH, 1, 63.0),
        (HeroKind.GAIN_CASH, 7, 9.0),
        (HeroKind.GAIN_CASH_ON_KILL, 1, 1.0),
        (HeroKind.GAIN_CASH_ON_KILL, 2, 1.0),
        (HeroKind.GAIN_CASH_ON_KILL, 3, 2.0),
        (HeroKind.INCREASE_REFUND, 5, 100.0),
        (HeroKind.CONVERT_HEAT, 7, 21.0),
        (HeroKind.DOUBLE_HIT_SUB, 9, 90.0),
        (HeroKind.DOUBLE_HIT_SUB, 10, 100.0),
        (HeroKind.DOUBLE_HIT_SUB, 14, 100.0),
    ],
)
def test_strength_table(kind: HeroKind, level: int, expected: float) -> None:
    assert isclose(strength(kind, level), expected, rel_tol=1e-9, abs_tol=1e-9)


def test_attacker_strength_decays_monotonically() -> None:
    values = [strength(HeroKind.DECREASE_ATT_STRENGTH, level) for level in range(10)]
    assert all(later < earlier for earlier, later in zip(values, values[1:]))
    assert values[-1] > 0.0


def test_negative_level_counts_as_absent() -> None:
    assert strength(HeroKind.GAIN_CASH, -2) == 0.0
    assert strength(HeroKind.INCREASE_CHIP_SUB_SPEED, -1) == pytest.approx(1.0)


def test_curve_primitives() -> None:
    ramp = SaturatingRamp(slope=10.0, threshold=10, ceiling=100.0)
    assert ramp.value_for(0) == 0.0
    assert ramp.value_for(10) == 100.0
    assert CountdownCurve(start=8.0, factor=9.0).value_for(0) == 0.0
    assert SteppedCurve(offset=1.0, factor=0.5).value_for(4) == 2.0


def test_format_strength_uses_kind_precision() -> None:
    assert format_strength(HeroKind.INCREASE_CHIP_SUB_SPEED, strength(HeroKind.INCREASE_CHIP_SUB_SPEED, 1)) == "x 1.05"
    assert format_strength(HeroKind.INCREASE_STARTING_CASH, 17.0) == "17 bits"
    assert format_strength(HeroKind.REDUCE_HEAT, 30.0) == "-30%"
    assert format_strength(HeroKind.GAIN_CASH, 63.0) == "1 bit/63 ticks"
    assert format_strength(HeroKind.INCREASE_MAX_HERO_LEVEL, 2.0) == "+2"
