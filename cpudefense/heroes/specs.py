"""Static per-kind rule table for heroes.

Every hero kind has exactly one :class:`HeroSpec` describing its strength
curve, its level cap, whether the cap receives the bonus of the level-cap
booster, and the single prerequisite that gates it in the first series.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from cpudefense.heroes.curves import (
    CountdownCurve,
    ExponentialDecay,
    LinearCurve,
    QuadraticCurve,
    SaturatingRamp,
    SteppedCurve,
)
from cpudefense.heroes.kinds import (
    MAX_INTERNAL_CHIP_STORAGE,
    MINIMAL_AMOUNT_OF_CASH,
    HeroKind,
)

DEFAULT_MAX_LEVEL = 7

# The hero whose level raises the cap of (almost) every other hero.
LEVEL_CAP_BOOSTER = HeroKind.INCREASE_MAX_HERO_LEVEL

StrengthCurve = Union[
    LinearCurve,
    QuadraticCurve,
    ExponentialDecay,
    CountdownCurve,
    SteppedCurve,
    SaturatingRamp,
]


class EffectFamily(Enum):
    RATE = "rate"  # multiplies a game value; 1.0 when absent
    ADDITIVE = "additive"  # adds to a game value; 0 when absent
    ABSOLUTE = "absolute"  # replaces a game value; has its own baseline


@dataclass(frozen=True)
class HeroLevelGate:
    """Available once ``kind`` has reached ``minimum_level``."""

    kind: HeroKind
    minimum_level: int


@dataclass(frozen=True)
class StageNumberGate:
    """Available from stage ``minimum_stage`` on."""

    minimum_stage: int


Prerequisite = Union[HeroLevelGate, StageNumberGate]


@dataclass(frozen=True)
class HeroSpec:
    kind: HeroKind
    name: str
    full_name: str
    category: str
    family: EffectFamily
    curve: StrengthCurve
    display: str
    whole_numbers: bool = False
    base_cap: int = DEFAULT_MAX_LEVEL
    receives_cap_bonus: bool = True
    prerequisite: Optional[Prerequisite] = None


def _spec(kind: HeroKind, **kwargs) -> HeroSpec:
    return HeroSpec(kind=kind, **kwargs)


_K = HeroKind

HERO_SPECS: Dict[HeroKind, HeroSpec] = {
    spec.kind: spec
    for spec in (
        _spec(
            _K.INCREASE_CHIP_SUB_SPEED,
            name="Turing",
            full_name="Alan Turing",
            category="chip_sub",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, 1 / 20),
            display="x {:.2f}",
        ),
        _spec(
            _K.INCREASE_CHIP_SUB_RANGE,
            name="Wiener",
            full_name="Norbert Wiener",
            category="chip_sub",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, 1 / 10),
            display="x {:.2f}",
            prerequisite=HeroLevelGate(_K.INCREASE_CHIP_SUB_SPEED, 5),
        ),
        _spec(
            _K.DOUBLE_HIT_SUB,
            name="Boole",
            full_name="George Boole",
            category="chip_sub",
            family=EffectFamily.ADDITIVE,
            curve=SaturatingRamp(slope=10.0, threshold=10, ceiling=100.0),
            display="{:d}%",
            whole_numbers=True,
            prerequisite=HeroLevelGate(_K.INCREASE_CHIP_SUB_RANGE, 3),
        ),
        _spec(
            _K.INCREASE_CHIP_SHR_SPEED,
            name="Lovelace",
            full_name="Ada Lovelace",
            category="chip_shr",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, 1 / 20),
            display="x {:.2f}",
        ),
        _spec(
            _K.INCREASE_CHIP_SHR_RANGE,
            name="Pascal",
            full_name="Blaise Pascal",
            category="chip_shr",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, 1 / 10),
            display="x {:.2f}",
            prerequisite=HeroLevelGate(_K.INCREASE_CHIP_SHR_SPEED, 5),
        ),
        _spec(
            _K.INCREASE_CHIP_MEM_SPEED,
            name="Knuth",
            full_name="Donald E. Knuth",
            category="chip_mem",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, 1 / 20),
            display="x {:.2f}",
            prerequisite=StageNumberGate(14),
        ),
        _spec(
            _K.INCREASE_CHIP_MEM_RANGE,
            name="Hopper",
            full_name="Grace Hopper",
            category="chip_mem",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, 1 / 10),
            display="x {:.2f}",
            prerequisite=HeroLevelGate(_K.INCREASE_CHIP_MEM_SPEED, 5),
        ),
        _spec(
            _K.ENABLE_MEM_UPGRADE,
            name="Leibniz",
            full_name="Gottfried Wilhelm Leibniz",
            category="chip_mem",
            family=EffectFamily.ABSOLUTE,
            curve=LinearCurve(1.0, 1.0),
            display="{:d}",
            whole_numbers=True,
            base_cap=MAX_INTERNAL_CHIP_STORAGE - 1,
            receives_cap_bonus=False,
            prerequisite=HeroLevelGate(_K.INCREASE_CHIP_MEM_RANGE, 3),
        ),
        _spec(
            _K.INCREASE_CHIP_RES_STRENGTH,
            name="Ohm",
            full_name="Georg Ohm",
            category="chip_res",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, 0.2),
            display="x {:.2f}",
            prerequisite=StageNumberGate(32),
        ),
        _spec(
            _K.INCREASE_CHIP_RES_DURATION,
            name="Volta",
            full_name="Alessandro Volta",
            category="chip_res",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, 0.2),
            display="x {:.2f}",
            prerequisite=HeroLevelGate(_K.INCREASE_CHIP_RES_STRENGTH, 3),
        ),
        _spec(
            _K.CONVERT_HEAT,
            name="Shannon",
            full_name="Claude Shannon",
            category="chip_res",
            family=EffectFamily.ADDITIVE,
            curve=LinearCurve(0.0, 3.0),
            display="{:d}%",
            whole_numbers=True,
            prerequisite=HeroLevelGate(_K.INCREASE_CHIP_RES_DURATION, 3),
        ),
        _spec(
            _K.DECREASE_ATT_FREQ,
            name="LHC",
            full_name="Les Horribles Cernettes",
            category="general",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, -0.05),
            display="x {:.2f}",
            prerequisite=HeroLevelGate(_K.INCREASE_CHIP_SHR_SPEED, 3),
        ),
        _spec(
            _K.DECREASE_ATT_SPEED,
            name="Vaughan",
            full_name="Dorothy Vaughan",
            category="general",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, -0.04),
            display="x {:.2f}",
            prerequisite=HeroLevelGate(_K.DECREASE_ATT_FREQ, 3),
        ),
        _spec(
            _K.DECREASE_ATT_STRENGTH,
            name="Schneier",
            full_name="Bruce Schneier",
            category="general",
            family=EffectFamily.RATE,
            curve=ExponentialDecay(scale=3.0),
            display="x {:.2f}",
            prerequisite=HeroLevelGate(_K.DECREASE_ATT_SPEED, 3),
        ),
        _spec(
            _K.DECREASE_COIN_STRENGTH,
            name="Diffie",
            full_name="Whit Diffie",
            category="general",
            family=EffectFamily.RATE,
            curve=LinearCurve(1.0, -0.05),
            display="x {:.2f}",
            prerequisite=HeroLevelGate(_K.DECREASE_ATT_STRENGTH, 3),
        ),
        _spec(
            _K.REDUCE_HEAT,
            name="Chappe",
            full_name="Claude Chappe",
            category="chip_clk",
            family=EffectFamily.ADDITIVE,
            curve=LinearCurve(0.0, 10.0),
            display="-{:d}%",
            whole_numbers=True,
            prerequisite=HeroLevelGate(_K.INCREASE_CHIP_MEM_SPEED, 3),
        ),
        _spec(
            _K.ADDITIONAL_LIVES,
            name="Zuse",
            full_name="Konrad Zuse",
            category="meta",
            family=EffectFamily.ADDITIVE,
            curve=LinearCurve(0.0, 1.0),
            display="{:d}",
            whole_numbers=True,
            base_cap=3,
            receives_cap_bonus=False,
            prerequisite=HeroLevelGate(_K.DECREASE_ATT_SPEED, 5),
        ),
        _spec(
            _K.INCREASE_MAX_HERO_LEVEL,
            name="Meier",
            full_name="Sid Meier",
            category="meta",
            family=EffectFamily.ADDITIVE,
            curve=LinearCurve(0.0, 1.0),
            display="+{:d}",
            whole_numbers=True,
            base_cap=3,
            receives_cap_bonus=False,
            prerequisite=HeroLevelGate(_K.ADDITIONAL_LIVES, 3),
        ),
        _spec(
            _K.LIMIT_UNWANTED_CHIPS,
            name="Kilby",
            full_name="Jack Kilby",
            category="meta",
            family=EffectFamily.ADDITIVE,
            curve=LinearCurve(0.0, 1.0),
            display="-{:d}",
            whole_numbers=True,
            prerequisite=HeroLevelGate(_K.INCREASE_MAX_HERO_LEVEL, 3),
        ),
        _spec(
            _K.INCREASE_STARTING_CASH,
            name="Hollerith",
            full_name="Herman Hollerith",
            category="eco",
            family=EffectFamily.ABSOLUTE,
            curve=QuadraticCurve(float(MINIMAL_AMOUNT_OF_CASH), 1.0),
            display="{:d} bits",
            whole_numbers=True,
        ),
        _spec(
            _K.GAIN_CASH,
            name="Franke",
            full_name="Herbert W. Franke",
            category="eco",
            family=EffectFamily.ADDITIVE,
            curve=CountdownCurve(start=8.0, factor=9.0),
            display="1 bit/{:d} ticks",
            whole_numbers=True,
            receives_cap_bonus=False,
            prerequisite=HeroLevelGate(_K.INCREASE_STARTING_CASH, 3),
        ),
        _spec(
            _K.DECREASE_REMOVAL_COST,
            name="Hamilton",
            full_name="Margaret Hamilton",
            category="eco",
            family=EffectFamily.ADDITIVE,
            curve=LinearCurve(0.0, 8.0),
            display="-{:d}%",
            whole_numbers=True,
            prerequisite=HeroLevelGate(_K.GAIN_CASH, 3),
        ),
        _spec(
            _K.DECREASE_UPGRADE_COST,
            name="Osborne",
            full_name="Adam Osborne",
            category="eco",
            family=EffectFamily.ADDITIVE,
            curve=LinearCurve(0.0, 6.0),
            display="-{:d}%",
            whole_numbers=True,
            prerequisite=HeroLevelGate(_K.GAIN_CASH, 3),
        ),
        _spec(
            _K.INCREASE_REFUND,
            name="Tramiel",
            full_name="Jack Tramiel",
            category="eco",
            family=EffectFamily.ABSOLUTE,
            curve=LinearCurve(50.0, 10.0),
            display="{:d}%",
            whole_numbers=True,
            # at level 6 the refund would exceed the purchase price
            base_cap=5,
            receives_cap_bonus=False,
            prerequisite=HeroLevelGate(_K.DECREASE_UPGRADE_COST, 3),
        ),
        _spec(
            _K.GAIN_CASH_ON_KILL,
            name="Mandelbrot",
            full_name="Benoît B. Mandelbrot",
            category="eco",
            family=EffectFamily.ADDITIVE,
            curve=SteppedCurve(offset=1.0, factor=0.5),
            display="{:d} bit/kill",
            whole_numbers=True,
            prerequisite=HeroLevelGate(_K.INCREASE_REFUND, 3),
        ),
    )
}


def spec_for(kind: HeroKind) -> HeroSpec:
    return HERO_SPECS[kind]


def cap_bonus_exclusions() -> frozenset:
    """Kinds whose cap never receives the level-cap booster's bonus."""

    return frozenset(kind for kind, spec in HERO_SPECS.items() if not spec.receives_cap_bonus)


__all__ = [
    "DEFAULT_MAX_LEVEL",
    "LEVEL_CAP_BOOSTER",
    "EffectFamily",
    "HeroLevelGate",
    "StageNumberGate",
    "Prerequisite",
    "HeroSpec",
    "HERO_SPECS",
    "spec_for",
    "cap_bonus_exclusions",
]
