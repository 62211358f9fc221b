import pytest

from cpudefense.heroes.kinds import SERIES_ENDLESS, SERIES_NORMAL, SERIES_TURBO, HeroKind, StageIdentifier
from cpudefense.heroes.leave import Holiday, LeaveScheduler
from cpudefense.heroes.registry import HeroRegistry


H = HeroKind.INCREASE_CHIP_SUB_SPEED


def _endless(number: int) -> StageIdentifier:
    return StageIdentifier(SERIES_ENDLESS, number)


def test_leave_covers_inclusive_range() -> None:
    scheduler = LeaveScheduler()
    holiday = scheduler.add_leave(H, _endless(10), 3)
    assert holiday == Holiday(H, 10, 12)
    assert scheduler.is_on_leave(H, _endless(10))
    assert scheduler.is_on_leave(H, _endless(11))
    assert scheduler.is_on_leave(H, _endless(12))
    assert not scheduler.is_on_leave(H, _endless(13))
    assert not scheduler.is_on_leave(H, _endless(9))


def test_single_stage_leave() -> None:
    scheduler = LeaveScheduler()
    scheduler.add_leave(H, _endless(4), 1)
    assert scheduler.is_on_leave(H, _endless(4))
    assert not scheduler.is_on_leave(H, _endless(5))


@pytest.mark.parametrize("series", [SERIES_NORMAL, SERIES_TURBO])
def test_leave_only_applies_to_endless_series(series: int) -> None:
    scheduler = LeaveScheduler()
    scheduler.add_leave(H, _endless(10), 3)
    for number in range(8, 15):
        stage = StageIdentifier(series, number)
        assert not scheduler.is_on_leave(H, stage)
        assert not scheduler.is_on_leave(H, stage, exact_start_only=True)
    assert scheduler.heroes_on_leave(StageIdentifier(series, 11)) == []


def test_exact_start_only_matches_first_stage() -> None:
    scheduler = LeaveScheduler()
    scheduler.add_leave(H, _endless(10), 3)
    assert scheduler.is_on_leave(H, _endless(10), exact_start_only=True)
    assert not scheduler.is_on_leave(H, _endless(11), exact_start_only=True)
    assert not scheduler.is_on_leave(HeroKind.GAIN_CASH, _endless(10), exact_start_only=True)


def test_other_kinds_are_unaffected() -> None:
    scheduler = LeaveScheduler()
    scheduler.add_leave(H, _endless(10), 3)
    assert not scheduler.is_on_leave(HeroKind.GAIN_CASH, _endless(11))


def test_same_start_overwrites() -> None:
    scheduler = LeaveScheduler()
    scheduler.add_leave(H, _endless(10), 3)
    scheduler.add_leave(HeroKind.GAIN_CASH, _endless(10), 2)
    assert len(scheduler) == 1
    assert not scheduler.is_on_leave(H, _endless(11))
    assert scheduler.is_on_leave(HeroKind.GAIN_CASH, _endless(11))


def test_overlapping_holidays_with_different_starts() -> None:
    scheduler = LeaveScheduler()
    scheduler.add_leave(H, _endless(10), 3)
    scheduler.add_leave(HeroKind.GAIN_CASH, _endless(11), 4)
    assert scheduler.heroes_on_leave(_endless(12)) == [H, HeroKind.GAIN_CASH]
    assert [holiday.from_stage for holiday in scheduler.holidays()] == [10, 11]
    scheduler.clear()
    assert scheduler.holidays() == []


def test_enter_stage_updates_flags_and_modifier() -> None:
    registry = HeroRegistry()
    registry.upgrade(H)
    registry.upgrade(H)
    registry.add_leave(H, _endless(10), 2)

    assert registry.enter_stage(_endless(9)) == []
    assert registry.hero_modifier(H) == pytest.approx(1.1)

    assert registry.enter_stage(_endless(10)) == [H]
    assert registry.hero(H).is_on_leave
    assert registry.hero_modifier(H) == pytest.approx(1.0)
    assert registry.card(H).on_leave

    registry.enter_stage(_endless(12))
    assert not registry.hero(H).is_on_leave
    assert registry.hero_modifier(H) == pytest.approx(1.1)
