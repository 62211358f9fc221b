import pygame

from cpudefense.heroes.events import HERO_DOWNGRADED, HERO_UPGRADED, HeroEventBus
from cpudefense.heroes.kinds import HeroKind


def test_event_types_are_distinct_custom_types() -> None:
    assert HERO_UPGRADED != HERO_DOWNGRADED
    assert HERO_UPGRADED >= pygame.USEREVENT
    assert HERO_DOWNGRADED >= pygame.USEREVENT


def test_listeners_receive_level_change() -> None:
    bus = HeroEventBus()
    received = []
    bus.subscribe(received.append)
    bus.subscribe(received.append)

    event = bus.upgraded(HeroKind.CONVERT_HEAT, 2, 3)

    assert received == [event]
    assert event.type == HERO_UPGRADED
    assert (event.kind, event.old_level, event.new_level) == (HeroKind.CONVERT_HEAT, 2, 3)

    bus.unsubscribe(received.append)
    bus.downgraded(HeroKind.CONVERT_HEAT, 3, 2)
    assert len(received) == 1


def test_events_posted_to_queue_when_requested(monkeypatch) -> None:
    posted = []
    monkeypatch.setattr(pygame.event, "post", posted.append)

    HeroEventBus().upgraded(HeroKind.GAIN_CASH, 0, 1)
    assert posted == []

    bus = HeroEventBus(post_to_queue=True)
    event = bus.downgraded(HeroKind.GAIN_CASH, 1, 0)
    assert posted == [event]
    assert posted[0].type == HERO_DOWNGRADED
