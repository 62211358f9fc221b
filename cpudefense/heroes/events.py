"""Upgrade/downgrade notifications delivered as pygame events."""
from __future__ import annotations

from typing import Callable, List

import pygame

from cpudefense.heroes.kinds import HeroKind

HERO_UPGRADED = pygame.event.custom_type()
HERO_DOWNGRADED = pygame.event.custom_type()

HeroListener = Callable[[pygame.event.Event], None]


class HeroEventBus:
    """Fans hero level changes out to the rendering side.

    Listeners are called synchronously. When ``post_to_queue`` is set the
    event is also put on pygame's event queue, which requires the host to
    have initialised pygame.
    """

    def __init__(self, post_to_queue: bool = False) -> None:
        self._listeners: List[HeroListener] = []
        self.post_to_queue = post_to_queue

    def subscribe(self, listener: HeroListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: HeroListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def upgraded(self, kind: HeroKind, old_level: int, new_level: int) -> pygame.event.Event:
        return self._emit(HERO_UPGRADED, kind, old_level, new_level)

    def downgraded(self, kind: HeroKind, old_level: int, new_level: int) -> pygame.event.Event:
        return self._emit(HERO_DOWNGRADED, kind, old_level, new_level)

    def _emit(self, event_type: int, kind: HeroKind, old_level: int, new_level: int) -> pygame.event.Event:
        event = pygame.event.Event(event_type, kind=kind, old_level=old_level, new_level=new_level)
        for listener in list(self._listeners):
            listener(event)
        if self.post_to_queue:
            pygame.event.post(event)
        return event


__all__ = ["HERO_UPGRADED", "HERO_DOWNGRADED", "HeroEventBus", "HeroListener"]
