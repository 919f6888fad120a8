"""Game events and the fixed-size ring buffer that carries them between frames."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum


class Event(IntEnum):
    """Things that happen during a frame and are handled on the next one."""

    NONE = 0
    REFRESH_BG = 1
    EVO_READY = 2
    TEST_EVENT = 3


class EventQueue:
    """A ring of ten event slots; pushing past the end overwrites the oldest slot."""

    CAPACITY = 10

    def __init__(self) -> None:
        self._events: list[Event] = [Event.NONE] * self.CAPACITY
        self._idx = 0

    def push(self, event: Event | int) -> None:
        """Store an event in the next slot, wrapping around after the last one."""
        self._events[self._idx] = Event(event)
        self._idx = (self._idx + 1) % self.CAPACITY

    def clear(self) -> None:
        """Reset every slot to ``Event.NONE`` and start again at the first slot."""
        self._events = [Event.NONE] * self.CAPACITY
        self._idx = 0

    def __iter__(self) -> Iterator[Event]:
        return iter(tuple(self._events))

    def __contains__(self, event: object) -> bool:
        return event in self._events

    def __repr__(self) -> str:
        names = ", ".join(event.name for event in self._events)
        return f"EventQueue([{names}])"