"""Event engine — time-ordered queue of flight and charge completions.

Events are plain tagged records; the simulation dispatches on
``Event.kind``.  Ties on timestamp are broken by insertion order (``seq``),
so a fixed seed always yields the same interleaving.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class EventKind(str, Enum):
    FLIGHT_END = "flight_end"
    CHARGE_END = "charge_end"


@dataclass(frozen=True, order=True)
class Event:
    """One scheduled completion.  Ordered by ``(time, seq)`` only."""

    time: float
    seq: int
    kind: EventKind = field(compare=False)
    vehicle: int = field(compare=False)
    """Index into the simulation's fleet."""

    start_time: float = field(default=0.0, compare=False)
    """When the flight or charge began."""

    duration: float = field(default=0.0, compare=False)

    charger: int | None = field(default=None, compare=False)
    """Slot index for CHARGE_END, ``None`` for flights."""


class EventQueue:
    """Min-heap of pending events.

    The queue does no domain validation.  Callers decide whether an event
    is worth scheduling; the queue only guarantees that events fire once,
    in non-decreasing time order, and never past the horizon they are
    drained to.
    """

    def __init__(self) -> None:
        self._heap: list[Event] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def schedule(
        self,
        time: float,
        kind: EventKind,
        vehicle: int,
        *,
        start_time: float = 0.0,
        duration: float = 0.0,
        charger: int | None = None,
    ) -> Event:
        event = Event(
            time=time,
            seq=next(self._counter),
            kind=kind,
            vehicle=vehicle,
            start_time=start_time,
            duration=duration,
            charger=charger,
        )
        heapq.heappush(self._heap, event)
        return event

    def peek_time(self) -> float | None:
        return self._heap[0].time if self._heap else None

    def pop_next(self, horizon: float) -> Event | None:
        """Remove and return the earliest event if it fires by ``horizon``."""
        if not self._heap or self._heap[0].time > horizon:
            return None
        return heapq.heappop(self._heap)

    def run_until(self, horizon: float, dispatch: Callable[[Event], None]) -> int:
        """Dispatch events in time order until none remain at or before ``horizon``.

        ``dispatch`` may schedule further events.  Returns the number of
        events executed.
        """
        executed = 0
        while (event := self.pop_next(horizon)) is not None:
            dispatch(event)
            executed += 1
        return executed
