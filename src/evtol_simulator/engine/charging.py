"""Charging allocator — fixed charger pool fed by one FIFO waiting line.

Matching pass (``try_charging``)::

    for slot in 0 .. num_chargers-1:
        if slot idle and line not empty:
            v = line.popleft()
            end = now + v.time_to_charge
            if end > horizon:  v is dropped, slot stays idle this pass
            else:              slot ← v, schedule CHARGE_END at end

A vehicle dropped on overrun has already left the line and never returns;
later slots in the same pass still serve the vehicles behind it.  Arrival
order is the only priority.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from evtol_simulator.config.vehicle_type import VehicleType
from evtol_simulator.engine.events import Event, EventKind, EventQueue
from evtol_simulator.engine.stats import StatsAggregator


class ChargingAllocator:
    """Owns the charger slots and the waiting line.

    Parameters
    ----------
    fleet : list[VehicleType]
        Vehicle arena; vehicles are referenced by index.
    num_chargers : int
        Pool size.
    queue : EventQueue
        Where CHARGE_END events are scheduled.
    stats : StatsAggregator
        Receives one charge record per completed charge.
    horizon_hours : float
        No charge may end after this time.
    on_charged : Callable[[int, float], None]
        Called with ``(vehicle, now)`` after a charge completes; the
        simulation wires this to the flight scheduler.
    """

    def __init__(
        self,
        fleet: list[VehicleType],
        num_chargers: int,
        queue: EventQueue,
        stats: StatsAggregator,
        horizon_hours: float,
        on_charged: Callable[[int, float], None],
    ) -> None:
        self._fleet = fleet
        self._queue = queue
        self._stats = stats
        self._horizon = horizon_hours
        self._on_charged = on_charged

        self._slots: list[int | None] = [None] * num_chargers
        self._line: deque[int] = deque()
        self._busy_hours = 0.0

    # ── Introspection ───────────────────────────────────────────────────

    @property
    def num_chargers(self) -> int:
        return len(self._slots)

    @property
    def waiting(self) -> tuple[int, ...]:
        """Vehicles in the line, head first."""
        return tuple(self._line)

    @property
    def occupied(self) -> tuple[int | None, ...]:
        """Vehicle per slot, ``None`` where idle."""
        return tuple(self._slots)

    @property
    def busy_hours(self) -> float:
        """Σ durations of every charge started so far."""
        return self._busy_hours

    # ── Entry points ────────────────────────────────────────────────────

    def arrive(self, vehicle: int, now: float) -> None:
        """A vehicle finished flying and needs a charger."""
        self._line.append(vehicle)
        self.try_charging(now)

    def release(self, charger: int, now: float) -> None:
        """A charger became free."""
        self._slots[charger] = None
        self.try_charging(now)

    def try_charging(self, now: float) -> None:
        for i, occupant in enumerate(self._slots):
            if occupant is not None or not self._line:
                continue
            vehicle = self._line.popleft()
            charge_time = self._fleet[vehicle].time_to_charge_hours
            charge_end = now + charge_time
            if charge_end > self._horizon:
                continue

            self._slots[i] = vehicle
            self._busy_hours += charge_time
            self._queue.schedule(
                charge_end, EventKind.CHARGE_END, vehicle,
                start_time=now, duration=charge_time, charger=i,
            )

    # ── Completion ──────────────────────────────────────────────────────

    def complete_charge(self, event: Event) -> None:
        """Handle a CHARGE_END: record it, free the slot, send the vehicle flying."""
        vt = self._fleet[event.vehicle]
        now = event.time
        self._stats.record_charge(vt.operator, vt.time_to_charge_hours)
        self._on_charged(event.vehicle, now)
        self.release(event.charger, now)
