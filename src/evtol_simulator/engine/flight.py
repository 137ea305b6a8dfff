"""Flight scheduler — queues full-battery flights that fit in the horizon."""

from __future__ import annotations

from evtol_simulator.config.vehicle_type import VehicleType
from evtol_simulator.engine.charging import ChargingAllocator
from evtol_simulator.engine.events import Event, EventKind, EventQueue
from evtol_simulator.engine.faults import FaultModel
from evtol_simulator.engine.stats import StatsAggregator


class FlightScheduler:
    """Starts flights and handles their completion.

    A flight that would land after the horizon is never queued; the
    vehicle simply goes idle for the rest of the run.
    """

    def __init__(
        self,
        fleet: list[VehicleType],
        queue: EventQueue,
        stats: StatsAggregator,
        faults: FaultModel,
        allocator: ChargingAllocator,
        horizon_hours: float,
    ) -> None:
        self._fleet = fleet
        self._queue = queue
        self._stats = stats
        self._faults = faults
        self._allocator = allocator
        self._horizon = horizon_hours

    def schedule_flight(self, vehicle: int, start_time: float) -> Event | None:
        duration = self._fleet[vehicle].flight_duration_hours()
        if start_time + duration > self._horizon:
            return None
        return self._queue.schedule(
            start_time + duration, EventKind.FLIGHT_END, vehicle,
            start_time=start_time, duration=duration,
        )

    def complete_flight(self, event: Event) -> None:
        """Handle a FLIGHT_END: stats, fault draw, then hand off to charging."""
        end_time = event.start_time + event.duration
        # Already pruned at scheduling time; re-checked in case enqueue is ever delayed.
        if end_time > self._horizon:
            return

        vt = self._fleet[event.vehicle]
        distance = vt.distance_per_flight_miles()
        self._stats.record_flight(vt.operator, event.duration, distance, vt.passenger_count)

        if self._faults.occurred(vt.fault_probability_per_hour, event.duration):
            self._stats.record_fault(vt.operator)

        self._allocator.arrive(event.vehicle, end_time)
