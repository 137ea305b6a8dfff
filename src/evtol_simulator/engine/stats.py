"""Statistics aggregator — per-operator running totals.

Totals are only ever added to, from inside completion events, so every
field is non-decreasing over a run.  ``snapshot()`` freezes the current
totals into ``OperatorStats`` models with their averages filled in.
"""

from __future__ import annotations

from dataclasses import dataclass

from evtol_simulator.config.vehicle_type import VehicleType
from evtol_simulator.models.results import OperatorStats


@dataclass
class _OperatorTotals:
    flight_time_hours: float = 0.0
    distance_miles: float = 0.0
    charge_time_hours: float = 0.0
    passenger_miles: float = 0.0
    flights: int = 0
    charges: int = 0
    faults: int = 0


def _safe_avg(total: float, count: int) -> float:
    return total / count if count > 0 else 0.0


class StatsAggregator:
    """Accumulates completion events keyed by operator.

    Parameters
    ----------
    operators : list[str]
        Reporting order.  Operators not listed still accumulate and are
        reported after the listed ones, in first-seen order.
    """

    def __init__(self, operators: list[str] | None = None) -> None:
        self._order = list(operators or [])
        self._totals: dict[str, _OperatorTotals] = {}

    def _for(self, operator: str) -> _OperatorTotals:
        totals = self._totals.get(operator)
        if totals is None:
            totals = self._totals[operator] = _OperatorTotals()
        return totals

    # ── Recording ───────────────────────────────────────────────────────

    def record_flight(
        self,
        operator: str,
        duration_hours: float,
        distance_miles: float,
        passengers: int,
    ) -> None:
        t = self._for(operator)
        t.flight_time_hours += duration_hours
        t.distance_miles += distance_miles
        t.flights += 1
        t.passenger_miles += passengers * distance_miles

    def record_fault(self, operator: str) -> None:
        self._for(operator).faults += 1

    def record_charge(self, operator: str, duration_hours: float) -> None:
        t = self._for(operator)
        t.charge_time_hours += duration_hours
        t.charges += 1

    # ── Read side ───────────────────────────────────────────────────────

    def _ordered_operators(self) -> list[str]:
        listed = [op for op in self._order if op in self._totals]
        extra = [op for op in self._totals if op not in self._order]
        return listed + extra

    def snapshot(self) -> dict[str, OperatorStats]:
        """Immutable totals and averages for every operator seen so far."""
        out: dict[str, OperatorStats] = {}
        for op in self._ordered_operators():
            t = self._totals[op]
            out[op] = OperatorStats(
                operator=op,
                total_flight_time_hours=t.flight_time_hours,
                total_distance_miles=t.distance_miles,
                total_charge_time_hours=t.charge_time_hours,
                passenger_miles=t.passenger_miles,
                total_flights=t.flights,
                total_charges=t.charges,
                total_faults=t.faults,
                avg_flight_time_hours=_safe_avg(t.flight_time_hours, t.flights),
                avg_distance_per_flight_miles=_safe_avg(t.distance_miles, t.flights),
                avg_charge_time_hours=_safe_avg(t.charge_time_hours, t.charges),
            )
        return out

    def vehicle_counts(self, fleet: list[VehicleType]) -> dict[str, int]:
        """Vehicles per operator from the static fleet, not from events."""
        counts: dict[str, int] = {}
        for vt in fleet:
            counts[vt.operator] = counts.get(vt.operator, 0) + 1
        ordered = [op for op in self._order if op in counts]
        ordered += [op for op in counts if op not in self._order]
        return {op: counts[op] for op in ordered}
