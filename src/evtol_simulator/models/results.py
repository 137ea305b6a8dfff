"""Result types — the contract between the engine and any reporter.

Everything here is read-only output.  Averages are computed once when the
snapshot is taken and fall back to ``0.0`` for operators with no completed
flights or charges, so consumers never see NaN.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════════════════════
# Per-operator statistics
# ═══════════════════════════════════════════════════════════════════════════

class OperatorStats(BaseModel):
    """Totals for one operator at the end of a run."""

    model_config = ConfigDict(frozen=True)

    operator: str

    # --- Running totals ---
    total_flight_time_hours: float = 0.0
    total_distance_miles: float = 0.0
    total_charge_time_hours: float = 0.0
    passenger_miles: float = 0.0
    """Σ passengers × distance over every completed flight."""
    total_flights: int = 0
    total_charges: int = 0
    total_faults: int = 0

    # --- Derived averages ---
    avg_flight_time_hours: float = 0.0
    """total_flight_time / total_flights, or 0.0 with no flights."""
    avg_distance_per_flight_miles: float = 0.0
    """total_distance / total_flights, or 0.0 with no flights."""
    avg_charge_time_hours: float = 0.0
    """total_charge_time / total_charges, or 0.0 with no charges."""


# ═══════════════════════════════════════════════════════════════════════════
# Full run result
# ═══════════════════════════════════════════════════════════════════════════

class SimulationResult(BaseModel):
    """Complete output of one simulation run."""

    model_config = ConfigDict(frozen=True)

    horizon_hours: float
    num_vehicles: int
    num_chargers: int
    random_seed: int | None = None

    operator_stats: dict[str, OperatorStats]
    """Operators with at least one completion event, catalog order."""

    vehicle_counts: dict[str, int]
    """Static fleet composition: operators with ≥ 1 vehicle, catalog order."""

    events_processed: int
    """Flight-end + charge-end events executed before the horizon."""

    charger_busy_hours: float
    """Σ charge durations actually started (all complete within the horizon)."""

    charger_utilization: float
    """charger_busy_hours / (num_chargers × horizon_hours), in [0, 1]."""
