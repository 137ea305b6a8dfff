"""Reference vehicle catalog — the five operators of the base case."""

from __future__ import annotations

from evtol_simulator.config.vehicle_type import VehicleType


# operator, cruise mph, battery kWh, charge hr, kWh/mile, passengers, faults/hr
_REFERENCE_TYPES = [
    ("Alpha", 120.0, 320.0, 0.60, 1.6, 4, 0.25),
    ("Bravo", 100.0, 100.0, 0.20, 1.5, 5, 0.10),
    ("Charlie", 160.0, 220.0, 0.80, 2.2, 3, 0.05),
    ("Delta", 90.0, 120.0, 0.62, 0.8, 2, 0.22),
    ("Echo", 30.0, 150.0, 0.30, 5.8, 2, 0.61),
]


def default_catalog() -> list[VehicleType]:
    """Build a fresh copy of the reference catalog."""
    return [
        VehicleType(
            operator=operator,
            cruise_speed_mph=speed,
            battery_capacity_kwh=capacity,
            time_to_charge_hours=charge,
            energy_per_mile_kwh=energy,
            passenger_count=passengers,
            fault_probability_per_hour=faults,
        )
        for operator, speed, capacity, charge, energy, passengers, faults in _REFERENCE_TYPES
    ]


def operator_order(catalog: list[VehicleType]) -> list[str]:
    """Distinct operator names in first-appearance catalog order."""
    seen: list[str] = []
    for vt in catalog:
        if vt.operator not in seen:
            seen.append(vt.operator)
    return seen
