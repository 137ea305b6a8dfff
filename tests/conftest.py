"""Shared test fixtures — reference vehicle types and small scenarios."""

from __future__ import annotations

import pytest

from evtol_simulator.config import Scenario, SimulationConfig, VehicleType, default_catalog


@pytest.fixture
def bravo() -> VehicleType:
    """Bravo with faults switched off: 0.667 h flights, 0.2 h charges."""
    return VehicleType(
        operator="Bravo",
        cruise_speed_mph=100,
        battery_capacity_kwh=100,
        time_to_charge_hours=0.2,
        energy_per_mile_kwh=1.5,
        passenger_count=5,
        fault_probability_per_hour=0.0,
    )


@pytest.fixture
def delta() -> VehicleType:
    return VehicleType(
        operator="Delta",
        cruise_speed_mph=90,
        battery_capacity_kwh=120,
        time_to_charge_hours=0.62,
        energy_per_mile_kwh=0.8,
        passenger_count=2,
        fault_probability_per_hour=0.22,
    )


@pytest.fixture
def catalog() -> list[VehicleType]:
    return default_catalog()


@pytest.fixture
def single_bravo_scenario(bravo: VehicleType) -> Scenario:
    """One Bravo, one charger, three hours."""
    return Scenario(
        catalog=[bravo],
        simulation=SimulationConfig(horizon_hours=3.0, num_vehicles=1, num_chargers=1, random_seed=0),
    )


@pytest.fixture
def busy_scenario(catalog: list[VehicleType]) -> Scenario:
    """Reference catalog with heavy charger contention over a long horizon."""
    return Scenario(
        catalog=catalog,
        simulation=SimulationConfig(horizon_hours=12.0, num_vehicles=20, num_chargers=3, random_seed=42),
    )
