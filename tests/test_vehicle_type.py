"""Tests for config/vehicle_type.py — derived flight values, hand-calculated."""

from __future__ import annotations

import pytest

from evtol_simulator.config import VehicleType, default_catalog


def test_flight_duration(bravo: VehicleType):
    # 100 / (100 × 1.5) = 0.6667 h
    assert bravo.flight_duration_hours() == pytest.approx(100 / 150)


def test_distance_per_flight_uses_own_energy_rate(bravo: VehicleType):
    # speed × duration = C / E = 100 / 1.5 = 66.67 miles, not 150
    assert bravo.distance_per_flight_miles() == pytest.approx(66.6667, abs=1e-3)


def test_distance_per_flight_delta(delta: VehicleType):
    # 120 / 0.8 = 150 miles
    assert delta.distance_per_flight_miles() == pytest.approx(150.0)
    assert delta.flight_duration_hours() == pytest.approx(120 / 72)


def test_distance_equals_capacity_over_energy():
    for vt in default_catalog():
        assert vt.distance_per_flight_miles() == pytest.approx(
            vt.battery_capacity_kwh / vt.energy_per_mile_kwh
        )


def test_derived_values_follow_a_changed_type(bravo: VehicleType):
    """Derived values are recomputed from the current fields, never cached."""
    before = bravo.flight_duration_hours()
    bigger = bravo.model_copy(update={"battery_capacity_kwh": 200})
    assert bigger.flight_duration_hours() == pytest.approx(2 * before)
    assert bravo.flight_duration_hours() == before


def test_reference_catalog_operators():
    ops = [vt.operator for vt in default_catalog()]
    assert ops == ["Alpha", "Bravo", "Charlie", "Delta", "Echo"]


def test_default_catalog_is_a_fresh_copy():
    a = default_catalog()
    a.pop()
    assert len(default_catalog()) == 5
