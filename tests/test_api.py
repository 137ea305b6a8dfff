"""Tests for the HTTP API layer."""

from __future__ import annotations

from fastapi.testclient import TestClient

from evtol_simulator.api.server import app, _build_scenario, _deep_merge


client = TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

class TestHelpers:

    def test_deep_merge_nested(self):
        base = {"simulation": {"num_chargers": 3, "num_vehicles": 20}, "catalog": [1]}
        _deep_merge(base, {"simulation": {"num_chargers": 5}})
        assert base == {"simulation": {"num_chargers": 5, "num_vehicles": 20}, "catalog": [1]}

    def test_deep_merge_replaces_lists(self):
        base = {"catalog": [1, 2, 3]}
        _deep_merge(base, {"catalog": [9]})
        assert base["catalog"] == [9]

    def test_build_scenario_partial(self):
        s = _build_scenario({"simulation": {"random_seed": 5}})
        assert s.simulation.random_seed == 5
        assert s.simulation.num_chargers == 3
        assert len(s.catalog) == 5


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestEndpoints:

    def test_health(self):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "ok"}

    def test_root(self):
        assert "name" in client.get("/").json()

    def test_schema(self):
        schema = client.get("/schema").json()
        assert "catalog" in schema["properties"]
        assert "simulation" in schema["properties"]

    def test_defaults(self):
        d = client.get("/scenario/defaults").json()
        assert [vt["operator"] for vt in d["catalog"]] == ["Alpha", "Bravo", "Charlie", "Delta", "Echo"]
        assert d["simulation"]["horizon_hours"] == 3.0

    def test_simulate_seeded_is_reproducible(self):
        body = {"scenario": {"simulation": {"random_seed": 11}}}
        a = client.post("/simulate", json=body)
        b = client.post("/simulate", json=body)
        assert a.status_code == 200
        assert a.json() == b.json()
        result = a.json()["result"]
        assert sum(result["vehicle_counts"].values()) == 20
        assert "Vehicle Distribution:" in a.json()["report"]

    def test_simulate_custom_catalog(self):
        body = {"scenario": {
            "catalog": [{
                "operator": "Bravo",
                "cruise_speed_mph": 100,
                "battery_capacity_kwh": 100,
                "time_to_charge_hours": 0.2,
                "energy_per_mile_kwh": 1.5,
                "passenger_count": 5,
                "fault_probability_per_hour": 0.0,
            }],
            "simulation": {"num_vehicles": 1, "num_chargers": 1, "random_seed": 0},
        }}
        stats = client.post("/simulate", json=body).json()["result"]["operator_stats"]["Bravo"]
        assert stats["total_flights"] == 3
        assert stats["total_charges"] == 3

    def test_simulate_invalid_rejected(self):
        r = client.post("/simulate", json={"scenario": {"simulation": {"num_chargers": 0}}})
        assert r.status_code == 422
        assert r.json()["detail"]

    def test_simulate_empty_catalog_rejected(self):
        r = client.post("/simulate", json={"scenario": {"catalog": []}})
        assert r.status_code == 422
