"""FastAPI server — HTTP access to the fleet simulator.

Run with:
    uvicorn evtol_simulator.api.server:app --reload --port 8000

Endpoints:
    GET  /health             — liveness probe
    GET  /                   — welcome + pointers
    GET  /schema             — JSON Schema for Scenario inputs
    GET  /scenario/defaults  — complete default scenario as JSON
    POST /simulate           — run one simulation (partial or full Scenario)
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from evtol_simulator import __version__
from evtol_simulator.config.scenario import Scenario
from evtol_simulator.engine.simulation import run_simulation
from evtol_simulator.report import format_report

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="eVTOL Fleet Charging Simulator API",
    version=__version__,
    description=(
        "Run horizon-bounded discrete-event simulations of an eVTOL fleet "
        "competing for a shared charger pool, and get per-operator flight, "
        "charging and fault statistics."
    ),
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /simulate. All fields optional — defaults used for missing."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'simulation': {'num_chargers': 5, 'random_seed': 42}}",
    )


class SimulateResponse(BaseModel):
    """Response from /simulate."""
    result: dict[str, Any]
    report: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _default_scenario() -> dict[str, Any]:
    return Scenario().model_dump()


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    defaults = _default_scenario()
    _deep_merge(defaults, overrides)
    return Scenario(**defaults)


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "eVTOL Fleet Charging Simulator API",
        "version": __version__,
        "start_here": "GET /scenario/defaults",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario — all input parameters with types, defaults, constraints."""
    return Scenario.model_json_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return _default_scenario()


@app.post("/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest):
    """Run one simulation.

    Send a partial Scenario (only the fields you want to change).  A
    ``catalog`` list replaces the default catalog wholesale.  Invalid input
    is rejected with 422 before anything runs.
    """
    try:
        scenario = _build_scenario(req.scenario)
    except ValidationError as exc:
        logger.info("Rejected scenario: %d validation error(s)", exc.error_count())
        raise HTTPException(status_code=422, detail=json.loads(exc.json())) from exc

    result = run_simulation(scenario)
    return SimulateResponse(
        result=result.model_dump(),
        report=format_report(result),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "evtol_simulator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
