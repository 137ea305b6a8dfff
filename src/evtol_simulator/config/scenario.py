"""Top-level scenario — fleet configuration plus vehicle catalog."""

from __future__ import annotations

from pydantic import BaseModel, Field

from evtol_simulator.config.catalog import default_catalog
from evtol_simulator.config.vehicle_type import VehicleType


class SimulationConfig(BaseModel):
    """Run-level settings.

    ``random_seed=None`` draws fresh OS entropy, so two runs differ.
    Pass a seed for reproducible runs.
    """

    horizon_hours: float = Field(
        default=3.0, gt=0, allow_inf_nan=False,
        description="Simulated time after which no flight or charge may complete (hours)",
    )
    num_vehicles: int = Field(default=20, ge=1, description="Fleet size, sampled uniformly from the catalog")
    num_chargers: int = Field(default=3, ge=1, description="Size of the shared charger pool")
    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for reproducible runs. None = non-deterministic.",
    )


class Scenario(BaseModel):
    """Complete input bundle for one simulation run."""

    catalog: list[VehicleType] = Field(
        default_factory=default_catalog,
        min_length=1,
        description="Vehicle types the fleet is sampled from (uniform, per vehicle)",
    )
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
