"""Configuration models — catalog and run inputs."""

from evtol_simulator.config.vehicle_type import VehicleType
from evtol_simulator.config.catalog import default_catalog, operator_order
from evtol_simulator.config.scenario import Scenario, SimulationConfig

__all__ = [
    "VehicleType",
    "default_catalog",
    "operator_order",
    "SimulationConfig",
    "Scenario",
]
