"""eVTOL fleet charging simulator — discrete-event core."""

from evtol_simulator.config import Scenario, SimulationConfig, VehicleType, default_catalog
from evtol_simulator.engine import FleetSimulation, SimulationError, run_simulation
from evtol_simulator.models import OperatorStats, SimulationResult

__version__ = "1.0.0"

__all__ = [
    "Scenario",
    "SimulationConfig",
    "VehicleType",
    "default_catalog",
    "FleetSimulation",
    "SimulationError",
    "run_simulation",
    "OperatorStats",
    "SimulationResult",
]
