"""Result models — simulation output contracts."""

from evtol_simulator.models.results import OperatorStats, SimulationResult

__all__ = [
    "OperatorStats",
    "SimulationResult",
]
