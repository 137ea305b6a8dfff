"""Engine — discrete-event core: events, faults, charging, flights, stats."""

from evtol_simulator.engine.events import Event, EventKind, EventQueue
from evtol_simulator.engine.faults import FaultModel
from evtol_simulator.engine.stats import StatsAggregator
from evtol_simulator.engine.charging import ChargingAllocator
from evtol_simulator.engine.flight import FlightScheduler
from evtol_simulator.engine.simulation import FleetSimulation, SimulationError, run_simulation

__all__ = [
    "Event",
    "EventKind",
    "EventQueue",
    "FaultModel",
    "StatsAggregator",
    "ChargingAllocator",
    "FlightScheduler",
    "FleetSimulation",
    "SimulationError",
    "run_simulation",
]
