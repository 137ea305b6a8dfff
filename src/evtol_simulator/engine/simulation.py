"""Run driver — wires the sub-engines and drives one horizon-bounded run.

Sequence:
  1. Sample each vehicle's type uniformly and independently from the catalog
  2. Seed every vehicle's first flight at t = 0
  3. Drain the event queue to the horizon, dispatching on event kind:
       FLIGHT_END → stats + fault draw → charging line
       CHARGE_END → stats → free slot → next flight → matching pass
  4. Freeze statistics into a ``SimulationResult``

Entry point: ``run_simulation(scenario)``
"""

from __future__ import annotations

import logging

import numpy as np

from evtol_simulator.config.catalog import operator_order
from evtol_simulator.config.scenario import Scenario
from evtol_simulator.config.vehicle_type import VehicleType
from evtol_simulator.engine.charging import ChargingAllocator
from evtol_simulator.engine.events import Event, EventKind, EventQueue
from evtol_simulator.engine.faults import FaultModel
from evtol_simulator.engine.flight import FlightScheduler
from evtol_simulator.engine.stats import StatsAggregator
from evtol_simulator.models.results import SimulationResult

logger = logging.getLogger(__name__)


class SimulationError(RuntimeError):
    """Raised when a simulation is driven incorrectly (e.g. run twice)."""


# ═══════════════════════════════════════════════════════════════════════════
# Simulation
# ═══════════════════════════════════════════════════════════════════════════

class FleetSimulation:
    """One run of the fleet over one horizon.

    Usage::

        sim = FleetSimulation(Scenario(), rng=np.random.default_rng(7))
        result = sim.run()

    Parameters
    ----------
    scenario : Scenario
        Validated on construction, so bad input never reaches the engine.
    rng : np.random.Generator, optional
        Source for type sampling and fault draws.  Defaults to
        ``np.random.default_rng(scenario.simulation.random_seed)``.
    """

    def __init__(self, scenario: Scenario, rng: np.random.Generator | None = None) -> None:
        self._scenario = scenario
        cfg = scenario.simulation
        self._horizon = cfg.horizon_hours
        self._rng = rng if rng is not None else np.random.default_rng(cfg.random_seed)

        self.queue = EventQueue()
        self.stats = StatsAggregator(operator_order(scenario.catalog))
        self.fleet: list[VehicleType] = self._sample_fleet(scenario.catalog, cfg.num_vehicles)
        self.history: list[Event] = []

        self.allocator = ChargingAllocator(
            self.fleet, cfg.num_chargers, self.queue, self.stats,
            self._horizon, on_charged=self._start_flight,
        )
        self.flights = FlightScheduler(
            self.fleet, self.queue, self.stats, FaultModel(self._rng),
            self.allocator, self._horizon,
        )
        self._finished = False

        for vehicle in range(len(self.fleet)):
            self.flights.schedule_flight(vehicle, 0.0)

    # ── Setup ───────────────────────────────────────────────────────────

    def _sample_fleet(self, catalog: list[VehicleType], num_vehicles: int) -> list[VehicleType]:
        picks = self._rng.integers(0, len(catalog), size=num_vehicles)
        return [catalog[int(i)] for i in picks]

    def _start_flight(self, vehicle: int, now: float) -> None:
        self.flights.schedule_flight(vehicle, now)

    # ── Driving ─────────────────────────────────────────────────────────

    @property
    def horizon_hours(self) -> float:
        return self._horizon

    def _dispatch(self, event: Event) -> None:
        match event.kind:
            case EventKind.FLIGHT_END:
                self.flights.complete_flight(event)
            case EventKind.CHARGE_END:
                self.allocator.complete_charge(event)
        self.history.append(event)

    def step(self) -> Event | None:
        """Execute the next event at or before the horizon, if any."""
        event = self.queue.pop_next(self._horizon)
        if event is not None:
            self._dispatch(event)
        return event

    def run(self) -> SimulationResult:
        if self._finished:
            raise SimulationError("simulation has already run; build a new FleetSimulation")

        cfg = self._scenario.simulation
        logger.info(
            "Starting run: %d vehicles, %d chargers, horizon %.2f h, seed %s",
            len(self.fleet), cfg.num_chargers, self._horizon, cfg.random_seed,
        )
        logger.debug("Fleet composition: %s", self.stats.vehicle_counts(self.fleet))

        self.queue.run_until(self._horizon, self._dispatch)
        self._finished = True

        logger.info("Run finished after %d events", len(self.history))
        return self.result()

    # ── Output ──────────────────────────────────────────────────────────

    def result(self) -> SimulationResult:
        cfg = self._scenario.simulation
        capacity_hours = cfg.num_chargers * self._horizon
        busy = self.allocator.busy_hours
        return SimulationResult(
            horizon_hours=self._horizon,
            num_vehicles=len(self.fleet),
            num_chargers=cfg.num_chargers,
            random_seed=cfg.random_seed,
            operator_stats=self.stats.snapshot(),
            vehicle_counts=self.stats.vehicle_counts(self.fleet),
            events_processed=len(self.history),
            charger_busy_hours=busy,
            charger_utilization=busy / capacity_hours if capacity_hours > 0 else 0.0,
        )


# ═══════════════════════════════════════════════════════════════════════════
# Public entry point
# ═══════════════════════════════════════════════════════════════════════════

def run_simulation(scenario: Scenario, rng: np.random.Generator | None = None) -> SimulationResult:
    """Build a ``FleetSimulation`` for ``scenario`` and run it to the horizon."""
    return FleetSimulation(scenario, rng).run()
