"""Command-line entry point.

    python -m evtol_simulator --vehicles 20 --chargers 3 --horizon 3 --seed 42
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from evtol_simulator.config.scenario import Scenario, SimulationConfig
from evtol_simulator.engine.simulation import run_simulation
from evtol_simulator.report import format_report


def build_parser() -> argparse.ArgumentParser:
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(
        prog="evtol-sim",
        description="Simulate an eVTOL fleet sharing a charger pool over a fixed horizon.",
    )
    parser.add_argument("--horizon", type=float, default=defaults.horizon_hours,
                        help="simulated hours (default: %(default)s)")
    parser.add_argument("--vehicles", type=int, default=defaults.num_vehicles,
                        help="fleet size (default: %(default)s)")
    parser.add_argument("--chargers", type=int, default=defaults.num_chargers,
                        help="charger pool size (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible run")
    parser.add_argument("--json", action="store_true", help="print the raw result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        scenario = Scenario(simulation=SimulationConfig(
            horizon_hours=args.horizon,
            num_vehicles=args.vehicles,
            num_chargers=args.chargers,
            random_seed=args.seed,
        ))
    except ValidationError as exc:
        print(f"invalid configuration:\n{exc}", file=sys.stderr)
        return 2

    result = run_simulation(scenario)
    if args.json:
        print(json.dumps(result.model_dump(), indent=2))
    else:
        print(format_report(result))
    return 0
