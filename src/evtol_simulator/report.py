"""Plain-text report for a finished run."""

from __future__ import annotations

from evtol_simulator.models.results import SimulationResult


def format_report(result: SimulationResult) -> str:
    lines: list[str] = []
    for op, s in result.operator_stats.items():
        lines += [
            "",
            f"Stats for {op}:",
            f"  Avg Flight Time: {s.avg_flight_time_hours:.2f} hr",
            f"  Avg Distance per Flight: {s.avg_distance_per_flight_miles:.2f} miles",
            f"  Avg Charge Time: {s.avg_charge_time_hours:.2f} hr",
            f"  Total Faults: {s.total_faults}",
            f"  Total Passenger Miles: {s.passenger_miles:.2f}",
        ]

    lines += ["", "Vehicle Distribution:"]
    for op, count in result.vehicle_counts.items():
        lines.append(f"  {op}: {count} vehicle(s)")

    lines += [
        "",
        f"Charger Utilization: {result.charger_utilization:.1%} "
        f"({result.charger_busy_hours:.2f} of "
        f"{result.num_chargers * result.horizon_hours:.2f} charger-hours)",
    ]
    return "\n".join(lines)
