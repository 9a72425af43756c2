"""
Synthetic data generator for the employee record store.

Builds a table of deterministic pseudo-random employees, writes it as a
snapshot (and optionally as CSV), then restores it to confirm the round trip.
Each step is profiled.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import List

import typer

from empdb.table import EmployeeTable
from empdb.utils.profiler import ProfileStats, profile_block

app = typer.Typer(help="Generate synthetic employees and write a snapshot.")

FIRST_NAMES = ["Asha", "Bob", "Chen", "Dana", "Eitan", "Farah", "Goran", "Hana", "Ivan", "Jyoti"]
CITIES = ["Pune", "Mumbai", "Berlin", "Lagos", "Austin", "Osaka", "Lima", "Oslo"]


def _generate_table(rows: int, seed: int) -> EmployeeTable:
    rng = random.Random(seed)
    table = EmployeeTable()
    for _ in range(rows):
        table.insert(
            rng.choice(FIRST_NAMES),
            rng.randint(21, 65),
            rng.choice(CITIES),
            rng.randrange(20_000, 200_000, 500),
        )
    return table


def _run(rows: int, seed: int, snapshot_path: Path, csv_path: Path | None) -> List[ProfileStats]:
    results: List[ProfileStats] = []

    with profile_block("generate") as stats:
        table = _generate_table(rows, seed)
    stats.extra["rows"] = len(table)
    results.append(stats)

    with profile_block("snapshot") as stats:
        outcome = table.snapshot(snapshot_path)
    if not outcome["ok"]:
        raise RuntimeError(f"snapshot failed: {outcome.get('error')}")
    stats.extra["bytes"] = snapshot_path.stat().st_size
    results.append(stats)

    if csv_path is not None:
        with profile_block("export_csv") as stats:
            outcome = table.export_csv(csv_path)
        if not outcome["ok"]:
            raise RuntimeError(f"export failed: {outcome.get('error')}")
        results.append(stats)

    with profile_block("restore") as stats:
        restored = EmployeeTable.restore_strict(snapshot_path)
    if restored != table:
        raise RuntimeError("restored table differs from the generated one")
    results.append(stats)

    return results


@app.command()
def main(
    rows: int = typer.Option(
        10_000,
        "--rows",
        "-r",
        help="Number of employees to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("employees.snapshot.json"),
        "--output",
        "-o",
        help="Snapshot output path.",
    ),
    csv_output: Path | None = typer.Option(
        None,
        "--csv",
        help="Optional CSV export path.",
    ),
) -> None:
    """
    Generate employees, snapshot them, and report timings and memory.
    """
    typer.echo(f"Generating {rows:,} employees -> {output} (seed={seed})")
    for stats in _run(rows, seed, output, csv_output):
        rss_mb = (stats.peak_rss_bytes or 0) / (1024 * 1024)
        typer.echo(f"{stats.label:<10} {stats.duration_seconds:8.3f}s  peak RSS {rss_mb:8.2f} MB")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
