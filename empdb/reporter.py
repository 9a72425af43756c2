from __future__ import annotations

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from empdb.domain.models import Employee, SalarySummary


def build_employee_table(records: Iterable[Employee], title: str = "Employee table") -> Table:
    """
    Render records as a rich table, one row per record in the order given.
    """
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Age", justify="right")
    table.add_column("Address")
    table.add_column("Salary", justify="right", style="bold green")

    for record in records:
        table.add_row(
            str(record.id), record.name, str(record.age), record.address, f"{record.salary}"
        )
    return table


def print_employees(
    records: Iterable[Employee],
    title: str = "Employee table",
    console: Optional[Console] = None,
) -> None:
    console = console or Console()
    records = list(records)
    if not records:
        console.print("[yellow]No records to display.[/yellow]")
        return
    console.print(build_employee_table(records, title=title))


def print_summary(summary: SalarySummary, console: Optional[Console] = None) -> None:
    """
    Render count and salary aggregates as a two-column table.
    """
    console = console or Console()
    table = Table(title="Salary summary", box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="bold green")

    table.add_row("Total employees", str(summary.count))
    table.add_row("Highest salary", str(summary.max_salary))
    table.add_row("Lowest salary", str(summary.min_salary))
    table.add_row("Average salary", f"{summary.average_salary:.2f}")
    console.print(table)


__all__ = ["build_employee_table", "print_employees", "print_summary"]
