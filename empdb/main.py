from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from empdb.config import Settings, get_settings
from empdb.console import run_shell
from empdb.exceptions import SnapshotError
from empdb.reporter import print_employees, print_summary
from empdb.storage.abstract import StorageResult
from empdb.table import EmployeeTable
from empdb.utils.logging import configure_logging

app = typer.Typer(help="Employee record store CLI.")


def _save_option() -> bool:
    return typer.Option(
        True,
        "--save/--no-save",
        help="Write the snapshot back after the change.",
    )


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj


def _load(ctx: typer.Context) -> EmployeeTable:
    return EmployeeTable.restore(_settings(ctx).snapshot_path)


def _check(result: StorageResult, success: str) -> None:
    if not result["ok"]:
        typer.echo(f"Error: {result.get('error')}", err=True)
        raise typer.Exit(code=1)
    typer.echo(success)


def _persist(ctx: typer.Context, table: EmployeeTable, save: bool) -> None:
    if not save:
        return
    path = _settings(ctx).snapshot_path
    _check(table.snapshot(path), f"Snapshot written to {path}.")


@app.callback()
def main_callback(
    ctx: typer.Context,
    snapshot: Optional[Path] = typer.Option(
        None,
        "--snapshot",
        "-f",
        help="Snapshot file to load and save (default from settings).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level.",
    ),
) -> None:
    """
    Load settings and configure logging for every command.
    """
    settings = get_settings()
    updates = {}
    if snapshot is not None:
        updates["snapshot_path"] = snapshot
    if log_level is not None:
        updates["log_level"] = log_level
    if updates:
        settings = settings.model_copy(update=updates)
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    ctx.obj = settings


@app.command()
def info(ctx: typer.Context) -> None:
    """
    Show effective configuration values.
    """
    settings = _settings(ctx)
    typer.echo(
        f"snapshot={settings.snapshot_path} | export={settings.export_path} | "
        f"env={settings.app_env} log_level={settings.log_level}"
    )


@app.command()
def insert(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Employee name."),
    age: int = typer.Argument(..., help="Age in years."),
    address: str = typer.Argument(..., help="Address."),
    salary: int = typer.Argument(..., help="Salary."),
    save: bool = _save_option(),
) -> None:
    """
    Insert a new employee.
    """
    table = _load(ctx)
    employee = table.insert(name, age, address, salary)
    typer.echo(f"Inserted: {employee}")
    _persist(ctx, table, save)


@app.command("list")
def list_all(ctx: typer.Context) -> None:
    """
    Show every employee in table order.
    """
    print_employees(_load(ctx).select_all())


@app.command()
def show(ctx: typer.Context, employee_id: int = typer.Argument(..., metavar="ID")) -> None:
    """
    Show one employee by id.
    """
    employee = _load(ctx).select_by_id(employee_id)
    if employee is None:
        typer.echo(f"No record found with ID = {employee_id}")
        raise typer.Exit(code=1)
    typer.echo(str(employee))


@app.command()
def find(ctx: typer.Context, name: str = typer.Argument(..., help="Name, case-insensitive.")) -> None:
    """
    Show employees with the given name.
    """
    matches = _load(ctx).select_by_name(name)
    if not matches:
        typer.echo(f"No record found with Name = {name}")
        raise typer.Exit(code=1)
    print_employees(matches, title=f"Employees named {name}")


@app.command()
def delete(
    ctx: typer.Context,
    employee_id: int = typer.Argument(..., metavar="ID"),
    save: bool = _save_option(),
) -> None:
    """
    Delete one employee by id.
    """
    table = _load(ctx)
    if not table.delete_by_id(employee_id):
        typer.echo(f"No record found with ID = {employee_id}")
        raise typer.Exit(code=1)
    typer.echo("Record deleted successfully.")
    _persist(ctx, table, save)


@app.command("update-salary")
def update_salary(
    ctx: typer.Context,
    employee_id: int = typer.Argument(..., metavar="ID"),
    salary: int = typer.Argument(..., help="New salary."),
    save: bool = _save_option(),
) -> None:
    """
    Change the salary of one employee.
    """
    table = _load(ctx)
    if not table.update_salary_by_id(employee_id, salary):
        typer.echo(f"No record found with ID = {employee_id}")
        raise typer.Exit(code=1)
    typer.echo(f"Salary updated for ID {employee_id}")
    _persist(ctx, table, save)


@app.command()
def sort(ctx: typer.Context, save: bool = _save_option()) -> None:
    """
    Sort employees by salary (stable, ascending) and show the result.
    """
    table = _load(ctx)
    print_employees(table.sort_by_salary(), title="Employees sorted by salary")
    _persist(ctx, table, save)


@app.command()
def stats(ctx: typer.Context) -> None:
    """
    Show employee count and highest, lowest and average salary.
    """
    print_summary(_load(ctx).summary())


@app.command("age-range")
def age_range(
    ctx: typer.Context,
    min_age: int = typer.Argument(..., help="Lower bound, inclusive."),
    max_age: int = typer.Argument(..., help="Upper bound, inclusive."),
) -> None:
    """
    Show employees whose age lies in the given range.
    """
    matches = _load(ctx).select_by_age_range(min_age, max_age)
    if not matches:
        typer.echo("No employees found in given age range.")
        raise typer.Exit(code=1)
    print_employees(matches, title=f"Employees aged {min_age}-{max_age}")


@app.command()
def export(
    ctx: typer.Context,
    output: Optional[Path] = typer.Argument(None, help="CSV path (default from settings)."),
) -> None:
    """
    Export the table to a CSV file.
    """
    target = output or _settings(ctx).export_path
    _check(_load(ctx).export_csv(target), f"Data exported successfully to {target}")


@app.command()
def snapshot(
    ctx: typer.Context,
    output: Path = typer.Argument(..., help="Where to write the copy."),
) -> None:
    """
    Write a copy of the current snapshot to another file.

    Fails without writing anything if the current snapshot is missing or
    unreadable.
    """
    source = _settings(ctx).snapshot_path
    try:
        table = EmployeeTable.restore_strict(source)
    except SnapshotError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    _check(table.snapshot(output), f"Database backup stored in {output}.")


@app.command()
def shell(ctx: typer.Context) -> None:
    """
    Interactive menu. Changes are saved only through the backup option.
    """
    run_shell(_load(ctx), _settings(ctx))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
