"""
Interactive numbered menu over an EmployeeTable.

This is the thin I/O layer: it reads and type-checks user input, calls one
table operation per option and prints the outcome. Nothing is saved unless
the user picks the backup option.
"""

from __future__ import annotations

from typing import Callable, Dict

import typer

from empdb.config import Settings
from empdb.domain.models import Employee
from empdb.exceptions import InvalidInputError
from empdb.storage.abstract import StorageResult
from empdb.table import EmployeeTable
from empdb.utils.logging import get_logger

log = get_logger(__name__)

EXIT_OPTION = 20
RULE = "-" * 50

MENU = f"""
{'-' * 16} Employee DBMS {'-' * 19}
1  : Insert new employee
2  : Select * from employee
3  : Take backup
4  : Select by ID
5  : Select by Name
6  : Delete by ID
7  : Update salary by ID
8  : Sort employees by salary
9  : Show max salary
10 : Show min salary
11 : Show average salary
12 : Show total employees
13 : Search employees by age range
14 : Export data to CSV
20 : Exit DBMS
{RULE}"""


def parse_option(raw: str) -> int:
    """Turn a menu choice into an int, raising InvalidInputError if it is not one."""
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise InvalidInputError(f"not a menu option: {raw!r}") from exc


def _echo_records(records: list[Employee]) -> None:
    typer.echo(RULE)
    typer.echo("Data from Employee table")
    typer.echo(RULE)
    for record in records:
        typer.echo(str(record))
    typer.echo(RULE)


def _echo_storage(result: StorageResult, success: str, failure: str) -> None:
    if result["ok"]:
        typer.echo(success)
    else:
        typer.echo(f"{failure} ({result.get('error')})", err=True)


def _insert(table: EmployeeTable, settings: Settings) -> None:
    name = typer.prompt("Enter name")
    age = typer.prompt("Enter age", type=int)
    address = typer.prompt("Enter address")
    salary = typer.prompt("Enter salary", type=int)
    table.insert(name, age, address, salary)
    typer.echo("New record inserted successfully.")


def _select_all(table: EmployeeTable, settings: Settings) -> None:
    _echo_records(table.select_all())


def _backup(table: EmployeeTable, settings: Settings) -> None:
    result = table.snapshot(settings.snapshot_path)
    _echo_storage(
        result, "Database backup stored successfully.", "Exception occurred during backup..."
    )


def _select_by_id(table: EmployeeTable, settings: Settings) -> None:
    employee_id = typer.prompt("Enter ID", type=int)
    employee = table.select_by_id(employee_id)
    if employee is None:
        typer.echo(f"No record found with ID = {employee_id}")
    else:
        typer.echo(str(employee))


def _select_by_name(table: EmployeeTable, settings: Settings) -> None:
    name = typer.prompt("Enter name")
    matches = table.select_by_name(name)
    if not matches:
        typer.echo(f"No record found with Name = {name}")
    for employee in matches:
        typer.echo(str(employee))


def _delete_by_id(table: EmployeeTable, settings: Settings) -> None:
    employee_id = typer.prompt("Enter ID", type=int)
    if table.delete_by_id(employee_id):
        typer.echo("Record deleted successfully.")
    else:
        typer.echo(f"No record found with ID = {employee_id}")


def _update_salary(table: EmployeeTable, settings: Settings) -> None:
    employee_id = typer.prompt("Enter ID", type=int)
    new_salary = typer.prompt("Enter new salary", type=int)
    if table.update_salary_by_id(employee_id, new_salary):
        typer.echo(f"Salary updated for ID {employee_id}")
    else:
        typer.echo(f"No record found with ID = {employee_id}")


def _sort_by_salary(table: EmployeeTable, settings: Settings) -> None:
    ordered = table.sort_by_salary()
    typer.echo("Employees sorted by salary.")
    _echo_records(ordered)


def _max_salary(table: EmployeeTable, settings: Settings) -> None:
    typer.echo(f"Highest salary: {table.max_salary()}")


def _min_salary(table: EmployeeTable, settings: Settings) -> None:
    typer.echo(f"Lowest salary: {table.min_salary()}")


def _average_salary(table: EmployeeTable, settings: Settings) -> None:
    typer.echo(f"Average salary: {table.average_salary()}")


def _count(table: EmployeeTable, settings: Settings) -> None:
    typer.echo(f"Total employees: {table.count()}")


def _age_range(table: EmployeeTable, settings: Settings) -> None:
    min_age = typer.prompt("Enter min age", type=int)
    max_age = typer.prompt("Enter max age", type=int)
    matches = table.select_by_age_range(min_age, max_age)
    if not matches:
        typer.echo("No employees found in given age range.")
    for employee in matches:
        typer.echo(str(employee))


def _export(table: EmployeeTable, settings: Settings) -> None:
    filename = typer.prompt("Enter filename", default=str(settings.export_path))
    result = table.export_csv(filename)
    _echo_storage(result, f"Data exported successfully to {filename}", "Error exporting data...")


Handler = Callable[[EmployeeTable, Settings], None]

HANDLERS: Dict[int, Handler] = {
    1: _insert,
    2: _select_all,
    3: _backup,
    4: _select_by_id,
    5: _select_by_name,
    6: _delete_by_id,
    7: _update_salary,
    8: _sort_by_salary,
    9: _max_salary,
    10: _min_salary,
    11: _average_salary,
    12: _count,
    13: _age_range,
    14: _export,
}


def run_shell(table: EmployeeTable, settings: Settings) -> EmployeeTable:
    """
    Loop over the menu until the exit option is chosen.

    Returns the table so callers can inspect or persist the final state.
    """
    while True:
        typer.echo(MENU)
        raw = typer.prompt("Enter option")
        try:
            option = parse_option(raw)
        except InvalidInputError:
            option = -1

        if option == EXIT_OPTION:
            typer.echo("Thank you for using Employee DBMS!")
            return table

        handler = HANDLERS.get(option)
        if handler is None:
            log.debug("Invalid menu option", extra={"raw": raw})
            typer.echo("Invalid option. Try again.")
            continue
        handler(table, settings)


__all__ = ["HANDLERS", "MENU", "parse_option", "run_shell"]
