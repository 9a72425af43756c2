"""
The employee table: an ordered, in-memory list of records plus the id counter.

Every lookup, update and delete is a linear scan. Records are frozen pydantic
models, so anything returned to a caller is a value that later mutations or
deletions cannot affect.

The table is not safe for concurrent mutation. Callers embedding it in a
threaded host must serialize access themselves.

Usage:
    from empdb.table import EmployeeTable

    table = EmployeeTable.restore("employees.snapshot.json")
    table.insert("Alice", 30, "Pune", 1000)
    result = table.snapshot("employees.snapshot.json")
    if not result["ok"]:
        print(result["error"])
"""

from __future__ import annotations

import statistics
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from empdb.domain.models import Employee, SalarySummary
from empdb.exceptions import SnapshotError, SnapshotNotFoundError
from empdb.storage.abstract import StorageResult
from empdb.storage.csv_export import export_csv
from empdb.storage.snapshot import read_snapshot, write_snapshot
from empdb.utils.logging import get_logger

log = get_logger(__name__)


class EmployeeTable:
    """
    Owns a sequence of Employee records and assigns their ids.

    Ids come from a per-table counter starting at 1. The counter only moves
    forward, is never reset by deletes, and is persisted with snapshots.
    """

    def __init__(self) -> None:
        self._records: List[Employee] = []
        self._next_id: int = 1

    @classmethod
    def _from_state(cls, records: Iterable[Employee], next_id: int) -> "EmployeeTable":
        table = cls()
        table._records = list(records)
        table._next_id = next_id
        return table

    @property
    def next_id(self) -> int:
        """Id the next insert will receive."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._records))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmployeeTable):
            return NotImplemented
        return self._next_id == other._next_id and self._records == other._records

    def __repr__(self) -> str:
        return f"EmployeeTable(records={len(self._records)}, next_id={self._next_id})"

    # CRUD

    def insert(self, name: str, age: int, address: str, salary: int) -> Employee:
        """Append a new record with the next id and return it."""
        employee = Employee(id=self._next_id, name=name, age=age, address=address, salary=salary)
        self._next_id += 1
        self._records.append(employee)
        log.debug("Record inserted", extra={"id": employee.id})
        return employee

    def select_all(self) -> List[Employee]:
        return list(self._records)

    def select_by_id(self, employee_id: int) -> Optional[Employee]:
        for employee in self._records:
            if employee.id == employee_id:
                return employee
        return None

    def select_by_name(self, name: str) -> List[Employee]:
        """Case-insensitive exact name match, in table order."""
        wanted = name.casefold()
        return [e for e in self._records if e.name.casefold() == wanted]

    def select_by_age_range(self, min_age: int, max_age: int) -> List[Employee]:
        """
        Records whose age lies in [min_age, max_age], in table order.

        An inverted range matches nothing.
        """
        return [e for e in self._records if min_age <= e.age <= max_age]

    def delete_by_id(self, employee_id: int) -> bool:
        for index, employee in enumerate(self._records):
            if employee.id == employee_id:
                del self._records[index]
                log.debug("Record deleted", extra={"id": employee_id})
                return True
        return False

    def update_salary_by_id(self, employee_id: int, new_salary: int) -> bool:
        """
        Replace the salary of the matching record, keeping its position.

        The value is not range-checked.
        """
        for index, employee in enumerate(self._records):
            if employee.id == employee_id:
                self._records[index] = employee.with_salary(new_salary)
                log.debug("Salary updated", extra={"id": employee_id, "salary": new_salary})
                return True
        return False

    def sort_by_salary(self) -> List[Employee]:
        """Stable ascending sort by salary, in place. Returns the new order."""
        self._records.sort(key=lambda e: e.salary)
        return self.select_all()

    # Aggregates

    def count(self) -> int:
        return len(self._records)

    def max_salary(self) -> int:
        return max((e.salary for e in self._records), default=0)

    def min_salary(self) -> int:
        return min((e.salary for e in self._records), default=0)

    def average_salary(self) -> float:
        if not self._records:
            return 0.0
        return statistics.fmean(e.salary for e in self._records)

    def summary(self) -> SalarySummary:
        return SalarySummary(
            count=self.count(),
            max_salary=self.max_salary(),
            min_salary=self.min_salary(),
            average_salary=self.average_salary(),
        )

    # Persistence

    def export_csv(self, path: Path | str) -> StorageResult:
        """Write the table as CSV in current order. Never raises for I/O errors."""
        return export_csv(path, self._records)

    def snapshot(self, path: Path | str) -> StorageResult:
        """Write every record and the id counter to `path`. Never raises for I/O errors."""
        return write_snapshot(path, self._records, self._next_id)

    @classmethod
    def restore_strict(cls, path: Path | str) -> "EmployeeTable":
        """
        Rebuild a table from a snapshot.

        Raises
        ------
        SnapshotError
            Missing file, unsupported version or corrupt contents (see the
            subclasses in `empdb.exceptions`).
        """
        snapshot = read_snapshot(path)
        log.info(
            "Snapshot restored",
            extra={"path": str(path), "rows": len(snapshot.records), "next_id": snapshot.next_id},
        )
        return cls._from_state(snapshot.records, snapshot.next_id)

    @classmethod
    def restore(cls, path: Path | str) -> "EmployeeTable":
        """
        Rebuild a table from a snapshot, or return a fresh empty table.

        Any failure yields an empty table with the counter at 1, so callers
        cannot tell "no snapshot yet" from "snapshot unreadable". The cause is
        logged: a missing file at INFO, anything else at WARNING. Use
        `restore_strict` to handle the failure explicitly.
        """
        try:
            return cls.restore_strict(path)
        except SnapshotNotFoundError:
            log.info("No snapshot found, starting with an empty table", extra={"path": str(path)})
        except SnapshotError as exc:
            log.warning(
                "Snapshot could not be restored, starting with an empty table",
                extra={"path": str(path), "reason": exc.reason},
            )
        return cls()


__all__ = ["EmployeeTable"]
