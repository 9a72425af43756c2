"""
empdb - a single-table, in-memory employee record store.

The package provides:

- An ordered employee table with insert, lookup, update, delete and a stable
  salary sort
- Salary aggregates (count, max, min, average)
- CSV export
- Whole-table snapshot and restore, including the id counter
- A typer CLI and an interactive numbered menu over the table

Lookups are linear scans; the table is meant for small data sets and is not
safe for concurrent mutation.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from empdb.config import Settings, get_settings
from empdb.domain.models import Employee, SalarySummary
from empdb.exceptions import (
    EmpDBError,
    InvalidInputError,
    SnapshotCorruptError,
    SnapshotError,
    SnapshotNotFoundError,
    SnapshotVersionError,
)
from empdb.storage.abstract import StorageResult
from empdb.table import EmployeeTable
from empdb.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Table and records
    "Employee",
    "EmployeeTable",
    "SalarySummary",
    "StorageResult",
    # Errors
    "EmpDBError",
    "InvalidInputError",
    "SnapshotError",
    "SnapshotNotFoundError",
    "SnapshotVersionError",
    "SnapshotCorruptError",
    # Logging
    "configure_logging",
    "get_logger",
]
