"""
Pytest configuration for the employee record store.

Provides fixtures for:
- Settings pointing at temporary snapshot/export files
- A small seeded table
- Logging and settings-cache cleanup between tests
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator

import pytest

from empdb.config import Settings, get_settings
from empdb.table import EmployeeTable


@pytest.fixture(autouse=True)
def _isolate_global_state() -> Generator[None, None, None]:
    """
    Drop cached settings and root log handlers so tests cannot leak
    configuration (or handlers bound to closed CliRunner streams) into each other.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    return tmp_path / "employees.snapshot.json"


@pytest.fixture
def csv_path(tmp_path: Path) -> Path:
    return tmp_path / "employees.csv"


@pytest.fixture
def test_settings(snapshot_path: Path, csv_path: Path) -> Settings:
    """
    Settings with storage redirected into the test's temp directory.
    """
    return Settings(
        snapshot_path=snapshot_path,
        export_path=csv_path,
        log_level="DEBUG",
    )


@pytest.fixture
def env_settings(
    monkeypatch: pytest.MonkeyPatch, snapshot_path: Path, csv_path: Path
) -> Settings:
    """
    Point the environment at temp files so `get_settings()` (and the CLI) use them.
    """
    monkeypatch.setenv("EMPDB_SNAPSHOT_PATH", str(snapshot_path))
    monkeypatch.setenv("EMPDB_EXPORT_PATH", str(csv_path))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def sample_table() -> EmployeeTable:
    """
    Two employees matching the CSV example: (1, Alice, 30, X, 1000), (2, Bob, 25, Y, 2000).
    """
    table = EmployeeTable()
    table.insert("Alice", 30, "X", 1000)
    table.insert("Bob", 25, "Y", 2000)
    return table
