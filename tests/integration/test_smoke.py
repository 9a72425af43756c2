"""
End-to-end tests for the employee CLI.

Each command runs through typer's CliRunner against snapshot and CSV files
in a temp directory, so every invocation goes through restore -> operation ->
snapshot exactly as it would from a shell.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from empdb.config import Settings
from empdb.main import app
from empdb.table import EmployeeTable

runner = CliRunner()

EXPECTED_CSV_LINES = [
    "ID,Name,Age,Address,Salary",
    "1,Alice,30,X,1000",
    "2,Bob,25,Y,2000",
]


def _invoke(*args: str):
    return runner.invoke(app, list(args))


@pytest.fixture
def seeded_cli(env_settings: Settings) -> Settings:
    """Insert the two sample employees through the CLI."""
    for args in (("Alice", "30", "X", "1000"), ("Bob", "25", "Y", "2000")):
        result = _invoke("insert", *args)
        assert result.exit_code == 0, result.output
    return env_settings


class TestMutatingCommands:
    """Commands that change the table and save it back."""

    def test_insert_persists_snapshot(self, seeded_cli: Settings):
        table = EmployeeTable.restore_strict(seeded_cli.snapshot_path)

        assert [(e.id, e.name) for e in table] == [(1, "Alice"), (2, "Bob")]
        assert table.next_id == 3

    def test_insert_no_save_leaves_snapshot_untouched(self, seeded_cli: Settings):
        result = _invoke("insert", "Carol", "41", "Z", "3000", "--no-save")

        assert result.exit_code == 0, result.output
        assert "ID : 3 | Name : Carol" in result.output
        assert EmployeeTable.restore_strict(seeded_cli.snapshot_path).count() == 2

    def test_update_salary_then_show(self, seeded_cli: Settings):
        assert _invoke("update-salary", "1", "1500").exit_code == 0

        result = _invoke("show", "1")

        assert result.exit_code == 0
        assert "ID : 1 | Name : Alice | Age : 30 | Address : X | Salary : 1500" in result.output

    def test_delete_then_show_misses(self, seeded_cli: Settings):
        assert _invoke("delete", "1").exit_code == 0

        result = _invoke("show", "1")

        assert result.exit_code == 1
        assert "No record found with ID = 1" in result.output

    def test_delete_missing_id_fails(self, seeded_cli: Settings):
        result = _invoke("delete", "42")

        assert result.exit_code == 1
        assert EmployeeTable.restore_strict(seeded_cli.snapshot_path).count() == 2

    def test_update_missing_id_fails(self, seeded_cli: Settings):
        assert _invoke("update-salary", "42", "1").exit_code == 1

    def test_ids_keep_increasing_across_invocations(self, seeded_cli: Settings):
        _invoke("delete", "2")
        _invoke("insert", "Carol", "41", "Z", "3000")

        table = EmployeeTable.restore_strict(seeded_cli.snapshot_path)
        assert [e.id for e in table] == [1, 3]

    def test_sort_persists_new_order(self, seeded_cli: Settings):
        _invoke("update-salary", "1", "9000")

        result = _invoke("sort")

        assert result.exit_code == 0, result.output
        table = EmployeeTable.restore_strict(seeded_cli.snapshot_path)
        assert [e.id for e in table] == [2, 1]

    def test_unwritable_snapshot_fails(self, env_settings: Settings, tmp_path: Path):
        result = _invoke("--snapshot", str(tmp_path), "insert", "A", "1", "a", "1")

        assert result.exit_code == 1


class TestQueryCommands:
    """Read-only commands."""

    def test_list_shows_all_employees(self, seeded_cli: Settings):
        result = _invoke("list")

        assert result.exit_code == 0
        assert "Alice" in result.output
        assert "Bob" in result.output

    def test_list_on_empty_table(self, env_settings: Settings):
        result = _invoke("list")

        assert result.exit_code == 0
        assert "No records to display." in result.output

    def test_find_is_case_insensitive(self, seeded_cli: Settings):
        result = _invoke("find", "ALICE")

        assert result.exit_code == 0
        assert "Alice" in result.output
        assert "Bob" not in result.output

    def test_find_miss(self, seeded_cli: Settings):
        result = _invoke("find", "Carol")

        assert result.exit_code == 1
        assert "No record found with Name = Carol" in result.output

    def test_age_range(self, seeded_cli: Settings):
        hit = _invoke("age-range", "25", "30")
        miss = _invoke("age-range", "31", "40")

        assert hit.exit_code == 0
        assert "Alice" in hit.output and "Bob" in hit.output
        assert miss.exit_code == 1
        assert "No employees found in given age range." in miss.output

    def test_stats(self, seeded_cli: Settings):
        result = _invoke("stats")

        assert result.exit_code == 0
        assert "Total employees" in result.output
        assert "2000" in result.output
        assert "1000" in result.output
        assert "1500.00" in result.output

    def test_info_reports_paths(self, env_settings: Settings):
        result = _invoke("info")

        assert result.exit_code == 0
        assert str(env_settings.snapshot_path) in result.output


class TestFileCommands:
    """Export and snapshot copies."""

    def test_export_to_default_path(self, seeded_cli: Settings):
        result = _invoke("export")

        assert result.exit_code == 0, result.output
        assert seeded_cli.export_path.read_text(encoding="utf-8").splitlines() == EXPECTED_CSV_LINES

    def test_export_to_explicit_path(self, seeded_cli: Settings, tmp_path: Path):
        target = tmp_path / "out" / "report.csv"

        result = _invoke("export", str(target))

        assert result.exit_code == 0, result.output
        assert target.read_text(encoding="utf-8").splitlines() == EXPECTED_CSV_LINES

    def test_export_failure_exit_code(self, seeded_cli: Settings, tmp_path: Path):
        assert _invoke("export", str(tmp_path)).exit_code == 1

    def test_snapshot_copy_round_trips(self, seeded_cli: Settings, tmp_path: Path):
        copy = tmp_path / "backup.json"

        result = _invoke("snapshot", str(copy))

        assert result.exit_code == 0, result.output
        assert EmployeeTable.restore_strict(copy) == EmployeeTable.restore_strict(
            seeded_cli.snapshot_path
        )

    def test_snapshot_copy_of_corrupt_source_fails(self, env_settings: Settings, tmp_path: Path):
        env_settings.snapshot_path.write_text("{broken", encoding="utf-8")
        copy = tmp_path / "backup.json"

        result = _invoke("snapshot", str(copy))

        assert result.exit_code == 1
        assert not copy.exists()

    def test_snapshot_copy_of_missing_source_fails(self, env_settings: Settings, tmp_path: Path):
        copy = tmp_path / "backup.json"

        result = _invoke("snapshot", str(copy))

        assert result.exit_code == 1
        assert not copy.exists()

    def test_corrupt_snapshot_starts_empty(self, env_settings: Settings):
        env_settings.snapshot_path.write_text("{broken", encoding="utf-8")

        result = _invoke("list")

        assert result.exit_code == 0
        assert "No records to display." in result.output

    def test_snapshot_option_overrides_settings(self, env_settings: Settings, tmp_path: Path):
        other = tmp_path / "other.json"

        result = _invoke("--snapshot", str(other), "insert", "Dana", "33", "W", "700")

        assert result.exit_code == 0, result.output
        assert other.exists()
        assert not env_settings.snapshot_path.exists()
        payload = json.loads(other.read_text(encoding="utf-8"))
        assert payload["records"][0]["name"] == "Dana"
