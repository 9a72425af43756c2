from __future__ import annotations

from pathlib import Path
from time import sleep

import pytest

from empdb import config
from empdb.console import parse_option
from empdb.exceptions import InvalidInputError
from empdb.utils import profiler


def test_get_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("EMPDB_SNAPSHOT_PATH", "EMPDB_EXPORT_PATH", "APP_ENV", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)

    settings = config.get_settings()

    assert settings.snapshot_path == Path("employees.snapshot.json")
    assert settings.export_path == Path("employees.csv")
    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.log_json is False


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("EMPDB_SNAPSHOT_PATH", str(tmp_path / "db.json"))
    monkeypatch.setenv("LOG_JSON", "true")

    settings = config.get_settings()

    assert settings.snapshot_path == tmp_path / "db.json"
    assert settings.log_json is True


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)

    assert stats.duration_seconds >= 0.05
    assert stats.peak_rss_bytes is not None and stats.peak_rss_bytes > 0
    assert stats.peak_traced_bytes is not None
    assert stats.as_dict()["label"] == "sleep"


def test_parse_option_accepts_padded_integers():
    assert parse_option(" 14 ") == 14


def test_parse_option_rejects_text():
    with pytest.raises(InvalidInputError):
        parse_option("fourteen")
