"""Tests for application settings."""

from pathlib import Path

from travel_log.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    monkeypatch.delenv("STORAGE_PATH", raising=False)

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "json"
    assert settings.storage_path == Path("travel_tracker_data.json")
    assert settings.supabase_table == "places"


def test_settings_read_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("STORAGE_PATH", str(tmp_path / "log.json"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.storage_path == tmp_path / "log.json"
    assert settings.log_level == "DEBUG"
