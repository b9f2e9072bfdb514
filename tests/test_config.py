"""Tests for environment configuration."""

from pathlib import Path

from laughmeter.config import DEFAULT_HOME, AppConfig, config_from_env


def test_defaults(monkeypatch):
    monkeypatch.delenv("LAUGHMETER_HOME", raising=False)
    monkeypatch.delenv("LAUGHMETER_LOG_MAX_MB", raising=False)
    config = config_from_env()
    assert config.home == DEFAULT_HOME
    assert config.log_max_size_mb == 10.0


def test_home_from_env(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("LAUGHMETER_HOME", str(tmp_path))
    monkeypatch.setenv("LAUGHMETER_LOG_MAX_MB", "2.5")
    config = config_from_env()
    assert config.home == tmp_path
    assert config.log_max_size_mb == 2.5


def test_paths_live_under_home(tmp_path: Path):
    config = AppConfig(home=tmp_path)
    assert config.db_path == tmp_path / "journal.db"
    assert config.settings_path == tmp_path / "settings.json"
    assert config.log_dir == tmp_path / "logs"
