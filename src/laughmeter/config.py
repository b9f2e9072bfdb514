"""Application paths, read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_HOME = Path.home() / ".laughmeter"


@dataclass(frozen=True)
class AppConfig:
    """Where LaughMeter keeps its files.

    Attributes:
        home: Base directory for all data.
        log_max_size_mb: Size at which the event log is rotated.
    """

    home: Path = DEFAULT_HOME
    log_max_size_mb: float = 10.0

    @property
    def db_path(self) -> Path:
        return self.home / "journal.db"

    @property
    def settings_path(self) -> Path:
        return self.home / "settings.json"

    @property
    def log_dir(self) -> Path:
        return self.home / "logs"


def config_from_env() -> AppConfig:
    """Load configuration from environment variables."""
    home = os.getenv("LAUGHMETER_HOME")
    return AppConfig(
        home=Path(home).expanduser() if home else DEFAULT_HOME,
        log_max_size_mb=float(os.getenv("LAUGHMETER_LOG_MAX_MB", "10")),
    )
