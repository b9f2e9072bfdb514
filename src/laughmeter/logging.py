"""JSONL event log for journal activity."""

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


@dataclass
class LogEntry:
    """A single log entry."""

    timestamp: str
    event: str
    entry_id: str | None = None
    mood: str | None = None
    badge_id: str | None = None
    entries_total: int | None = None
    duration_ms: float | None = None
    error: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict, excluding None values."""
        data = asdict(self)
        return {k: v for k, v in data.items() if v is not None and v != {}}


class JSONLLogger:
    """Logger that writes structured logs in JSONL format."""

    def __init__(
        self,
        log_dir: str | Path | None = None,
        filename: str = "events.jsonl",
        max_size_mb: float = 10.0,
    ) -> None:
        if log_dir is None:
            log_dir = Path.home() / ".laughmeter" / "logs"
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.filename = filename
        self.max_size_bytes = int(max_size_mb * 1024 * 1024)

    @property
    def log_path(self) -> Path:
        """Current log file path."""
        return self.log_dir / self.filename

    def _rotate_if_needed(self) -> None:
        """Rotate log file if it exceeds max size."""
        if not self.log_path.exists():
            return

        if self.log_path.stat().st_size >= self.max_size_bytes:
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
            rotated_name = f"{self.log_path.stem}_{timestamp}.jsonl"
            self.log_path.rename(self.log_dir / rotated_name)

    def _write(self, entry: LogEntry) -> None:
        """Write a log entry to the file."""
        self._rotate_if_needed()

        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry.to_dict(), ensure_ascii=False) + "\n")

    def log(
        self,
        event: str,
        *,
        entry_id: str | None = None,
        mood: str | None = None,
        badge_id: str | None = None,
        entries_total: int | None = None,
        duration_ms: float | None = None,
        error: str | None = None,
        **extra: Any,
    ) -> None:
        """Log an event."""
        entry = LogEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            event=event,
            entry_id=entry_id,
            mood=mood,
            badge_id=badge_id,
            entries_total=entries_total,
            duration_ms=duration_ms,
            error=error,
            extra=extra if extra else {},
        )
        self._write(entry)

    def log_entry_logged(self, entry_id: str, mood: str) -> None:
        """Log a newly logged laugh."""
        self.log("entry_logged", entry_id=entry_id, mood=mood)

    def log_entry_updated(self, entry_id: str, mood: str) -> None:
        """Log an edit to a laugh."""
        self.log("entry_updated", entry_id=entry_id, mood=mood)

    def log_entry_deleted(self, entry_id: str) -> None:
        """Log a deleted laugh."""
        self.log("entry_deleted", entry_id=entry_id)

    def log_refresh(self, entries_total: int, unlocked: int, duration_ms: float) -> None:
        """Log a completed refresh."""
        self.log(
            "refresh",
            entries_total=entries_total,
            duration_ms=duration_ms,
            unlocked=unlocked,
        )

    def log_refresh_failed(self, error: str) -> None:
        """Log a refresh that could not read the store."""
        self.log("refresh_failed", error=error)

    def log_badge_unlocked(self, badge_id: str, title: str) -> None:
        """Log a badge that became unlocked."""
        self.log("badge_unlocked", badge_id=badge_id, title=title)


# Global logger instance
_logger: JSONLLogger | None = None


def get_logger() -> JSONLLogger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = JSONLLogger()
    return _logger


def configure_logger(log_dir: str | Path | None = None, max_size_mb: float = 10.0) -> JSONLLogger:
    """Configure and return the global logger."""
    global _logger
    _logger = JSONLLogger(log_dir=log_dir, max_size_mb=max_size_mb)
    return _logger
