"""Journal controller: entry actions and the refresh cycle."""

from __future__ import annotations

import logging
import sqlite3
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .achievements import BadgeStatus, unlocked_ids
from .dates import stamp
from .export import generate_csv
from .journal import DEFAULT_MOOD, MOODS, Entry, EntryStore, clean_text
from .logging import JSONLLogger, get_logger
from .quotes import daily_quote
from .settings import Settings, save_settings
from .stats import Snapshot, build_snapshot

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    # Naive; see dates.local_time for how stored offsets are read.
    return datetime.now()


@dataclass(frozen=True)
class RefreshStatus:
    """Outcome of the latest refresh.

    Attributes:
        ok: False if the store could not be read.
        error: Description of the failure, if any.
        at: When the refresh ran.
    """

    ok: bool
    error: str | None = None
    at: datetime | None = None


class JournalController:
    """Coordinates the entry store, settings and derived state.

    Every entry action is followed by a full refresh: re-read all entries,
    recompute statistics and re-evaluate every badge. The latest result
    is available as ``snapshot``.
    """

    def __init__(
        self,
        store: EntryStore,
        settings: Settings | None = None,
        settings_path: Path | None = None,
        events: JSONLLogger | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the controller and run a first refresh.

        Args:
            store: Entry storage, already initialized.
            settings: Loaded user settings. Defaults are used if None.
            settings_path: Where settings changes are saved.
            events: Event log. Uses the global event logger if None.
            clock: Returns the current time. Local wall clock if None.
        """
        self.store = store
        self.settings = settings or Settings()
        self.settings_path = settings_path
        self.events = events or get_logger()
        self.clock = clock or _local_now
        self.snapshot: Snapshot | None = None
        self.status = RefreshStatus(ok=True)
        self.newly_unlocked: list[BadgeStatus] = []
        self._lock = threading.Lock()
        self.refresh()

    @property
    def people(self) -> list[str]:
        return self.settings.people

    # -- refresh ---------------------------------------------------------

    def refresh(self) -> bool:
        """Recompute everything from the full entry history.

        On a store failure the previous snapshot is kept and the error is
        recorded in ``status``.

        Returns:
            True if the refresh succeeded.
        """
        with self._lock:
            now = self.clock()
            started = time.perf_counter()
            try:
                entries = self.store.list_all()
            except sqlite3.Error as e:
                logger.warning("Refresh failed: %s", e)
                self.status = RefreshStatus(ok=False, error=str(e), at=now)
                self.events.log_refresh_failed(str(e))
                return False

            snapshot = build_snapshot(entries, now)
            previous = self.snapshot
            self.newly_unlocked = []
            if previous is not None:
                before = unlocked_ids(previous.badges)
                self.newly_unlocked = [
                    b for b in snapshot.badges if b.is_unlocked and b.id not in before
                ]

            self.snapshot = snapshot
            self.status = RefreshStatus(ok=True, at=now)

            duration_ms = (time.perf_counter() - started) * 1000
            self.events.log_refresh(len(entries), snapshot.unlocked_count, duration_ms)
            for badge in self.newly_unlocked:
                self.events.log_badge_unlocked(badge.id, badge.title)
            return True

    # -- entry actions ---------------------------------------------------

    def log_laugh(
        self,
        mood: str = DEFAULT_MOOD,
        person: str | None = None,
        location: str | None = None,
        note: str | None = None,
    ) -> Entry:
        """Log a new laugh stamped with the current time.

        Raises:
            ValueError: If the mood is not a known mood code.
        """
        mood = mood or DEFAULT_MOOD
        if mood not in MOODS:
            raise ValueError(f"Unknown mood: {mood}")

        entry = Entry(
            timestamp=stamp(self.clock()),
            mood=mood,
            person=clean_text(person),
            location=clean_text(location),
            note=clean_text(note),
        )
        self.store.append(entry)
        self.events.log_entry_logged(entry.id, entry.mood)
        self.refresh()
        return entry

    def update_laugh(
        self,
        entry_id: str,
        mood: str,
        person: str | None = None,
        note: str | None = None,
    ) -> bool:
        """Edit the mood, person and note of a laugh.

        Returns:
            True if the entry existed.

        Raises:
            ValueError: If the mood is not a known mood code.
        """
        if mood not in MOODS:
            raise ValueError(f"Unknown mood: {mood}")

        updated = self.store.update(
            entry_id, mood=mood, person=clean_text(person), note=clean_text(note)
        )
        if updated:
            self.events.log_entry_updated(entry_id, mood)
            self.refresh()
        return updated

    def delete_laugh(self, entry_id: str) -> bool:
        """Delete a laugh.

        Returns:
            True if the entry existed.
        """
        deleted = self.store.delete(entry_id)
        if deleted:
            self.events.log_entry_deleted(entry_id)
            self.refresh()
        return deleted

    # -- people quick-picks ----------------------------------------------

    def add_person(self, name: str) -> bool:
        added = self.settings.add_person(name)
        if added:
            self._save_settings()
        return added

    def remove_person(self, name: str) -> bool:
        removed = self.settings.remove_person(name)
        if removed:
            self._save_settings()
        return removed

    def move_person(self, source: int, destination: int) -> None:
        self.settings.move_person(source, destination)
        self._save_settings()

    def _save_settings(self) -> None:
        save_settings(self.settings, self.settings_path)

    # -- other views -----------------------------------------------------

    def export_csv(self) -> str:
        """CSV of the full journal, newest first."""
        return generate_csv(self.store.list_all())

    def daily_quote(self) -> str:
        return daily_quote(self.clock())

    def find_entry(self, id_prefix: str) -> Entry | None:
        """Look up an entry by its id or an unambiguous id prefix."""
        if not id_prefix:
            return None
        exact = self.store.get(id_prefix)
        if exact is not None:
            return exact
        matches = [e for e in self.store.list_all() if e.id.startswith(id_prefix)]
        return matches[0] if len(matches) == 1 else None
