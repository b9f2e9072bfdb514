"""Aggregate statistics over the laugh history.

Everything here is a pure function of the entries and an injected ``now``,
computed alongside badge evaluation on every refresh.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from .achievements import BadgeStatus, evaluate
from .dates import local_day

WEEK_DAYS = 7


@dataclass(frozen=True)
class JournalStats:
    """Derived numbers shown on the dashboard.

    Attributes:
        today_count: Entries logged on the current day.
        streak: 1 if anything was logged today, else 0.
        top_person: Most frequent non-empty person, or None.
        top_location: Most frequent non-empty location, or None.
        last_laugh: Timestamp of the latest entry if it is from today.
        weekly_chart: The 7 days ending today, oldest first, with counts.
        laughs_by_date: Count per calendar day for every day with entries.
    """

    today_count: int = 0
    streak: int = 0
    top_person: str | None = None
    top_location: str | None = None
    last_laugh: datetime | None = None
    weekly_chart: dict[date, int] = field(default_factory=dict)
    laughs_by_date: dict[date, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Snapshot:
    """Everything the presentation layer needs after one refresh."""

    now: datetime
    entries: tuple = ()
    stats: JournalStats = field(default_factory=JournalStats)
    badges: tuple[BadgeStatus, ...] = ()

    @property
    def unlocked_count(self) -> int:
        return sum(1 for b in self.badges if b.is_unlocked)


def most_frequent(values: Iterable[str | None]) -> str | None:
    """Most common non-empty value, in a single pass.

    Ties go to the value that reached the winning count first, so among
    values seen equally often the one whose last counted occurrence comes
    earliest in iteration order wins.
    """
    counts: dict[str, int] = {}
    best: str | None = None
    best_count = 0
    for value in values:
        if not value:
            continue
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > best_count:
            best = value
            best_count = counts[value]
    return best


def count_by_date(entries: Sequence, now: datetime) -> dict[date, int]:
    """Map every calendar day that has entries to its entry count."""
    by_date: dict[date, int] = {}
    for entry in entries:
        day = local_day(entry.timestamp, now)
        by_date[day] = by_date.get(day, 0) + 1
    return by_date


def weekly_chart(by_date: dict[date, int], now: datetime) -> dict[date, int]:
    """Counts for the last seven calendar days ending today, oldest first."""
    today = now.date()
    days = [today - timedelta(days=offset) for offset in range(WEEK_DAYS - 1, -1, -1)]
    return {day: by_date.get(day, 0) for day in days}


def entries_on(entries: Sequence, day: date, now: datetime) -> list:
    """Entries that fall on the given calendar day, in input order."""
    return [e for e in entries if local_day(e.timestamp, now) == day]


def compute_stats(entries: Sequence, now: datetime) -> JournalStats:
    """Derive the dashboard statistics.

    Args:
        entries: Full history, newest first (store order).
        now: The evaluation instant.
    """
    by_date = count_by_date(entries, now)
    today_count = by_date.get(now.date(), 0)

    last_laugh = None
    if entries:
        latest = max(entries, key=lambda e: e.timestamp.timestamp())
        if local_day(latest.timestamp, now) == now.date():
            last_laugh = latest.timestamp

    return JournalStats(
        today_count=today_count,
        streak=1 if today_count > 0 else 0,
        top_person=most_frequent(e.person for e in entries),
        top_location=most_frequent(e.location for e in entries),
        last_laugh=last_laugh,
        weekly_chart=weekly_chart(by_date, now),
        laughs_by_date=by_date,
    )


def build_snapshot(entries: Sequence, now: datetime) -> Snapshot:
    """Run the full refresh computation: statistics plus badges."""
    return Snapshot(
        now=now,
        entries=tuple(entries),
        stats=compute_stats(entries, now),
        badges=tuple(evaluate(entries, now)),
    )
