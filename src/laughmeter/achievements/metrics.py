"""Metrics derived from the entry history.

Every metric has the signature ``metric(entries, now, **params) -> int``
and reads absent optional fields as the empty string.
"""

from collections.abc import Callable, Sequence
from datetime import datetime

from ..dates import local_day, local_time
from ..journal.models import Entry

Metric = Callable[..., int]


def _text(value: str | None) -> str:
    return value or ""


def total(entries: Sequence[Entry], now: datetime) -> int:
    return len(entries)


def today(entries: Sequence[Entry], now: datetime) -> int:
    """Entries on the same calendar day as ``now``."""
    day = now.date()
    return sum(1 for e in entries if local_day(e.timestamp, now) == day)


def streak(entries: Sequence[Entry], now: datetime) -> int:
    """1 if anything was logged today, else 0.

    This is a same-day flag, not a count of consecutive days.
    """
    return 1 if today(entries, now) > 0 else 0


def person_contains(entries: Sequence[Entry], now: datetime, keyword: str) -> int:
    keyword = keyword.lower()
    return sum(1 for e in entries if keyword in _text(e.person).lower())


def location_contains(
    entries: Sequence[Entry], now: datetime, keywords: Sequence[str]
) -> int:
    """Entries whose location contains any of the keywords, case-insensitively."""
    keywords = [k.lower() for k in keywords]
    count = 0
    for e in entries:
        location = _text(e.location).lower()
        if any(k in location for k in keywords):
            count += 1
    return count


def solo(entries: Sequence[Entry], now: datetime) -> int:
    """Entries logged alone: no person, or a person naming "self"."""
    count = 0
    for e in entries:
        person = _text(e.person)
        if not person or "self" in person.lower():
            count += 1
    return count


def hour_band(entries: Sequence[Entry], now: datetime, start: int, end: int) -> int:
    """Entries whose local hour is in [start, end).

    A band with start > end wraps past midnight, so (22, 4) covers
    22:00-23:59 and 00:00-03:59.
    """
    count = 0
    for e in entries:
        hour = local_time(e.timestamp, now).hour
        if start <= end:
            inside = start <= hour < end
        else:
            inside = hour >= start or hour < end
        if inside:
            count += 1
    return count


def hour_equals(entries: Sequence[Entry], now: datetime, hour: int) -> int:
    return sum(1 for e in entries if local_time(e.timestamp, now).hour == hour)


def weekend(entries: Sequence[Entry], now: datetime) -> int:
    # Monday is 0, so Saturday and Sunday are 5 and 6.
    return sum(1 for e in entries if local_time(e.timestamp, now).weekday() >= 5)


def mood(entries: Sequence[Entry], now: datetime, mood: str) -> int:
    return sum(1 for e in entries if e.mood == mood)


def with_note(entries: Sequence[Entry], now: datetime) -> int:
    return sum(1 for e in entries if _text(e.note))


def with_context(entries: Sequence[Entry], now: datetime) -> int:
    """Entries tagged with a person or a location."""
    return sum(1 for e in entries if _text(e.person) or _text(e.location))


def distinct_locations(entries: Sequence[Entry], now: datetime) -> int:
    return len({e.location for e in entries if _text(e.location)})


METRICS: dict[str, Metric] = {
    "total": total,
    "today": today,
    "streak": streak,
    "person_contains": person_contains,
    "location_contains": location_contains,
    "solo": solo,
    "hour_band": hour_band,
    "hour_equals": hour_equals,
    "weekend": weekend,
    "mood": mood,
    "with_note": with_note,
    "with_context": with_context,
    "distinct_locations": distinct_locations,
}
