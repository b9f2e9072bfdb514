"""Tests for local-calendar helpers."""

import os
import time
from datetime import date, datetime, timedelta, timezone

import pytest

from laughmeter.achievements import evaluate, unlocked_ids
from laughmeter.dates import local_day, local_time, stamp
from laughmeter.journal import Entry
from laughmeter.stats import count_by_date, entries_on

TOKYO = timezone(timedelta(hours=9))
CEST = timezone(timedelta(hours=2))

# Central European time with daylight saving, as a POSIX rule string.
BERLIN_TZ = "CET-1CEST,M3.5.0,M10.5.0/3"


@pytest.fixture
def berlin():
    """Run the test with the system zone set to Central European time."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = BERLIN_TZ
    time.tzset()
    yield
    if previous is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = previous
    time.tzset()


class TestLocalTime:
    def test_naive_with_naive_now_unchanged(self):
        ts = datetime(2024, 6, 12, 23, 30)
        assert local_time(ts, datetime(2024, 6, 13)) == ts

    def test_aware_converted_to_now_zone(self):
        ts = datetime(2024, 6, 12, 20, 0, tzinfo=timezone.utc)
        now = datetime(2024, 6, 13, 8, 0, tzinfo=TOKYO)
        local = local_time(ts, now)
        assert local.hour == 5
        assert local.date() == date(2024, 6, 13)

    def test_naive_read_as_wall_time_in_now_zone(self):
        ts = datetime(2024, 6, 12, 23, 30)
        now = datetime(2024, 6, 13, tzinfo=TOKYO)
        assert local_time(ts, now).hour == 23
        assert local_time(ts, now).tzinfo is TOKYO

    def test_aware_with_naive_now_becomes_naive(self):
        ts = datetime(2024, 6, 12, 20, 0, tzinfo=timezone.utc)
        assert local_time(ts, datetime(2024, 6, 13)).tzinfo is None

    def test_local_day(self):
        ts = datetime(2024, 6, 12, 20, 0, tzinfo=timezone.utc)
        assert local_day(ts, datetime(2024, 6, 13, tzinfo=TOKYO)) == date(2024, 6, 13)


class TestStamp:
    def test_aware_unchanged(self):
        ts = datetime(2024, 6, 12, 20, 0, tzinfo=TOKYO)
        assert stamp(ts) is ts

    def test_offset_follows_daylight_saving(self, berlin):
        assert stamp(datetime(2024, 7, 1, 12, 30)).utcoffset() == timedelta(hours=2)
        assert stamp(datetime(2025, 1, 15, 15, 0)).utcoffset() == timedelta(hours=1)


class TestDaylightSaving:
    """Summer entries read in winter keep their own wall-clock time."""

    WINTER_NOW = datetime(2025, 1, 15, 15, 0)

    def test_summer_hour_read_in_winter(self, berlin):
        ts = datetime(2024, 7, 1, 12, 30, tzinfo=CEST)
        local = local_time(ts, self.WINTER_NOW)
        assert (local.hour, local.minute) == (12, 30)

    def test_after_midnight_stays_on_its_day(self, berlin):
        ts = datetime(2024, 7, 2, 0, 30, tzinfo=CEST)
        assert local_day(ts, self.WINTER_NOW) == date(2024, 7, 2)

    def test_lunch_break_stays_unlocked(self, berlin):
        entries = [Entry(timestamp=datetime(2024, 7, 1, 12, 30, tzinfo=CEST))]
        assert "18" in unlocked_ids(evaluate(entries, self.WINTER_NOW))

    def test_summer_days_counted_separately(self, berlin):
        entries = [
            Entry(timestamp=datetime(2024, 7, 2, 0, 30, tzinfo=CEST)),
            Entry(timestamp=datetime(2024, 7, 1, 12, 30, tzinfo=CEST)),
        ]
        assert count_by_date(entries, self.WINTER_NOW) == {
            date(2024, 7, 2): 1,
            date(2024, 7, 1): 1,
        }
        assert entries_on(entries, date(2024, 7, 2), self.WINTER_NOW) == entries[:1]

    def test_night_entry_in_night_band(self, berlin):
        # 23:30 in July, read in January, is still a night laugh.
        entries = [
            Entry(timestamp=datetime(2024, 7, d, 23, 30, tzinfo=CEST)) for d in range(1, 6)
        ]
        unlocked = unlocked_ids(evaluate(entries, self.WINTER_NOW))
        assert "17" in unlocked
        assert "16" not in unlocked
