"""Tests for achievement evaluation."""

from datetime import datetime, timedelta, timezone

import pytest

from laughmeter.achievements import (
    BADGES,
    BadgeDefinition,
    UnknownRuleError,
    evaluate,
    unlocked_ids,
)
from laughmeter.journal import Entry

# A Wednesday afternoon.
NOW = datetime(2024, 6, 12, 15, 0)


def at(days_ago: int, hour: int, minute: int = 0, **fields) -> Entry:
    """Entry logged ``days_ago`` days before NOW at the given local time."""
    day = NOW - timedelta(days=days_ago)
    return Entry(timestamp=day.replace(hour=hour, minute=minute), **fields)


def status_of(statuses, badge_id: str):
    return next(s for s in statuses if s.id == badge_id)


class TestEvaluateShape:
    """Tests for the structure of the result."""

    def test_one_status_per_badge_in_order(self):
        statuses = evaluate([at(0, 9)], NOW)
        assert [s.id for s in statuses] == [b.id for b in BADGES]

    def test_table_has_thirty_badges(self):
        assert len(evaluate([], NOW)) == 30

    def test_empty_history_unlocks_nothing(self):
        statuses = evaluate([], NOW)
        assert not any(s.is_unlocked for s in statuses)

    def test_is_idempotent(self):
        entries = [at(0, 9, mood="joy", person="Friends"), at(3, 23, location="Home")]
        assert evaluate(entries, NOW) == evaluate(entries, NOW)

    def test_does_not_mutate_input(self):
        entries = [at(0, 9), at(1, 10)]
        before = list(entries)
        evaluate(entries, NOW)
        assert entries == before

    def test_status_exposes_metadata_and_value(self):
        statuses = evaluate([at(0, 9), at(1, 9)], NOW)
        first = status_of(statuses, "1")
        assert first.title == "First Smile"
        assert first.icon == "🙂"
        assert first.color == "blue"
        assert first.value == 2

    def test_tolerates_missing_fields(self):
        entries = [Entry(timestamp=NOW, mood=None, person=None, location=None, note=None)]
        statuses = evaluate(entries, NOW)
        assert status_of(statuses, "1").is_unlocked is True
        assert status_of(statuses, "22").is_unlocked is False


class TestScenarios:
    """End-to-end scenarios over realistic histories."""

    def test_single_entry_with_friend(self):
        entries = [at(0, 14, mood="joy", person="Friend Alice")]
        statuses = evaluate(entries, NOW)

        assert status_of(statuses, "1").is_unlocked is True   # First Smile
        assert status_of(statuses, "2").is_unlocked is False  # 10 laughs
        assert status_of(statuses, "7").is_unlocked is False  # friends x5
        assert status_of(statuses, "18").is_unlocked is False  # Lunch Break
        assert status_of(statuses, "24").is_unlocked is True  # laughed today

    def test_hundred_entries_mostly_at_home(self):
        entries = []
        for i in range(100):
            if i < 40:
                location = "Home"
            elif i < 60:
                location = "home office"
            else:
                location = None
            mood = "dead-funny" if i < 6 else "joy"
            entries.append(at(i % 30 + 1, 9 + i % 8, mood=mood, location=location))

        unlocked = unlocked_ids(evaluate(entries, NOW))

        assert {"1", "2", "3", "4", "30"} <= unlocked
        assert "5" not in unlocked
        assert "13" in unlocked  # Home Hero, 60 >= 50
        assert "14" in unlocked  # "home office" counts as office
        assert "22" in unlocked  # Dead Funny

    def test_night_owl(self):
        entries = [
            at(1, 23), at(2, 2), at(3, 23), at(4, 2), at(5, 23),
        ]
        statuses = evaluate(entries, NOW)
        assert status_of(statuses, "17").is_unlocked is True
        assert status_of(statuses, "16").is_unlocked is False

    def test_explorer_with_three_places(self):
        entries = [
            at(1, 10, location="Home"),
            at(2, 10, location="Park"),
            at(3, 10, location="Cafe"),
            at(4, 10, location=None),
            at(5, 10, location=""),
        ]
        assert "29" in unlocked_ids(evaluate(entries, NOW))

        entries.append(at(6, 10, location="Office"))
        assert "29" in unlocked_ids(evaluate(entries, NOW))

    def test_two_places_is_not_enough(self):
        entries = [at(1, 10, location="Home"), at(2, 10, location="Home"), at(3, 10, location="Park")]
        assert "29" not in unlocked_ids(evaluate(entries, NOW))


class TestMonotonicity:
    """Adding entries never locks a count badge."""

    @pytest.mark.parametrize(
        "extra",
        [
            at(0, 12, mood="touched"),
            at(10, 3, person="Partner", location="Park"),
            at(4, 8, note="bus driver sang"),
            Entry(timestamp=NOW, mood=None),
        ],
    )
    def test_adding_an_entry_keeps_unlocked(self, extra):
        base = [at(i, 6 + i % 17, person="Friends" if i % 2 else None) for i in range(25)]
        before = unlocked_ids(evaluate(base, NOW))
        after = unlocked_ids(evaluate(base + [extra], NOW))
        assert before <= after


class TestLocalCalendar:
    """Hours and days are read in the calendar of ``now``."""

    def test_aware_timestamps_converted_to_now_zone(self):
        plus_two = timezone(timedelta(hours=2))
        now = datetime(2024, 6, 12, 15, 0, tzinfo=plus_two)
        # 10:00 UTC is 12:00 at +02:00.
        entry = Entry(timestamp=datetime(2024, 6, 12, 10, 0, tzinfo=timezone.utc))
        statuses = evaluate([entry], now)
        assert status_of(statuses, "18").is_unlocked is True
        assert status_of(statuses, "24").is_unlocked is True

    def test_entry_late_yesterday_in_utc_is_today_locally(self):
        plus_two = timezone(timedelta(hours=2))
        now = datetime(2024, 6, 12, 15, 0, tzinfo=plus_two)
        entry = Entry(timestamp=datetime(2024, 6, 11, 23, 30, tzinfo=timezone.utc))
        assert "24" in unlocked_ids(evaluate([entry], now))


class TestCustomDefinitions:
    """The evaluator runs any table of definitions."""

    def test_new_badge_needs_no_engine_change(self):
        badge = BadgeDefinition(
            id="99", title="Park Regular", description="", icon="🌲", color="green",
            metric="location_contains", target=2, params={"keywords": ("park",)},
        )
        entries = [at(1, 10, location="Central Park"), at(2, 10, location="park bench")]
        [status] = evaluate(entries, NOW, definitions=[badge])
        assert status.is_unlocked is True
        assert status.value == 2

    def test_unknown_metric_raises(self):
        badge = BadgeDefinition(id="x", title="", description="", icon="", color="", metric="nope")
        with pytest.raises(UnknownRuleError):
            evaluate([], NOW, definitions=[badge])

    def test_unknown_operator_raises(self):
        badge = BadgeDefinition(
            id="x", title="", description="", icon="", color="", metric="total", operator="gt"
        )
        with pytest.raises(UnknownRuleError):
            evaluate([], NOW, definitions=[badge])


class TestHashing:
    """Statuses can be collected in sets and used as keys."""

    def test_statuses_are_hashable(self):
        statuses = evaluate([at(0, 12, location="Park")], NOW)
        assert len(set(statuses)) == len(statuses)
        assert hash(statuses[14]) == hash(evaluate([at(0, 12, location="Park")], NOW)[14])

    def test_params_do_not_affect_hash_but_do_affect_equality(self):
        base = dict(id="x", title="", description="", icon="", color="", metric="person_contains")
        friend = BadgeDefinition(**base, params={"keyword": "friend"})
        partner = BadgeDefinition(**base, params={"keyword": "partner"})
        assert hash(friend) == hash(partner)
        assert friend != partner
