"""Tests for journal data models."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from laughmeter.journal import DEFAULT_MOOD, MOODS, Entry, clean_text


class TestEntry:
    def test_defaults(self):
        entry = Entry(timestamp=datetime(2024, 6, 12, 9, 0))
        assert entry.mood == DEFAULT_MOOD == "smile"
        assert entry.person is None
        assert entry.location is None
        assert entry.note is None

    def test_ids_are_unique(self):
        now = datetime(2024, 6, 12, 9, 0)
        assert Entry(timestamp=now).id != Entry(timestamp=now).id

    def test_is_immutable(self):
        entry = Entry(timestamp=datetime(2024, 6, 12, 9, 0))
        with pytest.raises(FrozenInstanceError):
            entry.mood = "joy"

    def test_emoji(self):
        assert Entry(timestamp=datetime(2024, 6, 12), mood="dead-funny").emoji == "💀"
        assert Entry(timestamp=datetime(2024, 6, 12), mood="mystery").emoji == "mystery"

    def test_mood_vocabulary(self):
        assert set(MOODS) == {"joy", "laugh-tears", "touched", "dead-funny", "smile"}


class TestCleanText:
    def test_blank_becomes_none(self):
        assert clean_text("") is None
        assert clean_text("   ") is None
        assert clean_text(None) is None

    def test_strips(self):
        assert clean_text("  Park ") == "Park"
