"""Laugh journal entries and their storage."""

from .models import DEFAULT_MOOD, MOODS, Entry, clean_text
from .store import EntryStore

__all__ = [
    "DEFAULT_MOOD",
    "MOODS",
    "Entry",
    "EntryStore",
    "clean_text",
]
