"""Data models for the laugh journal."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime

# Mood codes mapped to the emoji shown for them.
MOODS: dict[str, str] = {
    "joy": "😄",
    "laugh-tears": "😂",
    "touched": "🥹",
    "dead-funny": "💀",
    "smile": "🙂",
}

DEFAULT_MOOD = "smile"


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Entry:
    """A single logged laugh.

    Attributes:
        timestamp: When the laugh was logged. Never changes after creation.
        mood: Mood code, one of MOODS.
        person: Who the user was with, if anyone.
        location: Where it happened. Only set at creation.
        note: Free-text annotation.
        id: Unique identifier, generated when not given.
    """

    timestamp: datetime
    mood: str = DEFAULT_MOOD
    person: str | None = None
    location: str | None = None
    note: str | None = None
    id: str = field(default_factory=_new_id)

    @property
    def emoji(self) -> str:
        """Display emoji for the mood, or the raw code if unknown."""
        return MOODS.get(self.mood or "", self.mood or "")


def clean_text(value: str | None) -> str | None:
    """Normalize optional user input: blank strings become None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
