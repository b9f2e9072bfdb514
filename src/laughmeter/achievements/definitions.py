"""The badge table.

Each badge pairs one metric, an operator and a target with its display
metadata. Ids are stable and never reused; new badges go at the end.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BadgeDefinition:
    """A named achievement rule.

    Attributes:
        id: Stable key.
        title: Short display name.
        description: What the user has to do.
        icon: Emoji shown when unlocked.
        color: Category color name.
        metric: Name of a function in METRICS.
        operator: Name of a function in OPERATORS.
        target: Threshold handed to the operator.
        params: Keyword arguments for the metric.
    """

    id: str
    title: str
    description: str
    icon: str
    color: str
    metric: str
    operator: str = "gte"
    target: int = 1
    params: dict[str, Any] = field(default_factory=dict, hash=False)


def _badge(badge_id, title, description, icon, color, metric, operator="gte", target=1, **params):
    return BadgeDefinition(
        id=badge_id,
        title=title,
        description=description,
        icon=icon,
        color=color,
        metric=metric,
        operator=operator,
        target=target,
        params=params,
    )


NIGHT_BAND = {"start": 22, "end": 4}
MORNING_BAND = {"start": 5, "end": 12}

BADGES: tuple[BadgeDefinition, ...] = (

    # ==================================================
    # Basics
    # ==================================================

    _badge("1", "First Smile", "Log your first laugh", "🙂", "blue", "total", target=1),
    _badge("2", "Giggle Rookie", "Log 10 laughs", "👶", "blue", "total", target=10),
    _badge("3", "Chuckle Champ", "Log 50 laughs", "🥉", "green", "total", target=50),
    _badge("4", "ROFL Master", "Log 100 laughs", "🥈", "orange", "total", target=100),
    _badge("5", "Laugh Legend", "Log 500 laughs", "🥇", "purple", "total", target=500),
    _badge("6", "Joy Junkie", "Log 1,000 laughs", "💎", "pink", "total", target=1000),

    # ==================================================
    # People
    # ==================================================

    _badge("7", "Social Butterfly", "Laugh with friends 5 times", "🦋", "pink",
           "person_contains", target=5, keyword="friend"),
    _badge("8", "Squad Goals", "Laugh with friends 20 times", "👯", "pink",
           "person_contains", target=20, keyword="friend"),
    _badge("9", "Love & Laughs", "Laugh with partner 5 times", "❤️", "red",
           "person_contains", target=5, keyword="partner"),
    _badge("10", "Rom Com", "Laugh with partner 20 times", "🍿", "red",
           "person_contains", target=20, keyword="partner"),
    _badge("11", "Solo Smiler", "Log a laugh alone", "🧘", "indigo", "solo", operator="exists"),

    # ==================================================
    # Places
    # ==================================================

    _badge("12", "Homebody", "5 laughs at Home", "🏡", "green",
           "location_contains", target=5, keywords=("home",)),
    _badge("13", "Home Hero", "50 laughs at Home", "🏰", "green",
           "location_contains", target=50, keywords=("home",)),
    _badge("14", "Office Clown", "Laugh at Work 5 times", "💼", "gray",
           "location_contains", target=5, keywords=("work", "office")),
    _badge("15", "Nature Lover", "Laugh outside/park", "🌳", "green",
           "location_contains", operator="exists", keywords=("park",)),

    # ==================================================
    # Time
    # ==================================================

    _badge("16", "Early Bird", "Laugh before noon (5 times)", "☀️", "yellow",
           "hour_band", target=5, **MORNING_BAND),
    _badge("17", "Night Owl", "Laugh after 10 PM (5 times)", "🌙", "indigo",
           "hour_band", target=5, **NIGHT_BAND),
    _badge("18", "Lunch Break", "Laugh between 12-1 PM", "🍔", "orange",
           "hour_equals", operator="exists", hour=12),
    _badge("19", "Weekend Warrior", "Laugh on Sat or Sun", "🎉", "purple",
           "weekend", operator="exists"),

    # ==================================================
    # Moods
    # ==================================================

    _badge("20", "Tears of Joy", "Log '😂' mood 10 times", "😂", "cyan",
           "mood", target=10, mood="laugh-tears"),
    _badge("21", "Subtle Grin", "Log '🙂' mood 10 times", "🙂", "mint",
           "mood", target=10, mood="smile"),
    _badge("22", "Dead Funny", "Log '💀' mood", "💀", "gray",
           "mood", operator="exists", mood="dead-funny"),
    _badge("23", "Heart Warmed", "Log '🥹' mood", "🥹", "pink",
           "mood", operator="exists", mood="touched"),

    # ==================================================
    # Habits
    # ==================================================

    _badge("24", "Streak Starter", "Laugh today (Start streak)", "🔥", "orange",
           "streak", target=1),
    _badge("25", "Double Digit Day", "10 laughs in one day", "🚀", "red", "today", target=10),
    _badge("26", "Note Taker", "Add notes to 5 laughs", "📝", "yellow", "with_note", target=5),
    _badge("27", "Detail Orientated", "Add notes to 20 laughs", "✍️", "yellow",
           "with_note", target=20),
    _badge("28", "Context King", "Add person/location to 10 laughs", "🏷️", "blue",
           "with_context", target=10),
    _badge("29", "Explorer", "Log laughs in 3 diff places", "🗺️", "green",
           "distinct_locations", target=3),
    _badge("30", "The Century", "100 Laughs total. You made it.", "💯", "red", "total", target=100),
)
