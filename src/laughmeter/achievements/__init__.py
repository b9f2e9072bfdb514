"""Achievement badges derived from the laugh history."""

from .conditions import OPERATORS
from .definitions import BADGES, BadgeDefinition
from .engine import BadgeStatus, UnknownRuleError, evaluate, unlocked_ids
from .metrics import METRICS

__all__ = [
    "BADGES",
    "METRICS",
    "OPERATORS",
    "BadgeDefinition",
    "BadgeStatus",
    "UnknownRuleError",
    "evaluate",
    "unlocked_ids",
]
