"""Achievement evaluation over the full entry history."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from ..journal.models import Entry
from .conditions import OPERATORS
from .definitions import BADGES, BadgeDefinition
from .metrics import METRICS


class UnknownRuleError(LookupError):
    """A badge names a metric or operator that is not registered."""


@dataclass(frozen=True)
class BadgeStatus:
    """A badge definition together with its state for one entry history."""

    definition: BadgeDefinition
    is_unlocked: bool
    value: int = 0

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def title(self) -> str:
        return self.definition.title

    @property
    def description(self) -> str:
        return self.definition.description

    @property
    def icon(self) -> str:
        return self.definition.icon

    @property
    def color(self) -> str:
        return self.definition.color


def evaluate(
    entries: Sequence[Entry],
    now: datetime,
    definitions: Sequence[BadgeDefinition] = BADGES,
) -> list[BadgeStatus]:
    """Compute the state of every badge for an entry history.

    Args:
        entries: The complete, unfiltered entry history.
        now: The evaluation instant; defines "today" and the local calendar.
        definitions: Badge table to evaluate, in display order.

    Returns:
        One BadgeStatus per definition, in definition order.

    Raises:
        UnknownRuleError: If a definition names an unregistered metric or operator.
    """
    statuses = []
    for badge in definitions:
        metric_fn = METRICS.get(badge.metric)
        if metric_fn is None:
            raise UnknownRuleError(f"Badge {badge.id!r} uses unknown metric {badge.metric!r}")
        operator_fn = OPERATORS.get(badge.operator)
        if operator_fn is None:
            raise UnknownRuleError(f"Badge {badge.id!r} uses unknown operator {badge.operator!r}")

        value = metric_fn(entries, now, **badge.params)
        statuses.append(
            BadgeStatus(
                definition=badge,
                is_unlocked=operator_fn(value, badge.target),
                value=value,
            )
        )
    return statuses


def unlocked_ids(statuses: Sequence[BadgeStatus]) -> set[str]:
    """Ids of the unlocked badges in an evaluation result."""
    return {s.id for s in statuses if s.is_unlocked}
