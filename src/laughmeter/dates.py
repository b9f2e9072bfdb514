"""Local-calendar helpers shared by the engine and the statistics pass."""

from datetime import date, datetime


def local_time(timestamp: datetime, now: datetime) -> datetime:
    """Express a timestamp in the evaluator's local calendar.

    The local calendar is the timezone of ``now``. Naive timestamps are
    read as wall time in that zone. When ``now`` itself is naive, aware
    timestamps are converted with the system zone rules in force at their
    own instant, so daylight saving changes do not shift them.
    """
    if now.tzinfo is not None:
        if timestamp.tzinfo is None:
            return timestamp.replace(tzinfo=now.tzinfo)
        return timestamp.astimezone(now.tzinfo)
    if timestamp.tzinfo is not None:
        return timestamp.astimezone().replace(tzinfo=None)
    return timestamp


def local_day(timestamp: datetime, now: datetime) -> date:
    """Calendar day a timestamp falls on, in the local calendar of ``now``."""
    return local_time(timestamp, now).date()


def stamp(moment: datetime) -> datetime:
    """Attach a UTC offset to a naive local time.

    The offset is the one the system zone uses at that instant, so a
    summer moment keeps its summer offset when read back in winter.
    """
    if moment.tzinfo is not None:
        return moment
    return moment.astimezone()
