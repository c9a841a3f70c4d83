# lms/shared/utils/clock.py

"""
Helpers for the timestamps persisted by the application.

Timestamps are stored as naive UTC so comparisons behave the same on
every backend.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(moment: datetime) -> datetime:
    """
    Normalize a datetime to naive UTC.

    Aware values are converted to UTC first; naive values are assumed
    to already be UTC.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def from_timestamp(seconds: float) -> datetime:
    """Naive UTC datetime for a POSIX timestamp (e.g. a JWT ``exp`` claim)."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(tzinfo=None)
