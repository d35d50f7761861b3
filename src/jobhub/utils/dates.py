"""Local-time normalization for stored and compared datetimes."""

from __future__ import annotations

from datetime import date, datetime, time


def as_local_naive(moment: date | datetime) -> datetime:
    """
    Normalize a date or datetime to a naive local datetime.

    Dates become local midnight.  Aware datetimes are converted to the
    machine's local zone and the offset is dropped, so the wall-clock value
    matches what a naive ``DateTime`` column stores.

    Args:
        moment: Date, naive datetime, or aware datetime

    Returns:
        Naive datetime in local time
    """
    if not isinstance(moment, datetime):
        return datetime.combine(moment, time.min)
    if moment.tzinfo is not None:
        return moment.astimezone().replace(tzinfo=None)
    return moment
