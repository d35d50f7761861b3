"""Weekly aggregation of finance transactions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from jobhub.models.transaction import Transaction
from jobhub.utils.dates import as_local_naive

DAYS_IN_WEEK = 7
_END_OF_DAY = time(23, 59, 59)


@dataclass
class DaySummary:
    date: date
    transactions: list[Transaction] = field(default_factory=list)
    total: float = 0.0


@dataclass
class WeeklySummary:
    start: datetime
    end: datetime
    days: list[DaySummary]
    income: float = 0.0
    expenses: float = 0.0
    net: float = 0.0


def week_bounds(week_of: date | datetime) -> tuple[datetime, datetime]:
    """
    Compute the Sunday-to-Saturday window containing a moment.

    Args:
        week_of: Any date or datetime inside the week

    Returns:
        (Sunday 00:00:00, following Saturday 23:59:59), both local and naive

    Examples:
        >>> week_bounds(date(2025, 11, 12))  # a Wednesday
        (datetime.datetime(2025, 11, 9, 0, 0), datetime.datetime(2025, 11, 15, 23, 59, 59))
    """
    moment = as_local_naive(week_of)
    # date.weekday(): Monday == 0 ... Sunday == 6
    days_from_sunday = (moment.weekday() + 1) % DAYS_IN_WEEK
    sunday = moment.date() - timedelta(days=days_from_sunday)
    saturday = sunday + timedelta(days=DAYS_IN_WEEK - 1)
    return datetime.combine(sunday, time.min), datetime.combine(saturday, _END_OF_DAY)


def shift_week(week_of: date | datetime, offset: int) -> datetime:
    """Return the Sunday start of the week ``offset`` weeks away from ``week_of``."""
    start, _ = week_bounds(week_of)
    return start + timedelta(weeks=offset)


def signed_amount(txn: Transaction) -> float:
    """Amount with expenses negative and income positive."""
    return -txn.amount if txn.expense else txn.amount


def weekly_transaction_summary(
    transactions: Iterable[Transaction], week_start: date | datetime
) -> WeeklySummary:
    """
    Summarize the transactions of the week containing ``week_start``.

    Transactions are filtered into the inclusive Sunday 00:00:00 to Saturday
    23:59:59 window and bucketed into seven days, Sunday first.  Days without
    transactions are still present with a zero total.

    Args:
        transactions: Any transactions; those outside the week are ignored
        week_start: A date or datetime inside the week to summarize

    Returns:
        WeeklySummary with per-day net totals and week income, expenses, net
    """
    start, end = week_bounds(week_start)
    in_week = sorted(
        (txn for txn in transactions if start <= as_local_naive(txn.date) <= end),
        key=lambda txn: as_local_naive(txn.date),
    )

    days = [DaySummary(date=(start + timedelta(days=offset)).date()) for offset in range(DAYS_IN_WEEK)]
    for txn in in_week:
        day = days[(as_local_naive(txn.date).date() - start.date()).days]
        day.transactions.append(txn)
        day.total += signed_amount(txn)

    income = sum(txn.amount for txn in in_week if not txn.expense)
    expenses = sum(txn.amount for txn in in_week if txn.expense)
    return WeeklySummary(
        start=start,
        end=end,
        days=days,
        income=float(income),
        expenses=float(expenses),
        net=float(income - expenses),
    )
