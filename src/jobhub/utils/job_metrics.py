"""Derived job properties computed from stored fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jobhub.schemas.job import SalaryBucket

if TYPE_CHECKING:
    from jobhub.models.job import Job

NO_SALARY_DISPLAY = "—"

# Upper bounds (exclusive) in thousands of dollars; anything above falls in ABOVE_150
_BUCKET_CEILINGS: list[tuple[int, SalaryBucket]] = [
    (50, SalaryBucket.UNDER_50),
    (75, SalaryBucket.FROM_50_TO_75),
    (100, SalaryBucket.FROM_75_TO_100),
    (150, SalaryBucket.FROM_100_TO_150),
]


def salary_in_dollars(job: Job) -> int | None:
    """
    Convert a job's salary from thousands to whole dollars.

    Examples:
        >>> salary_in_dollars(Job(title="Dev", company="Acme", salary_k=60))
        60000
    """
    if job.salary_k is None:
        return None
    return job.salary_k * 1000


def salary_display(job: Job) -> str:
    """
    Format a job's salary for display.

    Returns:
        "$60k" style string, or an em-dash when no salary is recorded
    """
    if job.salary_k is None:
        return NO_SALARY_DISPLAY
    return f"${job.salary_k}k"


def open_tasks_count(job: Job) -> int:
    """Count the job's tasks that are not completed."""
    return sum(1 for task in job.tasks if not task.is_completed)


def salary_bucket(job: Job) -> SalaryBucket | None:
    """
    Place a job's salary into a coarse band.

    Args:
        job: Job with an optional ``salary_k``

    Returns:
        The matching SalaryBucket, or None when the job has no salary

    Examples:
        >>> salary_bucket(Job(title="Dev", company="Acme", salary_k=74))
        <SalaryBucket.FROM_50_TO_75: 'from50to75'>
    """
    k = job.salary_k
    if k is None:
        return None
    for ceiling, bucket in _BUCKET_CEILINGS:
        if k < ceiling:
            return bucket
    return SalaryBucket.ABOVE_150
