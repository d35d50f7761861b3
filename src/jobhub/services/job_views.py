"""Sorting and grouping of jobs for list views.

Every function here takes a snapshot sequence of jobs and returns new lists;
inputs are never mutated and nothing is read from the database.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from functools import cmp_to_key
from typing import Any, NamedTuple

from jobhub.models.job import Job
from jobhub.schemas.job import JobStatus, SalaryBucket

STATUS_ORDER: dict[JobStatus, int] = {status: index for index, status in enumerate(JobStatus)}


class JobSortKey(str, Enum):
    """Supported list orderings."""

    STATUS = "status"
    SALARY_DESCENDING = "salary_desc"
    SALARY_ASCENDING = "salary_asc"
    OPEN_TASKS_DESCENDING = "open_tasks_desc"
    DATE_CREATED_DESCENDING = "date_created_desc"


class StatusGroup(NamedTuple):
    status: JobStatus
    jobs: list[Job]


class SalaryBucketGroup(NamedTuple):
    bucket: SalaryBucket
    jobs: list[Job]


def _status_key(job: Job) -> int:
    return STATUS_ORDER[JobStatus(job.status)]


def _salary_descending_key(job: Job) -> tuple[bool, int]:
    # Jobs without a salary sort after every salaried job
    return (job.salary_k is None, -(job.salary_k or 0))


def _salary_ascending_key(job: Job) -> tuple[bool, int]:
    return (job.salary_k is None, job.salary_k or 0)


def _open_tasks_descending_key(job: Job) -> int:
    return -job.open_tasks_count


def _newest_first(a: Job, b: Job) -> int:
    return (a.created_at < b.created_at) - (a.created_at > b.created_at)


_date_created_descending_key = cmp_to_key(_newest_first)


_SORT_KEYS: dict[JobSortKey, Callable[[Job], Any]] = {
    JobSortKey.STATUS: _status_key,
    JobSortKey.SALARY_DESCENDING: _salary_descending_key,
    JobSortKey.SALARY_ASCENDING: _salary_ascending_key,
    JobSortKey.OPEN_TASKS_DESCENDING: _open_tasks_descending_key,
    JobSortKey.DATE_CREATED_DESCENDING: _date_created_descending_key,
}


def sort_key(key: JobSortKey | str) -> Callable[[Job], Any]:
    """
    Return the key function implementing a list ordering.

    The returned callable is meant for ``sorted``/``list.sort``, which are
    stable, so jobs that compare equal keep their input order.

    Args:
        key: A JobSortKey or its string value

    Returns:
        Key function mapping a job to a comparable value

    Raises:
        ValueError: If ``key`` is not a known ordering
    """
    return _SORT_KEYS[JobSortKey(key)]


def sort_jobs(jobs: Iterable[Job], key: JobSortKey | str) -> list[Job]:
    """Return the jobs as a new list ordered by ``key``."""
    return sorted(jobs, key=sort_key(key))


def group_by_status(jobs: Iterable[Job]) -> list[StatusGroup]:
    """
    Partition jobs by status.

    Groups follow the JobStatus declaration order and empty groups are
    omitted.  Within a group jobs keep their input order.
    """
    grouped: dict[JobStatus, list[Job]] = {}
    for job in jobs:
        grouped.setdefault(JobStatus(job.status), []).append(job)
    return [StatusGroup(status, grouped[status]) for status in JobStatus if status in grouped]


def group_by_salary_bucket(jobs: Iterable[Job]) -> list[SalaryBucketGroup]:
    """
    Partition salaried jobs by salary bucket, lowest bucket first.

    Jobs without a salary are left out entirely and empty buckets are
    omitted.
    """
    grouped: dict[SalaryBucket, list[Job]] = {}
    for job in jobs:
        bucket = job.salary_bucket
        if bucket is None:
            continue
        grouped.setdefault(bucket, []).append(job)
    return [SalaryBucketGroup(bucket, grouped[bucket]) for bucket in SalaryBucket if bucket in grouped]
