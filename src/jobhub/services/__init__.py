"""Services package."""

from jobhub.services.finance import weekly_transaction_summary
from jobhub.services.job_views import (
    JobSortKey,
    group_by_salary_bucket,
    group_by_status,
    sort_jobs,
)
from jobhub.services.repository import NotFoundError, PersistenceError, Repository

__all__ = [
    "JobSortKey",
    "NotFoundError",
    "PersistenceError",
    "Repository",
    "group_by_salary_bucket",
    "group_by_status",
    "sort_jobs",
    "weekly_transaction_summary",
]
