"""Utility functions package."""

from jobhub.utils.dates import as_local_naive
from jobhub.utils.file_storage import document_path, file_exists, resolve_path
from jobhub.utils.job_metrics import (
    open_tasks_count,
    salary_bucket,
    salary_display,
    salary_in_dollars,
)
from jobhub.utils.slug import create_slug, safe_filename

__all__ = [
    "as_local_naive",
    "create_slug",
    "document_path",
    "file_exists",
    "open_tasks_count",
    "resolve_path",
    "safe_filename",
    "salary_bucket",
    "salary_display",
    "salary_in_dollars",
]
