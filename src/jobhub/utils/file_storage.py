"""Path helpers for document files referenced by jobs.

Documents are stored as paths relative to ``settings.data_root``; nothing in
this module opens or reads the files themselves.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from jobhub.utils.slug import create_slug, safe_filename

if TYPE_CHECKING:
    from jobhub.models.job import Job

DOCUMENTS_DIR = "documents"


def resolve_path(filepath: str) -> str:
    """
    Resolve a stored file path to an absolute path.

    Relative paths are resolved under ``settings.data_root``.  Absolute
    paths are returned unchanged.

    Args:
        filepath: An absolute or relative path string.

    Returns:
        Absolute path string.
    """
    if os.path.isabs(filepath):
        return filepath

    # Import here to avoid circular imports at module load time
    from jobhub.config import settings

    return os.path.join(settings.data_root, filepath)


def file_exists(filepath: str) -> bool:
    """
    Check if a file exists.

    Args:
        filepath: The path to check (absolute or relative to data_root).

    Returns:
        True if the file exists, False otherwise.
    """
    return os.path.exists(resolve_path(filepath))


def document_path(job: Job, filename: str) -> str:
    """
    Build the relative storage path for a document attached to a job.

    Args:
        job: Owning job (its company and id form the directory).
        filename: Original file name.

    Returns:
        Relative path such as ``documents/acme-corp/<job-id>/resume.pdf``.
    """
    company_slug = create_slug(job.company) or "unknown-company"
    return "/".join([DOCUMENTS_DIR, company_slug, job.id, safe_filename(filename)])
