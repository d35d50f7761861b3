"""Database models package."""

from jobhub.models.job import Job, JobDocument, JobLink, JobNote, JobTask
from jobhub.models.transaction import Transaction
from jobhub.models.user import User

__all__ = ["Job", "JobDocument", "JobLink", "JobNote", "JobTask", "Transaction", "User"]
