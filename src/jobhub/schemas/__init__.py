"""Pydantic schemas package."""

from jobhub.schemas.job import (
    Document,
    DocumentCreate,
    JobCreate,
    JobDetail,
    JobListItem,
    JobStatus,
    JobUpdate,
    Link,
    LinkCreate,
    Note,
    NoteCreate,
    SalaryBucket,
    SalaryBucketGroup,
    StatusGroup,
    StatusUpdate,
    Task,
    TaskCreate,
)
from jobhub.schemas.transaction import (
    AccountType,
    DaySummary,
    Transaction,
    TransactionCreate,
    TxnInterval,
    WeeklySummary,
)
from jobhub.schemas.user import User, UserBase, UserCreate

__all__ = [
    "AccountType",
    "DaySummary",
    "Document",
    "DocumentCreate",
    "JobCreate",
    "JobDetail",
    "JobListItem",
    "JobStatus",
    "JobUpdate",
    "Link",
    "LinkCreate",
    "Note",
    "NoteCreate",
    "SalaryBucket",
    "SalaryBucketGroup",
    "StatusGroup",
    "StatusUpdate",
    "Task",
    "TaskCreate",
    "Transaction",
    "TransactionCreate",
    "TxnInterval",
    "User",
    "UserBase",
    "UserCreate",
    "WeeklySummary",
]
