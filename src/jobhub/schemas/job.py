"""Job-related Pydantic schemas."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, StringConstraints, field_validator

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class JobStatus(str, Enum):
    """Job pipeline stage, in pipeline order."""

    DOCKET = "docket"
    RESEARCH = "research"
    APPLIED = "applied"
    CONTACTED = "contacted"
    INTERVIEWING = "interviewing"
    OFFER = "offer"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"

    @property
    def display_name(self) -> str:
        """Human-readable status label."""
        return self.value.capitalize()


class SalaryBucket(str, Enum):
    """Coarse salary band, lowest first."""

    UNDER_50 = "under50"
    FROM_50_TO_75 = "from50to75"
    FROM_75_TO_100 = "from75to100"
    FROM_100_TO_150 = "from100to150"
    ABOVE_150 = "above150"

    @property
    def label(self) -> str:
        """Display label such as '50k–75k'."""
        return _BUCKET_LABELS[self]


_BUCKET_LABELS = {
    SalaryBucket.UNDER_50: "Under 50k",
    SalaryBucket.FROM_50_TO_75: "50k–75k",
    SalaryBucket.FROM_75_TO_100: "75k–100k",
    SalaryBucket.FROM_100_TO_150: "100k–150k",
    SalaryBucket.ABOVE_150: "150k+",
}


class JobCreate(BaseModel):
    """Schema for creating a job."""

    title: NonEmptyStr
    company: NonEmptyStr
    contact: str | None = None
    status: JobStatus = JobStatus.APPLIED
    location: str | None = None
    salary_k: int | None = Field(default=None, ge=0)
    salary_estimate: str | None = None
    user_id: str | None = None


class JobUpdate(BaseModel):
    """Schema for editing a job; only provided fields change."""

    title: NonEmptyStr | None = None
    company: NonEmptyStr | None = None
    contact: str | None = None
    status: JobStatus | None = None
    location: str | None = None
    salary_k: int | None = Field(default=None, ge=0)
    salary_estimate: str | None = None

    @field_validator("title", "company", "status")
    @classmethod
    def _required_when_given(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class StatusUpdate(BaseModel):
    """Schema for updating a job's status."""

    status: JobStatus


class NoteCreate(BaseModel):
    """Schema for adding a note to a job."""

    text: NonEmptyStr


class Note(BaseModel):
    """Job note."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    text: str
    created_at: datetime


class TaskCreate(BaseModel):
    """Schema for adding a task to a job."""

    title: NonEmptyStr
    due_date: datetime | None = None


class Task(BaseModel):
    """Job task."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    due_date: datetime | None
    is_completed: bool


class LinkCreate(BaseModel):
    """Schema for adding a link to a job."""

    title: NonEmptyStr
    url: HttpUrl


class Link(BaseModel):
    """Job link."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    url: str


class DocumentCreate(BaseModel):
    """Schema for attaching a document reference to a job."""

    name: NonEmptyStr
    filename: NonEmptyStr
    mutable: bool = False


class Document(BaseModel):
    """Job document reference."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    file_path: str
    added_at: datetime
    mutable: bool


class JobListItem(BaseModel):
    """Schema for job list item (summary view)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    company: str
    status: JobStatus
    location: str | None
    salary_k: int | None
    salary_display: str
    salary_bucket: SalaryBucket | None
    open_tasks_count: int
    created_at: datetime


class JobDetail(JobListItem):
    """Schema for detailed job view."""

    contact: str | None
    salary_in_dollars: int | None
    salary_estimate: str | None
    notes: list[Note]
    tasks: list[Task]
    links: list[Link]
    documents: list[Document]


class StatusGroup(BaseModel):
    """Jobs sharing one status."""

    status: JobStatus
    jobs: list[JobListItem]


class SalaryBucketGroup(BaseModel):
    """Jobs sharing one salary bucket."""

    bucket: SalaryBucket
    label: str
    jobs: list[JobListItem]
