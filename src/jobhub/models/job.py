"""Job and job-owned child database models."""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship, validates

from jobhub.database import Base, new_id
from jobhub.schemas.job import JobStatus, SalaryBucket
from jobhub.utils import job_metrics


class Job(Base):
    """
    Job model representing a tracked application or opportunity.

    Attributes:
        id: Primary key (UUID string)
        title: Job title
        company: Company name
        contact: Optional recruiter or hiring contact
        created_at: Timestamp when the job was added
        status: Pipeline stage (see JobStatus)
        location: Optional location
        salary_k: Salary in thousands of dollars
        salary_estimate: Deprecated free-text salary range, display only
        user_id: Optional owning user
    """

    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    contact = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    status = Column(String, default=JobStatus.APPLIED.value, nullable=False, index=True)
    location = Column(String, nullable=True)
    salary_k = Column(Integer, nullable=True)
    salary_estimate = Column(String, nullable=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)

    user = relationship("User", back_populates="jobs")
    notes = relationship("JobNote", back_populates="job", order_by="JobNote.created_at.desc()")
    tasks = relationship("JobTask", back_populates="job", order_by="JobTask.created_at")
    links = relationship("JobLink", back_populates="job", order_by="JobLink.created_at")
    documents = relationship(
        "JobDocument",
        back_populates="job",
        foreign_keys="JobDocument.job_id",
        order_by="JobDocument.added_at",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("id", new_id())
        kwargs.setdefault("status", JobStatus.APPLIED)
        kwargs.setdefault("created_at", datetime.now())
        super().__init__(**kwargs)

    @validates("status")
    def _coerce_status(self, key, value):
        return JobStatus(value).value

    @property
    def salary_in_dollars(self) -> int | None:
        return job_metrics.salary_in_dollars(self)

    @property
    def salary_display(self) -> str:
        return job_metrics.salary_display(self)

    @property
    def open_tasks_count(self) -> int:
        return job_metrics.open_tasks_count(self)

    @property
    def salary_bucket(self) -> SalaryBucket | None:
        return job_metrics.salary_bucket(self)

    def __repr__(self) -> str:
        """String representation of Job."""
        return f"<Job(id={self.id}, title='{self.title}', company='{self.company}')>"


class _OwnedByJob:
    """Guards the owning-job reference of child records against reassignment."""

    @validates("job_id")
    def _keep_job_id(self, key, value):
        if value is not None and self.job_id is not None and value != self.job_id:
            raise ValueError(f"{type(self).__name__} {self.id} already belongs to job {self.job_id}")
        return value

    @validates("job")
    def _keep_job(self, key, value):
        current = self.job
        if current is not None and value is not None and value is not current:
            raise ValueError(f"{type(self).__name__} {self.id} already belongs to job {current.id}")
        return value


class JobNote(_OwnedByJob, Base):
    """Free-text note attached to a job."""

    __tablename__ = "job_notes"

    id = Column(String(36), primary_key=True, default=new_id)
    job_id = Column(String(36), ForeignKey("jobs.id"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    job = relationship("Job", back_populates="notes")

    def __init__(self, **kwargs):
        kwargs.setdefault("id", new_id())
        kwargs.setdefault("created_at", datetime.now())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        """String representation of JobNote."""
        return f"<JobNote(id={self.id}, job_id={self.job_id})>"


class JobTask(_OwnedByJob, Base):
    """To-do item attached to a job."""

    __tablename__ = "job_tasks"

    id = Column(String(36), primary_key=True, default=new_id)
    job_id = Column(String(36), ForeignKey("jobs.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    due_date = Column(DateTime, nullable=True)
    is_completed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    job = relationship("Job", back_populates="tasks")

    def __init__(self, **kwargs):
        kwargs.setdefault("id", new_id())
        kwargs.setdefault("is_completed", False)
        kwargs.setdefault("created_at", datetime.now())
        super().__init__(**kwargs)

    def toggle(self) -> None:
        """Flip the completion flag."""
        self.is_completed = not self.is_completed

    def __repr__(self) -> str:
        """String representation of JobTask."""
        return f"<JobTask(id={self.id}, title='{self.title}', done={self.is_completed})>"


class JobLink(_OwnedByJob, Base):
    """Titled URL attached to a job."""

    __tablename__ = "job_links"

    id = Column(String(36), primary_key=True, default=new_id)
    job_id = Column(String(36), ForeignKey("jobs.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    url = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    job = relationship("Job", back_populates="links")

    def __init__(self, **kwargs):
        kwargs.setdefault("id", new_id())
        kwargs.setdefault("created_at", datetime.now())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        """String representation of JobLink."""
        return f"<JobLink(id={self.id}, title='{self.title}', url='{self.url}')>"


class JobDocument(_OwnedByJob, Base):
    """
    Reference to a document file kept under the data root.

    Attributes:
        file_path: Path relative to ``settings.data_root``
        mutable: Whether the user may replace the file in place
        user_id: Set when the document is also filed in the user's library
    """

    __tablename__ = "job_documents"

    id = Column(String(36), primary_key=True, default=new_id)
    job_id = Column(String(36), ForeignKey("jobs.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    name = Column(String, nullable=False)
    file_path = Column(String, nullable=False)
    added_at = Column(DateTime, default=datetime.now, nullable=False)
    mutable = Column(Boolean, default=False, nullable=False)

    job = relationship("Job", back_populates="documents", foreign_keys=[job_id])
    user = relationship("User", back_populates="documents", foreign_keys=[user_id])

    def __init__(self, **kwargs):
        kwargs.setdefault("id", new_id())
        kwargs.setdefault("mutable", False)
        kwargs.setdefault("added_at", datetime.now())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        """String representation of JobDocument."""
        return f"<JobDocument(id={self.id}, name='{self.name}', path='{self.file_path}')>"
