"""Persistence gateway over the SQLAlchemy session."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from jobhub.database import Base
from jobhub.log import get_logger
from jobhub.models.job import Job, JobDocument, JobLink, JobNote, JobTask
from jobhub.schemas.job import JobStatus
from jobhub.utils.file_storage import document_path

log = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Child collections a Job owns, in the order they are removed on delete
_JOB_CHILD_COLLECTIONS = ("notes", "tasks", "links", "documents")
_CHILD_COLLECTION_BY_TYPE = {
    JobNote: "notes",
    JobTask: "tasks",
    JobLink: "links",
    JobDocument: "documents",
}


class PersistenceError(Exception):
    """Raised when the database rejects a save or delete."""


class NotFoundError(Exception):
    """Raised when an entity with the requested id does not exist."""

    def __init__(self, model: type, entity_id: str) -> None:
        super().__init__(f"{model.__name__} {entity_id} not found")
        self.model = model
        self.entity_id = entity_id


class Repository:
    """
    Gateway for creating, reading, updating, and deleting entities.

    Handles:
    - Insert/delete staging and commit with error propagation
    - Explicit cascade delete of a job's notes, tasks, links, and documents
    - Sorted and filtered queries
    - Child-record helpers that attach notes, tasks, links, and documents
    """

    def __init__(self, db: Session) -> None:
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def insert(self, entity: Base) -> Base:
        """Stage a new entity for the next save."""
        self.db.add(entity)
        log.debug("Inserted %r", entity)
        return entity

    def delete(self, entity: Base) -> None:
        """
        Stage an entity for deletion.

        Deleting a job also deletes every note, task, link, and document it
        owns.  Deleting a child detaches it from its job's collection.
        """
        if isinstance(entity, Job):
            self._delete_job_children(entity)
        elif isinstance(entity, (JobNote, JobTask, JobLink, JobDocument)):
            self._detach_from_job(entity)
        self.db.delete(entity)
        log.debug("Deleted %r", entity)

    def _delete_job_children(self, job: Job) -> None:
        removed = 0
        for name in _JOB_CHILD_COLLECTIONS:
            children = getattr(job, name)
            for child in list(children):
                self.db.delete(child)
                removed += 1
        if removed:
            log.info("Cascade delete of job %s removed %d child records", job.id, removed)

    @staticmethod
    def _detach_from_job(child: JobNote | JobTask | JobLink | JobDocument) -> None:
        job = child.job
        if job is None:
            return
        collection = getattr(job, _CHILD_COLLECTION_BY_TYPE[type(child)])
        if child in collection:
            collection.remove(child)

    def save(self) -> None:
        """
        Commit pending changes.

        Raises:
            PersistenceError: If the commit fails; the session is rolled back
        """
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            log.error("Save failed: %s", exc)
            raise PersistenceError(f"Could not save changes: {exc}") from exc

    def query(
        self,
        model: type[ModelT],
        order_by: Iterable[Any] = (),
        where: ColumnElement[bool] | Callable[[ModelT], bool] | None = None,
    ) -> list[ModelT]:
        """
        Load entities of one type.

        Args:
            model: Mapped class to query
            order_by: Column expressions, e.g. ``Job.created_at.desc()``
            where: SQL criterion, or a Python predicate applied after loading

        Returns:
            Matching entities as a list
        """
        stmt = self.db.query(model)
        if isinstance(where, ColumnElement):
            stmt = stmt.filter(where)
        for clause in order_by:
            stmt = stmt.order_by(clause)
        rows = stmt.all()
        if where is not None and not isinstance(where, ColumnElement):
            rows = [row for row in rows if where(row)]
        return rows

    def get(self, model: type[ModelT], entity_id: str) -> ModelT | None:
        """Return the entity with ``entity_id``, or None if it does not exist."""
        return self.db.get(model, entity_id)

    def get_or_raise(self, model: type[ModelT], entity_id: str) -> ModelT:
        """
        Return the entity with ``entity_id``.

        Raises:
            NotFoundError: If no such entity exists
        """
        entity = self.get(model, entity_id)
        if entity is None:
            raise NotFoundError(model, entity_id)
        return entity

    def get_child(self, model: type[ModelT], job: Job, child_id: str) -> ModelT:
        """
        Return a child record that belongs to ``job``.

        Raises:
            NotFoundError: If the child does not exist or belongs to another job
        """
        child = self.get(model, child_id)
        if child is None or child.job_id != job.id:
            raise NotFoundError(model, child_id)
        return child

    def set_status(self, job: Job, status: JobStatus) -> Job:
        """Move a job to another pipeline stage."""
        job.status = status
        log.debug("Job %s status -> %s", job.id, JobStatus(status).value)
        return job

    def add_note(self, job: Job, text: str) -> JobNote:
        """Attach a new note to a job."""
        note = JobNote(text=text)
        job.notes.append(note)
        self.insert(note)
        return note

    def add_task(self, job: Job, title: str, due_date: datetime | None = None) -> JobTask:
        """Attach a new, incomplete task to a job."""
        task = JobTask(title=title, due_date=due_date)
        job.tasks.append(task)
        self.insert(task)
        return task

    def toggle_task(self, task: JobTask) -> JobTask:
        """Flip a task between complete and incomplete."""
        task.toggle()
        return task

    def add_link(self, job: Job, title: str, url: str) -> JobLink:
        """Attach a new link to a job."""
        link = JobLink(title=title, url=url)
        job.links.append(link)
        self.insert(link)
        return link

    def add_document(
        self, job: Job, name: str, filename: str, mutable: bool = False
    ) -> JobDocument:
        """
        Attach a document reference to a job.

        The stored path is derived from the job's company and id; the file
        itself is managed outside this repository.  When the job belongs to
        a user the document is also filed in that user's library.
        """
        document = JobDocument(
            name=name,
            file_path=document_path(job, filename),
            mutable=mutable,
            user_id=job.user_id,
        )
        job.documents.append(document)
        self.insert(document)
        return document
