"""Tests for the persistence gateway."""

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from jobhub.database import Base
from jobhub.models.job import Job, JobDocument, JobLink, JobNote, JobTask
from jobhub.models.transaction import Transaction
from jobhub.models.user import User
from jobhub.schemas.job import JobStatus
from jobhub.services.repository import NotFoundError, PersistenceError, Repository


@pytest.fixture
def db():
    """Create in-memory SQLite database for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def repo(db):
    return Repository(db)


@pytest.fixture
def job(repo):
    """A saved job with one child of each kind."""
    job = Job(title="Backend Engineer", company="Acme Corp", salary_k=140)
    repo.insert(job)
    repo.add_note(job, "Recruiter reached out")
    repo.add_task(job, "Send resume")
    repo.add_link(job, "Posting", "https://acme.example.com/jobs/1")
    repo.add_document(job, "Resume", "Resume 2025.pdf")
    repo.save()
    return job


def count(db, model):
    return db.query(model).count()


class TestInsertAndGet:
    """Tests for insert, save, and lookups."""

    def test_insert_save_get(self, repo):
        """A saved job can be fetched by id."""
        job = Job(title="Data Analyst", company="Globex")
        repo.insert(job)
        repo.save()

        fetched = repo.get(Job, job.id)
        assert fetched is job
        assert fetched.status == JobStatus.APPLIED.value
        assert isinstance(fetched.created_at, datetime)

    def test_id_assigned_before_flush(self):
        """Identifiers exist as soon as an entity is constructed."""
        a = Job(title="A", company="X")
        b = Job(title="B", company="X")
        assert a.id and b.id and a.id != b.id

    def test_get_missing_returns_none(self, repo):
        """Unknown ids give None rather than an error."""
        assert repo.get(Job, "does-not-exist") is None

    def test_get_or_raise_missing(self, repo):
        """get_or_raise reports a typed not-found error."""
        with pytest.raises(NotFoundError, match="Job missing not found"):
            repo.get_or_raise(Job, "missing")

    def test_get_child_wrong_job(self, repo, job):
        """A child looked up through another job is reported as not found."""
        other = Job(title="Other", company="Initech")
        repo.insert(other)
        repo.save()
        note_id = job.notes[0].id
        with pytest.raises(NotFoundError):
            repo.get_child(JobNote, other, note_id)
        assert repo.get_child(JobNote, job, note_id).text == "Recruiter reached out"


class TestChildRecords:
    """Tests for the child-record helpers."""

    def test_children_attached(self, job):
        """Helpers attach children to the job and persist them."""
        assert [n.text for n in job.notes] == ["Recruiter reached out"]
        assert [t.title for t in job.tasks] == ["Send resume"]
        assert job.tasks[0].is_completed is False
        assert job.links[0].url == "https://acme.example.com/jobs/1"
        assert job.documents[0].file_path == f"documents/acme-corp/{job.id}/resume-2025.pdf"
        assert all(child.job_id == job.id for child in job.notes + job.tasks + job.links + job.documents)

    def test_toggle_task_persists(self, repo, db, job):
        """Toggling a task is saved."""
        task = job.tasks[0]
        repo.toggle_task(task)
        repo.save()
        db.expire_all()
        assert repo.get(JobTask, task.id).is_completed is True
        assert job.open_tasks_count == 0

    def test_set_status(self, repo, job):
        """Status changes are stored by value."""
        repo.set_status(job, JobStatus.INTERVIEWING)
        repo.save()
        assert repo.get(Job, job.id).status == "interviewing"

    def test_unknown_status_rejected(self, job):
        """Statuses form a closed set."""
        with pytest.raises(ValueError):
            job.status = "ghosted"

    def test_document_filed_in_user_library(self, repo):
        """Documents of a user's job also appear in the user's library."""
        user = User(email="sam@example.com", username="sam", first_name="Sam", last_name="Lee")
        repo.insert(user)
        repo.save()
        job = Job(title="PM", company="Hooli", user_id=user.id)
        repo.insert(job)
        repo.save()
        repo.add_document(job, "Cover letter", "cover.docx")
        repo.save()
        assert [d.name for d in user.documents] == ["Cover letter"]
        assert [j.title for j in user.jobs] == ["PM"]


class TestOwnership:
    """Tests for the owning-job invariant."""

    def test_cannot_move_child_between_jobs(self, repo, job):
        """Appending a child to a second job is refused."""
        other = Job(title="Other", company="Initech")
        repo.insert(other)
        repo.save()
        with pytest.raises(ValueError, match="already belongs"):
            other.notes.append(job.notes[0])

    def test_cannot_reassign_job_id(self, repo, job):
        """A persisted child's job_id cannot be rewritten."""
        note = job.notes[0]
        with pytest.raises(ValueError, match="already belongs"):
            note.job_id = "another-job"

    def test_same_job_id_allowed(self, job):
        """Re-setting the same owner is harmless."""
        note = job.notes[0]
        note.job_id = job.id
        assert note.job_id == job.id


class TestDelete:
    """Tests for delete and cascade delete."""

    def test_delete_job_cascades(self, repo, db, job):
        """Deleting a job deletes every child it owns."""
        repo.delete(job)
        repo.save()

        assert count(db, Job) == 0
        for model in (JobNote, JobTask, JobLink, JobDocument):
            assert count(db, model) == 0

    def test_delete_job_leaves_other_jobs(self, repo, db, job):
        """Cascade only touches the deleted job's children."""
        other = Job(title="Other", company="Initech")
        repo.insert(other)
        repo.add_note(other, "Keep me")
        repo.save()

        repo.delete(job)
        repo.save()

        assert count(db, JobNote) == 1
        assert repo.get(Job, other.id).notes[0].text == "Keep me"

    def test_delete_child_detaches(self, repo, db, job):
        """Deleting a note removes it from the job's collection too."""
        note = job.notes[0]
        repo.delete(note)
        repo.save()

        assert job.notes == []
        assert count(db, JobNote) == 0
        assert count(db, JobTask) == 1

    def test_delete_transaction(self, repo, db):
        """Non-job entities delete plainly."""
        t = Transaction(amount=5, description="Snack", expense=True)
        repo.insert(t)
        repo.save()
        repo.delete(t)
        repo.save()
        assert count(db, Transaction) == 0


class TestSave:
    """Tests for save error propagation."""

    def test_save_failure_raises(self, repo, db):
        """Constraint violations surface as PersistenceError and roll back."""
        repo.insert(User(email="dup@example.com", username="one", first_name="", last_name=""))
        repo.save()
        repo.insert(User(email="dup@example.com", username="two", first_name="", last_name=""))

        with pytest.raises(PersistenceError, match="Could not save changes"):
            repo.save()

        assert count(db, User) == 1

    def test_session_usable_after_failure(self, repo):
        """After a failed save the repository keeps working."""
        repo.insert(Job(title=None, company="Broken"))
        with pytest.raises(PersistenceError):
            repo.save()

        repo.insert(Job(title="Fixed", company="Working"))
        repo.save()
        assert [j.title for j in repo.query(Job)] == ["Fixed"]


class TestQuery:
    """Tests for query ordering and filtering."""

    @pytest.fixture
    def jobs(self, repo):
        made = [
            Job(title="old", company="A", salary_k=50, created_at=datetime(2025, 1, 1)),
            Job(title="new", company="B", salary_k=None, created_at=datetime(2025, 3, 1)),
            Job(title="mid", company="C", salary_k=90, created_at=datetime(2025, 2, 1)),
        ]
        for job in made:
            repo.insert(job)
        repo.save()
        return made

    def test_order_by(self, repo, jobs):
        """Column ordering is applied in SQL."""
        rows = repo.query(Job, order_by=[Job.created_at.desc()])
        assert [j.title for j in rows] == ["new", "mid", "old"]

    def test_sql_filter(self, repo, jobs):
        """SQL criteria filter in the database."""
        rows = repo.query(Job, order_by=[Job.created_at], where=Job.salary_k.is_not(None))
        assert [j.title for j in rows] == ["old", "mid"]

    def test_predicate_filter(self, repo, jobs):
        """Python predicates filter after loading."""
        rows = repo.query(Job, order_by=[Job.created_at], where=lambda j: j.salary_display != "—")
        assert [j.title for j in rows] == ["old", "mid"]

    def test_empty_table(self, repo):
        """Querying an empty table gives an empty list."""
        assert repo.query(Transaction) == []
