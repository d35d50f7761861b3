"""Jobs API router - job CRUD, grouped views, and job child records."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from jobhub.models.job import Job, JobDocument, JobLink, JobNote, JobTask
from jobhub.models.user import User
from jobhub.routers.dependencies import commit, get_repository
from jobhub.schemas.job import (
    Document,
    DocumentCreate,
    JobCreate,
    JobDetail,
    JobListItem,
    JobUpdate,
    Link,
    LinkCreate,
    Note,
    NoteCreate,
    SalaryBucketGroup,
    StatusGroup,
    StatusUpdate,
    Task,
    TaskCreate,
)
from jobhub.services.job_views import (
    JobSortKey,
    group_by_salary_bucket,
    group_by_status,
    sort_jobs,
)
from jobhub.services.repository import NotFoundError, Repository

router = APIRouter()


def _load_job(repo: Repository, job_id: str) -> Job:
    """
    Fetch a job or fail the request.

    Raises:
        HTTPException 404: If the job is not found.
    """
    job = repo.get(Job, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


def _load_child(repo: Repository, model: type, job: Job, child_id: str):
    try:
        return repo.get_child(model, job, child_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/jobs", response_model=list[JobListItem])
def list_jobs(
    sort: JobSortKey = JobSortKey.DATE_CREATED_DESCENDING,
    repo: Repository = Depends(get_repository),
) -> list[JobListItem]:
    """
    List all tracked jobs.

    Args:
        sort: Ordering to apply (default: newest first).

    Returns:
        List of job summaries.
    """
    jobs = repo.query(Job, order_by=[Job.created_at.desc()])
    return [JobListItem.model_validate(job) for job in sort_jobs(jobs, sort)]


@router.get("/jobs/groups/status", response_model=list[StatusGroup])
def jobs_by_status(repo: Repository = Depends(get_repository)) -> list[StatusGroup]:
    """Jobs grouped by pipeline stage, in pipeline order."""
    jobs = repo.query(Job, order_by=[Job.created_at.desc()])
    return [
        StatusGroup(
            status=group.status,
            jobs=[JobListItem.model_validate(job) for job in group.jobs],
        )
        for group in group_by_status(jobs)
    ]


@router.get("/jobs/groups/salary", response_model=list[SalaryBucketGroup])
def jobs_by_salary(repo: Repository = Depends(get_repository)) -> list[SalaryBucketGroup]:
    """Salaried jobs grouped by salary bucket, lowest first."""
    jobs = repo.query(Job, order_by=[Job.created_at.desc()])
    return [
        SalaryBucketGroup(
            bucket=group.bucket,
            label=group.bucket.label,
            jobs=[JobListItem.model_validate(job) for job in group.jobs],
        )
        for group in group_by_salary_bucket(jobs)
    ]


@router.post("/jobs", response_model=JobDetail, status_code=201)
def create_job(payload: JobCreate, repo: Repository = Depends(get_repository)) -> JobDetail:
    """
    Start tracking a new job.

    Raises:
        HTTPException 404: If ``user_id`` refers to an unknown user.
    """
    if payload.user_id is not None:
        if repo.get(User, payload.user_id) is None:
            raise HTTPException(status_code=404, detail="User not found")

    job = Job(**payload.model_dump())
    repo.insert(job)
    commit(repo)
    return JobDetail.model_validate(job)


@router.get("/jobs/{job_id}", response_model=JobDetail)
def get_job(job_id: str, repo: Repository = Depends(get_repository)) -> JobDetail:
    """
    Get detailed information for a job, including its child records.

    Raises:
        HTTPException 404: If the job is not found.
    """
    return JobDetail.model_validate(_load_job(repo, job_id))


@router.patch("/jobs/{job_id}", response_model=JobDetail)
def update_job(
    job_id: str,
    changes: JobUpdate,
    repo: Repository = Depends(get_repository),
) -> JobDetail:
    """
    Edit a job's fields; fields absent from the payload are left alone.

    Raises:
        HTTPException 404: If the job is not found.
    """
    job = _load_job(repo, job_id)
    for field, value in changes.model_dump(exclude_unset=True).items():
        setattr(job, field, value)
    commit(repo)
    return JobDetail.model_validate(job)


@router.patch("/jobs/{job_id}/status", response_model=JobListItem)
def update_job_status(
    job_id: str,
    status_update: StatusUpdate,
    repo: Repository = Depends(get_repository),
) -> JobListItem:
    """
    Move a job to another pipeline stage.

    Raises:
        HTTPException 404: If the job is not found.
    """
    job = _load_job(repo, job_id)
    repo.set_status(job, status_update.status)
    commit(repo)
    return JobListItem.model_validate(job)


@router.delete("/jobs/{job_id}", status_code=204)
def delete_job(job_id: str, repo: Repository = Depends(get_repository)) -> None:
    """Delete a job together with its notes, tasks, links, and documents."""
    repo.delete(_load_job(repo, job_id))
    commit(repo)


# --- Notes -----------------------------------------------------------------


@router.post("/jobs/{job_id}/notes", response_model=Note, status_code=201)
def add_note(job_id: str, payload: NoteCreate, repo: Repository = Depends(get_repository)) -> Note:
    """Attach a note to a job."""
    note = repo.add_note(_load_job(repo, job_id), payload.text)
    commit(repo)
    return Note.model_validate(note)


@router.delete("/jobs/{job_id}/notes/{note_id}", status_code=204)
def delete_note(job_id: str, note_id: str, repo: Repository = Depends(get_repository)) -> None:
    """Remove a note from a job."""
    job = _load_job(repo, job_id)
    repo.delete(_load_child(repo, JobNote, job, note_id))
    commit(repo)


# --- Tasks -----------------------------------------------------------------


@router.post("/jobs/{job_id}/tasks", response_model=Task, status_code=201)
def add_task(job_id: str, payload: TaskCreate, repo: Repository = Depends(get_repository)) -> Task:
    """Attach a task to a job."""
    task = repo.add_task(_load_job(repo, job_id), payload.title, payload.due_date)
    commit(repo)
    return Task.model_validate(task)


@router.post("/jobs/{job_id}/tasks/{task_id}/toggle", response_model=Task)
def toggle_task(job_id: str, task_id: str, repo: Repository = Depends(get_repository)) -> Task:
    """Flip a task between complete and incomplete."""
    job = _load_job(repo, job_id)
    task = repo.toggle_task(_load_child(repo, JobTask, job, task_id))
    commit(repo)
    return Task.model_validate(task)


@router.delete("/jobs/{job_id}/tasks/{task_id}", status_code=204)
def delete_task(job_id: str, task_id: str, repo: Repository = Depends(get_repository)) -> None:
    """Remove a task from a job."""
    job = _load_job(repo, job_id)
    repo.delete(_load_child(repo, JobTask, job, task_id))
    commit(repo)


# --- Links -----------------------------------------------------------------


@router.post("/jobs/{job_id}/links", response_model=Link, status_code=201)
def add_link(job_id: str, payload: LinkCreate, repo: Repository = Depends(get_repository)) -> Link:
    """Attach a link to a job."""
    link = repo.add_link(_load_job(repo, job_id), payload.title, str(payload.url))
    commit(repo)
    return Link.model_validate(link)


@router.delete("/jobs/{job_id}/links/{link_id}", status_code=204)
def delete_link(job_id: str, link_id: str, repo: Repository = Depends(get_repository)) -> None:
    """Remove a link from a job."""
    job = _load_job(repo, job_id)
    repo.delete(_load_child(repo, JobLink, job, link_id))
    commit(repo)


# --- Documents -------------------------------------------------------------


@router.post("/jobs/{job_id}/documents", response_model=Document, status_code=201)
def add_document(
    job_id: str,
    payload: DocumentCreate,
    repo: Repository = Depends(get_repository),
) -> Document:
    """Attach a document reference to a job; the file itself is not uploaded."""
    document = repo.add_document(
        _load_job(repo, job_id), payload.name, payload.filename, mutable=payload.mutable
    )
    commit(repo)
    return Document.model_validate(document)


@router.delete("/jobs/{job_id}/documents/{document_id}", status_code=204)
def delete_document(
    job_id: str, document_id: str, repo: Repository = Depends(get_repository)
) -> None:
    """Remove a document reference from a job."""
    job = _load_job(repo, job_id)
    repo.delete(_load_child(repo, JobDocument, job, document_id))
    commit(repo)
