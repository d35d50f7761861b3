"""Shared FastAPI dependencies and error translation."""

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from jobhub.database import get_db
from jobhub.services.repository import PersistenceError, Repository


def get_repository(db: Session = Depends(get_db)) -> Repository:
    """
    Dependency function to get a repository bound to the request session.

    Returns:
        Repository: Persistence gateway for this request
    """
    return Repository(db)


def commit(repo: Repository) -> None:
    """
    Save pending changes, surfacing failures as HTTP 500.

    Raises:
        HTTPException 500: If the database rejects the changes.
    """
    try:
        repo.save()
    except PersistenceError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
