"""Users API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from jobhub.models.user import User
from jobhub.routers.dependencies import commit, get_repository
from jobhub.schemas.user import User as UserSchema
from jobhub.schemas.user import UserCreate
from jobhub.services.repository import Repository

router = APIRouter()


@router.post("/users", response_model=UserSchema, status_code=201)
def create_user(payload: UserCreate, repo: Repository = Depends(get_repository)) -> UserSchema:
    """Create a user."""
    user = User(**payload.model_dump())
    repo.insert(user)
    commit(repo)
    return UserSchema.model_validate(user)


@router.get("/users/{user_id}", response_model=UserSchema)
def get_user(user_id: str, repo: Repository = Depends(get_repository)) -> UserSchema:
    """
    Get a user with their jobs and document library.

    Raises:
        HTTPException 404: If the user is not found.
    """
    user = repo.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserSchema.model_validate(user)
