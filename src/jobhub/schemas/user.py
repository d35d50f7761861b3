"""User Pydantic schemas."""

from pydantic import BaseModel, ConfigDict

from jobhub.schemas.job import Document, JobListItem, NonEmptyStr


class UserBase(BaseModel):
    """Base user schema with common fields."""

    email: NonEmptyStr
    username: NonEmptyStr
    first_name: str
    last_name: str


class UserCreate(UserBase):
    """Schema for creating a new user."""

    pass


class User(UserBase):
    """Complete user schema with owned jobs and documents."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    jobs: list[JobListItem]
    documents: list[Document]
