"""User database model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from jobhub.database import Base, new_id


class User(Base):
    """
    User model, the owner of jobs and a document library.

    Attributes:
        id: Primary key (UUID string)
        email: Email address (unique)
        username: Username (unique)
        first_name: Given name
        last_name: Family name
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String, nullable=False, unique=True, index=True)
    username = Column(String, nullable=False, unique=True, index=True)
    first_name = Column(String, nullable=False, default="")
    last_name = Column(String, nullable=False, default="")

    jobs = relationship("Job", back_populates="user", order_by="Job.created_at")
    documents = relationship(
        "JobDocument",
        back_populates="user",
        foreign_keys="JobDocument.user_id",
        order_by="JobDocument.added_at",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("id", new_id())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, username='{self.username}')>"
