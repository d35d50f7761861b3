"""Database configuration and session management."""

from uuid import uuid4

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from jobhub.config import settings

# The model_validator in Settings always populates this field after init.
assert settings.database_url is not None, "database_url must be set in Settings"
DATABASE_URL: str = settings.database_url

# Create SQLAlchemy engine
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},  # Needed for SQLite
    echo=False,  # Set to True for SQL query logging during development
)

# Create SessionLocal class for database sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for declarative models
Base = declarative_base()


def new_id() -> str:
    """Generate a fresh entity identifier (UUID4 string)."""
    return str(uuid4())


def get_db():
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
