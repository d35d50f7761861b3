"""Database initialization script."""

from pathlib import Path

from jobhub.config import settings
from jobhub.database import Base, engine
from jobhub.log import get_logger
from jobhub.models import Job, JobDocument, JobLink, JobNote, JobTask, Transaction, User  # noqa: F401

log = get_logger(__name__)


def init_database() -> None:
    """
    Initialize the database by creating all tables.

    Creates the data root directory first, then every table defined in the
    models.  Safe to run multiple times as existing tables are left alone.
    """
    Path(settings.data_root).mkdir(parents=True, exist_ok=True)
    log.info("Creating database tables in %s", settings.database_url)
    Base.metadata.create_all(bind=engine)
    log.info("Tables created: %s", ", ".join(Base.metadata.tables.keys()))


if __name__ == "__main__":
    init_database()
