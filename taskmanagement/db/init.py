"""Initialize database tables."""
from sqlmodel import SQLModel

from taskmanagement.models.user import User  # noqa: F401
from taskmanagement.models.task import TaskRecord  # noqa: F401
from taskmanagement.db.config import engine
from taskmanagement.utils.logger import get_logger

logger = get_logger(__name__)


def init_db(bind=None):
    """Create all tables in the database."""
    logger.info("Creating all tables")
    SQLModel.metadata.create_all(bind or engine)
    logger.info("Tables created successfully")


if __name__ == "__main__":
    init_db()
