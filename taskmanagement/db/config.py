"""Database configuration for the Task Management backend."""
from typing import Generator
from sqlmodel import create_engine, Session
from sqlalchemy import event

from taskmanagement.config import DATABASE_URL, IS_SQLITE
from taskmanagement.utils.logger import get_logger

logger = get_logger(__name__)

if IS_SQLITE:
    logger.info("Using SQLite database", url=DATABASE_URL)
else:
    logger.info("Using PostgreSQL database")

# SQLite connections are shared across FastAPI's threadpool workers
connect_args = {"check_same_thread": False} if IS_SQLITE else {}

engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)

if IS_SQLITE:
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_session() -> Generator[Session, None, None]:
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session
