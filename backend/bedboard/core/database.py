"""
Database setup.
Engine and SQLModel session management.
"""
from sqlmodel import SQLModel, create_engine, Session, text
from typing import Generator, Dict, Any
import logging
from bedboard.config import settings

logger = logging.getLogger("bedboard.database")

connect_args = {}
if "sqlite" in settings.DATABASE_URL:
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    connect_args=connect_args
)


def create_db_and_tables() -> None:
    """
    Creates every table in the database.
    Called when the application starts.
    """
    # Models must be imported so their tables are registered on the metadata
    import bedboard.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    """
    Session generator for FastAPI dependency injection.

    Usage:
        @router.get("/endpoint")
        def endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


def get_session_direct() -> Session:
    """
    Returns a plain session (not a generator) for startup hooks and scripts.

    The caller is responsible for closing it.
    """
    return Session(engine)


def check_database_health() -> Dict[str, Any]:
    """
    Runs a trivial query to check the database is reachable.

    Returns:
        {"status": "healthy"} or {"status": "unhealthy", "error": ...}
    """
    try:
        with Session(engine) as session:
            session.execute(text("SELECT 1"))
        return {"status": "healthy"}
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "unhealthy", "error": str(e)}
