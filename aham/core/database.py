"""
Database configuration and session management for SQLAlchemy.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from aham.core.config import DATABASE_URL


def create_db_engine(url: str, **kwargs) -> Engine:
    """
    Builds an engine for the given URL.

    SQLite connections are opened with foreign keys enabled so that
    ON DELETE CASCADE holds at the database level, and with thread checks
    disabled because FastAPI serves sync routes from a threadpool.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    db_engine = create_engine(url, **kwargs)

    if db_engine.dialect.name == "sqlite":
        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


# Engine & Session
engine = create_db_engine(DATABASE_URL)
SessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
)

# Declarative Base
Base = declarative_base()

# Import all models to register them with the Base metadata
import aham.entries.models  # noqa: F401,E402
import aham.targets.models  # noqa: F401,E402
import aham.tasks.models  # noqa: F401,E402
import aham.routines.models  # noqa: F401,E402


def init_db(bind: Engine = engine) -> None:
    """
    Creates any missing tables. Safe to run against an initialized database.
    """
    Base.metadata.create_all(bind=bind)


# Dependency for FastAPI Routes
def get_db():
    """
    Yields a database session for use in FastAPI dependency injection.
    Ensures the session is closed after the request lifecycle.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
