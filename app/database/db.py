"""Database connection and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import get_config

logger = logging.getLogger(__name__)

config = get_config()
DATABASE_URL = config.DATABASE_URL


def _build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        # FastAPI runs sync routes in a threadpool, so connections cross threads.
        return create_engine(
            database_url,
            echo=config.DEBUG,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        database_url,
        echo=config.DEBUG,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
    )


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite leaves foreign keys unenforced unless asked per connection."""
    module = type(dbapi_connection).__module__
    if not module.startswith("sqlite3"):
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = _build_engine(DATABASE_URL)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def get_active_database_url() -> str:
    """Return the currently bound database URL."""
    return DATABASE_URL


def get_db() -> Generator[Session, None, None]:
    """Yield a session for dependency injection contexts."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Context-manager wrapper for safe DB session lifecycle."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def verify_database_connection() -> bool:
    """Verify DB connectivity during startup."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as exc:  # pragma: no cover - exercised in deployment.
        logger.error(
            "database.connection_failed",
            extra={"event": "database.connection_failed", "error": str(exc)},
        )
        return False


def missing_tables(required: set[str]) -> set[str]:
    """Return the required table names absent from the bound database."""
    return required - set(inspect(engine).get_table_names())
