"""
Database engine and sessions for the BoutiqueChat backend.

SQLite by default; any SQLAlchemy URL works. Tables are created on startup,
there are no migrations.
"""

import os
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import settings

SQLITE_PREFIX = "sqlite:///"


def _sqlite_path(url: str) -> str:
    """File path of a file-backed SQLite URL, empty otherwise."""
    if not url.startswith(SQLITE_PREFIX):
        return ""
    path = url[len(SQLITE_PREFIX):]
    return "" if path == ":memory:" else path


def _make_engine(url: str):
    db_dir = os.path.dirname(_sqlite_path(url))
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    # Sessions may be used from worker threads
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=settings.DATABASE_ECHO, connect_args=connect_args)


engine = _make_engine(settings.DATABASE_URL)
Base = declarative_base()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Create missing tables for every catalog model."""
    from app.models import category, product, site_settings, user  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db() -> Iterator[Session]:
    """Request-scoped session for FastAPI dependencies."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Session for scripts: commits on success, rolls back on error.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
