"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file `app.db` by default) and
provides small helpers used by the application and tests.
"""

from sqlmodel import SQLModel, create_engine, Session
from .config import settings


def build_engine(url: str, echo: bool = False):
    """Create an engine for `url`.

    SQLite connections are shared across the request threads FastAPI
    runs sync handlers on, so same-thread checking is disabled for them.
    """
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)


def create_db_and_tables(bind=None):
    """Create database tables using SQLModel metadata.

    Tables that already exist are left untouched; there is no migration
    step.
    """
    # models must be imported so their tables are registered on the metadata
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session
