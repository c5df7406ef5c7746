from pathlib import Path
import os
import tempfile
import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine


def _remove_db_file(path: Path):
    if path.exists():
        try:
            path.unlink()
        except OSError:
            pass


# Point the application at a throw-away database before `estudos_api` is imported.
# A file left behind by an earlier interrupted run with the same pid is removed first.
TEST_DB = Path(tempfile.gettempdir()) / f"estudos_api_test_{os.getpid()}.db"
_remove_db_file(TEST_DB)
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB}"


@pytest.fixture(scope="session", autouse=True)
def reset_db():
    """Remove the SQLite file used by the HTTP tests once the run ends."""
    yield
    _remove_db_file(TEST_DB)


@pytest.fixture
def remove_db_file():
    return _remove_db_file


@pytest.fixture
def session():
    """A session bound to a fresh in-memory database."""
    from estudos_api import models  # noqa: F401
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as s:
        yield s
    engine.dispose()
