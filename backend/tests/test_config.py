import pytest
from estudos_api.config import Settings
from estudos_api.database import build_engine


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("SQL_ECHO", raising=False)
    s = Settings()
    assert s.LOG_LEVEL == "INFO"
    assert s.SQL_ECHO is False


def test_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost/estudos")
    s = Settings()
    assert s.DATABASE_URL == "postgresql://u:p@localhost/estudos"


def test_empty_database_url_rejected(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "  ")
    with pytest.raises(RuntimeError):
        Settings()


def test_settings_only_carry_used_keys(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    s = Settings()
    assert not hasattr(s, "ENV")


def test_build_engine_for_sqlite_url():
    engine = build_engine("sqlite://")
    assert engine.dialect.name == "sqlite"
    engine.dispose()


def test_stale_db_file_is_removed(tmp_path, remove_db_file):
    stale = tmp_path / "stale.db"
    stale.write_bytes(b"left over")
    remove_db_file(stale)
    assert not stale.exists()
    remove_db_file(stale)
