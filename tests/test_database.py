"""Connection pool and startup tests."""

import logging
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import QueuePool

from src.config import Settings
from src.database import build_database_url, check_database_connection, create_db_engine
from src.main import app


def make_settings(monkeypatch, **values) -> Settings:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    return Settings(_env_file=None, **values)


def test_build_database_url_from_parts(monkeypatch):
    """Test a MySQL URL is assembled from the DB_* settings."""
    settings = make_settings(
        monkeypatch,
        db_host="db.internal",
        db_port=3307,
        db_user="forms",
        db_pass="p@ss:word",
        db_name="signups",
    )

    url = build_database_url(settings)

    assert url.drivername == "mysql+pymysql"
    assert url.host == "db.internal"
    assert url.port == 3307
    assert url.username == "forms"
    assert url.password == "p@ss:word"
    assert url.database == "signups"
    assert url.query["charset"] == "utf8mb4"


def test_build_database_url_override():
    """Test DATABASE_URL takes precedence."""
    settings = Settings(_env_file=None, database_url="sqlite:///./other.db")
    assert build_database_url(settings) == "sqlite:///./other.db"


def test_engine_pool_limited(monkeypatch):
    """Test the MySQL engine pools at most ten connections."""
    settings = make_settings(monkeypatch, db_user="forms")

    engine = create_db_engine(settings)
    try:
        assert isinstance(engine.pool, QueuePool)
        assert engine.pool.size() == 10
    finally:
        engine.dispose()


def test_engine_pool_waits_without_timeout(monkeypatch):
    """Test requests queue for a pooled connection without a wait limit by default."""
    settings = make_settings(monkeypatch, db_user="forms")

    engine = create_db_engine(settings)
    try:
        assert engine.pool._timeout is None
    finally:
        engine.dispose()


def test_engine_pool_timeout_configurable(monkeypatch):
    """Test DB_POOL_TIMEOUT bounds the wait when set."""
    settings = make_settings(monkeypatch, db_user="forms", db_pool_timeout=5)

    engine = create_db_engine(settings)
    try:
        assert engine.pool._timeout == 5
    finally:
        engine.dispose()


def test_check_database_connection_ok():
    """Test the probe succeeds against a reachable database."""
    engine = create_engine("sqlite://")
    assert check_database_connection(engine) is True


def test_check_database_connection_failure_logged(tmp_path, caplog):
    """Test an unreachable database is logged instead of raised."""
    engine = create_engine(f"sqlite:///{tmp_path}/missing/dir/app.db")

    with caplog.at_level(logging.ERROR, logger="src.database"):
        assert check_database_connection(engine) is False

    assert "Database connection check failed" in caplog.text


def test_startup_survives_unreachable_database(tmp_path, caplog):
    """Test the app still serves the form when the startup probe fails."""
    unreachable = create_engine(f"sqlite:///{tmp_path}/missing/dir/app.db")

    with caplog.at_level(logging.ERROR, logger="src.database"):
        with patch("src.main.create_db_engine", return_value=unreachable):
            with TestClient(app) as client:
                response = client.get("/")

    assert response.status_code == 200
    assert "Database connection check failed" in caplog.text
