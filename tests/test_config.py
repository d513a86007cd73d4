"""Settings tests."""

import pytest
from pydantic import ValidationError

from src.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "DB_HOST", "DB_USER", "DB_PASS", "DB_NAME", "PORT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Test fallback defaults apply to everything but credentials."""
    settings = Settings(_env_file=None)

    assert settings.db_host == "localhost"
    assert settings.db_name == "form_demo"
    assert settings.port == 8000
    assert settings.db_pool_size == 10
    assert settings.db_pool_timeout is None
    assert settings.db_user is None
    assert settings.db_pass is None


def test_reads_environment(monkeypatch):
    """Test values come from environment variables."""
    monkeypatch.setenv("DB_HOST", "mysql")
    monkeypatch.setenv("DB_USER", "forms")
    monkeypatch.setenv("DB_PASS", "hunter2")
    monkeypatch.setenv("DB_NAME", "signups")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings(_env_file=None)

    assert settings.db_host == "mysql"
    assert settings.db_user == "forms"
    assert settings.db_pass == "hunter2"
    assert settings.db_name == "signups"
    assert settings.port == 9000


def test_production_requires_credentials():
    """Test production refuses to start without database credentials."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, environment="production")

    settings = Settings(_env_file=None, environment="production", db_user="forms")
    assert settings.environment == "production"
