"""Settings — environment-driven configuration."""

from enrollment.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("ENROLL_API_BASE_URL", "http://api.example")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.enroll_api_base_url == "http://api.example"
    assert settings.log_level == "DEBUG"
