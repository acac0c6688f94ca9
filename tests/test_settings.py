import pytest

from pharmacy_api.client.settings import ClientSettings
from pharmacy_api.core.settings import AppSettings
from pharmacy_api.db.config import Settings

_NO_DB = dict(DATABASE_URL=None, POSTGRES_URL=None, POSTGRES_USER=None, POSTGRES_PASSWORD=None, POSTGRES_DB=None)


@pytest.mark.parametrize(
    "url, async_url, sync_url",
    [
        ("postgresql://u:p@db:5432/pharmacy", "postgresql+asyncpg://u:p@db:5432/pharmacy", "postgresql://u:p@db:5432/pharmacy"),
        ("postgres://u:p@db/pharmacy", "postgresql+asyncpg://u:p@db/pharmacy", "postgres://u:p@db/pharmacy"),
        ("postgresql+asyncpg://u:p@db/pharmacy", "postgresql+asyncpg://u:p@db/pharmacy", "postgresql://u:p@db/pharmacy"),
        ("sqlite:///./pharmacy.db", "sqlite+aiosqlite:///./pharmacy.db", "sqlite:///./pharmacy.db"),
        ("sqlite+aiosqlite:///tmp/x.db", "sqlite+aiosqlite:///tmp/x.db", "sqlite:///tmp/x.db"),
    ],
)
def test_database_url_derivation(url, async_url, sync_url):
    settings = Settings(**{**_NO_DB, "DATABASE_URL": url})
    assert settings.async_database_url == async_url
    assert settings.sync_database_url == sync_url
    assert settings.is_sqlite == url.startswith("sqlite")


def test_database_url_from_parts():
    settings = Settings(
        **{**_NO_DB, "POSTGRES_USER": "app", "POSTGRES_PASSWORD": "pw", "POSTGRES_DB": "pharmacy", "POSTGRES_HOST": "pg", "POSTGRES_PORT": 6543}
    )
    assert settings.database_url == "postgresql://app:pw@pg:6543/pharmacy"


def test_missing_database_configuration_names_the_variables():
    with pytest.raises(ValueError, match="DATABASE_URL"):
        Settings(**_NO_DB).database_url


def test_app_settings_defaults_keep_schema_changes_out_of_startup(monkeypatch):
    monkeypatch.delenv("RUN_MIGRATIONS_ON_STARTUP", raising=False)
    monkeypatch.delenv("AUTO_SEED", raising=False)
    settings = AppSettings()
    assert settings.RUN_MIGRATIONS_ON_STARTUP is False
    assert settings.AUTO_SEED is False
    assert settings.CORS_ALLOW_CREDENTIALS is False


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("http://a.test, http://b.test", ["http://a.test", "http://b.test"]),
        ('["http://a.test"]', ["http://a.test"]),
        ("", ["*"]),
    ],
)
def test_cors_origins_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("CORS_ORIGINS", raw)
    assert AppSettings().CORS_ORIGINS == expected


def test_client_settings(monkeypatch):
    monkeypatch.delenv("PHARMACY_API_BASE_URL", raising=False)
    monkeypatch.delenv("PHARMACY_API_TIMEOUT", raising=False)
    defaults = ClientSettings()
    assert defaults.PHARMACY_API_BASE_URL == "http://localhost:8000/api/v1"
    assert defaults.PHARMACY_API_TIMEOUT == 15

    monkeypatch.setenv("PHARMACY_API_BASE_URL", "https://pharmacy.internal/api/v1")
    monkeypatch.setenv("PHARMACY_API_TIMEOUT", "3.5")
    configured = ClientSettings()
    assert configured.PHARMACY_API_BASE_URL == "https://pharmacy.internal/api/v1"
    assert configured.PHARMACY_API_TIMEOUT == 3.5
