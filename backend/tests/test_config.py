"""Settings derivation and error sanitizing."""

import pytest

from explainer.config import Settings, get_settings, sanitize_error


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, jwt_secret_key="k", **overrides)


def test_default_urls_target_postgres():
    settings = make_settings(database_url_override=None, postgres_password="pw")
    assert settings.database_url == "postgresql+asyncpg://explainer:pw@localhost:5432/explainer"
    assert settings.database_url_sync == "postgresql://explainer:pw@localhost:5432/explainer"
    assert settings.is_sqlite is False


@pytest.mark.parametrize(
    "override, async_url, sync_url",
    [
        (
            "postgres://u:p@db/x?sslmode=require",
            "postgresql+asyncpg://u:p@db/x",
            "postgresql://u:p@db/x?sslmode=require",
        ),
        ("sqlite:///./dev.db", "sqlite+aiosqlite:///./dev.db", "sqlite:///./dev.db"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:", "sqlite:///:memory:"),
    ],
)
def test_override_urls(override, async_url, sync_url):
    settings = make_settings(database_url_override=override)
    assert settings.database_url == async_url
    assert settings.database_url_sync == sync_url


def test_ssl_detection():
    assert make_settings(database_url_override="postgres://h/db?sslmode=require").database_requires_ssl
    assert not make_settings(database_url_override="postgres://h/db").database_requires_ssl


def test_sanitize_error_depends_on_environment(monkeypatch):
    error = RuntimeError("connection refused on 10.0.0.3")
    assert sanitize_error(error) == "connection refused on 10.0.0.3"

    monkeypatch.setattr(get_settings(), "environment", "production")
    assert sanitize_error(error, generic_message="nope") == "nope"
