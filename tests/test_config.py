import pytest

from movie_catalog.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REST_API_VERSION", raising=False)
    monkeypatch.delenv("LOG_JSON", raising=False)
    settings = Settings(_env_file=None)
    assert settings.rest_api_version == "1.0.0"
    assert settings.log_json is True


def test_api_version_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REST_API_VERSION", "2.3.1")
    monkeypatch.setenv("LOG_JSON", "false")
    settings = Settings(_env_file=None)
    assert settings.rest_api_version == "2.3.1"
    assert settings.log_json is False
