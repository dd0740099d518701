import pytest

from dependency_mr_creator.configuration.gitlab_settings import GitLabSettings
from dependency_mr_creator.core.exceptions.configuration_error import ConfigurationError
from dependency_mr_creator.infrastructure.drivers.gitlab.clients.gitlab_http_client import GitLabHttpClient


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GITLAB_BASE_URL", "https://gitlab.internal/")
    monkeypatch.setenv("GITLAB_TOKEN", "env-token")
    monkeypatch.setenv("GITLAB_MAX_RETRIES", "5")

    settings = GitLabSettings()

    assert settings.base_url == "https://gitlab.internal/"
    assert settings.token.get_secret_value() == "env-token"
    assert settings.max_retries == 5


def test_missing_token_rejected(monkeypatch):
    monkeypatch.delenv("GITLAB_TOKEN", raising=False)
    settings = GitLabSettings(base_url="https://gitlab.example.com", token=None)

    with pytest.raises(ConfigurationError):
        settings.validate_credentials()


def test_http_client_validates_on_construction(monkeypatch):
    monkeypatch.delenv("GITLAB_TOKEN", raising=False)

    with pytest.raises(ConfigurationError):
        GitLabHttpClient(GitLabSettings(token=None))


def test_http_client_strips_trailing_slash(settings):
    client = GitLabHttpClient(settings.model_copy(update={"base_url": "https://gitlab.example.com/"}))

    assert client.base_url == "https://gitlab.example.com"
