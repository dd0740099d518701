from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from dependency_mr_creator.core.exceptions.configuration_error import ConfigurationError


class GitLabSettings(BaseSettings):
    """Settings for the GitLab API connection."""

    base_url: str = Field(default="https://gitlab.com", alias="GITLAB_BASE_URL")
    token: SecretStr | None = Field(default=None, alias="GITLAB_TOKEN")

    # ── Transport ──
    timeout_seconds: float = Field(default=20.0, alias="GITLAB_TIMEOUT_SECONDS", gt=0)
    max_retries: int = Field(default=3, alias="GITLAB_MAX_RETRIES", ge=1)
    retry_backoff_seconds: float = Field(default=1.0, alias="GITLAB_RETRY_BACKOFF_SECONDS", ge=0)

    # ── Labels ──
    default_label: str = Field(default="dependencies", alias="DEFAULT_LABEL")
    default_label_color: str = Field(default="#0366d6", alias="DEFAULT_LABEL_COLOR")

    def validate_credentials(self) -> None:
        if not self.base_url:
            raise ConfigurationError("GitLab base URL is missing in settings.")
        if not self.token or not self.token.get_secret_value():
            raise ConfigurationError("GitLab token is missing in settings.")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
