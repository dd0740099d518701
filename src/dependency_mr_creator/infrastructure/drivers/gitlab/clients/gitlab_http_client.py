import urllib.parse
from typing import Any, Optional

import httpx

from dependency_mr_creator.configuration.gitlab_settings import GitLabSettings
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class GitLabHttpClient:
    def __init__(self, settings: GitLabSettings):
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = settings.timeout_seconds
        self._validate_config()

    def _validate_config(self):
        self.settings.validate_credentials()

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        token = self.settings.token.get_secret_value() if self.settings.token else ""
        headers["PRIVATE-TOKEN"] = token
        return headers

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        logger.debug(f"GET {path} params={params}")
        with httpx.Client() as client:
            return client.get(self._url(path), headers=self._get_headers(), params=params, timeout=self.timeout)

    def post(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        logger.debug(f"POST {path}")
        with httpx.Client() as client:
            return client.post(self._url(path), headers=self._get_headers(), json=json_data, timeout=self.timeout)

    def put(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        logger.debug(f"PUT {path}")
        with httpx.Client() as client:
            return client.put(self._url(path), headers=self._get_headers(), json=json_data, timeout=self.timeout)


def encode_segment(value: Any) -> str:
    """URL-encodes a project path, branch name or file path for use as one path segment."""
    return urllib.parse.quote(str(value), safe="")
