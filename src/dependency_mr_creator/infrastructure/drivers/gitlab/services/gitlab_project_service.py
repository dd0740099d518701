from typing import Any, Optional

from dependency_mr_creator.infrastructure.drivers.gitlab.clients.gitlab_http_client import (
    GitLabHttpClient,
    encode_segment,
)
from dependency_mr_creator.infrastructure.drivers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)


class GitLabProjectService:
    """Project metadata and project labels."""

    def __init__(self, client: GitLabHttpClient, payload_builder: GitLabPayloadBuilderService):
        self.client = client
        self.payload_builder = payload_builder

    def get_project(self, repo: str) -> dict[str, Any]:
        response = self.client.get(f"api/v4/projects/{encode_segment(repo)}")
        response.raise_for_status()
        return response.json()

    def list_labels(self, repo: str) -> list[dict[str, Any]]:
        """Lists every project label, following GitLab's X-Next-Page header across pages."""
        path = f"api/v4/projects/{encode_segment(repo)}/labels"
        labels: list[dict[str, Any]] = []
        page: Optional[str] = "1"
        while page:
            response = self.client.get(path, params={"per_page": 100, "page": page})
            response.raise_for_status()
            labels.extend(response.json())
            page = response.headers.get("X-Next-Page")
        return labels

    def create_label(self, repo: str, name: str, color: str, description: Optional[str] = None) -> dict[str, Any]:
        payload = self.payload_builder.build_label_payload(name, color, description)
        response = self.client.post(f"api/v4/projects/{encode_segment(repo)}/labels", payload)
        response.raise_for_status()
        return response.json()
