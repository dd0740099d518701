from typing import Any

from dependency_mr_creator.infrastructure.drivers.gitlab.clients.gitlab_http_client import (
    GitLabHttpClient,
    encode_segment,
)
from dependency_mr_creator.infrastructure.drivers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class GitLabCommitService:
    def __init__(self, client: GitLabHttpClient, payload_builder: GitLabPayloadBuilderService):
        self.client = client
        self.payload_builder = payload_builder

    def list_commits(self, repo: str, ref_name: str) -> list[dict[str, Any]]:
        path = f"api/v4/projects/{encode_segment(repo)}/repository/commits"
        response = self.client.get(path, params={"ref_name": ref_name})
        response.raise_for_status()
        return response.json()

    def create_commit(
        self,
        repo: str,
        branch_name: str,
        message: str,
        actions: list[dict[str, str]],
    ) -> dict[str, Any]:
        path = f"api/v4/projects/{encode_segment(repo)}/repository/commits"
        logger.info(f"Committing {len(actions)} files to branch '{branch_name}' in project {repo}")

        payload = self.payload_builder.build_commit_payload(branch_name, message, actions)
        response = self.client.post(path, payload)
        response.raise_for_status()
        return response.json()

    def edit_submodule(
        self,
        repo: str,
        submodule_path: str,
        branch_name: str,
        commit_sha: str,
        message: str,
    ) -> dict[str, Any]:
        path = f"api/v4/projects/{encode_segment(repo)}/repository/submodules/{encode_segment(submodule_path)}"
        logger.info(f"Updating submodule '{submodule_path}' to {commit_sha} on branch '{branch_name}' in project {repo}")

        payload = self.payload_builder.build_submodule_payload(branch_name, commit_sha, message)
        response = self.client.put(path, payload)
        response.raise_for_status()
        return response.json()
