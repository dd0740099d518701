from typing import Any

from dependency_mr_creator.infrastructure.drivers.gitlab.clients.gitlab_http_client import (
    GitLabHttpClient,
    encode_segment,
)
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class GitLabBranchService:
    def __init__(self, client: GitLabHttpClient):
        self.client = client

    def get_branch(self, repo: str, branch_name: str) -> dict[str, Any]:
        """
        Returns branch info. A missing branch surfaces as an HTTPStatusError with status 404.
        """
        path = f"api/v4/projects/{encode_segment(repo)}/repository/branches/{encode_segment(branch_name)}"
        response = self.client.get(path)
        response.raise_for_status()
        return response.json()

    def create_branch(self, repo: str, branch_name: str, ref: str) -> dict[str, Any]:
        path = f"api/v4/projects/{encode_segment(repo)}/repository/branches"
        logger.info(f"Creating branch '{branch_name}' from '{ref}' in project {repo}")

        response = self.client.post(path, {"branch": branch_name, "ref": ref})
        response.raise_for_status()
        return response.json()
