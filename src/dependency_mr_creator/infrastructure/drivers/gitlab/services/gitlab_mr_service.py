from typing import Any, Optional

from dependency_mr_creator.infrastructure.drivers.gitlab.clients.gitlab_http_client import (
    GitLabHttpClient,
    encode_segment,
)
from dependency_mr_creator.infrastructure.drivers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class GitLabMrService:
    def __init__(self, client: GitLabHttpClient, payload_builder: GitLabPayloadBuilderService):
        self.client = client
        self.payload_builder = payload_builder

    def list_mrs(self, repo: str, source_branch: str, target_branch: str, state: str) -> list[dict[str, Any]]:
        path = f"api/v4/projects/{encode_segment(repo)}/merge_requests"
        params = {
            "source_branch": source_branch,
            "target_branch": target_branch,
            "state": state,
        }
        response = self.client.get(path, params=params)
        response.raise_for_status()
        return response.json()

    def create_merge_request(
        self,
        repo: str,
        title: str,
        source_branch: str,
        target_branch: str,
        description: Optional[str] = None,
        remove_source_branch: bool = True,
        assignee_id: Optional[int] = None,
        labels: Optional[str] = None,
        milestone_id: Optional[int] = None,
    ) -> dict[str, Any]:
        path = f"api/v4/projects/{encode_segment(repo)}/merge_requests"
        logger.info(f"Creating MR {source_branch} -> {target_branch} in project {repo}")

        payload = self.payload_builder.build_merge_request_payload(
            title=title,
            source_branch=source_branch,
            target_branch=target_branch,
            description=description,
            remove_source_branch=remove_source_branch,
            assignee_id=assignee_id,
            labels=labels,
            milestone_id=milestone_id,
        )
        response = self.client.post(path, payload)
        response.raise_for_status()
        return response.json()

    def edit_approvers(
        self,
        repo: str,
        mr_iid: int,
        approver_ids: list[int],
        approver_group_ids: list[int],
    ) -> dict[str, Any]:
        path = f"api/v4/projects/{encode_segment(repo)}/merge_requests/{mr_iid}/approvers"
        payload = self.payload_builder.build_approvers_payload(approver_ids, approver_group_ids)

        response = self.client.put(path, payload)
        response.raise_for_status()
        return response.json()
