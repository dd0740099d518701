from typing import Any, Callable, Optional, TypeVar

import httpx
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from dependency_mr_creator.core.exceptions.provider_error import AlreadyExistsError, NotFoundError, ProviderError
from dependency_mr_creator.core.ports.gitlab_provider import GitLabProvider
from dependency_mr_creator.infrastructure.drivers.gitlab.clients.gitlab_http_client import GitLabHttpClient
from dependency_mr_creator.infrastructure.drivers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)
from dependency_mr_creator.infrastructure.drivers.gitlab.services.gitlab_branch_service import GitLabBranchService
from dependency_mr_creator.infrastructure.drivers.gitlab.services.gitlab_commit_service import GitLabCommitService
from dependency_mr_creator.infrastructure.drivers.gitlab.services.gitlab_mr_service import GitLabMrService
from dependency_mr_creator.infrastructure.drivers.gitlab.services.gitlab_project_service import (
    GitLabProjectService,
)
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)

_T = TypeVar("_T")

PROVIDER_NAME = "gitlab"
_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, ProviderError) and exc.retryable


class GitLabProviderImpl(GitLabProvider):
    def __init__(
        self,
        http_client: GitLabHttpClient,
        payload_builder: GitLabPayloadBuilderService,
        max_attempts: int = 3,
        backoff_seconds: float = 1.0,
    ):
        self.client = http_client
        self.payload_builder = payload_builder
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self._logger = logger

        # Initialize internal services
        self.branch_service = GitLabBranchService(http_client)
        self.commit_service = GitLabCommitService(http_client, payload_builder)
        self.mr_service = GitLabMrService(http_client, payload_builder)
        self.project_service = GitLabProjectService(http_client, payload_builder)

    def branch(self, repo: str, name: str) -> dict[str, Any]:
        return self._call(f"branch({name})", self.branch_service.get_branch, repo, name)

    def commits(self, repo: str, ref_name: str) -> list[dict[str, Any]]:
        return self._call(f"commits({ref_name})", self.commit_service.list_commits, repo, ref_name)

    def merge_requests(
        self,
        repo: str,
        source_branch: str,
        target_branch: str,
        state: str = "all",
    ) -> list[dict[str, Any]]:
        return self._call(
            f"merge_requests({source_branch} -> {target_branch})",
            self.mr_service.list_mrs,
            repo,
            source_branch,
            target_branch,
            state,
        )

    def create_branch(self, repo: str, name: str, ref: str) -> dict[str, Any]:
        return self._call(f"create_branch({name})", self.branch_service.create_branch, repo, name, ref)

    def create_commit(
        self,
        repo: str,
        branch: str,
        message: str,
        actions: list[dict[str, str]],
    ) -> dict[str, Any]:
        return self._call(
            f"create_commit(count={len(actions)})",
            self.commit_service.create_commit,
            repo,
            branch,
            message,
            actions,
        )

    def edit_submodule(
        self,
        repo: str,
        path: str,
        branch: str,
        commit_sha: str,
        commit_message: str,
    ) -> dict[str, Any]:
        return self._call(
            f"edit_submodule({path})",
            self.commit_service.edit_submodule,
            repo,
            path,
            branch,
            commit_sha,
            commit_message,
        )

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
        return self._call(
            "create_merge_request",
            self.mr_service.create_merge_request,
            repo,
            title,
            source_branch,
            target_branch,
            description=description,
            remove_source_branch=remove_source_branch,
            assignee_id=assignee_id,
            labels=labels,
            milestone_id=milestone_id,
        )

    def edit_merge_request_approvers(
        self,
        repo: str,
        merge_request_iid: int,
        approver_ids: list[int],
        approver_group_ids: list[int],
    ) -> dict[str, Any]:
        return self._call(
            f"edit_merge_request_approvers(!{merge_request_iid})",
            self.mr_service.edit_approvers,
            repo,
            merge_request_iid,
            approver_ids,
            approver_group_ids,
        )

    def project(self, repo: str) -> dict[str, Any]:
        return self._call(f"project({repo})", self.project_service.get_project, repo)

    def labels(self, repo: str) -> list[dict[str, Any]]:
        return self._call("labels", self.project_service.list_labels, repo)

    def create_label(self, repo: str, name: str, color: str, description: Optional[str] = None) -> dict[str, Any]:
        return self._call(f"create_label({name})", self.project_service.create_label, repo, name, color, description)

    def _call(self, context: str, fn: Callable[..., _T], *args: Any, **kwargs: Any) -> _T:
        """Runs a service call, mapping transport failures and retrying the retryable ones."""
        retrying = Retrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.backoff_seconds, max=10),
            reraise=True,
        )
        return retrying(self._guarded, context, fn, *args, **kwargs)

    def _guarded(self, context: str, fn: Callable[..., _T], *args: Any, **kwargs: Any) -> _T:
        try:
            return fn(*args, **kwargs)
        except httpx.HTTPError as e:
            raise self._map_error(e, context) from e

    def _map_error(self, error: httpx.HTTPError, context: str) -> ProviderError:
        if not isinstance(error, httpx.HTTPStatusError):
            self._logger.warning(f"Transport error in GitLabProviderImpl [{context}]: {error}")
            return ProviderError(
                provider=PROVIDER_NAME,
                message=f"GitLab request failed: {error}",
                retryable=isinstance(error, httpx.TransportError),
            )

        status = error.response.status_code
        detail = self._error_detail(error.response)
        message = f"GitLab operation {context} failed: {detail}"

        if status == 404:
            self._logger.debug(f"GitLabProviderImpl [{context}]: not found")
            return NotFoundError(provider=PROVIDER_NAME, message=message, status_code=status)
        if status == 409 or (status in (400, 422) and "already exists" in detail.lower()):
            self._logger.info(f"GitLabProviderImpl [{context}]: resource already exists")
            return AlreadyExistsError(provider=PROVIDER_NAME, message=message, status_code=status)

        self._logger.error(f"Error in GitLabProviderImpl [{context}]: status={status} {detail}")
        return ProviderError(
            provider=PROVIDER_NAME,
            message=message,
            retryable=status in _RETRYABLE_STATUS,
            status_code=status,
        )

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            detail = body.get("message") or body.get("error") or body
            return str(detail)
        return str(body)
