from typing import Optional

from dependency_mr_creator.application.creation_context import CreationContext
from dependency_mr_creator.core.domain.value_objects.creation_state import CreationState
from dependency_mr_creator.core.exceptions.provider_error import NotFoundError
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class IdempotencyProber:
    """Read-only checks telling how much of an update already exists on GitLab.

    Each check hits the API at most once per prober; build one prober per call.
    """

    def __init__(self, context: CreationContext):
        self.context = context
        self._branch_exists: Optional[bool] = None
        self._commit_exists: Optional[bool] = None
        self._merge_request_exists: Optional[bool] = None

    def branch_exists(self) -> bool:
        if self._branch_exists is None:
            try:
                self.context.provider.branch(self.context.repo, self.context.branch_name)
                self._branch_exists = True
            except NotFoundError:
                self._branch_exists = False
        return self._branch_exists

    def commit_exists(self) -> bool:
        """True when the branch tip carries exactly the intended commit message."""
        if self._commit_exists is None:
            commits = self.context.provider.commits(self.context.repo, self.context.branch_name)
            self._commit_exists = bool(commits) and commits[0].get("message") == self.context.draft.commit_message
        return self._commit_exists

    def merge_request_exists(self) -> bool:
        if self._merge_request_exists is None:
            merge_requests = self.context.provider.merge_requests(
                self.context.repo,
                source_branch=self.context.branch_name,
                target_branch=self.context.target_branch,
                state="all",
            )
            self._merge_request_exists = len(merge_requests) > 0
        return self._merge_request_exists

    def resolve_state(self) -> CreationState:
        if self.merge_request_exists():
            state = CreationState.SKIPPED
        else:
            branch_exists = self.branch_exists()
            state = CreationState.resolve(
                merge_request_exists=False,
                branch_exists=branch_exists,
                commit_exists=branch_exists and self.commit_exists(),
            )
        logger.info(f"Branch '{self.context.branch_name}' in project {self.context.repo} is in state {state.value}")
        return state
