from typing import Optional

from dependency_mr_creator.application.creation_context import CreationContext
from dependency_mr_creator.core.domain.entities.merge_request import MergeRequest
from dependency_mr_creator.core.domain.value_objects.approvers import Approvers
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class MergeRequestAnnotator:
    """Applies metadata GitLab does not accept on the creation call.

    Merge requests are addressed by their project-scoped ``iid``, not the global ``id``.
    """

    def __init__(self, context: CreationContext):
        self.context = context

    def annotate(self, merge_request: MergeRequest, approvers: Optional[Approvers]) -> None:
        if approvers is None or approvers.is_empty:
            return

        logger.info(
            f"Setting approvers on MR !{merge_request.iid}: "
            f"users={list(approvers.approver_ids)} groups={list(approvers.group_approver_ids)}"
        )
        self.context.provider.edit_merge_request_approvers(
            self.context.repo,
            merge_request.iid,
            approver_ids=list(approvers.approver_ids),
            approver_group_ids=list(approvers.group_approver_ids),
        )
