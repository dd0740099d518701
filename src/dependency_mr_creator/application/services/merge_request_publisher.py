from typing import Optional

from dependency_mr_creator.application.creation_context import CreationContext
from dependency_mr_creator.core.domain.entities.merge_request import MergeRequest
from dependency_mr_creator.core.exceptions.provider_error import AlreadyExistsError
from dependency_mr_creator.core.ports.labeler import Labeler
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class MergeRequestPublisher:
    def __init__(self, context: CreationContext, labeler: Labeler):
        self.context = context
        self.labeler = labeler

    def publish(self) -> Optional[MergeRequest]:
        """
        Creates the merge request for the settled branch.
        Returns None when GitLab reports that one already exists for the branch pair.
        """
        self.labeler.ensure_default_labels()

        draft = self.context.draft
        try:
            payload = self.context.provider.create_merge_request(
                self.context.repo,
                draft.title,
                source_branch=self.context.branch_name,
                target_branch=self.context.target_branch,
                description=draft.description,
                remove_source_branch=True,
                assignee_id=draft.assignee_id,
                labels=",".join(self.labeler.labels_for_request()),
                milestone_id=draft.milestone_id,
            )
        except AlreadyExistsError:
            logger.warning(
                f"MR {self.context.branch_name} -> {self.context.target_branch} was created concurrently. Skipping."
            )
            return None

        merge_request = MergeRequest.from_payload(payload)
        logger.info(f"Created MR !{merge_request.iid}: {merge_request.web_url}")
        return merge_request
