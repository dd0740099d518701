from typing import Optional

from dependency_mr_creator.application.creation_context import CreationContext
from dependency_mr_creator.application.services.commit_mutator import CommitMutator
from dependency_mr_creator.application.services.idempotency_prober import IdempotencyProber
from dependency_mr_creator.application.services.merge_request_annotator import MergeRequestAnnotator
from dependency_mr_creator.application.services.merge_request_publisher import MergeRequestPublisher
from dependency_mr_creator.core.domain.entities.merge_request import MergeRequest
from dependency_mr_creator.core.domain.entities.merge_request_draft import MergeRequestDraft
from dependency_mr_creator.core.domain.value_objects.change_set import ChangeSet
from dependency_mr_creator.core.domain.value_objects.creation_state import CreationState
from dependency_mr_creator.core.domain.value_objects.source import Source
from dependency_mr_creator.core.ports.gitlab_provider import GitLabProvider
from dependency_mr_creator.core.ports.labeler import Labeler
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class CreateMergeRequestUseCase:
    """
    Creates the merge request for a dependency update, idempotently.
    Probe -> Branch/Commit -> Merge Request -> Approvers.

    Safe to call again after a partial failure: existing branches and commits
    are reused, and nothing is done when a merge request for the branch pair
    already exists in any state.
    """

    def __init__(self, provider: GitLabProvider, labeler: Labeler):
        self.provider = provider
        self.labeler = labeler

    def create(
        self,
        source: Source,
        branch_name: str,
        base_commit: str,
        change_set: ChangeSet,
        draft: MergeRequestDraft,
    ) -> Optional[MergeRequest]:
        context = CreationContext(self.provider, source, branch_name, base_commit, change_set, draft)
        logger.info(f"Creating MR for branch '{branch_name}' in project {source.repo}")

        state = IdempotencyProber(context).resolve_state()
        if state is CreationState.SKIPPED:
            logger.info(f"MR for '{branch_name}' -> '{context.target_branch}' already exists. Nothing to do.")
            return None

        CommitMutator(context).apply(state)

        merge_request = MergeRequestPublisher(context, self.labeler).publish()
        if merge_request is None:
            return None

        MergeRequestAnnotator(context).annotate(merge_request, draft.approvers)
        return merge_request
