from dependency_mr_creator.application.creation_context import CreationContext
from dependency_mr_creator.core.domain.value_objects.change_set import ChangeSet
from dependency_mr_creator.core.domain.value_objects.creation_state import CreationState
from dependency_mr_creator.core.domain.value_objects.file_change import SubmoduleUpdate
from dependency_mr_creator.core.exceptions.provider_error import AlreadyExistsError
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class CommitMutator:
    """Brings the branch to the point where it holds the update commit."""

    def __init__(self, context: CreationContext):
        self.context = context

    def apply(self, state: CreationState) -> None:
        if state.needs_branch:
            self.create_branch()
        if state.needs_commit:
            self.create_commit()
        else:
            logger.info(f"Commit already present on '{self.context.branch_name}'. Skipping commit.")

    def create_branch(self) -> None:
        try:
            self.context.provider.create_branch(
                self.context.repo,
                self.context.branch_name,
                self.context.base_commit,
            )
        except AlreadyExistsError:
            # Lost a race with a concurrent run; the branch is there either way
            logger.info(f"Branch '{self.context.branch_name}' was created concurrently. Continuing.")

    def create_commit(self) -> None:
        change_set = self.context.change_set
        if change_set.is_submodule_update:
            self._create_submodule_update_commit(change_set.changes[0])
            return

        self.context.provider.create_commit(
            self.context.repo,
            self.context.branch_name,
            self.context.draft.commit_message,
            self.build_actions(change_set),
        )

    def _create_submodule_update_commit(self, change: SubmoduleUpdate) -> None:
        self.context.provider.edit_submodule(
            self.context.repo,
            change.submodule_path,
            branch=self.context.branch_name,
            commit_sha=change.commit_sha,
            commit_message=self.context.draft.commit_message,
        )

    @staticmethod
    def build_actions(change_set: ChangeSet) -> list[dict[str, str]]:
        return [
            {
                "action": "update",
                "file_path": change.commit_path,
                "content": change.content,
            }
            for change in change_set
        ]
