from typing import Optional

from dependency_mr_creator.core.domain.entities.merge_request_draft import MergeRequestDraft
from dependency_mr_creator.core.domain.value_objects.change_set import ChangeSet
from dependency_mr_creator.core.domain.value_objects.source import Source
from dependency_mr_creator.core.ports.gitlab_provider import GitLabProvider


class CreationContext:
    """
    State scoped to a single create() call.

    Lookups that cannot change during one call (the project's default branch)
    are fetched lazily and remembered here; a new context is built per call.
    """

    def __init__(
        self,
        provider: GitLabProvider,
        source: Source,
        branch_name: str,
        base_commit: str,
        change_set: ChangeSet,
        draft: MergeRequestDraft,
    ):
        self.provider = provider
        self.source = source
        self.branch_name = branch_name
        self.base_commit = base_commit
        self.change_set = change_set
        self.draft = draft
        self._default_branch: Optional[str] = None

    @property
    def repo(self) -> str:
        return self.source.repo

    @property
    def default_branch(self) -> str:
        if self._default_branch is None:
            self._default_branch = self.provider.project(self.repo)["default_branch"]
        return self._default_branch

    @property
    def target_branch(self) -> str:
        return self.source.branch or self.default_branch
