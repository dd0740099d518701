from abc import ABC, abstractmethod
from typing import Any, Optional


class GitLabProvider(ABC):
    """Abstract base class for the GitLab operations the creator relies on."""

    @abstractmethod
    def branch(self, repo: str, name: str) -> dict[str, Any]:
        """Returns branch info. Raises NotFoundError when the branch is missing."""
        pass

    @abstractmethod
    def commits(self, repo: str, ref_name: str) -> list[dict[str, Any]]:
        """Returns the commit history of a ref, most recent first."""
        pass

    @abstractmethod
    def merge_requests(
        self,
        repo: str,
        source_branch: str,
        target_branch: str,
        state: str = "all",
    ) -> list[dict[str, Any]]:
        """Lists merge requests filtered by branch pair and state."""
        pass

    @abstractmethod
    def create_branch(self, repo: str, name: str, ref: str) -> dict[str, Any]:
        """Creates a branch from a ref."""
        pass

    @abstractmethod
    def create_commit(
        self,
        repo: str,
        branch: str,
        message: str,
        actions: list[dict[str, str]],
    ) -> dict[str, Any]:
        """Creates a single commit applying all actions."""
        pass

    @abstractmethod
    def edit_submodule(
        self,
        repo: str,
        path: str,
        branch: str,
        commit_sha: str,
        commit_message: str,
    ) -> dict[str, Any]:
        """Moves a submodule pointer with a commit on the given branch."""
        pass

    @abstractmethod
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
        """Creates a merge request and returns its payload."""
        pass

    @abstractmethod
    def edit_merge_request_approvers(
        self,
        repo: str,
        merge_request_iid: int,
        approver_ids: list[int],
        approver_group_ids: list[int],
    ) -> dict[str, Any]:
        """Replaces the required approvers of a merge request."""
        pass

    @abstractmethod
    def project(self, repo: str) -> dict[str, Any]:
        """Returns project info, including ``default_branch``."""
        pass

    @abstractmethod
    def labels(self, repo: str) -> list[dict[str, Any]]:
        """Lists the labels defined on the project."""
        pass

    @abstractmethod
    def create_label(self, repo: str, name: str, color: str, description: Optional[str] = None) -> dict[str, Any]:
        """Creates a project label."""
        pass
