from enum import Enum


class CreationState(str, Enum):
    """Where a previous invocation left the remote repository."""

    SKIPPED = "skipped"
    NO_BRANCH = "no_branch"
    BRANCH_NO_COMMIT = "branch_no_commit"
    BRANCH_WITH_COMMIT = "branch_with_commit"

    @classmethod
    def resolve(cls, merge_request_exists: bool, branch_exists: bool, commit_exists: bool) -> "CreationState":
        if merge_request_exists:
            return cls.SKIPPED
        if not branch_exists:
            return cls.NO_BRANCH
        if commit_exists:
            return cls.BRANCH_WITH_COMMIT
        return cls.BRANCH_NO_COMMIT

    @property
    def needs_branch(self) -> bool:
        return self is CreationState.NO_BRANCH

    @property
    def needs_commit(self) -> bool:
        return self in (CreationState.NO_BRANCH, CreationState.BRANCH_NO_COMMIT)
