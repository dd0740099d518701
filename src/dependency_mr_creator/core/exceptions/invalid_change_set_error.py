from __future__ import annotations

from dependency_mr_creator.core.exceptions.merge_request_creator_error import MergeRequestCreatorError


class InvalidChangeSetError(MergeRequestCreatorError):
    """Raised when a change set cannot be committed in a single GitLab call."""
