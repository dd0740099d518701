from __future__ import annotations

from dependency_mr_creator.core.exceptions.merge_request_creator_error import MergeRequestCreatorError


class ConfigurationError(MergeRequestCreatorError):
    """Raised when configuration is invalid or incomplete."""
