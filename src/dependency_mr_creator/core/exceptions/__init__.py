from dependency_mr_creator.core.exceptions.configuration_error import ConfigurationError
from dependency_mr_creator.core.exceptions.invalid_change_set_error import InvalidChangeSetError
from dependency_mr_creator.core.exceptions.merge_request_creator_error import MergeRequestCreatorError
from dependency_mr_creator.core.exceptions.provider_error import (
    AlreadyExistsError,
    NotFoundError,
    ProviderError,
)

__all__ = [
    "AlreadyExistsError",
    "ConfigurationError",
    "InvalidChangeSetError",
    "MergeRequestCreatorError",
    "NotFoundError",
    "ProviderError",
]
