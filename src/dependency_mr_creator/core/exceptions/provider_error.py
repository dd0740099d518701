from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dependency_mr_creator.core.exceptions.merge_request_creator_error import MergeRequestCreatorError


@dataclass
class ProviderError(MergeRequestCreatorError):
    provider: str
    message: str
    retryable: bool = False
    status_code: Optional[int] = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"


@dataclass
class NotFoundError(ProviderError):
    """The requested GitLab resource does not exist (HTTP 404)."""


@dataclass
class AlreadyExistsError(ProviderError):
    """GitLab refused to create a resource because it already exists."""
