from dataclasses import dataclass
from typing import Optional

from dependency_mr_creator.core.exceptions.configuration_error import ConfigurationError


@dataclass(frozen=True)
class Source:
    """Target repository of a dependency update.

    ``repo`` is the GitLab project path (``group/project``) or its numeric id.
    ``branch`` overrides the merge request target; when unset the project's
    default branch is used. ``api_endpoint`` points at a self-hosted GitLab
    API and, when set, is used instead of the configured base URL.
    """

    repo: str
    branch: Optional[str] = None
    api_endpoint: Optional[str] = None

    def __post_init__(self) -> None:
        if not str(self.repo).strip():
            raise ConfigurationError("Source repo cannot be empty")
