from typing import Iterable, Optional

from dependency_mr_creator.configuration.gitlab_settings import GitLabSettings
from dependency_mr_creator.core.exceptions.provider_error import AlreadyExistsError
from dependency_mr_creator.core.ports.gitlab_provider import GitLabProvider
from dependency_mr_creator.core.ports.labeler import Labeler
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


class DefaultLabeler(Labeler):
    """
    Keeps a fixed set of baseline labels on the project and applies them,
    followed by any caller-supplied labels, to each merge request.
    """

    def __init__(
        self,
        provider: GitLabProvider,
        repo: str,
        default_labels: Iterable[str] = ("dependencies",),
        extra_labels: Iterable[str] = (),
        color: str = "#0366d6",
        description: Optional[str] = "Pull requests that update a dependency file",
    ):
        self.provider = provider
        self.repo = repo
        self.default_labels = list(default_labels)
        self.extra_labels = list(extra_labels)
        self.color = color
        self.description = description

    def ensure_default_labels(self) -> None:
        existing = {label["name"].lower() for label in self.provider.labels(self.repo)}
        for name in self.default_labels:
            if name.lower() in existing:
                continue
            logger.info(f"Creating missing label '{name}' in project {self.repo}")
            try:
                self.provider.create_label(self.repo, name, self.color, self.description)
            except AlreadyExistsError:
                logger.info(f"Label '{name}' already exists in project {self.repo}. Skipping.")

    def labels_for_request(self) -> list[str]:
        labels = []
        for name in [*self.default_labels, *self.extra_labels]:
            if name not in labels:
                labels.append(name)
        return labels

    @classmethod
    def from_settings(
        cls,
        provider: GitLabProvider,
        repo: str,
        settings: GitLabSettings,
        extra_labels: Iterable[str] = (),
    ) -> "DefaultLabeler":
        return cls(
            provider,
            repo,
            default_labels=[settings.default_label],
            extra_labels=extra_labels,
            color=settings.default_label_color,
        )
