from typing import Optional

from dependency_mr_creator.configuration.gitlab_settings import GitLabSettings
from dependency_mr_creator.core.domain.value_objects.source import Source
from dependency_mr_creator.core.ports.gitlab_provider import GitLabProvider
from dependency_mr_creator.infrastructure.drivers.gitlab.clients.gitlab_http_client import GitLabHttpClient
from dependency_mr_creator.infrastructure.drivers.gitlab.gitlab_provider_impl import GitLabProviderImpl
from dependency_mr_creator.infrastructure.drivers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)
from dependency_mr_creator.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)

API_SUFFIX = "/api/v4"


class GitLabProviderFactory:
    """Builds an authenticated GitLab provider from settings."""

    @staticmethod
    def create(settings: Optional[GitLabSettings] = None, source: Optional[Source] = None) -> GitLabProvider:
        """
        A source carrying an ``api_endpoint`` (e.g. ``https://gitlab.acme.io/api/v4/``)
        takes precedence over ``settings.base_url``.
        """
        settings = settings or GitLabSettings()
        if source is not None and source.api_endpoint:
            settings = settings.model_copy(update={"base_url": GitLabProviderFactory.base_url_for(source.api_endpoint)})
        logger.info(f"Building GitLab provider for {settings.base_url}")

        http_client = GitLabHttpClient(settings)
        return GitLabProviderImpl(
            http_client,
            GitLabPayloadBuilderService(),
            max_attempts=settings.max_retries,
            backoff_seconds=settings.retry_backoff_seconds,
        )

    @staticmethod
    def base_url_for(api_endpoint: str) -> str:
        # Service paths already start with api/v4
        base_url = api_endpoint.rstrip("/")
        if base_url.endswith(API_SUFFIX):
            base_url = base_url[: -len(API_SUFFIX)]
        return base_url
