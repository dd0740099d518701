import pytest

from dependency_mr_creator.configuration.gitlab_settings import GitLabSettings
from dependency_mr_creator.core.domain.entities.merge_request_draft import MergeRequestDraft
from dependency_mr_creator.core.domain.value_objects.change_set import ChangeSet
from dependency_mr_creator.core.domain.value_objects.file_change import ContentUpdate
from dependency_mr_creator.core.domain.value_objects.source import Source
from dependency_mr_creator.infrastructure.fakes.fake_gitlab_provider import FakeGitLabProvider
from dependency_mr_creator.infrastructure.labeling.default_labeler import DefaultLabeler

GITLAB_URL = "https://gitlab.example.com"
BRANCH_NAME = "dependabot/bundler/rails-7.1.0"
COMMIT_MESSAGE = "Bump rails from 7.0.8 to 7.1.0"


@pytest.fixture
def settings():
    return GitLabSettings(
        base_url=GITLAB_URL,
        token="mock_gl_token",
        max_retries=2,
        retry_backoff_seconds=0,
    )


@pytest.fixture
def source():
    return Source(repo="acme/shop")


@pytest.fixture
def change_set():
    return ChangeSet.of(
        [
            ContentUpdate(path="/Gemfile", content="gem 'rails', '7.1.0'\n"),
            ContentUpdate(path="/Gemfile.lock", content="rails (7.1.0)\n"),
        ]
    )


@pytest.fixture
def draft():
    return MergeRequestDraft(
        title="Bump rails from 7.0.8 to 7.1.0",
        description="Bumps rails from 7.0.8 to 7.1.0.",
        commit_message=COMMIT_MESSAGE,
    )


@pytest.fixture
def fake_provider():
    return FakeGitLabProvider(default_branch="main")


@pytest.fixture
def labeler(fake_provider, source):
    return DefaultLabeler(fake_provider, source.repo)
