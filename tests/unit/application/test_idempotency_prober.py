from unittest.mock import MagicMock

import pytest

from dependency_mr_creator.application.creation_context import CreationContext
from dependency_mr_creator.application.services.idempotency_prober import IdempotencyProber
from dependency_mr_creator.core.domain.value_objects.creation_state import CreationState
from dependency_mr_creator.core.exceptions.provider_error import NotFoundError, ProviderError


@pytest.fixture
def provider():
    mock = MagicMock()
    mock.project.return_value = {"default_branch": "main"}
    mock.merge_requests.return_value = []
    mock.branch.return_value = {"name": "deps"}
    mock.commits.return_value = []
    return mock


@pytest.fixture
def prober(provider, source, change_set, draft):
    context = CreationContext(provider, source, "deps", "abc123", change_set, draft)
    return IdempotencyProber(context)


def test_branch_not_found_is_false(prober, provider):
    provider.branch.side_effect = NotFoundError(provider="gitlab", message="404", status_code=404)

    assert prober.branch_exists() is False


def test_branch_lookup_other_errors_propagate(prober, provider):
    provider.branch.side_effect = ProviderError(provider="gitlab", message="unauthorized", status_code=401)

    with pytest.raises(ProviderError):
        prober.branch_exists()


def test_branch_exists_is_cached(prober, provider):
    assert prober.branch_exists() is True
    assert prober.branch_exists() is True

    provider.branch.assert_called_once_with("acme/shop", "deps")


def test_commit_exists_compares_latest_message(prober, provider, draft):
    provider.commits.return_value = [{"message": draft.commit_message}, {"message": "older"}]

    assert prober.commit_exists() is True
    provider.commits.assert_called_once_with("acme/shop", "deps")


def test_commit_exists_false_when_latest_differs(prober, provider, draft):
    provider.commits.return_value = [{"message": "Merge branch 'main'"}, {"message": draft.commit_message}]

    assert prober.commit_exists() is False


def test_commit_exists_false_on_empty_history(prober):
    assert prober.commit_exists() is False


def test_merge_request_exists_queries_all_states(prober, provider):
    provider.merge_requests.return_value = [{"iid": 3, "state": "closed"}]

    assert prober.merge_request_exists() is True
    provider.merge_requests.assert_called_once_with(
        "acme/shop", source_branch="deps", target_branch="main", state="all"
    )


def test_resolve_state_skipped_does_not_probe_branch(prober, provider):
    provider.merge_requests.return_value = [{"iid": 3}]

    assert prober.resolve_state() is CreationState.SKIPPED
    provider.branch.assert_not_called()


def test_resolve_state_no_branch_does_not_read_commits(prober, provider):
    provider.branch.side_effect = NotFoundError(provider="gitlab", message="404", status_code=404)

    assert prober.resolve_state() is CreationState.NO_BRANCH
    provider.commits.assert_not_called()


def test_resolve_state_branch_with_commit(prober, provider, draft):
    provider.commits.return_value = [{"message": draft.commit_message}]

    assert prober.resolve_state() is CreationState.BRANCH_WITH_COMMIT


def test_resolve_state_branch_no_commit(prober, provider):
    provider.commits.return_value = [{"message": "other"}]

    assert prober.resolve_state() is CreationState.BRANCH_NO_COMMIT
