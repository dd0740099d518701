import json

import httpx
import pytest
import respx
from httpx import Response

from dependency_mr_creator.core.domain.value_objects.source import Source
from dependency_mr_creator.core.exceptions.provider_error import AlreadyExistsError, NotFoundError, ProviderError
from dependency_mr_creator.infrastructure.labeling.default_labeler import DefaultLabeler
from dependency_mr_creator.infrastructure.resolution.gitlab_provider_factory import GitLabProviderFactory

API = "https://gitlab.example.com/api/v4/projects/123"


@pytest.fixture
def provider(settings):
    return GitLabProviderFactory.create(settings)


@respx.mock
def test_branch_found(provider):
    route = respx.get(f"{API}/repository/branches/deps").mock(return_value=Response(200, json={"name": "deps"}))

    assert provider.branch("123", "deps") == {"name": "deps"}
    assert route.calls.last.request.headers["PRIVATE-TOKEN"] == "mock_gl_token"


@respx.mock
def test_branch_missing_raises_not_found(provider):
    respx.get(f"{API}/repository/branches/deps").mock(return_value=Response(404, json={"message": "404 Branch Not Found"}))

    with pytest.raises(NotFoundError) as exc:
        provider.branch("123", "deps")

    assert exc.value.status_code == 404


@respx.mock
def test_commits_filtered_by_ref(provider):
    route = respx.get(f"{API}/repository/commits").mock(return_value=Response(200, json=[{"message": "m"}]))

    assert provider.commits("123", "deps") == [{"message": "m"}]
    assert route.calls.last.request.url.params["ref_name"] == "deps"


@respx.mock
def test_merge_requests_query(provider):
    route = respx.get(f"{API}/merge_requests").mock(return_value=Response(200, json=[]))

    assert provider.merge_requests("123", "deps", "main", "all") == []
    params = route.calls.last.request.url.params
    assert params["source_branch"] == "deps"
    assert params["target_branch"] == "main"
    assert params["state"] == "all"


@respx.mock
def test_create_branch_conflict_maps_to_already_exists(provider):
    respx.post(f"{API}/repository/branches").mock(return_value=Response(400, json={"message": "Branch already exists"}))

    with pytest.raises(AlreadyExistsError):
        provider.create_branch("123", "deps", "abc123")


@respx.mock
def test_create_commit_payload(provider):
    route = respx.post(f"{API}/repository/commits").mock(return_value=Response(201, json={"id": "sha1"}))
    actions = [{"action": "update", "file_path": "/Gemfile", "content": "x"}]

    provider.create_commit("123", "deps", "Bump rails", actions)

    body = json.loads(route.calls.last.request.content)
    assert body == {"branch": "deps", "commit_message": "Bump rails", "actions": actions}


@respx.mock
def test_edit_submodule(provider):
    route = respx.put(f"{API}/repository/submodules/lib").mock(return_value=Response(200, json={"id": "sha2"}))

    provider.edit_submodule("123", "lib", "deps", "deadbeef", "Bump lib")

    body = json.loads(route.calls.last.request.content)
    assert body == {"branch": "deps", "commit_sha": "deadbeef", "commit_message": "Bump lib"}


@respx.mock
def test_create_merge_request_omits_null_fields(provider):
    route = respx.post(f"{API}/merge_requests").mock(
        return_value=Response(201, json={"id": 1, "iid": 42, "web_url": "u"})
    )

    result = provider.create_merge_request("123", "Bump", "deps", "main", description="Body", labels="dependencies")

    assert result["iid"] == 42
    body = json.loads(route.calls.last.request.content)
    assert body == {
        "source_branch": "deps",
        "target_branch": "main",
        "title": "Bump",
        "remove_source_branch": True,
        "description": "Body",
        "labels": "dependencies",
    }


@respx.mock
def test_create_merge_request_conflict(provider):
    respx.post(f"{API}/merge_requests").mock(
        return_value=Response(409, json={"message": ["Another open merge request already exists for this source branch: !41"]})
    )

    with pytest.raises(AlreadyExistsError):
        provider.create_merge_request("123", "Bump", "deps", "main")


@respx.mock
def test_edit_approvers(provider):
    route = respx.put(f"{API}/merge_requests/42/approvers").mock(return_value=Response(200, json={"iid": 42}))

    provider.edit_merge_request_approvers("123", 42, [1, 2], [9])

    assert json.loads(route.calls.last.request.content) == {"approver_ids": [1, 2], "approver_group_ids": [9]}


@respx.mock
def test_project_default_branch(provider):
    respx.get(API).mock(return_value=Response(200, json={"id": 123, "default_branch": "develop"}))

    assert provider.project("123")["default_branch"] == "develop"


@respx.mock
def test_server_error_is_retried(provider):
    route = respx.get(f"{API}/repository/branches/deps").mock(
        side_effect=[Response(503), Response(200, json={"name": "deps"})]
    )

    assert provider.branch("123", "deps") == {"name": "deps"}
    assert route.call_count == 2


@respx.mock
def test_server_error_exhausts_retries(provider):
    route = respx.post(f"{API}/repository/commits").mock(return_value=Response(500, json={"message": "boom"}))

    with pytest.raises(ProviderError) as exc:
        provider.create_commit("123", "deps", "m", [{"action": "update", "file_path": "a", "content": ""}])

    assert exc.value.retryable is True
    assert exc.value.status_code == 500
    assert route.call_count == 2


@respx.mock
def test_client_error_not_retried(provider):
    route = respx.get(f"{API}/merge_requests").mock(return_value=Response(401, json={"message": "401 Unauthorized"}))

    with pytest.raises(ProviderError) as exc:
        provider.merge_requests("123", "deps", "main")

    assert exc.value.retryable is False
    assert "401 Unauthorized" in exc.value.message
    assert route.call_count == 1


@respx.mock
def test_connection_error_is_retryable(provider):
    route = respx.get(API).mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(ProviderError) as exc:
        provider.project("123")

    assert exc.value.retryable is True
    assert route.call_count == 2


@respx.mock
def test_labels_follow_next_page(provider):
    first_page = [{"name": f"label-{i}"} for i in range(100)]
    route = respx.get(f"{API}/labels").mock(
        side_effect=[
            Response(200, json=first_page, headers={"X-Next-Page": "2"}),
            Response(200, json=[{"name": "dependencies"}], headers={"X-Next-Page": ""}),
        ]
    )

    labels = provider.labels("123")

    assert len(labels) == 101
    assert labels[-1]["name"] == "dependencies"
    assert [call.request.url.params["page"] for call in route.calls] == ["1", "2"]


@respx.mock
def test_labeler_finds_default_label_on_second_page(provider):
    respx.get(f"{API}/labels").mock(
        side_effect=[
            Response(200, json=[{"name": f"label-{i}"} for i in range(100)], headers={"X-Next-Page": "2"}),
            Response(200, json=[{"name": "dependencies"}]),
        ]
    )
    create_route = respx.post(f"{API}/labels").mock(return_value=Response(201, json={"name": "dependencies"}))

    DefaultLabeler(provider, "123").ensure_default_labels()

    assert create_route.call_count == 0


@respx.mock
def test_labeler_tolerates_label_conflict(provider):
    respx.get(f"{API}/labels").mock(return_value=Response(200, json=[]))
    create_route = respx.post(f"{API}/labels").mock(
        return_value=Response(409, json={"message": "Label already exists"})
    )

    DefaultLabeler(provider, "123").ensure_default_labels()

    assert create_route.call_count == 1


def test_factory_prefers_source_api_endpoint(settings):
    source = Source(repo="acme/shop", api_endpoint="https://gitlab.acme.io/api/v4/")

    provider = GitLabProviderFactory.create(settings, source)

    assert provider.client.base_url == "https://gitlab.acme.io"


def test_factory_without_api_endpoint_uses_settings(settings):
    provider = GitLabProviderFactory.create(settings, Source(repo="acme/shop"))

    assert provider.client.base_url == "https://gitlab.example.com"


@respx.mock
def test_requests_go_to_source_api_endpoint(settings):
    route = respx.get("https://gitlab.acme.io/api/v4/projects/123").mock(
        return_value=Response(200, json={"default_branch": "main"})
    )
    provider = GitLabProviderFactory.create(settings, Source(repo="123", api_endpoint="https://gitlab.acme.io/api/v4"))

    provider.project("123")

    assert route.call_count == 1
