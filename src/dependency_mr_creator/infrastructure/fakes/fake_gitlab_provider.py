from typing import Any, Optional

from dependency_mr_creator.core.exceptions.provider_error import AlreadyExistsError, NotFoundError
from dependency_mr_creator.core.ports.gitlab_provider import GitLabProvider

_MUTATING_CALLS = {
    "create_branch",
    "create_commit",
    "edit_submodule",
    "create_merge_request",
    "edit_merge_request_approvers",
    "create_label",
}


class FakeGitLabProvider(GitLabProvider):
    """
    In-memory GitLab for testing/local development.
    Keeps branches, commits, merge requests and labels of a single project and
    records every call in ``calls`` as ``(method_name, args)``.
    """

    def __init__(self, default_branch: str = "main"):
        self.default_branch = default_branch
        self.branches: dict[str, list[dict[str, Any]]] = {default_branch: [{"id": "base", "message": "Initial commit"}]}
        self.merge_request_records: list[dict[str, Any]] = []
        self.approvers: dict[int, dict[str, list[int]]] = {}
        self.label_records: list[dict[str, Any]] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def calls_to(self, method: str) -> list[tuple[Any, ...]]:
        return [args for name, args in self.calls if name == method]

    @property
    def mutating_calls(self) -> list[str]:
        return [name for name, _ in self.calls if name in _MUTATING_CALLS]

    def branch(self, repo: str, name: str) -> dict[str, Any]:
        self.calls.append(("branch", (repo, name)))
        if name not in self.branches:
            raise NotFoundError(provider="gitlab", message=f"Branch {name} not found", status_code=404)
        return {"name": name}

    def commits(self, repo: str, ref_name: str) -> list[dict[str, Any]]:
        self.calls.append(("commits", (repo, ref_name)))
        if ref_name not in self.branches:
            raise NotFoundError(provider="gitlab", message=f"Ref {ref_name} not found", status_code=404)
        return list(reversed(self.branches[ref_name]))

    def merge_requests(
        self,
        repo: str,
        source_branch: str,
        target_branch: str,
        state: str = "all",
    ) -> list[dict[str, Any]]:
        self.calls.append(("merge_requests", (repo, source_branch, target_branch, state)))
        return [
            mr
            for mr in self.merge_request_records
            if mr["source_branch"] == source_branch
            and mr["target_branch"] == target_branch
            and (state == "all" or mr["state"] == state)
        ]

    def create_branch(self, repo: str, name: str, ref: str) -> dict[str, Any]:
        self.calls.append(("create_branch", (repo, name, ref)))
        if name in self.branches:
            raise AlreadyExistsError(provider="gitlab", message="Branch already exists", status_code=400)
        self.branches[name] = [{"id": ref, "message": f"Base {ref}"}]
        return {"name": name}

    def create_commit(
        self,
        repo: str,
        branch: str,
        message: str,
        actions: list[dict[str, str]],
    ) -> dict[str, Any]:
        self.calls.append(("create_commit", (repo, branch, message, actions)))
        return self._push(branch, message)

    def edit_submodule(
        self,
        repo: str,
        path: str,
        branch: str,
        commit_sha: str,
        commit_message: str,
    ) -> dict[str, Any]:
        self.calls.append(("edit_submodule", (repo, path, branch, commit_sha, commit_message)))
        return self._push(branch, commit_message)

    def create_merge_request(
        self,
        repo: str,
        title: str,
        source_branch: str,
        target_branch: str,
        description: Optional[str] = None,
        remove_source_branch: bool = True,
        assignee_id: Optional[int] = None,
        labels: Optional[str] = None,
        milestone_id: Optional[int] = None,
    ) -> dict[str, Any]:
        self.calls.append(
            (
                "create_merge_request",
                (repo, title, source_branch, target_branch, description, remove_source_branch, assignee_id, labels, milestone_id),
            )
        )
        if any(
            mr["source_branch"] == source_branch and mr["target_branch"] == target_branch and mr["state"] == "opened"
            for mr in self.merge_request_records
        ):
            raise AlreadyExistsError(provider="gitlab", message="Another open merge request already exists", status_code=409)

        iid = len(self.merge_request_records) + 1
        record = {
            "id": 1000 + iid,
            "iid": iid,
            "web_url": f"https://gitlab.example.com/{repo}/-/merge_requests/{iid}",
            "source_branch": source_branch,
            "target_branch": target_branch,
            "state": "opened",
            "title": title,
            "labels": labels.split(",") if labels else [],
        }
        self.merge_request_records.append(record)
        return dict(record)

    def edit_merge_request_approvers(
        self,
        repo: str,
        merge_request_iid: int,
        approver_ids: list[int],
        approver_group_ids: list[int],
    ) -> dict[str, Any]:
        self.calls.append(("edit_merge_request_approvers", (repo, merge_request_iid, approver_ids, approver_group_ids)))
        self.approvers[merge_request_iid] = {"approvers": approver_ids, "group_approvers": approver_group_ids}
        return {"iid": merge_request_iid}

    def project(self, repo: str) -> dict[str, Any]:
        self.calls.append(("project", (repo,)))
        return {"path_with_namespace": repo, "default_branch": self.default_branch}

    def labels(self, repo: str) -> list[dict[str, Any]]:
        self.calls.append(("labels", (repo,)))
        return list(self.label_records)

    def create_label(self, repo: str, name: str, color: str, description: Optional[str] = None) -> dict[str, Any]:
        self.calls.append(("create_label", (repo, name, color, description)))
        if any(label["name"].lower() == name.lower() for label in self.label_records):
            raise AlreadyExistsError(provider="gitlab", message="Label already exists", status_code=409)
        label = {"name": name, "color": color, "description": description}
        self.label_records.append(label)
        return label

    def _push(self, branch: str, message: str) -> dict[str, Any]:
        if branch not in self.branches:
            raise NotFoundError(provider="gitlab", message=f"Branch {branch} not found", status_code=404)
        commit = {"id": f"sha{len(self.branches[branch])}", "message": message}
        self.branches[branch].append(commit)
        return commit
