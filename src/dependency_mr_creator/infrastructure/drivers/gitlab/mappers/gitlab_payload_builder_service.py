from typing import Any, Optional


class GitLabPayloadBuilderService:
    def build_commit_payload(self, branch_name: str, message: str, actions: list[dict[str, str]]) -> dict[str, Any]:
        """
        Builds the JSON payload for the GitLab Commits API.
        :param actions: list of {"action", "file_path", "content"} entries
        """
        for action in actions:
            self._validate_path(action["file_path"])
        return {
            "branch": branch_name,
            "commit_message": message,
            "actions": actions,
        }

    def build_submodule_payload(self, branch_name: str, commit_sha: str, message: str) -> dict[str, Any]:
        return {
            "branch": branch_name,
            "commit_sha": commit_sha,
            "commit_message": message,
        }

    def build_merge_request_payload(
        self,
        title: str,
        source_branch: str,
        target_branch: str,
        description: Optional[str],
        remove_source_branch: bool,
        assignee_id: Optional[int],
        labels: Optional[str],
        milestone_id: Optional[int],
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "source_branch": source_branch,
            "target_branch": target_branch,
            "title": title,
            "remove_source_branch": remove_source_branch,
        }
        # Unset optional fields are left out rather than sent as null
        optional = {
            "description": description,
            "assignee_id": assignee_id,
            "labels": labels,
            "milestone_id": milestone_id,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload

    def build_approvers_payload(self, approver_ids: list[int], approver_group_ids: list[int]) -> dict[str, Any]:
        return {
            "approver_ids": list(approver_ids or []),
            "approver_group_ids": list(approver_group_ids or []),
        }

    def build_label_payload(self, name: str, color: str, description: Optional[str]) -> dict[str, Any]:
        payload = {"name": name, "color": color}
        if description:
            payload["description"] = description
        return payload

    def _validate_path(self, path: str):
        if not path:
            raise ValueError("File path cannot be empty")
        if ".." in path.split("/"):
            raise ValueError(f"Path contains invalid sequence '..': {path}")
        if "\\" in path:
            raise ValueError(f"Path must use POSIX separators (/): {path}")
