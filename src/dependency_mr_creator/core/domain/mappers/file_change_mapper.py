import posixpath
from typing import Any, Iterable, Mapping

from dependency_mr_creator.core.domain.value_objects.change_set import ChangeSet
from dependency_mr_creator.core.domain.value_objects.file_change import (
    ContentUpdate,
    FileChange,
    SubmoduleUpdate,
    SymlinkUpdate,
)
from dependency_mr_creator.core.exceptions.invalid_change_set_error import InvalidChangeSetError


class FileChangeMapper:
    """
    Maps updated dependency-file records into FileChange variants.

    Records look like ``{"type": "file"|"symlink"|"submodule", "name": ...,
    "directory": ..., "content": ..., "symlink_target": ...}``.
    """

    def to_change(self, record: Mapping[str, Any]) -> FileChange:
        file_type = record.get("type", "file")
        path = self._path_of(record)
        content = record.get("content")

        if file_type == "submodule":
            if not content:
                raise InvalidChangeSetError(f"Submodule update for {path} has no commit SHA")
            return SubmoduleUpdate(path=path, commit_sha=str(content).strip())

        if file_type == "symlink":
            target = record.get("symlink_target")
            if not target:
                raise InvalidChangeSetError(f"Symlink update for {path} has no symlink_target")
            return SymlinkUpdate(path=path, symlink_target=target, content=content or "")

        if file_type != "file":
            raise InvalidChangeSetError(f"Unsupported file type '{file_type}' for {path}")
        return ContentUpdate(path=path, content=content or "")

    def to_change_set(self, records: Iterable[Mapping[str, Any]]) -> ChangeSet:
        return ChangeSet.of(self.to_change(record) for record in records)

    def _path_of(self, record: Mapping[str, Any]) -> str:
        name = record.get("name")
        if not name:
            raise InvalidChangeSetError("File change record is missing 'name'")
        directory = record.get("directory") or "/"
        # normpath keeps a leading "//", which GitLab would treat as part of the path
        return "/" + posixpath.normpath(posixpath.join("/", directory, name)).lstrip("/")
