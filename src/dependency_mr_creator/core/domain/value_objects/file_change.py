from dataclasses import dataclass
from enum import Enum
from typing import Union


class FileChangeKind(str, Enum):
    CONTENT_UPDATE = "content-update"
    SYMLINK_UPDATE = "symlink-update"
    SUBMODULE_UPDATE = "submodule-update"


@dataclass(frozen=True)
class ContentUpdate:
    path: str
    content: str

    @property
    def kind(self) -> FileChangeKind:
        return FileChangeKind.CONTENT_UPDATE

    @property
    def commit_path(self) -> str:
        return self.path


@dataclass(frozen=True)
class SymlinkUpdate:
    """An update to a symlinked file; GitLab must be given the link target."""

    path: str
    symlink_target: str
    content: str

    @property
    def kind(self) -> FileChangeKind:
        return FileChangeKind.SYMLINK_UPDATE

    @property
    def commit_path(self) -> str:
        return self.symlink_target


@dataclass(frozen=True)
class SubmoduleUpdate:
    """Moves a submodule pointer to ``commit_sha``."""

    path: str
    commit_sha: str

    @property
    def kind(self) -> FileChangeKind:
        return FileChangeKind.SUBMODULE_UPDATE

    @property
    def commit_path(self) -> str:
        return self.path

    @property
    def content(self) -> str:
        return self.commit_sha

    @property
    def submodule_path(self) -> str:
        # GitLab's submodule endpoint takes paths relative to the repository root
        return self.path.lstrip("/")


FileChange = Union[ContentUpdate, SymlinkUpdate, SubmoduleUpdate]
