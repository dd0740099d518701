from dataclasses import dataclass
from typing import Iterable, Iterator

from dependency_mr_creator.core.domain.value_objects.file_change import FileChange, SubmoduleUpdate
from dependency_mr_creator.core.exceptions.invalid_change_set_error import InvalidChangeSetError


@dataclass(frozen=True)
class ChangeSet:
    """Ordered file changes that make up the single commit of an update.

    A submodule pointer change is committed through a dedicated endpoint, so
    it can only be applied on its own.
    """

    changes: tuple[FileChange, ...]

    def __post_init__(self) -> None:
        if not self.changes:
            raise InvalidChangeSetError("Change set must contain at least one file change")

        submodules = [c for c in self.changes if isinstance(c, SubmoduleUpdate)]
        if submodules and len(self.changes) > 1:
            raise InvalidChangeSetError(
                f"A submodule update must be the only change in a change set "
                f"(got {len(submodules)} submodule(s) among {len(self.changes)} changes)"
            )

    @classmethod
    def of(cls, changes: Iterable[FileChange]) -> "ChangeSet":
        return cls(tuple(changes))

    @property
    def is_submodule_update(self) -> bool:
        return len(self.changes) == 1 and isinstance(self.changes[0], SubmoduleUpdate)

    def __iter__(self) -> Iterator[FileChange]:
        return iter(self.changes)

    def __len__(self) -> int:
        return len(self.changes)
