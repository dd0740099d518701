from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Approvers:
    approver_ids: tuple[int, ...] = field(default_factory=tuple)
    group_approver_ids: tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[Any, Any]]) -> Optional["Approvers"]:
        """
        Builds approvers from ``{"approvers": [...], "group_approvers": [...]}``.
        Keys may be strings or any object whose ``str()`` is the key name.
        Returns None when no mapping is given.
        """
        if raw is None:
            return None
        normalized = {str(key): value for key, value in raw.items()}
        return cls(
            approver_ids=tuple(normalized.get("approvers") or ()),
            group_approver_ids=tuple(normalized.get("group_approvers") or ()),
        )

    @property
    def is_empty(self) -> bool:
        return not self.approver_ids and not self.group_approver_ids
