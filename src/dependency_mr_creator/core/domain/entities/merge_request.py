from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class MergeRequest:
    id: int
    iid: int
    web_url: str
    source_branch: str
    target_branch: str
    state: str = "opened"
    title: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "MergeRequest":
        return cls(
            id=payload["id"],
            iid=payload["iid"],
            web_url=payload.get("web_url", ""),
            source_branch=payload.get("source_branch", ""),
            target_branch=payload.get("target_branch", ""),
            state=payload.get("state", "opened"),
            title=payload.get("title"),
        )
