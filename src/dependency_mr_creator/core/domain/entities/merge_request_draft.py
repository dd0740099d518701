from dataclasses import dataclass
from typing import Optional

from dependency_mr_creator.core.domain.value_objects.approvers import Approvers


@dataclass(frozen=True)
class MergeRequestDraft:
    """Caller-supplied text and metadata for the merge request and its commit."""

    title: str
    description: str
    commit_message: str
    assignee_id: Optional[int] = None
    milestone_id: Optional[int] = None
    approvers: Optional[Approvers] = None
