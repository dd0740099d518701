from abc import ABC, abstractmethod


class Labeler(ABC):
    """Decides which labels apply to a merge request."""

    @abstractmethod
    def ensure_default_labels(self) -> None:
        """Creates the baseline labels on the project if they are missing. Must be idempotent."""
        pass

    @abstractmethod
    def labels_for_request(self) -> list[str]:
        """Returns the labels to set on the merge request being created."""
        pass
