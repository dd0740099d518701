class MergeRequestCreatorError(Exception):
    """Base class for every error raised by the merge request creator."""
