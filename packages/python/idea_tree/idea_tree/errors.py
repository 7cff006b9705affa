"""Domain-level errors for the idea tree."""


class IdeaTreeError(Exception):
    """Base class for idea tree errors."""


class IdeaNotFoundError(IdeaTreeError):
    """Raised when an idea node cannot be located."""

    def __init__(self, idea_id: str):
        super().__init__(f"Idea {idea_id} not found")
        self.idea_id = idea_id


class InvalidIdeaError(IdeaTreeError):
    """Raised when a draft cannot be saved (e.g. blank title)."""


class DragNotAllowedError(IdeaTreeError):
    """Raised when a reorder starts from an entry that cannot be dragged."""
