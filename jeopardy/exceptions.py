class JeopardyError(Exception):
    """Base exception for the jeopardy package."""
    pass


class SourceError(JeopardyError):
    """Raised when category data cannot be obtained."""
    pass


class SourceUnavailable(SourceError):
    """Raised when the question service cannot be reached or answers garbage.

    Transient: the whole start sequence may be retried.
    """
    pass


class MalformedCategory(SourceError):
    """Raised when a category violates the title / clue-count contract."""

    def __init__(self, category_id, reason: str):
        self.category_id = category_id
        self.reason = reason
        super().__init__(f"Category {category_id} is malformed: {reason}")


class BoardError(JeopardyError):
    """Raised when the board is used against its contract."""
    pass


class InvalidBoardShape(BoardError, ValueError):
    """Raised when load() receives the wrong number of categories or clues."""
    pass


class BoardNotLoaded(BoardError):
    """Raised when the board is queried or revealed while loading."""
    pass


class IndexOutOfRange(BoardError, IndexError):
    """Raised when a (category, clue) position is outside the board."""

    def __init__(self, category_index: int, clue_index: int):
        self.category_index = category_index
        self.clue_index = clue_index
        super().__init__(f"Invalid position: ({category_index}, {clue_index})")
