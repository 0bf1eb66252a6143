# Jeopardy board module
from .state import (
    BoardStatus,
    Category,
    CategoryId,
    CategorySummary,
    Clue,
    Visibility,
    CATEGORY_POOL_SIZE,
    HIDDEN_TEXT,
    NUM_CATEGORIES,
    NUM_QUESTIONS_PER_CAT,
)
from .exceptions import (
    BoardError,
    BoardNotLoaded,
    IndexOutOfRange,
    InvalidBoardShape,
    JeopardyError,
    MalformedCategory,
    SourceError,
    SourceUnavailable,
)
from .board import BoardState
from .config import GameConfig, load_config
from .source import CategorySource, JServiceSource, select_distinct
from .game import GameSession, RevealResult

__all__ = [
    # State
    "BoardStatus",
    "Category",
    "CategoryId",
    "CategorySummary",
    "Clue",
    "Visibility",
    "CATEGORY_POOL_SIZE",
    "HIDDEN_TEXT",
    "NUM_CATEGORIES",
    "NUM_QUESTIONS_PER_CAT",
    # Errors
    "BoardError",
    "BoardNotLoaded",
    "IndexOutOfRange",
    "InvalidBoardShape",
    "JeopardyError",
    "MalformedCategory",
    "SourceError",
    "SourceUnavailable",
    # Board and session
    "BoardState",
    "GameSession",
    "RevealResult",
    # Data access
    "CategorySource",
    "JServiceSource",
    "select_distinct",
    # Config
    "GameConfig",
    "load_config",
]
