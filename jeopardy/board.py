"""Board state and clue-reveal rules for Jeopardy."""

import logging
from typing import Optional, Sequence

from .exceptions import BoardNotLoaded, IndexOutOfRange, InvalidBoardShape
from .state import (
    BoardStatus,
    Category,
    Clue,
    Visibility,
    NUM_CATEGORIES,
    NUM_QUESTIONS_PER_CAT,
)

logger = logging.getLogger(__name__)


class BoardState:
    """
    The board of the running game.

    Holds NUM_CATEGORIES columns of NUM_QUESTIONS_PER_CAT clues each.
    Position (category_index, clue_index) addresses a single clue; the
    category index is the column, the clue index the row.

    Lifecycle: reset() -> load() -> reveal() ... -> reset(). The board
    is replaced wholesale on every load and reveal() is the only way a
    clue's visibility changes.
    """

    def __init__(
        self,
        num_categories: int = NUM_CATEGORIES,
        clues_per_category: int = NUM_QUESTIONS_PER_CAT,
    ):
        self.num_categories = num_categories
        self.clues_per_category = clues_per_category
        self._categories: Optional[list[Category]] = None

    @property
    def status(self) -> BoardStatus:
        """LOADING until a board has been installed, READY after."""
        return BoardStatus.LOADING if self._categories is None else BoardStatus.READY

    @property
    def is_ready(self) -> bool:
        return self._categories is not None

    def reset(self) -> None:
        """Drop the current board and go back to LOADING."""
        self._categories = None
        logger.debug("Board reset")

    def load(self, categories: Sequence[Category]) -> None:
        """
        Install a new board.

        Args:
            categories: Exactly num_categories categories of exactly
                clues_per_category clues each

        Raises:
            InvalidBoardShape: if the categories do not fit the grid
        """
        if len(categories) != self.num_categories:
            raise InvalidBoardShape(
                f"Board must have exactly {self.num_categories} categories, got {len(categories)}"
            )
        for i, category in enumerate(categories):
            if len(category.clues) != self.clues_per_category:
                raise InvalidBoardShape(
                    f"Category {i} ({category.title!r}) must have exactly "
                    f"{self.clues_per_category} clues, got {len(category.clues)}"
                )

        self._categories = [category.fresh() for category in categories]
        logger.debug("Board loaded: %s", ", ".join(self.titles))

    def get_visibility(self, category_index: int, clue_index: int) -> Visibility:
        """Get the visibility of the clue at (category_index, clue_index)."""
        return self._get_clue(category_index, clue_index).visibility

    def get_display_text(self, category_index: int, clue_index: int) -> str:
        """Get "?", the question or the answer, depending on visibility."""
        return self._get_clue(category_index, clue_index).text()

    def reveal(self, category_index: int, clue_index: int) -> Visibility:
        """
        Advance a clue one step: hidden -> question -> answer.

        Revealing a clue that already shows its answer changes nothing.

        Returns:
            The clue's visibility after the click
        """
        clue = self._get_clue(category_index, clue_index)
        if clue.visibility != Visibility.SHOWING_ANSWER:
            clue.visibility = clue.visibility.next
            logger.debug(
                "Revealed (%d, %d): %s", category_index, clue_index, clue.visibility.value
            )
        return clue.visibility

    @property
    def titles(self) -> list[str]:
        """Category titles in column order."""
        return [category.title for category in self._require_categories()]

    @property
    def revealed_count(self) -> int:
        """Number of clues that are no longer hidden."""
        return sum(
            1
            for category in self._require_categories()
            for clue in category.clues
            if clue.visibility != Visibility.HIDDEN
        )

    @property
    def is_fully_revealed(self) -> bool:
        """Whether every clue on the board shows its answer."""
        return all(
            clue.visibility == Visibility.SHOWING_ANSWER
            for category in self._require_categories()
            for clue in category.clues
        )

    def _require_categories(self) -> list[Category]:
        if self._categories is None:
            raise BoardNotLoaded("Board is still loading")
        return self._categories

    def _get_clue(self, category_index: int, clue_index: int) -> Clue:
        categories = self._require_categories()
        if not (
            0 <= category_index < self.num_categories
            and 0 <= clue_index < self.clues_per_category
        ):
            raise IndexOutOfRange(category_index, clue_index)
        return categories[category_index].clues[clue_index]
