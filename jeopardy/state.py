"""Board state types and data structures for Jeopardy."""

from enum import Enum
from dataclasses import dataclass, field


NUM_CATEGORIES = 6
NUM_QUESTIONS_PER_CAT = 5
CATEGORY_POOL_SIZE = 20
HIDDEN_TEXT = "?"

CategoryId = int


class Visibility(Enum):
    """What a single clue cell currently shows."""
    HIDDEN = "hidden"
    SHOWING_QUESTION = "question"
    SHOWING_ANSWER = "answer"

    @property
    def next(self) -> "Visibility":
        """The state one click further along. SHOWING_ANSWER is terminal."""
        if self == Visibility.HIDDEN:
            return Visibility.SHOWING_QUESTION
        return Visibility.SHOWING_ANSWER


class BoardStatus(Enum):
    """Board-level lifecycle state."""
    LOADING = "loading"
    READY = "ready"


@dataclass
class Clue:
    """A single question/answer pair on the board."""
    question: str
    answer: str
    visibility: Visibility = Visibility.HIDDEN

    def text(self) -> str:
        """Text a cell should display for the current visibility."""
        if self.visibility == Visibility.SHOWING_QUESTION:
            return self.question
        if self.visibility == Visibility.SHOWING_ANSWER:
            return self.answer
        return HIDDEN_TEXT

    def fresh(self) -> "Clue":
        """Return an unrevealed copy of this clue."""
        return Clue(question=self.question, answer=self.answer)


@dataclass
class Category:
    """A titled column of clues."""
    title: str
    clues: list[Clue] = field(default_factory=list)

    def fresh(self) -> "Category":
        """Return a copy with every clue hidden and no shared clue objects."""
        return Category(title=self.title, clues=[c.fresh() for c in self.clues])


@dataclass(frozen=True)
class CategorySummary:
    """An entry of the remote category pool."""
    id: CategoryId
    title: str = ""
