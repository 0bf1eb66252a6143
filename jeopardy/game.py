"""Game session: fetches a fresh board and routes clicks to it."""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Optional

from .board import BoardState
from .config import GameConfig
from .exceptions import SourceError, SourceUnavailable
from .source import CategorySource, select_distinct
from .state import Visibility

logger = logging.getLogger(__name__)


@dataclass
class RevealResult:
    """What a clicked cell should show now."""
    category_index: int
    clue_index: int
    visibility: Visibility
    text: str


class GameSession:
    """
    Drives a BoardState from a CategorySource.

    start() runs the setup sequence:
    1. reset the board (LOADING)
    2. fetch candidate category ids
    3. pick NUM_CATEGORIES of them at random
    4. fetch every picked category concurrently
    5. load the board once, with all categories resolved

    Every start() takes a new generation number. A setup whose generation
    is no longer current when its fetches finish never touches the board
    and never raises, so restarting while loading cannot resurrect the
    older game or report its failure.
    """

    def __init__(
        self,
        source: CategorySource,
        board: Optional[BoardState] = None,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.source = source
        self.board = board or BoardState()
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self._generation = 0
        self._in_flight = 0
        self._started = False

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_loading(self) -> bool:
        """
        Whether a setup is in flight.

        A board left LOADING by a failed setup does not count; check
        board.status for that.
        """
        return self._in_flight > 0

    @property
    def control_label(self) -> str:
        """Label of the start/restart control."""
        if self.is_loading:
            return "Loading..."
        if not self._started:
            return "Start"
        return "Restart"

    async def start(self) -> bool:
        """
        (Re)start the game with a fresh board.

        Returns:
            True if this call loaded the board, False if a newer start()
            superseded it first (even if this call's fetches failed)

        Raises:
            SourceUnavailable: the service failed or had too few categories
            MalformedCategory: a fetched category broke its contract
        """
        self._generation += 1
        generation = self._generation
        self._started = True
        self._in_flight += 1
        self.board.reset()
        logger.info("Setting up board (generation %d)", generation)

        try:
            pool = await self.source.fetch_candidate_category_ids(self.config.pool_size)
            wanted = self.board.num_categories
            ids = select_distinct(pool, wanted, self.rng)
            if len(ids) < wanted:
                raise SourceUnavailable(
                    f"Need {wanted} categories, the service offered only {len(ids)}"
                )

            categories = await asyncio.gather(
                *(self.source.fetch_category(category_id) for category_id in sorted(ids))
            )
        except SourceError as e:
            if generation != self._generation:
                logger.warning(
                    "Ignoring failure of superseded generation %d: %s", generation, e
                )
                return False
            raise
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            logger.warning(
                "Discarding board of generation %d, generation %d is current",
                generation,
                self._generation,
            )
            return False

        # Shuffle so column order doesn't follow id order.
        categories = list(categories)
        self.rng.shuffle(categories)
        self.board.load(categories)
        logger.info("Board ready: %s", ", ".join(self.board.titles))
        return True

    def reveal(self, category_index: int, clue_index: int) -> RevealResult:
        """Click a cell and return what it should show now."""
        visibility = self.board.reveal(category_index, clue_index)
        return RevealResult(
            category_index=category_index,
            clue_index=clue_index,
            visibility=visibility,
            text=self.board.get_display_text(category_index, clue_index),
        )
