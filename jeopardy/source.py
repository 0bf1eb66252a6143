"""Category data access: the remote question service and category selection."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Dict, Iterable, List, Optional, Protocol, Set

import requests

from .config import GameConfig
from .exceptions import MalformedCategory, SourceUnavailable
from .state import Category, CategoryId, CategorySummary, Clue, NUM_QUESTIONS_PER_CAT

logger = logging.getLogger(__name__)


class CategorySource(Protocol):
    """Anything that can list category ids and fetch a category by id."""

    async def fetch_candidate_category_ids(self, pool_size: int) -> List[CategoryId]:
        ...

    async def fetch_category(self, category_id: CategoryId) -> Category:
        ...


def select_distinct(
    pool: Iterable[CategoryId],
    count: int,
    rng: Optional[random.Random] = None,
) -> Set[CategoryId]:
    """
    Uniformly sample `count` distinct ids from `pool`.

    A pool with fewer distinct ids than requested yields all of them
    instead of failing.
    """
    if count < 1:
        raise ValueError("count must be positive")
    rng = rng or random.Random()
    distinct = list(dict.fromkeys(pool))
    k = min(count, len(distinct))
    if k < count:
        logger.warning("Category pool has only %d distinct ids, wanted %d", len(distinct), count)
    return set(rng.sample(distinct, k))


def parse_category_pool(data: Any, pool_size: int) -> List[CategorySummary]:
    """Turn a /categories payload into summaries, at most `pool_size` of them."""
    if not isinstance(data, list):
        raise SourceUnavailable(f"Expected a list of categories, got {type(data).__name__}")

    out: List[CategorySummary] = []
    for item in data[:pool_size]:
        if not isinstance(item, dict) or item.get("id") is None:
            raise SourceUnavailable(f"Category entry without an id: {item!r}")
        out.append(CategorySummary(id=item["id"], title=str(item.get("title") or "")))
    return out


def parse_category(
    category_id: CategoryId,
    data: Any,
    clues_per_category: int = NUM_QUESTIONS_PER_CAT,
    rng: Optional[random.Random] = None,
) -> Category:
    """
    Turn a /category payload into a Category of exactly `clues_per_category`
    hidden clues. Extra clues are dropped at random; `value` is ignored.
    """
    if not isinstance(data, dict):
        raise MalformedCategory(category_id, "payload is not an object")

    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise MalformedCategory(category_id, "missing title")

    raw_clues = data.get("clues")
    if not isinstance(raw_clues, list) or len(raw_clues) < clues_per_category:
        got = len(raw_clues) if isinstance(raw_clues, list) else 0
        raise MalformedCategory(
            category_id, f"needs {clues_per_category} clues, got {got}"
        )

    clues: List[Clue] = []
    for i, raw in enumerate(raw_clues):
        if not isinstance(raw, dict):
            raise MalformedCategory(category_id, f"clue {i} is not an object")
        question = _clue_text(raw.get("question"))
        answer = _clue_text(raw.get("answer"))
        if not question:
            raise MalformedCategory(category_id, f"clue {i} has no question")
        if not answer:
            raise MalformedCategory(category_id, f"clue {i} has no answer")
        clues.append(Clue(question=question, answer=answer))

    if len(clues) > clues_per_category:
        rng = rng or random.Random()
        picked = sorted(rng.sample(range(len(clues)), clues_per_category))
        clues = [clues[i] for i in picked]

    return Category(title=title.strip(), clues=clues)


def _clue_text(value: Any) -> str:
    # Answers are sometimes plain numbers.
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return ""


class JServiceSource:
    """
    CategorySource backed by a jService-style HTTP API.

    Endpoints:
        GET <base>/categories?count=N  -> [{id, title}, ...]
        GET <base>/category?id=ID      -> {title, clues: [{question, answer, value}, ...]}

    Requests are blocking and run in a worker thread so several categories
    can be fetched at once.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        clues_per_category: int = NUM_QUESTIONS_PER_CAT,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.base_url = self.config.base_url.rstrip("/")
        self.timeout_s = self.config.timeout_s
        self.clues_per_category = clues_per_category
        self.rng = rng or random.Random(self.config.seed)

    def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s %s", url, params)
        try:
            resp = requests.get(url, params=params, timeout=self.timeout_s)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise SourceUnavailable(f"GET {url} failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise SourceUnavailable(f"GET {url} returned invalid JSON") from e

    def list_categories(self, pool_size: int) -> List[CategorySummary]:
        """Blocking fetch of up to `pool_size` category summaries."""
        if pool_size < 1:
            raise ValueError("pool_size must be positive")
        data = self._get_json("categories", {"count": pool_size})
        return parse_category_pool(data, pool_size)

    def get_category(self, category_id: CategoryId) -> Category:
        """Blocking fetch of a single category."""
        data = self._get_json("category", {"id": category_id})
        return parse_category(category_id, data, self.clues_per_category, self.rng)

    async def fetch_candidate_category_ids(self, pool_size: int) -> List[CategoryId]:
        summaries = await asyncio.to_thread(self.list_categories, pool_size)
        return [s.id for s in summaries]

    async def fetch_category(self, category_id: CategoryId) -> Category:
        return await asyncio.to_thread(self.get_category, category_id)
