"""Shared fixtures: synthetic categories and an in-memory category source."""

import asyncio

import pytest

from jeopardy import Category, Clue, SourceUnavailable


def build_category(index: int, num_clues: int = 5) -> Category:
    return Category(
        title=f"Category {index}",
        clues=[
            Clue(question=f"Q{index}.{j}", answer=f"A{index}.{j}")
            for j in range(num_clues)
        ],
    )


class FakeSource:
    """CategorySource serving synthetic categories, with optional failures."""

    def __init__(self, pool_size: int = 20, fail_on_call: int | None = None, error=None):
        self.pool = list(range(100, 100 + pool_size))
        self.fail_on_call = fail_on_call
        self.error = error or SourceUnavailable("service down")
        self.category_calls = 0
        self.gate: asyncio.Event | None = None

    async def fetch_candidate_category_ids(self, pool_size: int) -> list[int]:
        if self.gate is not None:
            await self.gate.wait()
        return self.pool[:pool_size]

    async def fetch_category(self, category_id: int) -> Category:
        self.category_calls += 1
        if self.category_calls == self.fail_on_call:
            raise self.error
        await asyncio.sleep(0)
        return build_category(category_id)


@pytest.fixture
def categories():
    return [build_category(i) for i in range(6)]


@pytest.fixture
def make_category():
    return build_category


@pytest.fixture
def fake_source_cls():
    return FakeSource
