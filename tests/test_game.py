"""Tests for the game session setup sequence."""

import asyncio
import random
from unittest.mock import MagicMock

import pytest

from jeopardy import (
    BoardNotLoaded,
    BoardStatus,
    GameConfig,
    GameSession,
    MalformedCategory,
    SourceUnavailable,
    Visibility,
)


def _session(source, seed=0, **config):
    session = GameSession(source, config=GameConfig(**config), rng=random.Random(seed))
    session.board.load = MagicMock(wraps=session.board.load)
    return session


class TestStart:
    def test_start_loads_board(self, fake_source_cls):
        source = fake_source_cls()
        session = _session(source)

        assert asyncio.run(session.start()) is True

        board = session.board
        assert board.status == BoardStatus.READY
        board.load.assert_called_once()
        assert source.category_calls == 6
        assert len(set(board.titles)) == 6
        for title in board.titles:
            assert 100 <= int(title.split()[-1]) < 120
        for i in range(6):
            for j in range(5):
                assert board.get_visibility(i, j) == Visibility.HIDDEN

    def test_same_seed_same_board(self, fake_source_cls):
        first = _session(fake_source_cls(), seed=3)
        second = _session(fake_source_cls(), seed=3)
        asyncio.run(first.start())
        asyncio.run(second.start())
        assert first.board.titles == second.board.titles

    def test_uses_configured_pool_size(self, fake_source_cls):
        source = fake_source_cls(pool_size=50)
        session = _session(source, pool_size=8)
        asyncio.run(session.start())
        for title in session.board.titles:
            assert 100 <= int(title.split()[-1]) < 108

    def test_restart_replaces_board(self, fake_source_cls):
        session = _session(fake_source_cls())
        asyncio.run(session.start())
        session.reveal(0, 0)
        session.reveal(1, 1)

        asyncio.run(session.start())
        assert session.board.revealed_count == 0
        assert session.board.load.call_count == 2

    def test_fetch_failure_abandons_setup(self, fake_source_cls):
        source = fake_source_cls(fail_on_call=3)
        session = _session(source)

        with pytest.raises(SourceUnavailable):
            asyncio.run(session.start())

        session.board.load.assert_not_called()
        assert session.board.status == BoardStatus.LOADING
        with pytest.raises(BoardNotLoaded):
            session.reveal(0, 0)

    def test_failure_after_a_game_clears_board(self, fake_source_cls):
        source = fake_source_cls()
        session = _session(source)
        asyncio.run(session.start())

        source.fail_on_call = source.category_calls + 2
        with pytest.raises(SourceUnavailable):
            asyncio.run(session.start())
        assert session.board.status == BoardStatus.LOADING
        assert session.board.load.call_count == 1

    def test_malformed_category_propagates(self, fake_source_cls):
        source = fake_source_cls(fail_on_call=1, error=MalformedCategory(101, "missing title"))
        session = _session(source)
        with pytest.raises(MalformedCategory):
            asyncio.run(session.start())
        session.board.load.assert_not_called()

    def test_pool_too_small(self, fake_source_cls):
        source = fake_source_cls(pool_size=4)
        session = _session(source)
        with pytest.raises(SourceUnavailable, match="only 4"):
            asyncio.run(session.start())
        assert source.category_calls == 0
        session.board.load.assert_not_called()

    def test_stale_setup_never_loads(self, fake_source_cls):
        source = fake_source_cls()
        source.gate = asyncio.Event()
        session = _session(source)

        async def scenario():
            first = asyncio.create_task(session.start())
            await asyncio.sleep(0)
            second = asyncio.create_task(session.start())
            await asyncio.sleep(0)
            assert session.is_loading
            assert session.control_label == "Loading..."
            source.gate.set()
            return await first, await second

        first_loaded, second_loaded = asyncio.run(scenario())

        assert first_loaded is False
        assert second_loaded is True
        assert session.generation == 2
        session.board.load.assert_called_once()
        assert session.board.status == BoardStatus.READY

    def test_stale_setup_failure_is_not_raised(self, fake_source_cls):
        source = fake_source_cls(fail_on_call=1)
        source.gate = asyncio.Event()
        session = _session(source)

        async def scenario():
            first = asyncio.create_task(session.start())
            await asyncio.sleep(0)
            second = asyncio.create_task(session.start())
            await asyncio.sleep(0)
            source.gate.set()
            return await first, await second

        first_loaded, second_loaded = asyncio.run(scenario())

        assert first_loaded is False
        assert second_loaded is True
        session.board.load.assert_called_once()
        assert session.board.status == BoardStatus.READY
        assert not session.is_loading

    def test_stale_setup_with_small_pool_is_not_raised(self, fake_source_cls):
        source = fake_source_cls(pool_size=4)
        source.gate = asyncio.Event()
        session = _session(source)

        async def scenario():
            first = asyncio.create_task(session.start())
            await asyncio.sleep(0)
            second = asyncio.create_task(session.start())
            await asyncio.sleep(0)
            source.gate.set()
            first_loaded = await first
            with pytest.raises(SourceUnavailable, match="only 4"):
                await second
            return first_loaded

        assert asyncio.run(scenario()) is False
        session.board.load.assert_not_called()
        assert session.board.status == BoardStatus.LOADING


class TestControlLabel:
    def test_labels(self, fake_source_cls):
        session = _session(fake_source_cls())
        assert session.control_label == "Start"
        asyncio.run(session.start())
        assert session.control_label == "Restart"
        assert not session.is_loading

    def test_label_after_failure_allows_retry(self, fake_source_cls):
        session = _session(fake_source_cls(fail_on_call=1))
        with pytest.raises(SourceUnavailable):
            asyncio.run(session.start())
        assert session.control_label == "Restart"
        assert not session.is_loading
        assert session.board.status == BoardStatus.LOADING


class TestReveal:
    def test_reveal_returns_text(self, fake_source_cls):
        session = _session(fake_source_cls())
        asyncio.run(session.start())
        question = session.board.get_display_text(0, 0)
        assert question == "?"

        first = session.reveal(0, 0)
        assert first.visibility == Visibility.SHOWING_QUESTION
        assert first.text.startswith("Q")

        second = session.reveal(0, 0)
        assert second.visibility == Visibility.SHOWING_ANSWER
        assert second.text == "A" + first.text[1:]

        third = session.reveal(0, 0)
        assert third.visibility == Visibility.SHOWING_ANSWER
        assert third.text == second.text
