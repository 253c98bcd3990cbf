"""Tests for GameSession."""

import json

import pytest

from funfacts.data import GameFact
from funfacts.scores import CURRENT_SCORE_KEY, SCORE_HISTORY_KEY, ScoreManager
from funfacts.session import GameSession
from funfacts.storage import MemoryStore


class ScriptedSource:
    """Fact source that serves alternating true/false facts."""

    def __init__(self) -> None:
        self.served = 0

    async def next_fact(self) -> GameFact:
        self.served += 1
        return GameFact(text=f"Fact {self.served}", truth_value=self.served % 2 == 1)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def session(store: MemoryStore) -> GameSession:
    return GameSession(ScriptedSource(), ScoreManager(store))


async def test_start_resets_stale_score(store: MemoryStore, session: GameSession) -> None:
    await ScoreManager(store).save_current_score(5, 9)

    fact = await session.start()

    assert fact.text == "Fact 1"
    assert CURRENT_SCORE_KEY not in store
    assert (session.correct, session.total) == (0, 0)


async def test_answer_updates_and_persists_tally(
    store: MemoryStore, session: GameSession
) -> None:
    await session.start()

    assert await session.answer(True) is True
    await session.next()
    assert await session.answer(True) is False

    assert (session.correct, session.total) == (1, 2)
    current = await ScoreManager(store).get_current_score()
    assert current is not None
    assert (current.correct, current.total) == (1, 2)


async def test_answer_before_start_raises(session: GameSession) -> None:
    with pytest.raises(RuntimeError, match="not started"):
        await session.answer(True)


async def test_answer_twice_raises(session: GameSession) -> None:
    await session.start()
    await session.answer(True)
    with pytest.raises(ValueError):
        await session.answer(True)
    assert session.total == 1


async def test_history_browsing(session: GameSession) -> None:
    first = await session.start()
    await session.answer(True)
    second = await session.next()

    assert session.has_previous is True
    assert session.has_next is False

    assert session.previous() is first
    assert session.is_viewing_history is True
    assert session.previous() is None
    assert session.current is first

    # Forward through history does not fetch new facts
    assert await session.next() is second
    assert len(session.history) == 2

    third = await session.next()
    assert third.text == "Fact 3"
    assert len(session.history) == 3


async def test_cannot_answer_from_history(session: GameSession) -> None:
    await session.start()
    await session.answer(True)
    await session.next()
    session.previous()

    with pytest.raises(RuntimeError, match="history"):
        await session.answer(False)


async def test_full_game_finalizes(store: MemoryStore, session: GameSession) -> None:
    await session.start()
    await session.answer(True)  # Fact 1 is true
    await session.next()
    await session.answer(False)  # Fact 2 is false
    await session.next()
    await session.answer(False)  # Fact 3 is true

    stats = await session.stats()
    assert stats.current_score is not None
    assert (stats.current_score.correct, stats.current_score.total) == (2, 3)
    assert stats.is_new_high_score is True

    result = await session.end()

    assert result.is_new_high_score is True
    assert result.final_score.percentage == 67
    assert result.final_score.composite_score == pytest.approx(4.01)
    history = json.loads(await store.get(SCORE_HISTORY_KEY) or "[]")
    assert len(history) == 1


async def test_end_without_answers(store: MemoryStore, session: GameSession) -> None:
    await session.start()
    result = await session.end()
    assert result.is_new_high_score is False
    assert await store.get(SCORE_HISTORY_KEY) is None


async def test_ended_game_is_closed_until_restart(
    store: MemoryStore, session: GameSession
) -> None:
    await session.start()
    await session.answer(True)  # Fact 1 is true
    await session.next()
    await session.answer(False)  # Fact 2 is false
    await session.end()

    assert session.is_finished is True
    assert (session.correct, session.total) == (0, 0)
    stats = await session.stats()
    assert stats.current_score is None

    with pytest.raises(RuntimeError, match="over"):
        await session.next()
    with pytest.raises(RuntimeError, match="over"):
        await session.answer(True)
    with pytest.raises(RuntimeError, match="over"):
        await session.end()

    history = json.loads(await store.get(SCORE_HISTORY_KEY) or "[]")
    assert [(h["correct"], h["total"]) for h in history] == [(2, 2)]

    await session.start()
    assert session.is_finished is False
    await session.answer(True)  # Fact 3 is true
    await session.end()

    history = json.loads(await store.get(SCORE_HISTORY_KEY) or "[]")
    assert sorted((h["correct"], h["total"]) for h in history) == [(1, 1), (2, 2)]
