"""A single play-through: facts, guesses, browsing and scoring."""

import logging

from funfacts.data import FinalizeResult, GameFact, LiveScore, ScoreStats
from funfacts.scores.manager import ScoreManager
from funfacts.source.base import FactSource

logger = logging.getLogger(__name__)


class GameSession:
    """Drive one game from start to finalized score.

    Facts seen in this session are kept in order so the player can step
    back through earlier rounds; stepping forward past the newest fact loads
    a new one. Only the newest, unanswered fact can be answered. Once
    ``end()`` has run, the session is over until ``start()`` is called again.

    Args:
        fact_source: Where rounds come from.
        score_manager: Where the tally is persisted.
    """

    def __init__(self, fact_source: FactSource, score_manager: ScoreManager) -> None:
        self._facts = fact_source
        self._scores = score_manager
        self._history: list[GameFact] = []
        self._index = -1
        self._correct = 0
        self._total = 0
        self._finished = False

    @property
    def current(self) -> GameFact | None:
        return self._history[self._index] if self._index >= 0 else None

    @property
    def history(self) -> list[GameFact]:
        return list(self._history)

    @property
    def correct(self) -> int:
        return self._correct

    @property
    def total(self) -> int:
        return self._total

    @property
    def live_score(self) -> LiveScore:
        return LiveScore(correct=self._correct, total=self._total)

    @property
    def has_previous(self) -> bool:
        return self._index > 0

    @property
    def has_next(self) -> bool:
        return self._index < len(self._history) - 1

    @property
    def is_viewing_history(self) -> bool:
        return self.has_next

    @property
    def is_finished(self) -> bool:
        return self._finished

    async def start(self) -> GameFact:
        """Begin a fresh game and return its first fact."""
        await self._scores.reset_current_score()
        self._history.clear()
        self._index = -1
        self._correct = 0
        self._total = 0
        self._finished = False
        return await self._load_new_fact()

    async def answer(self, guess: bool) -> bool:
        """Answer the current fact and persist the running tally.

        Raises:
            RuntimeError: If there is no current fact, it is a past round,
                or the game has ended.
            ValueError: If the current fact was already answered.
        """
        self._ensure_active()
        fact = self.current
        if fact is None:
            raise RuntimeError("Game has not started")
        if self.is_viewing_history:
            raise RuntimeError("Cannot answer a fact from history")

        correct = fact.answer(guess)
        self._total += 1
        if correct:
            self._correct += 1
        await self._scores.save_current_score(self._correct, self._total)
        return correct

    async def next(self) -> GameFact:
        """Step forward in history, or load a new fact at the end of it."""
        self._ensure_active()
        if self.has_next:
            self._index += 1
            return self._history[self._index]
        return await self._load_new_fact()

    def previous(self) -> GameFact | None:
        """Step back one fact; stays put (returning None) at the start."""
        if not self.has_previous:
            return None
        self._index -= 1
        return self._history[self._index]

    async def stats(self) -> ScoreStats:
        live = None if self._finished else self.live_score
        return await self._scores.get_score_stats(live)

    async def end(self) -> FinalizeResult:
        """Finalize the game into score history.

        Raises:
            RuntimeError: If the game has already ended.
        """
        self._ensure_active()
        result = await self._scores.finalize_score()
        logger.info(
            "Game over: %d/%d correct, new high score: %s",
            self._correct,
            self._total,
            result.is_new_high_score,
        )
        self._finished = True
        self._correct = 0
        self._total = 0
        return result

    def _ensure_active(self) -> None:
        if self._finished:
            raise RuntimeError("Game is over, call start() for a new one")

    async def _load_new_fact(self) -> GameFact:
        fact = await self._facts.next_fact()
        self._history.append(fact)
        self._index = len(self._history) - 1
        return fact
