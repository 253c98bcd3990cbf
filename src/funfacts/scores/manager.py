"""Persistent score tracking on top of a key-value store."""

import json
import logging

from pydantic import ValidationError

from funfacts.data import FinalizeResult, GameScore, LiveScore, ScoreStats
from funfacts.errors import StorageError
from funfacts.scores.scoring import (
    compute_composite_score,
    compute_percentage,
    create_score,
    find_highest_score,
    is_new_high_score,
    normalize_scores,
    sort_scores,
)
from funfacts.storage.base import KeyValueStore

CURRENT_SCORE_KEY = "current_score"
SCORE_HISTORY_KEY = "score_history"

# Failures that mean "the store is unusable right now", as opposed to bugs.
_STORE_ERRORS = (StorageError, OSError, ValueError, ValidationError)

logger = logging.getLogger(__name__)


class ScoreManager:
    """Compute, persist and rank game scores.

    Two keys are used: one slot for the game in progress, overwritten after
    every answer, and the finalized history, stored unsorted and ranked on
    read. Storage failures are logged and turned into empty results so a
    broken store means "no score memory" rather than a crashed session.

    Args:
        store: Backing key-value store.
        key_prefix: Prefix applied to both keys.
    """

    def __init__(self, store: KeyValueStore, *, key_prefix: str = "") -> None:
        self._store = store
        self._current_key = f"{key_prefix}{CURRENT_SCORE_KEY}"
        self._history_key = f"{key_prefix}{SCORE_HISTORY_KEY}"

    @property
    def store(self) -> KeyValueStore:
        return self._store

    # -- arithmetic --

    def compute_percentage(self, correct: int, total: int) -> int:
        return compute_percentage(correct, total)

    def compute_composite_score(self, correct: int, total: int) -> float:
        return compute_composite_score(correct, total)

    def create_score(self, correct: int, total: int) -> GameScore:
        return create_score(correct, total)

    def find_highest_score(self, scores: list[GameScore]) -> GameScore | None:
        return find_highest_score(scores)

    # -- current game --

    async def save_current_score(self, correct: int, total: int) -> None:
        """Overwrite the in-progress slot with a fresh record.

        Raises:
            ValueError: On negative counts or ``correct > total``.
        """
        score = create_score(correct, total)
        try:
            await self._store.set(self._current_key, score.model_dump_json())
        except _STORE_ERRORS:
            logger.exception("Error saving current score")

    async def get_current_score(self) -> GameScore | None:
        """Read the in-progress slot; None if empty or unreadable."""
        try:
            raw = await self._store.get(self._current_key)
            if raw is None:
                return None
            scores = normalize_scores([json.loads(raw)])
        except _STORE_ERRORS:
            logger.exception("Error getting current score")
            return None
        return scores[0] if scores else None

    async def reset_current_score(self) -> None:
        """Forget the game in progress; called when a new game starts."""
        try:
            await self._store.delete(self._current_key)
        except _STORE_ERRORS:
            logger.exception("Error resetting current score")

    async def finalize_score(self) -> FinalizeResult:
        """Move the in-progress score into history.

        An empty game (no answers) leaves history untouched. A game with no
        correct answers is recorded but never reported as a new high score.
        """
        current = await self.get_current_score()
        if current is None or current.total == 0:
            return FinalizeResult(
                is_new_high_score=False,
                final_score=current or create_score(0, 0),
            )

        try:
            history = await self._load_history()
            new_high = is_new_high_score(current, find_highest_score(history))
            await self._save_history([*history, current])
            await self._store.delete(self._current_key)
        except _STORE_ERRORS:
            logger.exception("Error finalizing score")
            return FinalizeResult(is_new_high_score=False, final_score=create_score(0, 0))

        logger.info(
            "Finalized score %d/%d (composite %.2f)%s",
            current.correct,
            current.total,
            current.composite_score,
            ", new high score" if new_high else "",
        )
        return FinalizeResult(is_new_high_score=new_high, final_score=current)

    # -- history --

    async def get_all_scores(self) -> list[GameScore]:
        """Return history best first (ties: most recent first)."""
        try:
            history = await self._load_history()
        except _STORE_ERRORS:
            logger.exception("Error getting all scores")
            return []
        return sort_scores(history)

    async def get_score_stats(self, live: LiveScore | None = None) -> ScoreStats:
        """Everything a scoreboard needs.

        Args:
            live: Tally of the game on screen. When it has answers it replaces
                the stored in-progress score, and if it would be a new high
                score it is ranked into ``all_scores`` (without being saved).
        """
        current = await self.get_current_score()
        if live is not None and live.total > 0:
            current = create_score(live.correct, live.total)

        all_scores = await self.get_all_scores()
        highest = find_highest_score(all_scores)
        new_high = is_new_high_score(current, highest)

        if new_high and current is not None:
            highest = current
            all_scores = sort_scores([current, *all_scores])

        return ScoreStats(
            current_score=current,
            highest_score=highest,
            all_scores=all_scores,
            is_new_high_score=new_high,
        )

    async def delete_score(self, score_id: str) -> None:
        """Remove one score from history; unknown ids are ignored."""
        try:
            history = await self._load_history()
            remaining = [s for s in history if s.id != score_id]
            if len(remaining) == len(history):
                logger.debug("No score with id %s", score_id)
                return
            await self._save_history(remaining)
        except _STORE_ERRORS:
            logger.exception("Error deleting score")

    async def clear_all_scores(self) -> None:
        """Wipe history and the in-progress slot."""
        try:
            await self._store.delete(self._history_key)
            await self._store.delete(self._current_key)
        except _STORE_ERRORS:
            logger.exception("Error clearing all scores")

    async def _load_history(self) -> list[GameScore]:
        raw = await self._store.get(self._history_key)
        if raw is None:
            return []
        records = json.loads(raw)
        if not isinstance(records, list):
            raise StorageError("Score history is not a list")
        return normalize_scores(records)

    async def _save_history(self, scores: list[GameScore]) -> None:
        payload = json.dumps([s.model_dump() for s in scores])
        await self._store.set(self._history_key, payload)
