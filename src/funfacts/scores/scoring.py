"""Score arithmetic, ranking and legacy-record normalization.

The composite score is ``correct + percentage * total / 100`` where
``percentage`` is already rounded to a whole number. That makes it close to,
but not always exactly, ``2 * correct``: 2 of 3 gives 67% and a composite of
4.01. Stored histories depend on these exact values, so the rounding order
must not change.
"""

import logging
import math
import uuid
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from funfacts.data import GameScore

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=UTC)


def _check_counts(correct: int, total: int) -> None:
    if total < 0 or correct < 0:
        raise ValueError(f"Counts must be non-negative, got correct={correct} total={total}")
    if correct > total:
        raise ValueError(f"correct ({correct}) exceeds total ({total})")


def compute_percentage(correct: int, total: int) -> int:
    """Percentage of correct answers, rounded half-up.

    Half-up (12.5 -> 13) rather than Python's banker's rounding, so scores
    match records written by earlier clients.

    A zero total always gives 0.

    Raises:
        ValueError: On negative counts or ``correct > total``.
    """
    if total == 0:
        return 0
    _check_counts(correct, total)
    return math.floor(correct / total * 100 + 0.5)


def compute_composite_score(correct: int, total: int) -> float:
    """Score that rewards both accuracy and number of questions answered.

    Raises:
        ValueError: On negative counts or ``correct > total``.
    """
    if total == 0:
        return 0.0
    percentage = compute_percentage(correct, total)
    return correct + (percentage * total / 100)


def format_display_date(moment: datetime) -> str:
    """Render a timestamp like ``Oct 18, 2026, 02:30 PM`` in local time."""
    local = moment.astimezone()
    return f"{local:%b} {local.day}, {local:%Y, %I:%M %p}"


def create_score(correct: int, total: int, *, now: datetime | None = None) -> GameScore:
    """Build a new score record with a fresh id and timestamp.

    Args:
        correct: Number of correct answers.
        total: Number of questions answered.
        now: Creation time (default: current UTC time).

    Raises:
        ValueError: On negative counts or ``correct > total``.
    """
    moment = now or datetime.now(tz=UTC)
    return GameScore(
        id=f"score-{uuid.uuid4().hex}",
        correct=correct,
        total=total,
        percentage=compute_percentage(correct, total),
        composite_score=compute_composite_score(correct, total),
        timestamp=moment.isoformat(),
        date=format_display_date(moment),
    )


def composite_of(score: GameScore) -> float:
    """Composite score of a record, computing it if the record predates it."""
    if score.composite_score is not None:
        return score.composite_score
    return compute_composite_score(score.correct, score.total)


def _parse_timestamp(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def sort_scores(scores: Iterable[GameScore]) -> list[GameScore]:
    """Order scores best first; equal composites put the most recent first."""
    return sorted(
        scores,
        key=lambda s: (composite_of(s), _parse_timestamp(s.timestamp)),
        reverse=True,
    )


def find_highest_score(scores: Iterable[GameScore]) -> GameScore | None:
    """Return the score with the largest composite; the first one wins ties."""
    highest: GameScore | None = None
    for score in scores:
        if highest is None or composite_of(score) > composite_of(highest):
            highest = score
    return highest


def is_new_high_score(candidate: GameScore | None, previous_best: GameScore | None) -> bool:
    """Whether ``candidate`` beats the best recorded score.

    A game with no correct answers never counts, even as the first entry.
    """
    if candidate is None or candidate.correct <= 0:
        return False
    return previous_best is None or composite_of(candidate) > composite_of(previous_best)


def normalize_scores(records: Iterable[Any]) -> list[GameScore]:
    """Validate stored score records and back-fill missing composite scores.

    Records that fail validation are logged and dropped.
    """
    scores: list[GameScore] = []
    for record in records:
        try:
            score = GameScore.model_validate(record)
        except ValidationError as e:
            logger.warning(f"Dropping unreadable score record: {e}")
            continue
        if score.composite_score is None:
            score = score.model_copy(
                update={"composite_score": compute_composite_score(score.correct, score.total)}
            )
        scores.append(score)
    return scores
