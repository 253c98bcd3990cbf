"""Tests for score arithmetic and ranking helpers."""

from datetime import UTC, datetime

import pytest

from funfacts.data import GameScore
from funfacts.scores.scoring import (
    compute_composite_score,
    compute_percentage,
    create_score,
    find_highest_score,
    format_display_date,
    is_new_high_score,
    normalize_scores,
    sort_scores,
)


def _score(
    score_id: str,
    correct: int,
    total: int,
    timestamp: str = "2026-01-01T00:00:00+00:00",
) -> GameScore:
    return GameScore(
        id=score_id,
        correct=correct,
        total=total,
        percentage=compute_percentage(correct, total),
        composite_score=compute_composite_score(correct, total),
        timestamp=timestamp,
    )


# -- percentage --


@pytest.mark.parametrize("correct", [0, 1, 5])
def test_percentage_zero_total(correct: int) -> None:
    assert compute_percentage(correct, 0) == 0


def test_percentage_rounds() -> None:
    assert compute_percentage(2, 3) == 67
    assert compute_percentage(1, 3) == 33
    assert compute_percentage(10, 10) == 100
    assert compute_percentage(0, 7) == 0


def test_percentage_rounds_half_up() -> None:
    # 1/8 = 12.5% and 5/8 = 62.5%; banker's rounding would give 12 and 62
    assert compute_percentage(1, 8) == 13
    assert compute_percentage(5, 8) == 63
    assert compute_percentage(1, 40) == 3


def test_percentage_rejects_invalid_counts() -> None:
    with pytest.raises(ValueError):
        compute_percentage(4, 3)
    with pytest.raises(ValueError):
        compute_percentage(-1, 3)
    with pytest.raises(ValueError):
        compute_percentage(0, -1)


# -- composite --


@pytest.mark.parametrize("correct", [0, 1, 5])
def test_composite_zero_total(correct: int) -> None:
    assert compute_composite_score(correct, 0) == 0


def test_composite_matches_formula() -> None:
    for total in range(1, 25):
        for correct in range(total + 1):
            expected = correct + compute_percentage(correct, total) * total / 100
            assert compute_composite_score(correct, total) == expected


def test_composite_keeps_rounded_percentage() -> None:
    # 2 + 67 * 3 / 100, not 2 * 2
    assert compute_composite_score(2, 3) == pytest.approx(4.01)
    assert compute_composite_score(2, 3) != 4


def test_composite_exact_percentages_double_correct() -> None:
    assert compute_composite_score(8, 10) == 16
    assert compute_composite_score(5, 5) == 10
    assert compute_composite_score(4, 4) == 8
    assert compute_composite_score(3, 10) == 6


def test_composite_non_decreasing_in_correct() -> None:
    for total in range(1, 40):
        values = [compute_composite_score(c, total) for c in range(total + 1)]
        assert values == sorted(values)


# -- create_score --


def test_create_score_fields() -> None:
    now = datetime(2026, 10, 18, 14, 30, tzinfo=UTC)
    score = create_score(2, 3, now=now)
    assert score.id.startswith("score-")
    assert score.correct == 2
    assert score.total == 3
    assert score.percentage == 67
    assert score.composite_score == pytest.approx(4.01)
    assert score.timestamp == now.isoformat()
    assert score.date == format_display_date(now)


def test_create_score_unique_ids() -> None:
    assert create_score(1, 1).id != create_score(1, 1).id


def test_create_score_empty_game() -> None:
    score = create_score(0, 0)
    assert score.percentage == 0
    assert score.composite_score == 0


def test_format_display_date_shape() -> None:
    text = format_display_date(datetime(2026, 3, 5, 9, 7, tzinfo=UTC))
    assert text.startswith("Mar ")
    assert ", 2026, " in text
    assert text.endswith(("AM", "PM"))


# -- ranking --


def test_sort_by_composite_regardless_of_insertion_order() -> None:
    high = _score("a", 8, 10)
    low = _score("b", 5, 5)
    assert [s.id for s in sort_scores([low, high])] == ["a", "b"]
    assert [s.id for s in sort_scores([high, low])] == ["a", "b"]


def test_sort_ties_most_recent_first() -> None:
    older = _score("old", 4, 4, timestamp="2026-01-01T10:00:00+00:00")
    newer = _score("new", 4, 4, timestamp="2026-02-01T10:00:00+00:00")
    assert [s.id for s in sort_scores([older, newer])] == ["new", "old"]


def test_sort_handles_zulu_timestamps() -> None:
    older = _score("old", 1, 1, timestamp="2025-06-01T10:00:00.000Z")
    newer = _score("new", 1, 1, timestamp="2026-06-01T10:00:00+00:00")
    assert [s.id for s in sort_scores([older, newer])] == ["new", "old"]


def test_find_highest_score_empty() -> None:
    assert find_highest_score([]) is None


def test_find_highest_score() -> None:
    scores = [_score("a", 3, 10), _score("b", 4, 4), _score("c", 1, 2)]
    highest = find_highest_score(scores)
    assert highest is not None
    assert highest.id == "b"


def test_is_new_high_score_requires_a_correct_answer() -> None:
    assert is_new_high_score(_score("a", 0, 5), None) is False
    assert is_new_high_score(_score("a", 1, 5), None) is True


def test_is_new_high_score_must_beat_strictly() -> None:
    best = _score("best", 4, 4)
    assert is_new_high_score(_score("same", 4, 4), best) is False
    assert is_new_high_score(_score("better", 5, 5), best) is True
    assert is_new_high_score(None, best) is False


# -- normalization --


def test_normalize_backfills_composite() -> None:
    legacy = {
        "id": "legacy-1",
        "correct": 8,
        "total": 10,
        "percentage": 80,
        "timestamp": "2025-01-01T00:00:00.000Z",
        "date": "Jan 1, 2025",
    }
    (score,) = normalize_scores([legacy])
    assert score.composite_score == 16


def test_normalize_keeps_stored_composite() -> None:
    record = _score("a", 2, 3).model_dump()
    (score,) = normalize_scores([record])
    assert score.composite_score == pytest.approx(4.01)


def test_normalize_drops_invalid_records() -> None:
    good = _score("good", 1, 2).model_dump()
    records = [good, {"id": "bad"}, "not a record", {**good, "id": "x", "correct": 9}]
    scores = normalize_scores(records)
    assert [s.id for s in scores] == ["good"]
