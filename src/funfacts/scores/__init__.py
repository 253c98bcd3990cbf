from funfacts.scores.manager import CURRENT_SCORE_KEY, SCORE_HISTORY_KEY, ScoreManager
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

__all__ = [
    "CURRENT_SCORE_KEY",
    "SCORE_HISTORY_KEY",
    "ScoreManager",
    "compute_composite_score",
    "compute_percentage",
    "create_score",
    "find_highest_score",
    "format_display_date",
    "is_new_high_score",
    "normalize_scores",
    "sort_scores",
]
