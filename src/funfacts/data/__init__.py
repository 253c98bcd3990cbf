"""Data models for FunFacts."""

from funfacts.data.models import (
    FinalizeResult,
    GameFact,
    GameScore,
    LiveScore,
    ScoreStats,
    StaticFact,
)
from funfacts.data.static_facts import ALL_STATIC_FACTS, FALSE_FACTS, TRUE_FACTS

__all__ = [
    "ALL_STATIC_FACTS",
    "FALSE_FACTS",
    "FinalizeResult",
    "GameFact",
    "GameScore",
    "LiveScore",
    "ScoreStats",
    "StaticFact",
    "TRUE_FACTS",
]
