"""FunFacts: true-or-false fact game core with live facts and persistent scores."""

from funfacts.config import FunFactsConfig, create_from_config, load_config
from funfacts.data import (
    ALL_STATIC_FACTS,
    FALSE_FACTS,
    TRUE_FACTS,
    FinalizeResult,
    GameFact,
    GameScore,
    LiveScore,
    ScoreStats,
    StaticFact,
)
from funfacts.errors import FactUnavailableError, StorageError
from funfacts.providers import (
    FactProvider,
    FallbackChain,
    OpenTriviaProvider,
    RetryingProvider,
    StaticFactPool,
    StaticFactProvider,
    UselessFactsProvider,
)
from funfacts.scores import (
    ScoreManager,
    compute_composite_score,
    compute_percentage,
    create_score,
    find_highest_score,
)
from funfacts.session import GameSession
from funfacts.source import FactSource, PrefetchingFactSource
from funfacts.storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    # Models
    "FinalizeResult",
    "GameFact",
    "GameScore",
    "LiveScore",
    "ScoreStats",
    "StaticFact",
    # Static data
    "ALL_STATIC_FACTS",
    "FALSE_FACTS",
    "TRUE_FACTS",
    # Errors
    "FactUnavailableError",
    "StorageError",
    # Protocols
    "FactProvider",
    "FactSource",
    "KeyValueStore",
    # Providers
    "FallbackChain",
    "OpenTriviaProvider",
    "RetryingProvider",
    "StaticFactPool",
    "StaticFactProvider",
    "UselessFactsProvider",
    # Fact sources
    "PrefetchingFactSource",
    # Scores
    "ScoreManager",
    "compute_composite_score",
    "compute_percentage",
    "create_score",
    "find_highest_score",
    # Storage
    "JsonFileStore",
    "MemoryStore",
    # Sessions
    "GameSession",
    # Config
    "FunFactsConfig",
    "create_from_config",
    "load_config",
]
