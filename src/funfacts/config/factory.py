"""Factory functions to create components from configuration."""

import random
from pathlib import Path

from funfacts.config.models import (
    FunFactsConfig,
    JsonFileStorageConfig,
    MemoryStorageConfig,
    OpenTriviaProviderConfig,
    ProviderConfig,
    QueueConfig,
    RetryConfig,
    StorageConfig,
    UselessFactsProviderConfig,
)
from funfacts.providers.base import FactProvider
from funfacts.providers.chain import FallbackChain
from funfacts.providers.opentdb import OpenTriviaProvider
from funfacts.providers.retry import RetryingProvider
from funfacts.providers.static import StaticFactPool, StaticFactProvider
from funfacts.providers.uselessfacts import UselessFactsProvider
from funfacts.scores.manager import ScoreManager
from funfacts.source.prefetch import PrefetchingFactSource
from funfacts.storage.base import KeyValueStore
from funfacts.storage.json_file import JsonFileStore
from funfacts.storage.memory import MemoryStore


def create_provider(config: ProviderConfig) -> FactProvider:
    """Create a live fact provider from config."""
    if isinstance(config, UselessFactsProviderConfig):
        return UselessFactsProvider(
            base_url=config.base_url,
            language=config.language,
            timeout=config.timeout,
        )
    if isinstance(config, OpenTriviaProviderConfig):
        return OpenTriviaProvider(
            difficulty=config.difficulty,
            truth=config.truth,
            timeout=config.timeout,
        )
    msg = f"Unknown provider config type: {type(config)}"
    raise ValueError(msg)


def create_store(config: StorageConfig) -> KeyValueStore:
    """Create a key-value store from config."""
    if isinstance(config, MemoryStorageConfig):
        return MemoryStore()
    if isinstance(config, JsonFileStorageConfig):
        return JsonFileStore(Path(config.path).expanduser())
    msg = f"Unknown storage config type: {type(config)}"
    raise ValueError(msg)


def create_fact_source(
    providers: list[ProviderConfig],
    retry: RetryConfig,
    queue: QueueConfig,
    rng: random.Random | None = None,
) -> PrefetchingFactSource:
    """Wire live providers, retries and the static pool into a fact source.

    True facts come from each live provider in turn (each with its own
    retries), then from the bundled true facts. False facts always come from
    the bundled myths.
    """
    rng = rng or random.Random()
    pool = StaticFactPool(recent_window=queue.recent_window, rng=rng)

    live: list[FactProvider] = [
        RetryingProvider(create_provider(p), attempts=retry.attempts, delays=retry.delays)
        for p in providers
    ]
    true_chain = FallbackChain([*live, StaticFactProvider(pool, truth=True)])
    false_chain = FallbackChain([StaticFactProvider(pool, truth=False)])

    return PrefetchingFactSource(
        true_chain=true_chain,
        false_chain=false_chain,
        fallback=StaticFactProvider(pool),
        low_water_mark=queue.low_water_mark,
        batch_size=queue.batch_size,
        true_probability=queue.true_probability,
        rng=rng,
    )


def create_from_config(
    config: FunFactsConfig,
    *,
    rng: random.Random | None = None,
) -> tuple[PrefetchingFactSource, ScoreManager]:
    """Create the fact source and score manager from root config.

    Args:
        config: Root configuration.
        rng: Optional random source shared by the fact source and pool.

    Returns:
        Tuple of (fact_source, score_manager).
    """
    fact_source = create_fact_source(config.providers, config.retry, config.queue, rng=rng)
    score_manager = ScoreManager(
        create_store(config.storage),
        key_prefix=config.storage.key_prefix,
    )
    return (fact_source, score_manager)
