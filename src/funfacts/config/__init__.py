"""Configuration module for FunFacts."""

from funfacts.config.factory import create_fact_source, create_from_config
from funfacts.config.loader import get_default_config_path, load_config
from funfacts.config.models import (
    FunFactsConfig,
    JsonFileStorageConfig,
    LoggingConfig,
    MemoryStorageConfig,
    OpenTriviaProviderConfig,
    ProviderConfig,
    QueueConfig,
    RetryConfig,
    StorageConfig,
    UselessFactsProviderConfig,
)

__all__ = [
    "FunFactsConfig",
    "JsonFileStorageConfig",
    "LoggingConfig",
    "MemoryStorageConfig",
    "OpenTriviaProviderConfig",
    "ProviderConfig",
    "QueueConfig",
    "RetryConfig",
    "StorageConfig",
    "UselessFactsProviderConfig",
    "create_fact_source",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
