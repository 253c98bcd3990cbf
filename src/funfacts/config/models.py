"""Pydantic configuration models for FunFacts components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

# ============================================================
# Provider Configs
# ============================================================


class UselessFactsProviderConfig(BaseModel):
    """Configuration for UselessFactsProvider."""

    type: Literal["uselessfacts"] = "uselessfacts"
    base_url: str = "https://uselessfacts.jsph.pl/api/v2"
    language: str = "en"
    timeout: float = 10.0

    model_config = {"frozen": True}


class OpenTriviaProviderConfig(BaseModel):
    """Configuration for OpenTriviaProvider."""

    type: Literal["opentdb"] = "opentdb"
    difficulty: Literal["easy", "medium", "hard"] = "medium"
    truth: bool | None = True
    timeout: float = 10.0

    model_config = {"frozen": True}


ProviderConfig = Annotated[
    UselessFactsProviderConfig | OpenTriviaProviderConfig,
    Field(discriminator="type"),
]


# ============================================================
# Fact Source Configs
# ============================================================


class RetryConfig(BaseModel):
    """Retry schedule for each live provider."""

    attempts: int = Field(default=3, ge=1)
    delays: list[float] = Field(default_factory=lambda: [0.5, 1.0, 1.5])

    model_config = {"frozen": True}

    @field_validator("delays")
    @classmethod
    def delays_non_negative(cls, v: list[float]) -> list[float]:
        if any(d < 0 for d in v):
            raise ValueError("Retry delays must be non-negative")
        return v


class QueueConfig(BaseModel):
    """Prefetch queue and static pool tuning."""

    low_water_mark: int = Field(default=3, ge=0)
    batch_size: int = Field(default=5, ge=1)
    recent_window: int = Field(default=20, ge=0)
    true_probability: float = Field(default=0.5, ge=0.0, le=1.0)

    model_config = {"frozen": True}


# ============================================================
# Storage Configs
# ============================================================


class MemoryStorageConfig(BaseModel):
    """In-process storage; nothing survives a restart."""

    type: Literal["memory"] = "memory"
    key_prefix: str = "funfacts:"

    model_config = {"frozen": True}


class JsonFileStorageConfig(BaseModel):
    """Storage in a single JSON file."""

    type: Literal["json_file"] = "json_file"
    path: str = "~/.funfacts/scores.json"
    key_prefix: str = "funfacts:"

    model_config = {"frozen": True}


StorageConfig = Annotated[
    MemoryStorageConfig | JsonFileStorageConfig,
    Field(discriminator="type"),
]


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class FunFactsConfig(BaseModel):
    """Root configuration for FunFacts."""

    providers: list[ProviderConfig] = Field(
        default_factory=lambda: [UselessFactsProviderConfig()]
    )
    retry: RetryConfig = Field(default_factory=RetryConfig)
    queue: QueueConfig = Field(default_factory=QueueConfig)
    storage: StorageConfig = Field(default_factory=JsonFileStorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
