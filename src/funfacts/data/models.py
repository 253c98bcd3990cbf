"""Core data models for FunFacts."""

import uuid
from dataclasses import dataclass, field

from pydantic import BaseModel, Field, model_validator


@dataclass(frozen=True)
class StaticFact:
    """A bundled fact with a known truth value."""

    id: str
    text: str
    truth_value: bool
    category: str
    explanation: str | None = None
    source: str | None = None


@dataclass
class GameFact:
    """A single true/false round.

    The fact source creates these and never touches them again; the consumer
    records the player's guess once via ``answer``.
    """

    text: str
    truth_value: bool
    explanation: str | None = None
    category: str | None = None
    source: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    is_answered: bool = False
    user_guess: bool | None = None
    was_guess_correct: bool | None = None

    @classmethod
    def from_static(cls, fact: StaticFact) -> "GameFact":
        return cls(
            text=fact.text,
            truth_value=fact.truth_value,
            explanation=fact.explanation,
            category=fact.category,
            source=fact.source,
        )

    def answer(self, guess: bool) -> bool:
        """Record the player's guess and return whether it was right."""
        if self.is_answered:
            raise ValueError(f"Fact {self.id} has already been answered")
        self.is_answered = True
        self.user_guess = guess
        self.was_guess_correct = guess == self.truth_value
        return self.was_guess_correct


class GameScore(BaseModel):
    """Result of one play session as stored in score history.

    ``composite_score`` is optional so that records written before it existed
    still load; ``normalize_scores`` fills it in.
    """

    id: str
    correct: int = Field(ge=0)
    total: int = Field(ge=0)
    percentage: int = 0
    composite_score: float | None = None
    timestamp: str
    date: str = ""

    @model_validator(mode="after")
    def correct_within_total(self) -> "GameScore":
        if self.correct > self.total:
            raise ValueError(f"correct ({self.correct}) exceeds total ({self.total})")
        return self


@dataclass(frozen=True)
class LiveScore:
    """In-memory tally of the game in progress."""

    correct: int = 0
    total: int = 0


@dataclass(frozen=True)
class FinalizeResult:
    """Outcome of closing a session."""

    is_new_high_score: bool
    final_score: GameScore


@dataclass
class ScoreStats:
    """Everything a scoreboard needs in one read."""

    current_score: GameScore | None = None
    highest_score: GameScore | None = None
    all_scores: list[GameScore] = field(default_factory=list)
    is_new_high_score: bool = False
