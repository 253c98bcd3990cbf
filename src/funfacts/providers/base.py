from typing import Protocol

from funfacts.data import GameFact


class FactProvider(Protocol):
    """Interface for anything that can produce a single game fact."""

    async def fetch(self) -> GameFact:
        """Produce one fact.

        Returns:
            A fresh, unanswered GameFact.

        Raises:
            Exception: Any failure; callers treat it as a failed attempt.
        """
        ...
