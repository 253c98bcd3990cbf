"""Fact source protocol consumed by game sessions."""

from typing import Protocol

from funfacts.data import GameFact


class FactSource(Protocol):
    """Interface for supplying one fact per round."""

    async def next_fact(self) -> GameFact:
        """Return the next fact to show.

        Implementations must not raise: the worst case is a bundled fact.
        """
        ...
