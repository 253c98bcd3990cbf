"""Ordered fallback across several providers."""

import logging

from funfacts.data import GameFact
from funfacts.errors import FactUnavailableError
from funfacts.providers.base import FactProvider

logger = logging.getLogger(__name__)


class FallbackChain:
    """Try providers in order and return the first fact produced.

    Args:
        providers: Providers in priority order.
    """

    def __init__(self, providers: list[FactProvider]) -> None:
        self._providers = providers

    @property
    def providers(self) -> list[FactProvider]:
        return list(self._providers)

    async def fetch(self) -> GameFact:
        """Return the first successful provider's fact.

        Raises:
            FactUnavailableError: If every provider fails (or there are none).
        """
        for provider in self._providers:
            try:
                return await provider.fetch()
            except Exception as e:
                logger.warning(f"{type(provider).__name__} failed, trying next provider: {e}")
        raise FactUnavailableError(f"All {len(self._providers)} providers failed")
