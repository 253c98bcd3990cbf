"""Bounded retry around a single provider."""

import asyncio
import logging
from collections.abc import Sequence

from funfacts.data import GameFact
from funfacts.providers.base import FactProvider

DEFAULT_ATTEMPTS = 3
DEFAULT_DELAYS: tuple[float, ...] = (0.5, 1.0, 1.5)

logger = logging.getLogger(__name__)


class RetryingProvider:
    """Retry a provider with a fixed backoff schedule.

    Attempts run one after another; the wait before attempt ``n + 1`` is
    ``delays[n - 1]`` (the last delay repeats if the schedule is short).
    After the final attempt the last error is re-raised.

    Args:
        provider: Provider to wrap.
        attempts: Total attempts, at least 1.
        delays: Seconds to sleep between attempts.
    """

    def __init__(
        self,
        provider: FactProvider,
        *,
        attempts: int = DEFAULT_ATTEMPTS,
        delays: Sequence[float] = DEFAULT_DELAYS,
    ) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        self._provider = provider
        self._attempts = attempts
        self._delays = tuple(delays)

    @property
    def provider(self) -> FactProvider:
        return self._provider

    def _delay_after(self, attempt: int) -> float:
        if not self._delays:
            return 0.0
        return self._delays[min(attempt, len(self._delays) - 1)]

    async def fetch(self) -> GameFact:
        name = type(self._provider).__name__
        for attempt in range(self._attempts - 1):
            try:
                return await self._provider.fetch()
            except Exception as e:
                delay = self._delay_after(attempt)
                logger.debug(
                    "%s attempt %d/%d failed (%s), retrying in %.1fs",
                    name,
                    attempt + 1,
                    self._attempts,
                    e,
                    delay,
                )
                await asyncio.sleep(delay)

        try:
            return await self._provider.fetch()
        except Exception as e:
            logger.warning("%s failed after %d attempts: %s", name, self._attempts, e)
            raise
