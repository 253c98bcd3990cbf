"""Fact source with a background prefetch queue and static fallback."""

import asyncio
import logging
import random
from collections import deque

from funfacts.data import ALL_STATIC_FACTS, GameFact
from funfacts.providers.base import FactProvider

DEFAULT_LOW_WATER_MARK = 3
DEFAULT_BATCH_SIZE = 5
DEFAULT_TRUE_PROBABILITY = 0.5

logger = logging.getLogger(__name__)


class PrefetchingFactSource:
    """Serve facts from a prefetch queue, a live fetch, or the static table.

    Flow of ``next_fact``:
    1. Pop the queue head if there is one; top the queue up in the
       background when it falls below ``low_water_mark``.
    2. Otherwise fetch live. A coin flip picks the true chain (remote
       providers, then bundled true facts) or the false chain (bundled
       myths) so the long-run mix stays balanced.
    3. If that fails, draw from ``fallback``.

    Args:
        true_chain: Provider for true facts, usually a FallbackChain.
        false_chain: Provider for false facts.
        fallback: Last-resort provider, normally the static pool.
        low_water_mark: Queue size below which a refill is triggered.
        batch_size: Facts fetched per refill.
        true_probability: Odds that a live fetch asks for a true fact.
        rng: Random source (default: a fresh ``random.Random``).
    """

    def __init__(
        self,
        true_chain: FactProvider,
        false_chain: FactProvider,
        fallback: FactProvider,
        *,
        low_water_mark: int = DEFAULT_LOW_WATER_MARK,
        batch_size: int = DEFAULT_BATCH_SIZE,
        true_probability: float = DEFAULT_TRUE_PROBABILITY,
        rng: random.Random | None = None,
    ) -> None:
        self._true_chain = true_chain
        self._false_chain = false_chain
        self._fallback = fallback
        self._low_water_mark = low_water_mark
        self._batch_size = batch_size
        self._true_probability = true_probability
        self._rng = rng or random.Random()
        self._queue: deque[GameFact] = deque()
        self._refilling = False
        self._refill_task: asyncio.Task[int] | None = None

    @property
    def queue_size(self) -> int:
        return len(self._queue)

    @property
    def is_refilling(self) -> bool:
        return self._refilling

    async def start(self) -> int:
        """Prime the queue before the first round.

        Returns:
            Number of facts queued.
        """
        return await self.refill_queue()

    async def next_fact(self) -> GameFact:
        """Return a fact for the next round. Never raises."""
        if self._queue:
            fact = self._queue.popleft()
            if len(self._queue) < self._low_water_mark:
                self._schedule_refill()
            return fact

        try:
            return await self._fetch_live()
        except Exception as e:
            logger.warning(f"Live fetch failed, using static fallback: {e}")

        return await self._fetch_fallback()

    async def refill_queue(self, batch_size: int | None = None) -> int:
        """Fetch a batch of facts concurrently and append them to the queue.

        A call made while another refill is running does nothing.

        Args:
            batch_size: Facts to fetch (default: the configured batch size).

        Returns:
            Number of facts added.
        """
        if self._refilling:
            logger.debug("Refill already in flight, skipping")
            return 0

        self._refilling = True
        try:
            size = self._batch_size if batch_size is None else batch_size
            results = await asyncio.gather(
                *(self._fetch_live() for _ in range(size)),
                return_exceptions=True,
            )
            added = 0
            queued = {fact.text for fact in self._queue}
            for result in results:
                if isinstance(result, BaseException):
                    logger.warning(f"Error prefetching fact: {result}")
                    continue
                if result.text in queued:
                    logger.debug("Skipping duplicate prefetched fact: %s", result.text)
                    continue
                queued.add(result.text)
                self._queue.append(result)
                added += 1
            logger.debug("Prefetched %d/%d facts, queue size %d", added, size, len(self._queue))
            return added
        finally:
            self._refilling = False

    async def aclose(self) -> None:
        """Wait for a background refill, if any, to finish."""
        task = self._refill_task
        if task is not None and not task.done():
            await asyncio.gather(task, return_exceptions=True)
        self._refill_task = None

    def _schedule_refill(self) -> None:
        if self._refilling or (self._refill_task is not None and not self._refill_task.done()):
            return
        self._refill_task = asyncio.create_task(self.refill_queue())
        self._refill_task.add_done_callback(_log_refill_failure)

    async def _fetch_live(self) -> GameFact:
        if self._rng.random() < self._true_probability:
            return await self._true_chain.fetch()
        return await self._false_chain.fetch()

    async def _fetch_fallback(self) -> GameFact:
        try:
            return await self._fallback.fetch()
        except Exception:
            logger.exception("Fallback provider failed, drawing from bundled facts")
            return GameFact.from_static(self._rng.choice(ALL_STATIC_FACTS))


def _log_refill_failure(task: "asyncio.Task[int]") -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Background refill failed", exc_info=exc)
