"""Static fact pool with recent-repeat avoidance."""

import logging
import random
from collections import deque
from collections.abc import Sequence

from funfacts.data import ALL_STATIC_FACTS, GameFact, StaticFact

DEFAULT_RECENT_WINDOW = 20

logger = logging.getLogger(__name__)


class StaticFactPool:
    """Random draws from a fixed fact table that avoid recent repeats.

    The ids of the last ``recent_window`` facts served are excluded from the
    draw. When the exclusion would leave no candidates, the exclusion set is
    cleared and the draw proceeds over the full (filtered) table.

    Args:
        facts: Fact table to draw from (default: every bundled fact).
        recent_window: How many recent ids to exclude.
        rng: Random source (default: a fresh ``random.Random``).
    """

    def __init__(
        self,
        facts: Sequence[StaticFact] = ALL_STATIC_FACTS,
        *,
        recent_window: int = DEFAULT_RECENT_WINDOW,
        rng: random.Random | None = None,
    ) -> None:
        if not facts:
            raise ValueError("Static fact pool needs at least one fact")
        self._facts = tuple(facts)
        self._recent: deque[str] = deque(maxlen=max(recent_window, 0))
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._facts)

    @property
    def recent_ids(self) -> list[str]:
        """Ids currently excluded from draws, oldest first."""
        return list(self._recent)

    @property
    def categories(self) -> list[str]:
        """Distinct categories in the table, sorted."""
        return sorted({f.category for f in self._facts if f.category})

    def draw(self, truth: bool | None = None, category: str | None = None) -> StaticFact:
        """Pick a random fact, optionally restricted by truth value and category.

        Category matching ignores case.

        Raises:
            LookupError: If no fact in the table matches the filters.
        """
        wanted = category.lower() if category else None
        candidates = [
            f
            for f in self._facts
            if (truth is None or f.truth_value == truth)
            and (wanted is None or (f.category or "").lower() == wanted)
        ]
        if not candidates:
            raise LookupError(f"No static facts with truth value {truth} in category {category}")

        recent = set(self._recent)
        fresh = [f for f in candidates if f.id not in recent]
        if not fresh:
            logger.debug("Recent-fact window exhausted, resetting exclusions")
            self._recent.clear()
            fresh = candidates

        fact = self._rng.choice(fresh)
        self._recent.append(fact.id)
        return fact


class StaticFactProvider:
    """Serve facts from a StaticFactPool as a FactProvider.

    Args:
        pool: Shared pool; sharing one pool across providers keeps the
            recent-repeat window global.
        truth: Restrict to true or false facts (None: either).
        category: Restrict to one category (None: any).
    """

    def __init__(
        self,
        pool: StaticFactPool,
        *,
        truth: bool | None = None,
        category: str | None = None,
    ) -> None:
        self._pool = pool
        self._truth = truth
        self._category = category

    async def fetch(self) -> GameFact:
        return GameFact.from_static(self._pool.draw(self._truth, self._category))
