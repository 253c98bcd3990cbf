"""Random true facts from the Useless Facts API."""

import logging

import httpx

from funfacts.data import GameFact

USELESS_FACTS_API_URL = "https://uselessfacts.jsph.pl/api/v2"

logger = logging.getLogger(__name__)


class UselessFactsProvider:
    """Fetch random facts from ``uselessfacts.jsph.pl``.

    Every fact this API serves is true, so the provider only ever yields
    ``truth_value=True``.

    Args:
        base_url: API root (default: public v2 endpoint).
        language: Fact language code (default: "en").
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        base_url: str = USELESS_FACTS_API_URL,
        language: str = "en",
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._language = language
        self._timeout = timeout

    async def fetch(self) -> GameFact:
        """Fetch one random fact.

        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses.
            ValueError: If the payload carries no fact text.
        """
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(
                f"{self._base_url}/facts/random",
                params={"language": self._language},
            )
            response.raise_for_status()
            data = response.json()

        text = (data.get("text") or "").strip()
        if not text:
            raise ValueError("Useless Facts API returned an empty fact")

        logger.debug("Fetched useless fact %s", data.get("id"))
        return GameFact(
            text=text,
            truth_value=True,
            source=data.get("source") or "Useless Facts API",
        )
