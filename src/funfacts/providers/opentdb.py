"""True/false questions from the Open Trivia Database."""

import html
import logging
from typing import Literal

import httpx

from funfacts.data import GameFact

OPENTDB_API_URL = "https://opentdb.com/api.php"

Difficulty = Literal["easy", "medium", "hard"]

logger = logging.getLogger(__name__)


class OpenTriviaProvider:
    """Fetch boolean questions from ``opentdb.com``.

    The API HTML-encodes question text, so text and category are unescaped
    before building the fact.

    Args:
        difficulty: Question difficulty (default: "medium").
        truth: If set, only accept questions whose answer matches; a
            mismatching question counts as a failed attempt.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        difficulty: Difficulty = "medium",
        truth: bool | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._difficulty = difficulty
        self._truth = truth
        self._timeout = timeout

    async def fetch(self) -> GameFact:
        """Fetch one true/false question.

        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses.
            ValueError: On a non-zero ``response_code``, an empty result set,
                or a question that does not match the ``truth`` filter.
        """
        params: dict[str, str | int] = {
            "amount": 1,
            "type": "boolean",
            "difficulty": self._difficulty,
        }
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(OPENTDB_API_URL, params=params)
            response.raise_for_status()
            data = response.json()

        code = data.get("response_code")
        if code != 0:
            raise ValueError(f"Open Trivia DB error code: {code}")

        results = data.get("results") or []
        if not results:
            raise ValueError("Open Trivia DB returned no questions")

        item = results[0]
        truth_value = item.get("correct_answer") == "True"
        if self._truth is not None and truth_value != self._truth:
            raise ValueError(f"Question answer is {truth_value}, wanted {self._truth}")

        category = item.get("category")
        return GameFact(
            text=html.unescape(item["question"]),
            truth_value=truth_value,
            category=html.unescape(category) if category else None,
            source="Open Trivia Database",
        )
