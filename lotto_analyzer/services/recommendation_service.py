"""Turn a statistics summary into a report plus suggested combinations via Gemini."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from langchain_core.messages import HumanMessage
from marshmallow import ValidationError as MarshmallowValidationError

from lotto_analyzer.errors import RecommendationError
from lotto_analyzer.schemas.analysis import RecommendationSchema


logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)

PROMPT_TEMPLATE = """You are a lotto (6/45) statistics analyst. Using the recent draw statistics below, write this week's analysis.

[DATA]
{summary}

[TASK]
1. Suggest {sets} combinations, each of 6 distinct numbers between 1 and 45.
2. Give every combination a short theme, e.g. "balanced mix" or "cold-number focus".
3. Summarize why these combinations were chosen in two sentences (the report).
4. Reply with JSON only, in exactly this shape. No Markdown, no other text.

{{
  "report": "analysis report",
  "combinations": [
    {{"numbers": [1, 2, 3, 4, 5, 6], "theme": "theme"}},
    {{"numbers": [7, 8, 9, 10, 11, 12], "theme": "theme"}}
  ]
}}
"""


@dataclass(frozen=True)
class Combination:
    numbers: list[int]
    theme: str


@dataclass(frozen=True)
class Recommendation:
    report: str
    combinations: list[Combination]


def _message_text(content: Any) -> str:
    # Chat models return either a plain string or a list of content blocks.
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts)
    return str(content)


class RecommendationService:
    """Ask the chat model for combinations grounded on a statistics summary."""

    def __init__(
        self,
        *,
        api_key: str = "",
        model: str = "gemini-2.5-flash",
        sets: int = 2,
        llm: Any | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._sets = max(1, int(sets))
        self._llm = llm
        self._schema = RecommendationSchema()

    @classmethod
    def from_config(cls, config: Any) -> "RecommendationService":
        return cls(
            api_key=str(config.get("GEMINI_API_KEY") or ""),
            model=str(config.get("GEMINI_MODEL", "gemini-2.5-flash")),
            sets=int(config.get("RECOMMENDATION_SETS", 2)),
        )

    def _get_llm(self) -> Any:
        if self._llm is not None:
            return self._llm
        if not self._api_key:
            raise RecommendationError(message="GEMINI_API_KEY is not configured")

        from langchain_google_genai import ChatGoogleGenerativeAI

        self._llm = ChatGoogleGenerativeAI(model=self._model, google_api_key=self._api_key)
        return self._llm

    def build_prompt(self, summary: str, sets: int | None = None) -> str:
        return PROMPT_TEMPLATE.format(summary=summary.strip(), sets=sets or self._sets)

    def recommend(self, summary: str, *, sets: int | None = None) -> Recommendation:
        """Return the model's report and combinations for `summary`.

        Raises:
            RecommendationError: model unavailable, call failed, or the answer
                is not the expected JSON.
        """

        llm = self._get_llm()
        prompt = self.build_prompt(summary, sets)

        try:
            message = llm.invoke([HumanMessage(content=prompt)])
        except Exception as exc:
            logger.error("Recommendation model call failed", exc_info=exc)
            raise RecommendationError(message="Recommendation model call failed") from exc

        return self.parse(_message_text(getattr(message, "content", message)))

    def parse(self, text: str) -> Recommendation:
        """Parse a (possibly fenced) JSON answer into a Recommendation."""

        cleaned = _FENCE_RE.sub("", text).strip()
        try:
            payload = json.loads(cleaned)
        except ValueError as exc:
            logger.warning("Recommendation answer is not JSON: %.200s", cleaned)
            raise RecommendationError(message="Recommendation answer is not valid JSON") from exc

        try:
            data = self._schema.load(payload)
        except MarshmallowValidationError as exc:
            logger.warning("Recommendation answer failed validation: %s", exc.messages)
            raise RecommendationError(
                message="Recommendation answer has an unexpected shape",
                details=exc.messages,
            ) from exc

        return Recommendation(
            report=str(data["report"]).strip(),
            combinations=[
                Combination(numbers=list(c["numbers"]), theme=str(c["theme"]))
                for c in data["combinations"]
            ],
        )
