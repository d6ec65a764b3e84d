"""
AI assistant — manual lookup, item suggestions, value estimates.

Thin async client for the Gemini generateContent REST endpoint.
Every call returns a LookupOutcome: a usable (possibly neutral) value
plus an optional typed failure. Nothing raises to the caller, and
with no API key configured no request is made at all.

Neutral values:
  find_manual          → []
  suggest_room_items   → []
  analyze_item_value   → "Unable to estimate"

The repository never calls this module; routes do, then pass any
result to the repository as an ordinary update.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

import httpx

from home_inventory.core.config import settings
from home_inventory.schemas.items import ManualMatch

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNABLE_TO_ESTIMATE = "Unable to estimate"
UNKNOWN_ESTIMATE = "Unknown"


class LookupFailure(str, Enum):
    NO_CREDENTIAL = "no_credential"
    TRANSPORT = "transport"
    BAD_RESPONSE = "bad_response"


@dataclass(frozen=True)
class LookupOutcome(Generic[T]):
    """Result of an assistant call; value is always safe to use."""
    value: T
    failure: LookupFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class BadResponse(Exception):
    """The service answered, but not with anything we can read."""


def _response_text(payload: dict) -> str:
    """Concatenate the text parts of the first candidate."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))


def _grounding_links(payload: dict) -> list[ManualMatch]:
    """Web sources the answer was grounded on, in the order given."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return []
    metadata = candidates[0].get("groundingMetadata") or {}
    results = []
    for chunk in metadata.get("groundingChunks") or []:
        web = chunk.get("web") or {}
        if web.get("uri") and web.get("title"):
            results.append(ManualMatch(title=web["title"], uri=web["uri"]))
    return results


class InventoryAssistant:
    """Client for the three assistant features."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls) -> "InventoryAssistant":
        return cls(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            base_url=settings.GEMINI_BASE_URL,
            timeout=settings.AI_TIMEOUT_SECONDS,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def _generate(self, body: dict[str, Any]) -> dict:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                url,
                json=body,
                headers={"x-goog-api-key": self.api_key},
            )
            response.raise_for_status()
            try:
                payload = response.json()
            except ValueError as e:
                raise BadResponse("Response body is not JSON") from e
        if not isinstance(payload, dict):
            raise BadResponse("Response body is not an object")
        return payload

    async def _call(self, feature: str, body: dict[str, Any], parse, neutral: T) -> LookupOutcome[T]:
        """Run one request; map every failure to the neutral value."""
        if not self.enabled:
            logger.warning(f"No API key configured, skipping {feature}")
            return LookupOutcome(neutral, LookupFailure.NO_CREDENTIAL)
        try:
            payload = await self._generate(body)
            try:
                value = parse(payload)
            except (AttributeError, KeyError, TypeError) as e:
                raise BadResponse(f"Unexpected response shape: {e}") from e
            return LookupOutcome(value)
        except httpx.HTTPStatusError as e:
            logger.error(f"{feature} failed: service returned {e.response.status_code}")
            return LookupOutcome(neutral, LookupFailure.TRANSPORT)
        except httpx.HTTPError as e:
            logger.error(f"{feature} failed: {e}", exc_info=True)
            return LookupOutcome(neutral, LookupFailure.TRANSPORT)
        except BadResponse as e:
            logger.warning(f"{feature} returned an unreadable response: {e}")
            return LookupOutcome(neutral, LookupFailure.BAD_RESPONSE)

    async def find_manual(self, description: str, details: str | None = None) -> LookupOutcome[list[ManualMatch]]:
        """Search the web for a manual; the first match is the best one."""
        query = f"Find the official PDF user manual or support page for: {description} {details or ''}"
        body = {
            "contents": [{"parts": [{"text": query.strip()}]}],
            "tools": [{"google_search": {}}],
        }
        return await self._call("find_manual", body, _grounding_links, [])

    async def suggest_room_items(self, room_name: str, description: str) -> LookupOutcome[list[str]]:
        """Five household items one might expect in a room."""
        prompt = (
            f'List 5 common household items one might find in a "{room_name}" '
            f'described as "{description}". Return only a JSON array of strings.'
        )
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"responseMimeType": "application/json"},
        }

        def parse(payload: dict) -> list[str]:
            text = _response_text(payload)
            if not text:
                return []
            try:
                parsed = json.loads(text)
            except json.JSONDecodeError as e:
                raise BadResponse("Suggestions are not JSON") from e
            if not isinstance(parsed, list):
                raise BadResponse("Suggestions are not a JSON array")
            return [str(s) for s in parsed if isinstance(s, str) and s.strip()]

        return await self._call("suggest_room_items", body, parse, [])

    async def analyze_item_value(
        self,
        description: str,
        notes: str,
        currency_code: str = "USD",
    ) -> LookupOutcome[str]:
        """Free-text replacement value range; never written to Item.value."""
        prompt = (
            f"Estimate the average insurance replacement value range (in {currency_code}) "
            f"for a used: {description}. Description: {notes}. "
            f'Keep it very brief (e.g., "50 - 100 {currency_code}").'
        )
        body = {"contents": [{"parts": [{"text": prompt}]}]}

        def parse(payload: dict) -> str:
            return _response_text(payload).strip() or UNKNOWN_ESTIMATE

        return await self._call("analyze_item_value", body, parse, UNABLE_TO_ESTIMATE)


def item_search_text(brand: str | None, name: str, model: str | None) -> str:
    """'Bosch Dishwasher SMS6' — the phrase used to look an item up."""
    return f"{brand + ' ' if brand else ''}{name} {model or ''}".strip()
