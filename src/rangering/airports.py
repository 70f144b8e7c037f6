"""Resolve an ICAO code or city name to the coordinates of an airport.

The calculators never call this module. The app resolves a search query
to an :class:`AirportLocation` and only hands the coordinates on to the map.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Iterable, List, Optional, Protocol

from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI, OpenAIError

from rangering.database import airports as known_airports
from rangering.models import AirportLocation

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

LOOKUP_PROMPT = """Find the precise latitude and longitude, official name, and city for the airport with ICAO code "{query}".
If the ICAO code matches a small airfield (like SDVH or SBBP in Brazil, or others globally), ensure the coordinates are for that specific location.
If the input looks like a city name, search for the main airport in that city.

Return the data in the following JSON format inside a code block:
```json
{{
  "lat": 12.3456,
  "lng": -65.4321,
  "name": "Airport Official Name",
  "city": "City Name"
}}
```
"""

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```")
_BARE_JSON = re.compile(r"\{[\s\S]*\}")


class AirportLookupError(RuntimeError):
    """The lookup could not be carried out (as opposed to finding nothing)."""


class AirportResolver(Protocol):
    async def resolve(self, query: str) -> Optional[AirportLocation]:
        ...


def _require_query(query: str) -> str:
    if not isinstance(query, str) or not query.strip():
        raise AirportLookupError("Search query must be a non-empty string")
    return query.strip()


class StaticAirportResolver:
    """Match the query against the ICAO code, name or city of known airports."""

    def __init__(self, airports: Optional[Iterable[dict]] = None):
        self._airports = list(known_airports if airports is None else airports)

    async def resolve(self, query: str) -> Optional[AirportLocation]:
        needle = _require_query(query).casefold()
        for airport in self._airports:
            keys = (airport.get("icao", ""), airport.get("name", ""), airport.get("city", ""))
            if any(needle == key.casefold() for key in keys if key):
                return AirportLocation(
                    lat=airport["lat"],
                    lng=airport["lon"],
                    name=airport["name"],
                    city=airport.get("city", ""),
                )
        return None


def parse_airport_response(text: Optional[str]) -> Optional[AirportLocation]:
    """Extract the airport record from a model answer.

    Looks for a ```json fenced block first, then for the first ``{...}`` span.
    Returns None when nothing usable is found.
    """
    if not text:
        return None

    match = _FENCED_JSON.search(text)
    json_string = match.group(1) if match else None
    if json_string is None:
        match = _BARE_JSON.search(text)
        json_string = match.group(0) if match else None

    if json_string is not None:
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError:
            data = None
        if isinstance(data, dict):
            lat, lng = data.get("lat"), data.get("lng")
            # bool is an int subclass
            if all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (lat, lng)):
                return AirportLocation(
                    lat=float(lat),
                    lng=float(lng),
                    name=str(data.get("name") or ""),
                    city=str(data.get("city") or ""),
                )

    logger.warning("Could not parse airport data from response: %s", text)
    return None


class OpenAIAirportResolver:
    """Ask a chat model for the airport coordinates."""

    def __init__(
        self,
        client: Optional[AsyncOpenAI] = None,
        *,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout_s: float = 30.0,
    ):
        self._client = client
        self._api_key = api_key
        self._model = model
        self._timeout_s = timeout_s

    def _ensure_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def resolve(self, query: str) -> Optional[AirportLocation]:
        query = _require_query(query)
        client = self._ensure_client()
        try:
            response = await client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": LOOKUP_PROMPT.format(query=query)}],
                timeout=self._timeout_s,
            )
        except (APITimeoutError, APIConnectionError) as exc:
            raise AirportLookupError("Airport lookup request timed out") from exc
        except APIStatusError as exc:
            raise AirportLookupError(f"Airport lookup request failed: {exc}") from exc
        except OpenAIError as exc:
            raise AirportLookupError(f"Airport lookup request failed: {exc}") from exc

        if not response.choices:
            return None
        content = getattr(response.choices[0].message, "content", None)
        return parse_airport_response(content)


class ChainedAirportResolver:
    """Try each resolver in turn and return the first hit."""

    def __init__(self, resolvers: Iterable[AirportResolver]):
        self._resolvers: List[AirportResolver] = list(resolvers)

    async def resolve(self, query: str) -> Optional[AirportLocation]:
        query = _require_query(query)
        last_error: Optional[AirportLookupError] = None
        any_completed = False
        for resolver in self._resolvers:
            try:
                location = await resolver.resolve(query)
            except AirportLookupError as exc:
                logger.warning("%s failed for %r: %s", type(resolver).__name__, query, exc)
                last_error = exc
                continue
            any_completed = True
            if location is not None:
                return location
        if last_error is not None and not any_completed:
            raise last_error
        return None


def lookup_airport(query: str, resolver: AirportResolver) -> Optional[AirportLocation]:
    """Blocking wrapper for the Streamlit script."""
    return asyncio.run(resolver.resolve(query))
