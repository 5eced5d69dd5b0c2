"""Async client for the Codeforces ``problemset.problems`` method."""
from __future__ import annotations

import json
import logging
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..filtering.rules import sort_by_rating
from .errors import DecodeError, FetchError
from .models import Problem, ProblemsetEnvelope

logger = logging.getLogger(__name__)

PROBLEMSET_METHOD = "problemset.problems"
TAG_SEPARATOR = ";"


class CodeforcesClient:
    """Fetches problems by tag and returns them sorted by rating.

    Tags are forwarded as given, an empty tag included. Codeforces treats
    ``tags=`` as no filter and returns the whole catalog.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._client = httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.upstream_timeout,
            transport=transport,
        )

    async def fetch_by_tag(self, tag: str) -> list[Problem]:
        return await self._fetch(tag)

    async def fetch_by_tags(self, tags: Sequence[str]) -> list[Problem]:
        """Problems carrying all of ``tags`` (and possibly others)."""
        return await self._fetch(TAG_SEPARATOR.join(tags))

    async def _fetch(self, tags_param: str) -> list[Problem]:
        try:
            response = await self._client.get(PROBLEMSET_METHOD, params={"tags": tags_param})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Problemset fetch failed tags=%r status=%s", tags_param, e.response.status_code)
            raise FetchError(
                f"upstream returned {e.response.status_code} for {PROBLEMSET_METHOD}", cause=e
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Problemset fetch failed tags=%r err=%s", tags_param, e)
            raise FetchError(f"error fetching problem set: {e}", cause=e) from e

        try:
            envelope = ProblemsetEnvelope.model_validate(response.json())
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("Problemset decode failed tags=%r err=%s", tags_param, e)
            raise DecodeError(f"error decoding problem set: {e}", cause=e) from e

        if envelope.status != "OK":
            # Not treated as an error; whatever problems came back are passed through
            logger.warning(
                "Problemset status=%s comment=%r tags=%r", envelope.status, envelope.comment, tags_param
            )

        return sort_by_rating(envelope.result.problems)

    async def aclose(self) -> None:
        await self._client.aclose()
