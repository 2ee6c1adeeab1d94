"""Jikan Client - Rate-limited access to the Jikan (MyAnimeList) API.

This module handles:
- A fixed delay before every request to respect Jikan's rate limit
- JSON decoding of responses
- Endpoint helpers for search, recommendations, details and top lists

Interface Contract:
- get(path, params) -> dict
- search / get_recommendations / get_details / get_top -> list[dict] or dict
- All methods raise JikanAPIError on failure
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any

import requests

from config import JIKAN_BASE_URL, JIKAN_REQUEST_DELAY, JIKAN_TIMEOUT
from src.models import MediaType


logger = logging.getLogger(__name__)


class JikanAPIError(Exception):
    """Raised when a Jikan request fails."""
    pass


class JikanClient:
    """Client for the Jikan REST API.

    Every request waits `delay` seconds first. There is no backoff and no
    retry: a failed request raises immediately.

    requests.Session is not thread-safe, so unless a session is injected each
    thread gets its own.
    """

    HEADERS = {
        "Accept": "application/json",
        "User-Agent": "anime-recommender/1.0",
    }

    def __init__(
        self,
        base_url: str = JIKAN_BASE_URL,
        *,
        delay: float = JIKAN_REQUEST_DELAY,
        timeout: float = JIKAN_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.delay = delay
        self.timeout = timeout
        self._session = session
        self._local = threading.local()
        if session is not None:
            session.headers.update(self.HEADERS)

    @property
    def session(self) -> requests.Session:
        """Injected session, or one per calling thread."""
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers.update(self.HEADERS)
            self._local.session = session
        return session

    def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Wait the fixed delay, then GET `path` and parse the JSON body.

        Raises:
            JikanAPIError: On network errors, non-2xx statuses or invalid JSON
        """
        if self.delay > 0:
            time.sleep(self.delay)

        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("[jikan] GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params or {}, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            # ValueError covers JSON decoding on older requests releases
            raise JikanAPIError(f"Jikan request to {url} failed: {e}") from e

        if not isinstance(data, dict):
            raise JikanAPIError(f"Unexpected response from {url}")
        return data

    def search(self, media_type: MediaType, title: str, limit: int = 1) -> list[dict[str, Any]]:
        """Search titles of the given media type."""
        params: dict[str, Any] = {"q": title, "limit": limit}
        if media_type.type_filter:
            params["type"] = media_type.type_filter
        data = self.get(f"/{media_type.resource}", params)
        return data.get("data") or []

    def get_recommendations(self, media_type: MediaType, mal_id: int) -> list[dict[str, Any]]:
        """Community recommendations for a title."""
        data = self.get(f"/{media_type.resource}/{mal_id}/recommendations")
        return data.get("data") or []

    def get_details(self, media_type: MediaType, mal_id: int) -> dict[str, Any]:
        """Full record for a title.

        Raises:
            JikanAPIError: If the response has no record
        """
        data = self.get(f"/{media_type.resource}/{mal_id}")
        item = data.get("data")
        if not isinstance(item, dict):
            raise JikanAPIError(f"No {media_type.resource} found with id {mal_id}")
        return item

    def get_top(self, media_type: MediaType, limit: int = 5) -> list[dict[str, Any]]:
        """Top-ranked titles of the given media type.

        Raises:
            JikanAPIError: If the response has no list
        """
        params: dict[str, Any] = {"limit": limit}
        if media_type.type_filter:
            params["type"] = media_type.type_filter
        data = self.get(f"/top/{media_type.resource}", params)
        items = data.get("data")
        if not isinstance(items, list):
            raise JikanAPIError(f"Top {media_type.value} list unavailable")
        return items
