"""Recommendation Service - Title lookup and recommendation assembly.

This module handles:
- Looking up the base title on Jikan
- Fetching official recommendations and their details
- Falling back to the top list when too few recommendations were found

Interface Contract:
- recommend(request) -> RecommendationResult
- Raises InvalidRequestError for bad input, TitleNotFoundError when the
  base title has no match
- Failures while fetching official recommendations are logged and the
  top list is used instead
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from config import MAX_RECOMMENDATIONS, MIN_RECOMMENDATIONS, RESULT_CAP, TOP_LIMIT
from src.models import (
    MediaRecommendation,
    MediaType,
    RecommendationRequest,
    RecommendationResult,
)
from src.services.formatter import format_item


logger = logging.getLogger(__name__)


class RecommendationServiceError(Exception):
    """Raised when recommendation lookup fails."""
    pass


class InvalidRequestError(RecommendationServiceError):
    """Raised when the request is missing required input."""
    pass


class TitleNotFoundError(RecommendationServiceError):
    """Raised when the base title has no search match."""
    pass


class RecommendationService:
    """Service for building recommendations from Jikan data."""

    def __init__(
        self,
        jikan_client=None,
        *,
        max_results: int = MAX_RECOMMENDATIONS,
        min_results: int = MIN_RECOMMENDATIONS,
        top_limit: int = TOP_LIMIT,
    ):
        """Initialize with optional dependencies.

        Args:
            jikan_client: Client for the Jikan API. If None, creates default.
            max_results: Cap on returned recommendations (at most RESULT_CAP)
            min_results: Below this many, the top list is appended
            top_limit: Entries requested from the top list
        """
        self._jikan = jikan_client
        self.max_results = min(max_results, RESULT_CAP)
        self.min_results = min_results
        self.top_limit = top_limit

    @property
    def jikan(self):
        """Lazy load Jikan client."""
        if self._jikan is None:
            from src.services.jikan_client import JikanClient
            self._jikan = JikanClient()
        return self._jikan

    def recommend(self, request: RecommendationRequest) -> RecommendationResult:
        """Build recommendations similar to the first requested title.

        Args:
            request: Titles, filters and media type

        Returns:
            RecommendationResult: At most `max_results` recommendations

        Raises:
            InvalidRequestError: If no titles were given
            TitleNotFoundError: If the first title has no match
            JikanAPIError: If the search or top list request fails
        """
        if not request.titles:
            raise InvalidRequestError("Please provide at least one title")

        media_type = request.media_type
        title = request.base_title
        logger.info(
            "[recommend] title=%s media_type=%s genres=%s exclude=%s",
            title, media_type.value, request.genres, request.exclude,
        )

        matches = self.jikan.search(media_type, title, limit=1)
        if not matches:
            raise TitleNotFoundError(
                f'Could not find {media_type.value} with title "{title}"'
            )
        base_item = matches[0]

        recommendations = self._apply_exclusions(
            self._official_recommendations(base_item, title, media_type),
            request,
        )

        if len(recommendations) < self.min_results:
            logger.info(
                "[recommend] only %d official recommendations, adding top %s",
                len(recommendations), media_type.value,
            )
            recommendations.extend(self._apply_exclusions(
                self._top_recommendations(base_item, title, media_type, recommendations),
                request,
            ))

        return RecommendationResult(
            base_title=base_item.get("title") or title,
            media_type=media_type,
            recommendations=recommendations[: self.max_results],
        )

    def _official_recommendations(
        self,
        base_item: dict[str, Any],
        based_on: str,
        media_type: MediaType,
    ) -> list[MediaRecommendation]:
        """Fetch and format official recommendations, or [] on any failure."""
        try:
            entries = self.jikan.get_recommendations(media_type, base_item["mal_id"])
            ids = [
                entry["entry"]["mal_id"]
                for entry in entries[:RESULT_CAP]
            ]
            if not ids:
                return []

            with ThreadPoolExecutor(max_workers=len(ids)) as pool:
                details = list(pool.map(
                    lambda mal_id: self.jikan.get_details(media_type, mal_id),
                    ids,
                ))
            return [format_item(item, based_on, media_type) for item in details]
        except Exception:
            logger.exception("[recommend] error getting recommendations for %s", based_on)
            return []

    def _top_recommendations(
        self,
        base_item: dict[str, Any],
        based_on: str,
        media_type: MediaType,
        existing: list[MediaRecommendation],
    ) -> list[MediaRecommendation]:
        """Format the top list, skipping the base item and existing entries."""
        seen = {base_item.get("mal_id")}
        seen.update(rec.mal_id for rec in existing if rec.mal_id is not None)

        results = []
        for item in self.jikan.get_top(media_type, limit=self.top_limit):
            mal_id = item.get("mal_id")
            if mal_id in seen:
                continue
            seen.add(mal_id)
            results.append(format_item(item, based_on, media_type))
        return results

    @staticmethod
    def _apply_exclusions(
        recommendations: list[MediaRecommendation],
        request: RecommendationRequest,
    ) -> list[MediaRecommendation]:
        """Drop recommendations matching an excluded or requested title."""
        blocked = {t.casefold() for t in request.exclude + request.titles}
        return [r for r in recommendations if r.title.casefold() not in blocked]
