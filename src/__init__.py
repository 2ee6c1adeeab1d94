"""Anime/manga recommender package."""

from .models import MediaRecommendation, MediaType, RecommendationRequest, RecommendationResult
from .services import RecommendationService, format_item

__all__ = [
    "MediaType",
    "RecommendationRequest",
    "MediaRecommendation",
    "RecommendationResult",
    "RecommendationService",
    "format_item",
]
