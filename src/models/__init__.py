"""Data models - Pure data structures with no business logic."""

from .media import (
    MediaRecommendation,
    MediaType,
    RecommendationRequest,
    RecommendationResult,
)

__all__ = [
    "MediaType",
    "RecommendationRequest",
    "MediaRecommendation",
    "RecommendationResult",
]
