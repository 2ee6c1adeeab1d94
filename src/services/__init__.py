"""Service layer - Business logic modules.

Each service module has a clear interface and can be developed/tested independently.
"""

from .jikan_client import JikanAPIError, JikanClient
from .formatter import format_item
from .recommendation_service import (
    InvalidRequestError,
    RecommendationService,
    RecommendationServiceError,
    TitleNotFoundError,
)

__all__ = [
    "JikanClient",
    "JikanAPIError",
    "format_item",
    "RecommendationService",
    "RecommendationServiceError",
    "InvalidRequestError",
    "TitleNotFoundError",
]
