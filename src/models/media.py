"""Media recommendation data models.

Pure data structures for requests and results.
These can be safely used by any module.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any


class MediaType(Enum):
    """Supported media types."""
    ANIME = "anime"
    MANGA = "manga"
    MANHWA = "manhwa"
    MANHUA = "manhua"
    LIGHTNOVEL = "lightnovel"
    NOVEL = "novel"

    @property
    def resource(self) -> str:
        """Jikan path segment serving this media type."""
        return "anime" if self is MediaType.ANIME else "manga"

    @property
    def type_filter(self) -> str | None:
        """Value for Jikan's `type` query filter, if one is needed."""
        if self in (MediaType.ANIME, MediaType.MANGA):
            return None
        return self.value

    @property
    def label(self) -> str:
        """Display label used when the upstream record has no type."""
        if self is MediaType.LIGHTNOVEL:
            return "Light Novel"
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "MediaType":
        """Parse a request value, raising ValueError if unsupported."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unsupported mediaType: {value!r}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported mediaType: {value!r}") from None


def _as_str_list(value: Any) -> list[str]:
    """Normalize a string or list of strings, dropping blanks."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


@dataclass
class RecommendationRequest:
    """A single recommendation request."""
    titles: list[str]
    genres: list[str] = dataclass_field(default_factory=list)
    exclude: list[str] = dataclass_field(default_factory=list)
    media_type: MediaType = MediaType.MANGA

    @property
    def base_title(self) -> str:
        return self.titles[0]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecommendationRequest":
        """Create from a JSON request body.

        Raises:
            ValueError: If no titles were given or mediaType is not supported
        """
        titles = _as_str_list(data.get("titles"))
        if not titles:
            raise ValueError("Please provide at least one title")
        media_type = data.get("mediaType") or MediaType.MANGA
        return cls(
            titles=titles,
            genres=_as_str_list(data.get("genres")),
            exclude=_as_str_list(data.get("exclude")),
            media_type=MediaType.parse(media_type),
        )


@dataclass
class MediaRecommendation:
    """A single normalized recommendation."""
    title: str
    creator: str = "Unknown"
    type: str = ""
    genres: list[str] = dataclass_field(default_factory=list)
    description: str = "No description available"
    similar_to: str = ""
    why_recommended: str = ""
    image: str | None = None
    url: str | None = None
    score: float | None = None
    episodes: int | None = None
    chapters: int | None = None
    media_type: MediaType = MediaType.MANGA
    mal_id: int | None = None  # not serialized

    def to_dict(self) -> dict[str, Any]:
        """Convert to the response JSON shape."""
        data = {
            "title": self.title,
            "creator": self.creator,
            "type": self.type,
            "genres": self.genres,
            "description": self.description,
            "similarTo": self.similar_to,
            "whyRecommended": self.why_recommended,
            "image": self.image,
            "url": self.url,
            "score": self.score,
        }
        if self.media_type is MediaType.ANIME:
            data["episodes"] = self.episodes
        else:
            data["chapters"] = self.chapters
        return data


@dataclass
class RecommendationResult:
    """Result of a recommendation lookup."""
    base_title: str
    media_type: MediaType
    recommendations: list[MediaRecommendation] = dataclass_field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the response JSON shape."""
        return {
            "recommendations": [r.to_dict() for r in self.recommendations],
            "baseTitle": self.base_title,
            "mediaType": self.media_type.value,
        }
