"""Formatting of upstream Jikan records into recommendations."""

from __future__ import annotations

from typing import Any

from src.models import MediaRecommendation, MediaType


def _names(entries: Any) -> list[str]:
    """Extract `name` from a list of Jikan {mal_id, name, ...} objects."""
    if not isinstance(entries, list):
        return []
    names = []
    for entry in entries:
        name = entry.get("name") if isinstance(entry, dict) else None
        if name and name not in names:
            names.append(name)
    return names


def _image_url(item: dict[str, Any]) -> str | None:
    images = item.get("images") or {}
    jpg = images.get("jpg") or {}
    return jpg.get("image_url")


def format_item(item: dict[str, Any], based_on: str, media_type: MediaType) -> MediaRecommendation:
    """Map a Jikan anime/manga record onto a MediaRecommendation.

    Missing fields fall back to "Unknown", "No description available" or the
    media type's default label.
    """
    if media_type is MediaType.ANIME:
        creators = _names(item.get("studios"))
        default_type = "TV"
        why = "Popular anime on MyAnimeList"
    else:
        creators = _names(item.get("authors"))
        default_type = media_type.label
        why = f"Popular {media_type.value} on MyAnimeList"

    rec = MediaRecommendation(
        title=item.get("title") or "Unknown",
        creator=", ".join(creators) or "Unknown",
        type=item.get("type") or default_type,
        genres=_names(item.get("genres")),
        description=item.get("synopsis") or "No description available",
        similar_to=based_on,
        why_recommended=why,
        image=_image_url(item),
        url=item.get("url"),
        score=item.get("score"),
        media_type=media_type,
        mal_id=item.get("mal_id"),
    )
    if media_type is MediaType.ANIME:
        rec.episodes = item.get("episodes")
    else:
        rec.chapters = item.get("chapters")
    return rec
