from __future__ import annotations

import argparse
import json
import logging

from config import JIKAN_REQUEST_DELAY, LOG_LEVEL
from .models import MediaType, RecommendationRequest
from .services import JikanClient, RecommendationService, TitleNotFoundError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Recommend anime or manga similar to a title using the Jikan (MyAnimeList) API."
    )
    parser.add_argument("titles", nargs="+", help="Titles you like; the first one is looked up")
    parser.add_argument(
        "--media-type",
        default=MediaType.MANGA.value,
        choices=[m.value for m in MediaType],
        help="Kind of media to recommend (default: manga)",
    )
    parser.add_argument("--genre", action="append", default=[], help="Preferred genre (repeatable)")
    parser.add_argument("--exclude", action="append", default=[], help="Title to leave out (repeatable)")
    parser.add_argument(
        "--delay",
        type=float,
        default=JIKAN_REQUEST_DELAY,
        help=f"Seconds to wait before each Jikan request (default: {JIKAN_REQUEST_DELAY})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)

    request = RecommendationRequest(
        titles=args.titles,
        genres=args.genre,
        exclude=args.exclude,
        media_type=MediaType.parse(args.media_type),
    )
    service = RecommendationService(jikan_client=JikanClient(delay=args.delay))

    try:
        result = service.recommend(request)
    except TitleNotFoundError as e:
        raise SystemExit(str(e))

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
