"""Pick a random title from TMDb discovery and flatten it into a result card."""

from __future__ import annotations

import asyncio
import logging
import math
import random
from typing import Any, Iterable

from title_roulette.services.models import TitleCard
from title_roulette.services.tmdb import MediaKind, TitleNotFound, TMDbClient, TMDbError


logger = logging.getLogger(__name__)

DEFAULT_IMAGE_BASE = "https://image.tmdb.org/t/p/w500"
DEFAULT_WATCH_BASE = "https://www.youtube.com/watch?v="


class RandomTitleService:
    """Discover -> pick one at random -> details + videos in parallel -> TitleCard."""

    def __init__(
        self,
        client: TMDbClient,
        *,
        rng: random.Random | None = None,
        image_base: str = DEFAULT_IMAGE_BASE,
        watch_base: str = DEFAULT_WATCH_BASE,
    ) -> None:
        self.client = client
        self.rng = rng or random.Random()
        self.image_base = image_base.rstrip("/")
        self.watch_base = watch_base

    async def pick(self, kind: MediaKind = "movie", genre: str | None = None) -> TitleCard:
        results = await self.client.discover(kind, genre=genre)
        if not results:
            raise TitleNotFound(f"TMDb discover returned no {kind} titles for genre={genre!r}")

        chosen = results[self.rng.randrange(len(results))]
        try:
            title_id = chosen["id"]
        except (KeyError, TypeError) as exc:
            raise TMDbError("Discover candidate has no id") from exc

        # Wait for both calls to settle, then fail if either one did.
        details, videos = await asyncio.gather(
            self.client.details(kind, title_id),
            self.client.videos(kind, title_id),
            return_exceptions=True,
        )
        for outcome in (details, videos):
            if isinstance(outcome, BaseException):
                raise outcome
        try:
            return self._build_card(details, videos)
        except (KeyError, TypeError, AttributeError) as exc:
            raise TMDbError(f"Malformed TMDb payload for {kind}/{title_id}") from exc

    def _build_card(self, details: dict[str, Any], videos: Iterable[dict[str, Any]]) -> TitleCard:
        trailer = select_trailer(videos)
        return TitleCard(
            title=details.get("title") or details.get("name"),
            year=extract_year(details.get("release_date") or details.get("first_air_date")),
            overview=details.get("overview"),
            genres=[g["name"] for g in details["genres"]],
            poster=build_poster_url(details.get("poster_path"), image_base=self.image_base),
            rating=compute_rating(details.get("vote_average")),
            status=details.get("status"),
            creators=extract_creators(details),
            trailer_url=build_trailer_url(trailer, watch_base=self.watch_base),
        )


def extract_year(raw: str | None) -> str:
    """'1999-03-31' -> '1999'; empty string when no date is known."""

    return (raw or "").split("-")[0]


def compute_rating(vote_average: float | None) -> int | None:
    # 0 and missing are both "no rating"; halves round up, not to even
    if not vote_average:
        return None
    return math.floor(vote_average * 10 + 0.5)


def build_poster_url(path: str | None, *, image_base: str = DEFAULT_IMAGE_BASE) -> str | None:
    if not path:
        return None
    return f"{image_base}{path}"


def extract_creators(details: dict[str, Any], *, limit: int = 2) -> list[str]:
    """Names of the first ``limit`` entries of ``created_by`` (TV only upstream)."""

    creators = details.get("created_by") or []
    return [person["name"] for person in creators[:limit]]


def select_trailer(videos: Iterable[dict[str, Any]]) -> dict[str, Any] | None:
    """First YouTube trailer in upstream order, if any."""

    for video in videos:
        if video.get("type") == "Trailer" and video.get("site") == "YouTube":
            return video
    return None


def build_trailer_url(video: dict[str, Any] | None, *, watch_base: str = DEFAULT_WATCH_BASE) -> str | None:
    if not video:
        return None
    return f"{watch_base}{video['key']}"
