"""Thin async wrapper around the TMDb API endpoints used by the title picker."""

from __future__ import annotations

import logging
from typing import Any, Literal

import httpx

from title_roulette.core.config import Settings


logger = logging.getLogger(__name__)

MediaKind = Literal["movie", "tv"]


class TMDbError(Exception):
    """Base exception for TMDb-related failures."""


class TitleNotFound(TMDbError):
    """Raised when discovery returns no candidate titles."""


class TMDbClient:
    """Simple async TMDb HTTP client using API key auth."""

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str = "https://api.themoviedb.org/3",
        language: str = "pt-BR",
        region: str = "BR",
        provider_id: int = 8,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.region = region
        self.provider_id = provider_id
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "TMDbClient":
        return cls(
            api_key=settings.tmdb_api_key,
            base_url=settings.tmdb_base_url,
            language=settings.tmdb_language,
            region=settings.tmdb_region,
            provider_id=settings.tmdb_provider_id,
            timeout=settings.tmdb_timeout,
            transport=transport,
        )

    async def _get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        if not self.api_key:
            raise TMDbError("TMDB_API_KEY is not configured")
        url = f"{self.base_url}{path}"
        query: dict[str, Any] = {"api_key": self.api_key}
        if params:
            query.update({k: v for k, v in params.items() if v is not None})
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params=query)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            # str(exc) carries the full URL, api_key included
            raise TMDbError(f"GET {path} failed with HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise TMDbError(f"GET {path} failed: {type(exc).__name__}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise TMDbError(f"GET {path} returned a non-JSON body") from exc

    async def discover(self, kind: MediaKind, *, genre: str | None = None) -> list[dict[str, Any]]:
        """Return the first popularity-sorted page of titles on the configured provider."""

        payload = await self._get(
            f"/discover/{kind}",
            params={
                "with_watch_providers": self.provider_id,
                "watch_region": self.region,
                "with_genres": genre or "",
                "sort_by": "popularity.desc",
                "language": self.language,
                "include_adult": False,
                "page": 1,
            },
        )
        logger.debug("TMDb discover payload: %s", payload)
        if not isinstance(payload, dict):
            raise TMDbError("Unexpected discover payload")
        return payload.get("results") or []

    async def details(self, kind: MediaKind, title_id: int | str) -> dict[str, Any]:
        payload = await self._get(f"/{kind}/{title_id}", params={"language": self.language})
        logger.debug("TMDb details payload: %s", payload)
        if not isinstance(payload, dict):
            raise TMDbError("Unexpected details payload")
        return payload

    async def videos(self, kind: MediaKind, title_id: int | str) -> list[dict[str, Any]]:
        payload = await self._get(f"/{kind}/{title_id}/videos", params={"language": self.language})
        logger.debug("TMDb videos payload: %s", payload)
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise TMDbError("Unexpected videos payload")
        return results
