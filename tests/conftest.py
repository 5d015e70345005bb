from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest


BASE_URL = "https://api.themoviedb.org/3"


class FixedRng:
    """randrange() always answers the same index."""

    def __init__(self, index: int) -> None:
        self.index = index

    def randrange(self, stop: int) -> int:
        assert 0 <= self.index < stop
        return self.index


class FakeTMDb:
    """Routes httpx requests to canned TMDb payloads and records every call.

    Each route value may be a dict (served as 200 JSON), an int (empty body
    with that status) or an exception instance (raised as a transport error).
    """

    def __init__(
        self,
        *,
        discover: Any = None,
        details: Any = None,
        videos: Any = None,
    ) -> None:
        self.routes = {"discover": discover, "details": details, "videos": videos}
        self.requests: list[httpx.Request] = []

    def _route(self, request: httpx.Request) -> str:
        path = request.url.path
        if "/discover/" in path:
            return "discover"
        if path.endswith("/videos"):
            return "videos"
        return "details"

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        value = self.routes[self._route(request)]
        if isinstance(value, Exception):
            raise value
        if isinstance(value, int):
            return httpx.Response(value, request=request)
        return httpx.Response(200, json=value, request=request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self, route: str) -> list[httpx.Request]:
        return [r for r in self.requests if self._route(r) == route]


@pytest.fixture
def movie_details() -> dict[str, Any]:
    return {
        "id": 603,
        "title": "Matrix",
        "release_date": "1999-03-31",
        "overview": "Um hacker descobre a verdade sobre a realidade.",
        "genres": [{"id": 28, "name": "Ação"}, {"id": 878, "name": "Ficção científica"}],
        "poster_path": "/abc.jpg",
        "vote_average": 7.3,
        "status": "Released",
    }


@pytest.fixture
def series_details() -> dict[str, Any]:
    return {
        "id": 66732,
        "name": "Stranger Things",
        "first_air_date": "2016-07-15",
        "overview": "Um garoto desaparece.",
        "genres": [{"id": 18, "name": "Drama"}],
        "poster_path": None,
        "vote_average": 0,
        "status": "Ended",
        "created_by": [
            {"name": "Matt Duffer"},
            {"name": "Ross Duffer"},
            {"name": "Shawn Levy"},
            {"name": "Dan Cohen"},
            {"name": "Iain Paterson"},
        ],
    }


@pytest.fixture
def trailer_videos() -> dict[str, Any]:
    return {
        "results": [
            {"type": "Teaser", "site": "YouTube", "key": "a"},
            {"type": "Trailer", "site": "Vimeo", "key": "b"},
            {"type": "Trailer", "site": "YouTube", "key": "c"},
        ]
    }


@pytest.fixture
def discover_page() -> Callable[[int], dict[str, Any]]:
    def _page(count: int) -> dict[str, Any]:
        return {"page": 1, "results": [{"id": 100 + i} for i in range(count)]}

    return _page
