"""FastAPI entrypoint exposing the random title picker."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from title_roulette.core.config import Settings, get_settings
from title_roulette.services.models import GENRES
from title_roulette.services.random_title import RandomTitleService
from title_roulette.services.tmdb import MediaKind, TitleNotFound, TMDbClient, TMDbError


logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Nenhum título encontrado"
FETCH_ERROR_MESSAGE = "Erro ao buscar título completo"

app = FastAPI(title="Title Roulette")


class TitleResponse(BaseModel):
    title: str | None
    year: str
    overview: str | None = None
    genres: list[str]
    poster: str | None = None
    rating: int | None = None
    status: str | None = None
    creators: list[str]
    trailer_url: str | None = None


class GenreResponse(BaseModel):
    id: int
    name: str


def get_random_title_service(settings: Settings = Depends(get_settings)) -> RandomTitleService:
    """Build a stateless service per request from explicit settings."""

    return RandomTitleService(
        TMDbClient.from_settings(settings),
        image_base=settings.tmdb_image_base,
        watch_base=settings.youtube_watch_base,
    )


@app.get(
    "/api/random",
    response_model=TitleResponse,
    responses={404: {"description": NOT_FOUND_MESSAGE}, 500: {"description": FETCH_ERROR_MESSAGE}},
)
async def random_title(
    kind: MediaKind = Query("movie", alias="type"),
    genre: str | None = Query(None),
    service: RandomTitleService = Depends(get_random_title_service),
):
    """Return one random title currently on the configured streaming provider."""

    try:
        card = await service.pick(kind, genre or None)
    except TitleNotFound as exc:
        logger.info("No titles found: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": NOT_FOUND_MESSAGE},
        )
    except TMDbError as exc:
        logger.warning("TMDb request failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": FETCH_ERROR_MESSAGE},
        )
    except Exception:
        logger.exception("Unexpected error while picking a random %s", kind)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": FETCH_ERROR_MESSAGE},
        )
    return TitleResponse(**card.as_dict())


@app.get("/api/genres", response_model=list[GenreResponse])
def list_genres() -> list[GenreResponse]:
    return [GenreResponse(id=g.id, name=g.name) for g in GENRES]
