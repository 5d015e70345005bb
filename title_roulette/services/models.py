"""Shared dataclasses for service layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(slots=True)
class TitleCard:
    """Flattened title metadata rendered by the result card."""

    title: str | None
    year: str
    overview: str | None = None
    genres: list[str] = field(default_factory=list)
    poster: str | None = None
    rating: int | None = None
    status: str | None = None
    creators: list[str] = field(default_factory=list)
    trailer_url: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Genre:
    id: int
    name: str


# Genres offered by the selection form (TMDb ids, pt-BR labels).
GENRES: tuple[Genre, ...] = (
    Genre(28, "Ação"),
    Genre(35, "Comédia"),
    Genre(18, "Drama"),
    Genre(99, "Documentário"),
    Genre(27, "Terror"),
    Genre(10749, "Romance"),
    Genre(16, "Animação"),
    Genre(878, "Ficção Científica"),
    Genre(14, "Fantasia"),
    Genre(53, "Suspense"),
)
