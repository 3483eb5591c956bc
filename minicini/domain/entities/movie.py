"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


# Largest value the `movies.id` INTEGER column can hold on every supported store.
MAX_MOVIE_ID = 2_147_483_647


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Movie:
    """Core domain entity representing one entry of the watchlist."""

    title: str
    year: int | None = None
    genre: str | None = None
    poster_url: str | None = None
    rating: float | None = None
    watched: bool = False
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def update(
        self,
        title: str | None = None,
        year: int | None = None,
        genre: str | None = None,
        poster_url: str | None = None,
        rating: float | None = None,
        watched: bool | None = None,
    ) -> None:
        """Merge a partial change set into the movie.

        Only non-None arguments overwrite the current value, so an absent
        field and an explicit null both leave the stored value untouched.
        ``updated_at`` is refreshed unconditionally.
        """
        if title is not None:
            self.title = title
        if year is not None:
            self.year = year
        if genre is not None:
            self.genre = genre
        if poster_url is not None:
            self.poster_url = poster_url
        if rating is not None:
            self.rating = rating
        if watched is not None:
            self.watched = watched
        self.updated_at = _utcnow()
