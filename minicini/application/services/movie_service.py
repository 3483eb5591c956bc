"""Application service (use case) for watchlist operations."""

import logging

from minicini.application.interfaces import MovieRepository
from minicini.application.schemas import MovieCreate, MovieUpdate
from minicini.domain.entities import MAX_MOVIE_ID, Movie
from minicini.domain.exceptions import EntityNotFoundError, MovieValidationError

logger = logging.getLogger(__name__)


class MovieService:
    """Orchestrates movie business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: MovieRepository):
        self._repository = repository

    @staticmethod
    def _ensure_storable_id(movie_id: int) -> None:
        """Ids outside the column's range can never match a row."""
        if not 1 <= movie_id <= MAX_MOVIE_ID:
            raise EntityNotFoundError("Movie", movie_id)

    async def get_movie(self, movie_id: int) -> Movie:
        self._ensure_storable_id(movie_id)
        movie = await self._repository.get_by_id(movie_id)
        if movie is None:
            raise EntityNotFoundError("Movie", movie_id)
        return movie

    async def list_movies(self) -> list[Movie]:
        return await self._repository.get_all()

    async def create_movie(self, data: MovieCreate) -> Movie:
        if not data.title:
            raise MovieValidationError("title", "Title is required")

        movie = Movie(
            title=data.title,
            year=data.year,
            genre=data.genre,
            poster_url=data.poster_url,
            rating=data.rating,
            watched=bool(data.watched),
        )
        created = await self._repository.create(movie)
        logger.info("Added movie %d (%r) to the watchlist", created.id, created.title)
        return created

    async def update_movie(self, movie_id: int, data: MovieUpdate) -> Movie:
        # None means "leave unchanged"; an explicit blank would empty the title.
        if data.title is not None and not data.title:
            raise MovieValidationError("title", "Title cannot be empty")

        movie = await self.get_movie(movie_id)
        movie.update(**data.model_dump())

        updated = await self._repository.update(movie)
        if updated is None:
            raise EntityNotFoundError("Movie", movie_id)
        return updated

    async def delete_movie(self, movie_id: int) -> None:
        self._ensure_storable_id(movie_id)
        deleted = await self._repository.delete(movie_id)
        if not deleted:
            raise EntityNotFoundError("Movie", movie_id)
        logger.info("Deleted movie %d", movie_id)
