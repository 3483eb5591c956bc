"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from minicini.application.interfaces import MovieRepository
from minicini.domain.entities import Movie
from minicini.infrastructure.database.models import MovieModel


class SQLAlchemyMovieRepository(MovieRepository):
    """Implements the MovieRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: MovieModel) -> Movie:
        """Map ORM model → domain entity."""
        return Movie(
            id=model.id,
            title=model.title,
            year=model.year,
            genre=model.genre,
            poster_url=model.poster_url,
            rating=model.rating,
            watched=model.watched,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Movie) -> MovieModel:
        """Map domain entity → ORM model (for creation)."""
        return MovieModel(
            title=entity.title,
            year=entity.year,
            genre=entity.genre,
            poster_url=entity.poster_url,
            rating=entity.rating,
            watched=entity.watched,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, movie_id: int) -> Movie | None:
        result = await self._session.get(MovieModel, movie_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Movie]:
        stmt = select(MovieModel).order_by(MovieModel.created_at.desc(), MovieModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, movie: Movie) -> Movie:
        model = self._to_model(movie)
        self._session.add(model)
        await self._session.flush()
        # Re-read so the caller sees exactly what a later fetch would return.
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, movie: Movie) -> Movie | None:
        model = await self._session.get(MovieModel, movie.id)
        if model is None:
            return None
        model.title = movie.title
        model.year = movie.year
        model.genre = movie.genre
        model.poster_url = movie.poster_url
        model.rating = movie.rating
        model.watched = movie.watched
        model.updated_at = movie.updated_at
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, movie_id: int) -> bool:
        result = await self._session.execute(delete(MovieModel).where(MovieModel.id == movie_id))
        return result.rowcount > 0
