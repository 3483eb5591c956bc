"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minicini.application.services import MovieService
from minicini.infrastructure.database.repositories import SQLAlchemyMovieRepository
from minicini.infrastructure.database.session import get_db_session


async def get_movie_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MovieService, None]:
    """Provides a MovieService instance with its repository wired up."""
    repository = SQLAlchemyMovieRepository(session)
    yield MovieService(repository)
