from .movie_repository import SQLAlchemyMovieRepository

__all__ = [
    "SQLAlchemyMovieRepository",
]
