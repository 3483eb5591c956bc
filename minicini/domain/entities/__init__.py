from .movie import MAX_MOVIE_ID, Movie

__all__ = [
    "MAX_MOVIE_ID",
    "Movie",
]
