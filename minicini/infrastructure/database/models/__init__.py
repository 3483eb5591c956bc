from .movie import MovieModel

__all__ = [
    "MovieModel",
]
