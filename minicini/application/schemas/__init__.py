from .movie import MovieCreate, MovieUpdate, MovieResponse, MovieDeletedResponse
from .health import HealthResponse, HealthErrorResponse, ErrorResponse

__all__ = [
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "MovieDeletedResponse",
    "HealthResponse",
    "HealthErrorResponse",
    "ErrorResponse",
]
