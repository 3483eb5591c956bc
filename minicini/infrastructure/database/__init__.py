from .base import Base, UTCDateTime
from .models import MovieModel
from .session import Database, get_database, get_db_session

__all__ = [
    "Base",
    "UTCDateTime",
    "Database",
    "get_database",
    "get_db_session",
    "MovieModel",
]
