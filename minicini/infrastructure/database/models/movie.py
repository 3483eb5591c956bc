"""SQLAlchemy ORM model for the Movie entity."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from minicini.infrastructure.database.base import Base, UTCDateTime


class MovieModel(Base):
    """ORM model — maps to the 'movies' table."""

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    genre: Mapped[str | None] = mapped_column(String(100), nullable=True)
    poster_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    rating: Mapped[float | None] = mapped_column(Numeric(3, 1, asdecimal=False), nullable=True)
    watched: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<MovieModel(id={self.id}, title='{self.title}')>"
