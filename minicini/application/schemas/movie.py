"""Pydantic DTOs (Data Transfer Objects) for the Movie feature."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


class _MovieFields(BaseModel):
    """Movie attributes accepted from the client.

    The browser form posts every input as a string, with ``""`` for fields
    left blank. Blank optional fields are normalized to ``None`` here so they
    are stored as null; numeric strings are coerced by pydantic's lax mode.
    The title is only trimmed: whether a blank title is an error depends on
    the operation and is decided by the service.
    """

    title: str | None = Field(None, max_length=255, examples=["Dune"])
    year: int | None = Field(None, examples=[2021])
    genre: str | None = Field(None, max_length=100, examples=["Sci-Fi"])
    poster_url: str | None = Field(
        None, max_length=1024, examples=["https://image.tmdb.org/t/p/w500/dune.jpg"]
    )
    rating: float | None = Field(None, ge=0, le=10, examples=[8.5])
    watched: bool | None = Field(None, examples=[False])

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("year", "genre", "poster_url", "rating", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("rating")
    @classmethod
    def _one_decimal(cls, value: float | None) -> float | None:
        return round(value, 1) if value is not None else None


class MovieCreate(_MovieFields):
    """Schema for adding a movie to the watchlist — only the title is required."""


class MovieUpdate(_MovieFields):
    """Schema for patching a movie — absent and null fields are left unchanged."""


class MovieResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    year: int | None
    genre: str | None
    poster_url: str | None
    rating: float | None
    watched: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MovieDeletedResponse(BaseModel):
    message: str = Field(..., examples=["Movie deleted successfully"])
