"""Schemas for the health probe and the uniform error body."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    db: bool
    timestamp: datetime


class HealthErrorResponse(BaseModel):
    status: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every non-2xx response outside the health probe."""

    error: str
