"""Watchlist CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from minicini.application.schemas import (
    ErrorResponse,
    MovieCreate,
    MovieDeletedResponse,
    MovieResponse,
    MovieUpdate,
)
from minicini.application.services import MovieService
from minicini.domain.exceptions import EntityNotFoundError
from minicini.infrastructure.dependencies import get_movie_service

router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    responses={500: {"model": ErrorResponse}},
)

_NOT_FOUND = {404: {"model": ErrorResponse}}
_INVALID = {400: {"model": ErrorResponse}}


def movie_id_path(movie_id: str) -> int:
    """Parse the `{movie_id}` segment; anything that is not a number names no movie."""
    if not (movie_id.isascii() and movie_id.isdigit()):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Movie", movie_id)),
        )
    return int(movie_id)


@router.get("", response_model=list[MovieResponse])
async def list_movies(
    service: MovieService = Depends(get_movie_service),
) -> list[MovieResponse]:
    """Retrieve the whole watchlist, most recently added first."""
    movies = await service.list_movies()
    return [MovieResponse.model_validate(m, from_attributes=True) for m in movies]


@router.get("/{movie_id}", response_model=MovieResponse, responses=_NOT_FOUND)
async def get_movie(
    movie_id: int = Depends(movie_id_path),
    service: MovieService = Depends(get_movie_service),
) -> MovieResponse:
    """Retrieve a single movie by ID."""
    try:
        movie = await service.get_movie(movie_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MovieResponse.model_validate(movie, from_attributes=True)


@router.post(
    "",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
)
async def create_movie(
    data: MovieCreate,
    service: MovieService = Depends(get_movie_service),
) -> MovieResponse:
    """Add a movie to the watchlist."""
    movie = await service.create_movie(data)
    return MovieResponse.model_validate(movie, from_attributes=True)


@router.put("/{movie_id}", response_model=MovieResponse, responses={**_INVALID, **_NOT_FOUND})
async def update_movie(
    data: MovieUpdate,
    movie_id: int = Depends(movie_id_path),
    service: MovieService = Depends(get_movie_service),
) -> MovieResponse:
    """Patch an existing movie; fields left out of the body keep their value."""
    try:
        movie = await service.update_movie(movie_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MovieResponse.model_validate(movie, from_attributes=True)


@router.delete("/{movie_id}", response_model=MovieDeletedResponse, responses=_NOT_FOUND)
async def delete_movie(
    movie_id: int = Depends(movie_id_path),
    service: MovieService = Depends(get_movie_service),
) -> MovieDeletedResponse:
    """Delete a movie permanently."""
    try:
        await service.delete_movie(movie_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MovieDeletedResponse(message="Movie deleted successfully")
