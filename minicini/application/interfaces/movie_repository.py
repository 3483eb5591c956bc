"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from minicini.domain.entities import Movie


class MovieRepository(ABC):
    """Port for movie persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Movie | None:
        """Retrieve a single movie by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Movie]:
        """Retrieve every movie, most recently added first."""
        ...

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        """Persist a new movie and return it as stored, with the generated ID."""
        ...

    @abstractmethod
    async def update(self, movie: Movie) -> Movie | None:
        """Write back an existing movie. Returns None if the row is gone."""
        ...

    @abstractmethod
    async def delete(self, movie_id: int) -> bool:
        """Delete a movie. Returns True if a row was removed, False if none matched."""
        ...
