from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.catalog.domain.entity.movie_entity import Movie
from src.service.scheduling.app.interface.i_movie_catalog import IMovieCatalog


class IMovieRepo(IMovieCatalog, ABC):
    """Movie catalog persistence"""

    @abstractmethod
    async def get_by_title(self, *, title: str) -> Optional[Movie]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def create(self, *, movie: Movie) -> Movie:
        """Persist a new movie; ConflictError if the title is taken."""
        pass

    @abstractmethod
    async def update(self, *, movie: Movie) -> Movie:
        """Full replace by id; ConflictError if the new title is taken."""
        pass

    @abstractmethod
    async def delete(self, *, movie_id: int) -> None:
        """ConflictError if the store rejects the delete (still referenced)."""
        pass
