from abc import ABC, abstractmethod


class IMovieCatalog(ABC):
    """Movie existence lookups needed to schedule a showtime"""

    @abstractmethod
    async def exists_by_id(self, *, movie_id: int) -> bool:
        pass
