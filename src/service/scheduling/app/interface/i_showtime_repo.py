from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.service.scheduling.domain.entity.showtime_entity import Showtime


class IShowtimeRepo(ABC):
    """
    Interval store for showtimes

    No method here checks for conflicts; callers run find_overlapping and the
    write inside one locked unit of work.
    """

    @abstractmethod
    async def create(self, *, showtime: Showtime) -> Showtime:
        """Assign an id and persist."""
        pass

    @abstractmethod
    async def get_by_id(self, *, showtime_id: int) -> Optional[Showtime]:
        pass

    @abstractmethod
    async def update(self, *, showtime: Showtime) -> Showtime:
        """Replace theater, times, movie and price by id; NotFoundError if unknown."""
        pass

    @abstractmethod
    async def delete(self, *, showtime_id: int) -> None:
        """NotFoundError if unknown. Bookings are left untouched."""
        pass

    @abstractmethod
    async def find_overlapping(
        self,
        *,
        theater: str,
        start_time: datetime,
        end_time: datetime,
        exclude_id: Optional[int] = None,
    ) -> List[Showtime]:
        """
        Every showtime in `theater` whose interval intersects [start_time, end_time)

        Args:
            exclude_id: skip this showtime (the one being updated); None skips nothing
        """
        pass

    @abstractmethod
    async def exists_by_movie_id(self, *, movie_id: int) -> bool:
        pass
