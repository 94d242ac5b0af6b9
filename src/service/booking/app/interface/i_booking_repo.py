from abc import ABC, abstractmethod
from typing import List, Optional

from uuid_utils import UUID

from src.service.booking.domain.entity.booking_entity import Booking


class IBookingRepo(ABC):
    """Seat ledger: append-only record of sold seats"""

    @abstractmethod
    async def is_seat_taken(self, *, showtime_id: int, seat_number: int) -> bool:
        pass

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Assign id and creation timestamp, then persist.

        SeatTakenError if the store already holds the (showtime, seat) pair.
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        pass

    @abstractmethod
    async def find_all(self) -> List[Booking]:
        pass

    @abstractmethod
    async def find_by_showtime(self, *, showtime_id: int) -> List[Booking]:
        pass
