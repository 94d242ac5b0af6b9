from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.domain.entity.booking_entity import Booking


class ListBookingsUseCase:
    def __init__(self, booking_repo: IBookingRepo):
        self.booking_repo = booking_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
    ) -> Self:
        return cls(booking_repo=booking_repo)

    @Logger.io
    async def list_bookings(self, *, showtime_id: Optional[int] = None) -> List[Booking]:
        if showtime_id is None:
            return await self.booking_repo.find_all()
        return await self.booking_repo.find_by_showtime(showtime_id=showtime_id)
