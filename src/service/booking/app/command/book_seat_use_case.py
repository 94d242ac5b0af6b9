from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import SeatTakenError, UnknownShowtimeError
from src.platform.logging.loguru_io import Logger
from src.platform.state.scoped_lock import ScopedLock, seat_lock_key
from src.service.booking.domain.entity.booking_entity import Booking


class BookSeatUseCase:
    """
    Sell one numbered seat of a showtime to a holder

    Flow:
    1. Validate seat number and holder id (no I/O)
    2. Take the (showtime, seat) lock, open one transaction
    3. Check the showtime exists
    4. Check the seat is free
    5. Persist and commit

    Bookings for different seats never wait on each other. The ledger's
    unique (showtime, seat) constraint backs the lock up when several
    processes share one database.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        scoped_lock: ScopedLock,
    ) -> None:
        self.uow_factory = uow_factory
        self.scoped_lock = scoped_lock

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        scoped_lock: ScopedLock = Depends(Provide[Container.scoped_lock]),
    ) -> Self:
        return cls(uow_factory=uow_factory, scoped_lock=scoped_lock)

    @Logger.io
    async def book_seat(
        self, *, showtime_id: int, seat_number: int, holder_id: str | UUID
    ) -> Booking:
        """
        Raises:
            InvalidArgumentError: seat_number <= 0 or holder_id is not a canonical UUID
            UnknownShowtimeError: showtime_id does not exist
            SeatTakenError: the seat is already booked for this showtime
            TransientStoreFailureError: lock wait or transaction failed, safe to retry
        """
        booking = Booking.create(
            showtime_id=showtime_id,
            seat_number=seat_number,
            holder_id=holder_id,
        )

        lock_key = seat_lock_key(showtime_id=showtime_id, seat_number=seat_number)
        async with self.scoped_lock.hold(lock_key):
            async with self.uow_factory() as uow:
                if await uow.showtime_repo.get_by_id(showtime_id=showtime_id) is None:
                    raise UnknownShowtimeError(showtime_id)

                if await uow.booking_repo.is_seat_taken(
                    showtime_id=showtime_id, seat_number=seat_number
                ):
                    raise SeatTakenError(showtime_id=showtime_id, seat_number=seat_number)

                created = await uow.booking_repo.create(booking=booking)
                await uow.commit()

        Logger.base.info(
            f'🎟️  [BOOKING] Seat {seat_number} of showtime {showtime_id} booked: {created.id}'
        )
        return created
