from contextlib import asynccontextmanager
import uuid
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
import uuid_utils
from uuid_utils import UUID

from src.platform.exception.exceptions import SeatTakenError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.driven_adapter.model.booking_model import BookingModel


class BookingRepoImpl(IBookingRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Get session for query execution.

        If session is injected (from UoW), yield it directly without context management.
        Otherwise, use session_factory context manager.
        """
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        """
        Convert BookingModel to Booking entity

        Note: SQLAlchemy Uuid(as_uuid=True) returns stdlib uuid.UUID; the
        domain works with uuid_utils.UUID.
        """
        return Booking(
            id=UUID(str(db_booking.id)),
            showtime_id=db_booking.showtime_id,
            seat_number=db_booking.seat_number,
            holder_id=UUID(str(db_booking.holder_id)),
            created_at=db_booking.created_at,
        )

    @Logger.io
    async def is_seat_taken(self, *, showtime_id: int, seat_number: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(
                    exists().where(
                        BookingModel.showtime_id == showtime_id,
                        BookingModel.seat_number == seat_number,
                    )
                )
            )
            return bool(result.scalar())

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self._get_session() as session:
            db_booking = BookingModel(
                id=uuid.UUID(str(uuid_utils.uuid7())),
                showtime_id=booking.showtime_id,
                seat_number=booking.seat_number,
                holder_id=uuid.UUID(str(booking.holder_id)),
            )
            session.add(db_booking)
            try:
                await session.flush()
            except IntegrityError as e:
                # Unique (showtime_id, seat_number) caught a writer the seat lock did not see
                raise SeatTakenError(
                    showtime_id=booking.showtime_id, seat_number=booking.seat_number
                ) from e

            await session.refresh(db_booking)  # load server-side created_at
            return self._to_entity(db_booking)

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        async with self._get_session() as session:
            db_booking = await session.get(BookingModel, uuid.UUID(str(booking_id)))
            return self._to_entity(db_booking) if db_booking else None

    @Logger.io
    async def find_all(self) -> List[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel).order_by(BookingModel.showtime_id, BookingModel.seat_number)
            )
            return [self._to_entity(db_booking) for db_booking in result.scalars().all()]

    @Logger.io
    async def find_by_showtime(self, *, showtime_id: int) -> List[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.showtime_id == showtime_id)
                .order_by(BookingModel.seat_number)
            )
            return [self._to_entity(db_booking) for db_booking in result.scalars().all()]
