from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.constant.route_constant import BOOKING_CREATE, BOOKING_GET, BOOKING_LIST
from src.platform.logging.loguru_io import Logger
from src.platform.types.camel_model import INT32_MAX
from src.platform.types.uuid_utils_types import UtilsUUID
from src.service.booking.app.command.book_seat_use_case import BookSeatUseCase
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingCreateResponse,
    BookingResponse,
)


router = APIRouter()


def _to_response(booking: Booking) -> BookingResponse:
    assert booking.id is not None
    return BookingResponse(
        id=booking.id,
        showtime_id=booking.showtime_id,
        seat_number=booking.seat_number,
        holder_id=booking.holder_id,
        created_at=booking.created_at,
    )


@router.post(BOOKING_CREATE, status_code=status.HTTP_200_OK)
@Logger.io
async def book_seat(
    request: BookingCreateRequest,
    use_case: BookSeatUseCase = Depends(BookSeatUseCase.depends),
) -> BookingCreateResponse:
    booking = await use_case.book_seat(
        showtime_id=request.showtime_id,
        seat_number=request.seat_number,
        holder_id=request.holder_id,
    )

    if booking.id is None:
        raise ValueError('Booking ID should not be None after creation.')

    return BookingCreateResponse(booking_id=booking.id)


@router.get(BOOKING_LIST)
@Logger.io
async def list_bookings(
    showtime_id: Optional[int] = Query(default=None, alias='showtimeId', le=INT32_MAX),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_bookings(showtime_id=showtime_id)
    return [_to_response(booking) for booking in bookings]


@router.get(BOOKING_GET)
@Logger.io
async def get_booking(
    booking_id: UtilsUUID,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id)
    return _to_response(booking)
