from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, ConfigDict, Field

from src.platform.types.camel_model import CamelModel, DbInt
from src.platform.types.uuid_utils_types import UtilsUUID


class BookingCreateRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'showtimeId': 1,
                'seatNumber': 15,
                'holderId': '84438967-f68f-4fa0-b620-0f08217e76af',
            }
        },
    )

    showtime_id: DbInt
    seat_number: DbInt  # lower bound is a domain rule
    # Raw string; the booking domain enforces the canonical UUID form
    holder_id: str = Field(
        validation_alias=AliasChoices('holderId', 'holder_id', 'userId'),
    )


class BookingCreateResponse(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'bookingId': '01936d8f-5e73-7c4e-a9c5-123456789abc'}},
    )

    booking_id: UtilsUUID  # UUID7


class BookingResponse(CamelModel):
    id: UtilsUUID
    showtime_id: int
    seat_number: int
    holder_id: UtilsUUID
    created_at: Optional[datetime] = None
