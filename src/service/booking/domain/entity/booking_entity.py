from datetime import datetime
import re
from typing import Optional

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import InvalidArgumentError
from src.platform.logging.loguru_io import Logger


# 8-4-4-4-12 hex digits, nothing else (no braces, no urn: prefix, no missing hyphens)
CANONICAL_UUID_PATTERN = re.compile(
    r'^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$'
)


def parse_holder_id(value: str | UUID) -> UUID:
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str) or not CANONICAL_UUID_PATTERN.match(value):
        raise InvalidArgumentError(f'holderId must be a well-formed UUID, got {value!r}')
    return UUID(value)


@attrs.define
class Booking:
    showtime_id: int
    seat_number: int
    holder_id: UUID
    id: Optional[UUID] = None  # assigned by the seat ledger
    created_at: Optional[datetime] = None  # assigned by the seat ledger

    @classmethod
    @Logger.io
    def create(cls, *, showtime_id: int, seat_number: int, holder_id: str | UUID) -> 'Booking':
        if seat_number <= 0:
            raise InvalidArgumentError('seatNumber must be > 0')

        return cls(
            showtime_id=showtime_id,
            seat_number=seat_number,
            holder_id=parse_holder_id(holder_id),
        )
