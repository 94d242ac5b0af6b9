from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidArgumentError
from src.platform.logging.loguru_io import Logger


THEATER_MAX_LENGTH = 100
PRICE_QUANTUM = Decimal('0.01')
PRICE_MAX = Decimal('99999999.99')  # Numeric(10, 2)


def to_naive(value: datetime) -> datetime:
    """Drop any UTC offset without converting; instants are compared as wall-clock times."""
    return value.replace(tzinfo=None) if value.tzinfo is not None else value


def to_price(value: Decimal | float | int | str | None) -> Decimal:
    if value is None:
        return Decimal('0.00')
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise InvalidArgumentError(f'price must be a decimal number, got {value!r}')
    if not price.is_finite():
        raise InvalidArgumentError('price must be a finite number')
    if price < 0:
        raise InvalidArgumentError('price must be >= 0.0')
    if price >= PRICE_MAX + PRICE_QUANTUM / 2:  # would round past the column
        raise InvalidArgumentError(f'price must be <= {PRICE_MAX}')
    return price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


def normalize_theater(theater: str) -> str:
    theater = theater.strip() if theater else ''
    if not theater:
        raise InvalidArgumentError('theater must not be blank')
    if len(theater) > THEATER_MAX_LENGTH:
        raise InvalidArgumentError(f'theater must be at most {THEATER_MAX_LENGTH} characters')
    return theater


def check_interval(start_time: datetime, end_time: datetime) -> tuple[datetime, datetime]:
    start_time, end_time = to_naive(start_time), to_naive(end_time)
    if end_time <= start_time:
        raise InvalidArgumentError('endTime must be after startTime')
    return start_time, end_time


@attrs.define
class Showtime:
    theater: str
    start_time: datetime
    end_time: datetime
    movie_id: int
    price: Decimal = Decimal('0.00')
    id: Optional[int] = None

    def overlaps(self, *, start_time: datetime, end_time: datetime) -> bool:
        """Half-open intervals: touching boundaries do not overlap."""
        return self.start_time < end_time and start_time < self.end_time

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        theater: str,
        start_time: datetime,
        end_time: datetime,
        movie_id: int,
        price: Decimal | float | int | str | None = None,
        id: Optional[int] = None,
    ) -> 'Showtime':
        theater = normalize_theater(theater)
        normalized_price = to_price(price)
        start_time, end_time = check_interval(start_time, end_time)

        return cls(
            id=id,
            theater=theater,
            start_time=start_time,
            end_time=end_time,
            movie_id=movie_id,
            price=normalized_price,
        )
