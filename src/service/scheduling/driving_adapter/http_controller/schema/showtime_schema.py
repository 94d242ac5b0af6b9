from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict

from src.platform.types.camel_model import CamelModel, DbInt, JsonDecimal


class ShowtimeRequest(CamelModel):
    """Used for both create and update; update replaces every field."""

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'movieId': 1,
                'theater': 'Sample Theater',
                'startTime': '2025-02-14T11:47:46.125405',
                'endTime': '2025-02-14T14:47:46.125405',
                'price': 50.2,
            }
        },
    )

    movie_id: DbInt
    theater: str
    start_time: datetime
    end_time: datetime
    price: Optional[Decimal] = None  # defaults to 0


class ShowtimeResponse(CamelModel):
    id: int
    movie_id: int
    theater: str
    start_time: datetime
    end_time: datetime
    price: JsonDecimal
