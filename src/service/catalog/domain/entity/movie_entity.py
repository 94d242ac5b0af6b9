from datetime import datetime
import re
from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidArgumentError
from src.platform.logging.loguru_io import Logger


GENRE_PATTERN = re.compile(r'[A-Za-z ]+')
MIN_RELEASE_YEAR = 1800
MAX_RATING = 10.0


@attrs.define
class Movie:
    title: str
    genre: str
    duration: int  # minutes
    rating: float
    release_year: int
    id: Optional[int] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        title: str,
        genre: str,
        duration: int,
        rating: float,
        release_year: int,
        id: Optional[int] = None,
    ) -> 'Movie':
        title = title.strip() if title else ''
        if not title:
            raise InvalidArgumentError('Title must not be empty')
        if not genre or not GENRE_PATTERN.fullmatch(genre):
            raise InvalidArgumentError('Genre must contain only English letters and spaces')
        if duration < 1:
            raise InvalidArgumentError('Duration must be greater than 0')
        if not 0.0 <= rating <= MAX_RATING:
            raise InvalidArgumentError(f'Rating must be between 0.0 and {MAX_RATING}')
        if release_year < MIN_RELEASE_YEAR:
            raise InvalidArgumentError(f'Release year must not be before {MIN_RELEASE_YEAR}')
        if release_year > datetime.now().year:
            raise InvalidArgumentError('Release year must not exceed the current year')

        return cls(
            id=id,
            title=title,
            genre=genre,
            duration=duration,
            rating=rating,
            release_year=release_year,
        )
