from datetime import datetime

import pytest

from src.platform.exception.exceptions import InvalidArgumentError
from src.service.catalog.domain.entity.movie_entity import Movie
from test.constants import DEFAULT_MOVIE


@pytest.mark.unit
class TestMovieCreate:
    def test_valid_movie(self) -> None:
        movie = Movie.create(**DEFAULT_MOVIE)

        assert movie.title == 'Sample Movie Title'
        assert movie.id is None

    def test_title_is_trimmed(self) -> None:
        movie = Movie.create(**(DEFAULT_MOVIE | {'title': '  Padded  '}))

        assert movie.title == 'Padded'

    def test_current_year_is_allowed(self) -> None:
        movie = Movie.create(**(DEFAULT_MOVIE | {'release_year': datetime.now().year}))

        assert movie.release_year == datetime.now().year

    @pytest.mark.parametrize(
        'override,message',
        [
            ({'title': '   '}, 'Title must not be empty'),
            ({'genre': 'Sci-Fi'}, 'Genre must contain only English letters and spaces'),
            ({'genre': ''}, 'Genre must contain only English letters and spaces'),
            ({'genre': 'Action\n'}, 'Genre must contain only English letters and spaces'),
            ({'duration': 0}, 'Duration must be greater than 0'),
            ({'rating': -0.1}, 'Rating must be between 0.0 and 10.0'),
            ({'rating': 10.5}, 'Rating must be between 0.0 and 10.0'),
            ({'release_year': 1799}, 'Release year must not be before 1800'),
            ({'release_year': datetime.now().year + 1}, 'Release year must not exceed'),
        ],
    )
    def test_invalid_fields(self, override: dict, message: str) -> None:
        with pytest.raises(InvalidArgumentError, match=message):
            Movie.create(**(DEFAULT_MOVIE | override))
