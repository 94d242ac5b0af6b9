from pydantic import ConfigDict

from src.platform.types.camel_model import CamelModel, DbInt


class MovieRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'title': 'Sample Movie Title',
                'genre': 'Action',
                'duration': 120,
                'rating': 8.7,
                'releaseYear': 2025,
            }
        },
    )

    title: str
    genre: str
    duration: DbInt
    rating: float
    release_year: DbInt


class MovieResponse(CamelModel):
    id: int
    title: str
    genre: str
    duration: int
    rating: float
    release_year: int
