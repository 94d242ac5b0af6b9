from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.constant.route_constant import (
    MOVIE_CREATE,
    MOVIE_DELETE,
    MOVIE_LIST,
    MOVIE_UPDATE,
)
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.command.add_movie_use_case import AddMovieUseCase
from src.service.catalog.app.command.delete_movie_use_case import DeleteMovieUseCase
from src.service.catalog.app.command.update_movie_use_case import UpdateMovieUseCase
from src.service.catalog.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.catalog.domain.entity.movie_entity import Movie
from src.service.catalog.driving_adapter.http_controller.schema.movie_schema import (
    MovieRequest,
    MovieResponse,
)


router = APIRouter()


def _to_response(movie: Movie) -> MovieResponse:
    assert movie.id is not None
    return MovieResponse(
        id=movie.id,
        title=movie.title,
        genre=movie.genre,
        duration=movie.duration,
        rating=movie.rating,
        release_year=movie.release_year,
    )


@router.post(MOVIE_CREATE, status_code=status.HTTP_200_OK)
@Logger.io
async def add_movie(
    request: MovieRequest,
    use_case: AddMovieUseCase = Depends(AddMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.add_movie(
        title=request.title,
        genre=request.genre,
        duration=request.duration,
        rating=request.rating,
        release_year=request.release_year,
    )
    return _to_response(movie)


@router.get(MOVIE_LIST)
@Logger.io
async def list_movies(
    use_case: ListMoviesUseCase = Depends(ListMoviesUseCase.depends),
) -> List[MovieResponse]:
    return [_to_response(movie) for movie in await use_case.list_movies()]


@router.post(MOVIE_UPDATE, status_code=status.HTTP_200_OK)
@Logger.io
async def update_movie(
    movie_title: str,
    request: MovieRequest,
    use_case: UpdateMovieUseCase = Depends(UpdateMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.update_movie(
        current_title=movie_title,
        title=request.title,
        genre=request.genre,
        duration=request.duration,
        rating=request.rating,
        release_year=request.release_year,
    )
    return _to_response(movie)


@router.delete(MOVIE_DELETE, status_code=status.HTTP_200_OK)
@Logger.io
async def delete_movie(
    movie_title: str,
    use_case: DeleteMovieUseCase = Depends(DeleteMovieUseCase.depends),
) -> None:
    await use_case.delete_movie(title=movie_title)
