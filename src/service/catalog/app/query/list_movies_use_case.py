from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_movie_repo import IMovieRepo
from src.service.catalog.domain.entity.movie_entity import Movie


class ListMoviesUseCase:
    def __init__(self, movie_repo: IMovieRepo):
        self.movie_repo = movie_repo

    @classmethod
    @inject
    def depends(
        cls,
        movie_repo: IMovieRepo = Depends(Provide[Container.movie_repo]),
    ) -> Self:
        return cls(movie_repo=movie_repo)

    @Logger.io
    async def list_movies(self) -> List[Movie]:
        return await self.movie_repo.list_all()
