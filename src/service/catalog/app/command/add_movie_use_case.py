from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.domain.entity.movie_entity import Movie


class AddMovieUseCase:
    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
    ) -> Self:
        return cls(uow_factory=uow_factory)

    @Logger.io
    async def add_movie(
        self,
        *,
        title: str,
        genre: str,
        duration: int,
        rating: float,
        release_year: int,
    ) -> Movie:
        movie = Movie.create(
            title=title,
            genre=genre,
            duration=duration,
            rating=rating,
            release_year=release_year,
        )

        async with self.uow_factory() as uow:
            if await uow.movie_repo.get_by_title(title=movie.title):
                raise ConflictError(f"Movie with title '{movie.title}' already exists")

            created = await uow.movie_repo.create(movie=movie)
            await uow.commit()

        Logger.base.info(f'🎬 [CATALOG] Added movie {created.id}: {created.title}')
        return created
