from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.domain.entity.movie_entity import Movie


class UpdateMovieUseCase:
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
    async def update_movie(
        self,
        *,
        current_title: str,
        title: str,
        genre: str,
        duration: int,
        rating: float,
        release_year: int,
    ) -> Movie:
        """
        Replace every field of the movie currently titled `current_title`.

        Raises:
            NotFoundError: no movie has `current_title`
            ConflictError: renaming onto a title another movie already has
        """
        async with self.uow_factory() as uow:
            existing = await uow.movie_repo.get_by_title(title=current_title)
            if existing is None:
                raise NotFoundError(f"Movie with title '{current_title}' not found")

            movie = Movie.create(
                id=existing.id,
                title=title,
                genre=genre,
                duration=duration,
                rating=rating,
                release_year=release_year,
            )

            if movie.title != existing.title:
                clash = await uow.movie_repo.get_by_title(title=movie.title)
                if clash is not None:
                    raise ConflictError(f"Movie with title '{movie.title}' already exists")

            updated = await uow.movie_repo.update(movie=movie)
            await uow.commit()

        return updated
