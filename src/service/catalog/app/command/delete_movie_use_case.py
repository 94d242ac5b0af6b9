from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger


class DeleteMovieUseCase:
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
    async def delete_movie(self, *, title: str) -> None:
        async with self.uow_factory() as uow:
            movie = await uow.movie_repo.get_by_title(title=title)
            if movie is None or movie.id is None:
                raise NotFoundError(f"Movie with title '{title}' not found")

            # Showtimes hold a foreign key to the movie
            if await uow.showtime_repo.exists_by_movie_id(movie_id=movie.id):
                raise ConflictError(f"Movie '{title}' is still scheduled in one or more showtimes")

            await uow.movie_repo.delete(movie_id=movie.id)
            await uow.commit()

        Logger.base.info(f'🗑️  [CATALOG] Deleted movie {movie.id}: {title}')
