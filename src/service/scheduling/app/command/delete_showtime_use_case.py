from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger


class DeleteShowtimeUseCase:
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
    async def delete_showtime(self, *, showtime_id: int) -> None:
        # Removing an interval cannot create an overlap, so no theater lock
        async with self.uow_factory() as uow:
            await uow.showtime_repo.delete(showtime_id=showtime_id)
            await uow.commit()

        Logger.base.info(f'🗑️  [SCHEDULING] Deleted showtime {showtime_id}')
