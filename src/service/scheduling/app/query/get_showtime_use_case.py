from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.scheduling.app.interface.i_showtime_repo import IShowtimeRepo
from src.service.scheduling.domain.entity.showtime_entity import Showtime


class GetShowtimeUseCase:
    def __init__(self, showtime_repo: IShowtimeRepo):
        self.showtime_repo = showtime_repo

    @classmethod
    @inject
    def depends(
        cls,
        showtime_repo: IShowtimeRepo = Depends(Provide[Container.showtime_repo]),
    ) -> Self:
        return cls(showtime_repo=showtime_repo)

    @Logger.io
    async def get_showtime(self, *, showtime_id: int) -> Showtime:
        showtime = await self.showtime_repo.get_by_id(showtime_id=showtime_id)

        if not showtime:
            raise NotFoundError(f'Showtime not found: {showtime_id}')

        return showtime
