from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError, OverlapError, UnknownMovieError
from src.platform.logging.loguru_io import Logger
from src.platform.state.scoped_lock import ScopedLock, theater_lock_key
from src.service.scheduling.domain.entity.showtime_entity import (
    Showtime,
    normalize_theater,
    to_price,
)


class UpdateShowtimeUseCase:
    """
    Replace theater, interval, movie and price of an existing showtime

    Checks run in the same order as on create, after the NotFound check.
    The overlap check ignores the showtime being updated, so shrinking or
    shifting a showtime inside its own old interval is allowed. The lock is
    taken on the target theater; leaving the old theater can never create
    an overlap there.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        scoped_lock: ScopedLock,
    ) -> None:
        self.uow_factory = uow_factory
        self.scoped_lock = scoped_lock

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        scoped_lock: ScopedLock = Depends(Provide[Container.scoped_lock]),
    ) -> Self:
        return cls(uow_factory=uow_factory, scoped_lock=scoped_lock)

    @Logger.io
    async def update_showtime(
        self,
        *,
        showtime_id: int,
        theater: str,
        start_time: datetime,
        end_time: datetime,
        movie_id: int,
        price: Optional[Decimal] = None,
    ) -> Showtime:
        lock_key = theater_lock_key((theater or '').strip())

        async with self.scoped_lock.hold(lock_key):
            async with self.uow_factory() as uow:
                if await uow.showtime_repo.get_by_id(showtime_id=showtime_id) is None:
                    raise NotFoundError(f'Showtime not found: {showtime_id}')

                normalize_theater(theater)
                to_price(price)

                if not await uow.movie_repo.exists_by_id(movie_id=movie_id):
                    raise UnknownMovieError(movie_id)

                showtime = Showtime.create(
                    id=showtime_id,
                    theater=theater,
                    start_time=start_time,
                    end_time=end_time,
                    movie_id=movie_id,
                    price=price,
                )

                overlapping = await uow.showtime_repo.find_overlapping(
                    theater=showtime.theater,
                    start_time=showtime.start_time,
                    end_time=showtime.end_time,
                    exclude_id=showtime_id,
                )
                if overlapping:
                    raise OverlapError(showtime.theater)

                updated = await uow.showtime_repo.update(showtime=showtime)
                await uow.commit()

        Logger.base.info(f'🎞️  [SCHEDULING] Updated showtime {showtime_id}')
        return updated
