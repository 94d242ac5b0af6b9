from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import OverlapError, UnknownMovieError
from src.platform.logging.loguru_io import Logger
from src.platform.state.scoped_lock import ScopedLock, theater_lock_key
from src.service.scheduling.domain.entity.showtime_entity import (
    Showtime,
    normalize_theater,
    to_price,
)


class CreateShowtimeUseCase:
    """
    Schedule a movie in a theater for a time interval

    Flow:
    1. Validate theater and price (no I/O)
    2. Take the theater lock, open one transaction
    3. Check the movie exists
    4. Check end > start
    5. Check no showtime in the theater overlaps [start, end)
    6. Persist and commit

    Any failing step leaves the store untouched.
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
    async def create_showtime(
        self,
        *,
        theater: str,
        start_time: datetime,
        end_time: datetime,
        movie_id: int,
        price: Optional[Decimal] = None,
    ) -> Showtime:
        """
        Raises:
            InvalidArgumentError: blank/oversized theater, negative price, end <= start
            UnknownMovieError: movie_id is not in the catalog
            OverlapError: another showtime in the theater intersects the interval
            TransientStoreFailureError: lock wait or transaction failed, safe to retry
        """
        theater = normalize_theater(theater)
        to_price(price)

        async with self.scoped_lock.hold(theater_lock_key(theater)):
            async with self.uow_factory() as uow:
                if not await uow.movie_repo.exists_by_id(movie_id=movie_id):
                    raise UnknownMovieError(movie_id)

                showtime = Showtime.create(
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
                    exclude_id=None,
                )
                if overlapping:
                    raise OverlapError(showtime.theater)

                created = await uow.showtime_repo.create(showtime=showtime)
                await uow.commit()

        Logger.base.info(
            f'🎞️  [SCHEDULING] Created showtime {created.id} in {created.theater} '
            f'[{created.start_time.isoformat()}, {created.end_time.isoformat()})'
        )
        return created
