"""
Unit of Work Pattern - one database session and transaction per atomic unit

Architecture:
- UoW opens the session on enter and closes it on exit
- UoW is responsible for commit; anything not committed is rolled back on exit
- Repositories get the shared session from the UoW
- Use cases coordinate one or more repositories through the UoW
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Any, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.booking.app.interface.i_booking_repo import IBookingRepo
    from src.service.catalog.app.interface.i_movie_repo import IMovieRepo
    from src.service.scheduling.app.interface.i_showtime_repo import IShowtimeRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work

    Responsibilities:
    - Manage database session lifecycle
    - Coordinate one transaction across multiple repositories
    - Provide commit/rollback interface

    Usage:
        async with uow_factory() as uow:
            overlapping = await uow.showtime_repo.find_overlapping(...)
            showtime = await uow.showtime_repo.create(showtime=...)
            await uow.commit()
    """

    showtime_repo: IShowtimeRepo
    booking_repo: IBookingRepo
    movie_repo: IMovieRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> Optional[bool]:
        await self.rollback()
        return None

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh instance is created per atomic unit (providers.Factory); the
    session comes from Database.session, so retryable driver failures raised
    inside the block surface as TransientStoreFailureError.
    """

    def __init__(self, session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory
        self._session_cm: Optional[AbstractAsyncContextManager[AsyncSession]] = None
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.booking.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
        from src.service.catalog.driven_adapter.repo.movie_repo_impl import MovieRepoImpl
        from src.service.scheduling.driven_adapter.repo.showtime_repo_impl import (
            ShowtimeRepoImpl,
        )

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()

        # Create repositories with shared session
        self.showtime_repo = ShowtimeRepoImpl()
        self.showtime_repo.session = self.session
        self.booking_repo = BookingRepoImpl()
        self.booking_repo.session = self.session
        self.movie_repo = MovieRepoImpl()
        self.movie_repo.session = self.session

        return self

    async def __aexit__(self, *args: Any) -> Optional[bool]:
        # Closing the session rolls back whatever was not committed
        assert self._session_cm is not None
        session_cm, self._session_cm, self.session = self._session_cm, None, None
        return await session_cm.__aexit__(*args)

    async def _commit(self) -> None:
        assert self.session is not None
        await self.session.commit()

    async def rollback(self) -> None:
        assert self.session is not None
        await self.session.rollback()
