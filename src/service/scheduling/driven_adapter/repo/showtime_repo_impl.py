from contextlib import asynccontextmanager
from datetime import datetime
from decimal import Decimal
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError, UnknownMovieError
from src.platform.logging.loguru_io import Logger
from src.service.scheduling.app.interface.i_showtime_repo import IShowtimeRepo
from src.service.scheduling.domain.entity.showtime_entity import PRICE_QUANTUM, Showtime
from src.service.scheduling.driven_adapter.model.showtime_model import ShowtimeModel


class ShowtimeRepoImpl(IShowtimeRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Get session for query execution.

        If session is injected (from UoW), yield it directly without context management.
        Otherwise, use session_factory context manager.
        """
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _to_entity(db_showtime: ShowtimeModel) -> Showtime:
        """
        Convert ShowtimeModel to Showtime entity

        Note: SQLite hands Numeric back without a fixed scale, so price is
        re-quantized to keep two fraction digits on every backend.
        """
        return Showtime(
            id=db_showtime.id,
            theater=db_showtime.theater,
            start_time=db_showtime.start_time,
            end_time=db_showtime.end_time,
            movie_id=db_showtime.movie_id,
            price=Decimal(db_showtime.price).quantize(PRICE_QUANTUM),
        )

    @staticmethod
    async def _flush_against_movie(session: AsyncSession, *, movie_id: int) -> None:
        try:
            await session.flush()
        except IntegrityError as e:
            # FK to movie: the movie was deleted after the existence check
            raise UnknownMovieError(movie_id) from e

    @Logger.io
    async def create(self, *, showtime: Showtime) -> Showtime:
        async with self._get_session() as session:
            db_showtime = ShowtimeModel(
                theater=showtime.theater,
                start_time=showtime.start_time,
                end_time=showtime.end_time,
                movie_id=showtime.movie_id,
                price=showtime.price,
            )
            session.add(db_showtime)
            await self._flush_against_movie(session, movie_id=showtime.movie_id)
            return self._to_entity(db_showtime)

    @Logger.io
    async def get_by_id(self, *, showtime_id: int) -> Optional[Showtime]:
        async with self._get_session() as session:
            db_showtime = await session.get(ShowtimeModel, showtime_id)
            return self._to_entity(db_showtime) if db_showtime else None

    @Logger.io
    async def update(self, *, showtime: Showtime) -> Showtime:
        async with self._get_session() as session:
            db_showtime = await session.get(ShowtimeModel, showtime.id)
            if db_showtime is None:
                raise NotFoundError(f'Showtime not found: {showtime.id}')

            db_showtime.theater = showtime.theater
            db_showtime.start_time = showtime.start_time
            db_showtime.end_time = showtime.end_time
            db_showtime.movie_id = showtime.movie_id
            db_showtime.price = showtime.price
            await self._flush_against_movie(session, movie_id=showtime.movie_id)
            return self._to_entity(db_showtime)

    @Logger.io
    async def delete(self, *, showtime_id: int) -> None:
        async with self._get_session() as session:
            result = await session.execute(
                delete(ShowtimeModel).where(ShowtimeModel.id == showtime_id)
            )
            if result.rowcount == 0:
                raise NotFoundError(f'Showtime not found: {showtime_id}')

    @Logger.io
    async def find_overlapping(
        self,
        *,
        theater: str,
        start_time: datetime,
        end_time: datetime,
        exclude_id: Optional[int] = None,
    ) -> List[Showtime]:
        async with self._get_session() as session:
            stmt = select(ShowtimeModel).where(
                ShowtimeModel.theater == theater,
                ShowtimeModel.start_time < end_time,
                ShowtimeModel.end_time > start_time,
            )
            if exclude_id is not None:
                stmt = stmt.where(ShowtimeModel.id != exclude_id)

            result = await session.execute(stmt.order_by(ShowtimeModel.start_time))
            return [self._to_entity(db_showtime) for db_showtime in result.scalars().all()]

    @Logger.io
    async def exists_by_movie_id(self, *, movie_id: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(exists().where(ShowtimeModel.movie_id == movie_id))
            )
            return bool(result.scalar())
