from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_movie_repo import IMovieRepo
from src.service.catalog.domain.entity.movie_entity import Movie
from src.service.catalog.driven_adapter.model.movie_model import MovieModel


class MovieRepoImpl(IMovieRepo):
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
    def _to_entity(db_movie: MovieModel) -> Movie:
        return Movie(
            id=db_movie.id,
            title=db_movie.title,
            genre=db_movie.genre,
            duration=db_movie.duration,
            rating=db_movie.rating,
            release_year=db_movie.release_year,
        )

    @Logger.io
    async def exists_by_id(self, *, movie_id: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(select(exists().where(MovieModel.id == movie_id)))
            return bool(result.scalar())

    @Logger.io
    async def get_by_title(self, *, title: str) -> Optional[Movie]:
        async with self._get_session() as session:
            result = await session.execute(select(MovieModel).where(MovieModel.title == title))
            db_movie = result.scalar_one_or_none()
            return self._to_entity(db_movie) if db_movie else None

    @Logger.io
    async def list_all(self) -> List[Movie]:
        async with self._get_session() as session:
            result = await session.execute(select(MovieModel).order_by(MovieModel.id))
            return [self._to_entity(db_movie) for db_movie in result.scalars().all()]

    @Logger.io
    async def create(self, *, movie: Movie) -> Movie:
        async with self._get_session() as session:
            db_movie = MovieModel(
                title=movie.title,
                genre=movie.genre,
                duration=movie.duration,
                rating=movie.rating,
                release_year=movie.release_year,
            )
            session.add(db_movie)
            try:
                await session.flush()
            except IntegrityError as e:
                raise ConflictError(f"Movie with title '{movie.title}' already exists") from e
            return self._to_entity(db_movie)

    @Logger.io
    async def update(self, *, movie: Movie) -> Movie:
        async with self._get_session() as session:
            db_movie = await session.get(MovieModel, movie.id)
            if db_movie is None:
                raise NotFoundError(f'Movie not found: {movie.id}')

            db_movie.title = movie.title
            db_movie.genre = movie.genre
            db_movie.duration = movie.duration
            db_movie.rating = movie.rating
            db_movie.release_year = movie.release_year
            try:
                await session.flush()
            except IntegrityError as e:
                raise ConflictError(f"Movie with title '{movie.title}' already exists") from e
            return self._to_entity(db_movie)

    @Logger.io
    async def delete(self, *, movie_id: int) -> None:
        async with self._get_session() as session:
            try:
                result = await session.execute(delete(MovieModel).where(MovieModel.id == movie_id))
            except IntegrityError as e:
                raise ConflictError('Movie is still scheduled in one or more showtimes') from e
            if result.rowcount == 0:
                raise NotFoundError(f'Movie not found: {movie_id}')
