from collections.abc import Callable
from decimal import Decimal

import pytest

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.exception.exceptions import NotFoundError, UnknownMovieError
from src.service.catalog.domain.entity.movie_entity import Movie
from src.service.scheduling.domain.entity.showtime_entity import Showtime
from test.constants import DEFAULT_THEATER, ELEVEN, NOON, ONE_PM, OTHER_THEATER, TEN, TWO_PM


UowFactory = Callable[[], SqlAlchemyUnitOfWork]


async def _store(uow_factory: UowFactory, showtime: Showtime) -> Showtime:
    async with uow_factory() as uow:
        created = await uow.showtime_repo.create(showtime=showtime)
        await uow.commit()
    return created


@pytest.mark.integration
class TestFindOverlapping:
    @pytest.mark.asyncio
    async def test_empty_store_has_no_overlap(self, uow_factory: UowFactory) -> None:
        async with uow_factory() as uow:
            result = await uow.showtime_repo.find_overlapping(
                theater='T', start_time=TEN, end_time=NOON, exclude_id=None
            )

        assert result == []

    @pytest.mark.asyncio
    async def test_returns_exactly_the_conflicting_record(
        self, uow_factory: UowFactory, movie: Movie
    ) -> None:
        # Given: [11:00, 13:00) in "T" and an unrelated theater at the same time
        assert movie.id is not None
        stored = await _store(
            uow_factory,
            Showtime.create(theater='T', start_time=ELEVEN, end_time=ONE_PM, movie_id=movie.id),
        )
        await _store(
            uow_factory,
            Showtime.create(theater=OTHER_THEATER, start_time=TEN, end_time=NOON, movie_id=movie.id),
        )

        # When
        async with uow_factory() as uow:
            result = await uow.showtime_repo.find_overlapping(
                theater='T', start_time=TEN, end_time=NOON, exclude_id=None
            )

        # Then
        assert [showtime.id for showtime in result] == [stored.id]

    @pytest.mark.asyncio
    async def test_touching_interval_is_not_an_overlap(
        self, uow_factory: UowFactory, movie: Movie
    ) -> None:
        # Given: only [12:00, 14:00) is stored
        assert movie.id is not None
        await _store(
            uow_factory,
            Showtime.create(theater='T', start_time=NOON, end_time=TWO_PM, movie_id=movie.id),
        )

        # When
        async with uow_factory() as uow:
            result = await uow.showtime_repo.find_overlapping(
                theater='T', start_time=TEN, end_time=NOON, exclude_id=None
            )

        # Then
        assert result == []

    @pytest.mark.asyncio
    async def test_exclude_id_skips_the_record_being_updated(
        self, uow_factory: UowFactory, showtime: Showtime
    ) -> None:
        async with uow_factory() as uow:
            included = await uow.showtime_repo.find_overlapping(
                theater=DEFAULT_THEATER, start_time=ELEVEN, end_time=ONE_PM, exclude_id=None
            )
            excluded = await uow.showtime_repo.find_overlapping(
                theater=DEFAULT_THEATER, start_time=ELEVEN, end_time=ONE_PM, exclude_id=showtime.id
            )

        assert [s.id for s in included] == [showtime.id]
        assert excluded == []


@pytest.mark.integration
class TestShowtimeRepoCrud:
    @pytest.mark.asyncio
    async def test_create_assigns_id_and_round_trips_fields(
        self, uow_factory: UowFactory, showtime: Showtime
    ) -> None:
        async with uow_factory() as uow:
            loaded = await uow.showtime_repo.get_by_id(showtime_id=showtime.id)

        assert showtime.id is not None
        assert loaded == showtime
        assert loaded is not None and loaded.price == Decimal('12.50')

    @pytest.mark.asyncio
    async def test_update_replaces_in_place(
        self, uow_factory: UowFactory, showtime: Showtime
    ) -> None:
        # Given
        replacement = Showtime.create(
            id=showtime.id,
            theater=OTHER_THEATER,
            start_time=ONE_PM,
            end_time=TWO_PM,
            movie_id=showtime.movie_id,
            price='7',
        )

        # When
        async with uow_factory() as uow:
            await uow.showtime_repo.update(showtime=replacement)
            await uow.commit()

        # Then
        async with uow_factory() as uow:
            loaded = await uow.showtime_repo.get_by_id(showtime_id=showtime.id)
        assert loaded == replacement

    @pytest.mark.asyncio
    async def test_update_unknown_id_is_not_found(
        self, uow_factory: UowFactory, movie: Movie
    ) -> None:
        assert movie.id is not None
        ghost = Showtime.create(
            id=999, theater=DEFAULT_THEATER, start_time=TEN, end_time=NOON, movie_id=movie.id
        )

        async with uow_factory() as uow:
            with pytest.raises(NotFoundError):
                await uow.showtime_repo.update(showtime=ghost)

    @pytest.mark.asyncio
    async def test_delete_then_get_returns_none(
        self, uow_factory: UowFactory, showtime: Showtime
    ) -> None:
        async with uow_factory() as uow:
            await uow.showtime_repo.delete(showtime_id=showtime.id)
            await uow.commit()

        async with uow_factory() as uow:
            assert await uow.showtime_repo.get_by_id(showtime_id=showtime.id) is None
            with pytest.raises(NotFoundError):
                await uow.showtime_repo.delete(showtime_id=showtime.id)

    @pytest.mark.asyncio
    async def test_uncommitted_write_is_rolled_back(
        self, uow_factory: UowFactory, movie: Movie
    ) -> None:
        # Given: a create that is never committed
        assert movie.id is not None
        async with uow_factory() as uow:
            pending = await uow.showtime_repo.create(
                showtime=Showtime.create(
                    theater=DEFAULT_THEATER, start_time=TEN, end_time=NOON, movie_id=movie.id
                )
            )

        # Then
        async with uow_factory() as uow:
            assert await uow.showtime_repo.get_by_id(showtime_id=pending.id) is None


@pytest.mark.integration
class TestMovieForeignKey:
    @pytest.mark.asyncio
    async def test_create_for_missing_movie_is_unknown_movie(self, uow_factory: UowFactory) -> None:
        async with uow_factory() as uow:
            with pytest.raises(UnknownMovieError, match='No movie found with id=404'):
                await uow.showtime_repo.create(
                    showtime=Showtime.create(
                        theater=DEFAULT_THEATER, start_time=TEN, end_time=NOON, movie_id=404
                    )
                )

        async with uow_factory() as uow:
            assert (
                await uow.showtime_repo.find_overlapping(
                    theater=DEFAULT_THEATER, start_time=TEN, end_time=NOON
                )
                == []
            )

    @pytest.mark.asyncio
    async def test_update_onto_missing_movie_is_unknown_movie(
        self, uow_factory: UowFactory, showtime: Showtime
    ) -> None:
        async with uow_factory() as uow:
            with pytest.raises(UnknownMovieError):
                await uow.showtime_repo.update(
                    showtime=Showtime.create(
                        id=showtime.id,
                        theater=DEFAULT_THEATER,
                        start_time=TEN,
                        end_time=NOON,
                        movie_id=404,
                    )
                )

        async with uow_factory() as uow:
            stored = await uow.showtime_repo.get_by_id(showtime_id=showtime.id)
        assert stored == showtime
