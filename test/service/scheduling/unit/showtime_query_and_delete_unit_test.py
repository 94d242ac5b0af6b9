from unittest.mock import AsyncMock, MagicMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.scheduling.app.command.delete_showtime_use_case import DeleteShowtimeUseCase
from src.service.scheduling.app.query.get_showtime_use_case import GetShowtimeUseCase
from src.service.scheduling.domain.entity.showtime_entity import Showtime
from test.constants import DEFAULT_THEATER, NOON, TEN


@pytest.mark.unit
class TestGetShowtimeUseCase:
    @pytest.mark.asyncio
    async def test_returns_stored_showtime(self) -> None:
        # Arrange
        stored = Showtime(id=3, theater=DEFAULT_THEATER, start_time=TEN, end_time=NOON, movie_id=1)
        repo = AsyncMock()
        repo.get_by_id.return_value = stored

        # Act
        result = await GetShowtimeUseCase(showtime_repo=repo).get_showtime(showtime_id=3)

        # Assert
        assert result == stored
        repo.get_by_id.assert_awaited_once_with(showtime_id=3)

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_found(self) -> None:
        repo = AsyncMock()
        repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await GetShowtimeUseCase(showtime_repo=repo).get_showtime(showtime_id=3)


@pytest.mark.unit
class TestDeleteShowtimeUseCase:
    @pytest.mark.asyncio
    async def test_deletes_and_commits(
        self, mock_uow_factory: MagicMock, mock_uow: MagicMock
    ) -> None:
        await DeleteShowtimeUseCase(uow_factory=mock_uow_factory).delete_showtime(showtime_id=3)

        mock_uow.showtime_repo.delete.assert_awaited_once_with(showtime_id=3)
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_id_propagates_not_found(
        self, mock_uow_factory: MagicMock, mock_uow: MagicMock
    ) -> None:
        mock_uow.showtime_repo.delete.side_effect = NotFoundError('Showtime not found: 3')

        with pytest.raises(NotFoundError):
            await DeleteShowtimeUseCase(uow_factory=mock_uow_factory).delete_showtime(
                showtime_id=3
            )
        mock_uow.commit.assert_not_awaited()
