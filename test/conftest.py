"""
Test Configuration and Fixtures

This module provides:
- Test log directory setup (before any application import reads it)
- A throwaway SQLite database per test (aiosqlite, file-backed so concurrent
  sessions get their own connections)
- Unit-of-work factory, scoped lock and seed data fixtures for integration tests
- A TestClient bound to the per-test database for API tests

Architecture:
- Unit tests (test/**/unit/): mock repositories, no database
- Integration tests: real repositories and use cases against SQLite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# loguru_io_config reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'theater-ledger-test')


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.platform.database.orm_db_setting import Database, create_db_and_tables  # noqa: E402
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402
from src.platform.state.scoped_lock import ScopedLock  # noqa: E402
from src.service.catalog.domain.entity.movie_entity import Movie  # noqa: E402
from src.service.scheduling.domain.entity.showtime_entity import Showtime  # noqa: E402
from test.constants import DEFAULT_MOVIE, DEFAULT_MOVIE_PAYLOAD, DEFAULT_THEATER, NOON, TEN  # noqa: E402


# =============================================================================
# Database Fixtures
# =============================================================================
@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f'sqlite+aiosqlite:///{tmp_path / "ledger.db"}'


@pytest.fixture
async def database(database_url: str) -> AsyncGenerator[Database, None]:
    db = Database(url=database_url)
    await create_db_and_tables(db)
    yield db
    await db.dispose()


@pytest.fixture
def uow_factory(database: Database) -> Callable[[], SqlAlchemyUnitOfWork]:
    def _factory() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory=database.session)

    return _factory


@pytest.fixture
def scoped_lock() -> ScopedLock:
    return ScopedLock()


# =============================================================================
# Seed Data
# =============================================================================
@pytest.fixture
async def movie(uow_factory: Callable[[], SqlAlchemyUnitOfWork]) -> Movie:
    async with uow_factory() as uow:
        created = await uow.movie_repo.create(movie=Movie.create(**DEFAULT_MOVIE))
        await uow.commit()
    return created


@pytest.fixture
async def showtime(uow_factory: Callable[[], SqlAlchemyUnitOfWork], movie: Movie) -> Showtime:
    assert movie.id is not None
    async with uow_factory() as uow:
        created = await uow.showtime_repo.create(
            showtime=Showtime.create(
                theater=DEFAULT_THEATER,
                start_time=TEN,
                end_time=NOON,
                movie_id=movie.id,
                price='12.50',
            )
        )
        await uow.commit()
    return created


# =============================================================================
# API Client
# =============================================================================
@pytest.fixture
def client(database_url: str) -> Generator[TestClient, None, None]:
    from test.test_main import app

    # Read repos are singletons bound to the database they were first built with
    container.reset_singletons()
    with container.database.override(providers.Singleton(Database, url=database_url)):
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    container.reset_singletons()


@pytest.fixture
def create_movie(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _create(**overrides: Any) -> dict[str, Any]:
        payload = DEFAULT_MOVIE_PAYLOAD | overrides
        response = client.post('/movies', json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    return _create
