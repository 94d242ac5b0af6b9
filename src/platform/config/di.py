"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.state.scoped_lock import ScopedLock
from src.service.booking.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
from src.service.catalog.driven_adapter.repo.movie_repo_impl import MovieRepoImpl
from src.service.scheduling.driven_adapter.repo.showtime_repo_impl import ShowtimeRepoImpl


class Container(containers.DeclarativeContainer):
    # Database (lazy engine; tests override with a SQLite Database)
    database = providers.Singleton(Database)

    # One lock registry per process: theater and seat scopes share it
    scoped_lock = providers.Singleton(ScopedLock)

    # Unit of Work (Factory: a fresh session + transaction per atomic unit)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Read-side repositories (stateless - use session_factory per call)
    showtime_repo = providers.Singleton(
        ShowtimeRepoImpl, session_factory=database.provided.session
    )
    booking_repo = providers.Singleton(
        BookingRepoImpl, session_factory=database.provided.session
    )
    movie_repo = providers.Singleton(MovieRepoImpl, session_factory=database.provided.session)


container = Container()
