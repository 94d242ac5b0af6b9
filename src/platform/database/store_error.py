"""
Translate driver-level failures into TransientStoreFailureError

Only failures that a retry of the whole request could fix are translated:
lost connectivity, pool exhaustion, lock waits, serialization conflicts and
deadlocks. Integrity violations stay as they are so the repository that
caused them can map them to a domain conflict.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import exc as sa_exc

from src.platform.exception.exceptions import TransientStoreFailureError
from src.platform.logging.loguru_io import Logger


# PostgreSQL SQLSTATE codes
SERIALIZATION_FAILURE = '40001'
DEADLOCK_DETECTED = '40P01'
_RETRYABLE_SQLSTATES = frozenset({SERIALIZATION_FAILURE, DEADLOCK_DETECTED})


def _sqlstate(error: sa_exc.DBAPIError) -> Optional[str]:
    orig = error.orig
    return getattr(orig, 'sqlstate', None) or getattr(orig, 'pgcode', None)


def is_transient(error: BaseException) -> bool:
    if isinstance(error, sa_exc.IntegrityError):
        return False
    if isinstance(error, (sa_exc.OperationalError, sa_exc.InterfaceError, sa_exc.TimeoutError)):
        return True
    if isinstance(error, sa_exc.DBAPIError):
        return _sqlstate(error) in _RETRYABLE_SQLSTATES
    return False


def to_transient(error: BaseException) -> TransientStoreFailureError:
    Logger.base.warning(f'⚠️ [DB] Transient store failure: {type(error).__name__}: {error}')
    return TransientStoreFailureError(
        f'Store temporarily unavailable, retry the request ({type(error).__name__})'
    )


@asynccontextmanager
async def translate_store_errors() -> AsyncIterator[None]:
    try:
        yield
    except sa_exc.SQLAlchemyError as e:
        if is_transient(e):
            raise to_transient(e) from e
        raise
