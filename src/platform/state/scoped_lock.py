"""
Scoped Lock using anyio

Serializes check-and-write units that share a scope key, e.g. every showtime
write for one theater or every booking attempt for one seat. Units with
different keys never wait on each other.

Lock waits are bounded by settings.LOCK_ACQUIRE_TIMEOUT_SECONDS; a caller
that cannot acquire in time gets TransientStoreFailureError and may retry.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import anyio

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import TransientStoreFailureError
from src.platform.logging.loguru_io import Logger


def theater_lock_key(theater: str) -> str:
    return f'showtime:theater:{theater}'


def seat_lock_key(*, showtime_id: int, seat_number: int) -> str:
    return f'booking:showtime:{showtime_id}:seat:{seat_number}'


class _Entry:
    __slots__ = ('lock', 'users')

    def __init__(self) -> None:
        self.lock = anyio.Lock()
        self.users = 0


class ScopedLock:
    """
    In-process lock registry keyed by scope string

    Entries are reference counted and dropped when the last holder or waiter
    leaves, so the registry only holds keys that are in use.
    """

    def __init__(self, *, acquire_timeout: Optional[float] = None) -> None:
        self.acquire_timeout = (
            acquire_timeout
            if acquire_timeout is not None
            else settings.LOCK_ACQUIRE_TIMEOUT_SECONDS
        )
        self._entries: dict[str, _Entry] = {}

    def active_keys(self) -> list[str]:
        return list(self._entries)

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        """
        Hold the lock for `key` for the duration of the block

        Args:
            key: Scope key (e.g., "booking:showtime:3:seat:12")

        Raises:
            TransientStoreFailureError: lock not acquired within acquire_timeout
        """
        entry = self._entries.get(key)
        if entry is None:
            entry = self._entries[key] = _Entry()
        entry.users += 1

        try:
            try:
                with anyio.fail_after(self.acquire_timeout):
                    await entry.lock.acquire()
            except TimeoutError:
                Logger.base.warning(
                    f'⏳ [LOCK] Timed out after {self.acquire_timeout}s waiting for: {key}'
                )
                raise TransientStoreFailureError(
                    f'Timed out waiting for lock on {key}, retry the request'
                )

            Logger.base.debug(f'🔒 [LOCK] Acquired lock: {key}')
            try:
                yield
            finally:
                entry.lock.release()
                Logger.base.debug(f'🔓 [LOCK] Released lock: {key}')
        finally:
            entry.users -= 1
            if entry.users == 0:
                self._entries.pop(key, None)
