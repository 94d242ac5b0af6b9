import anyio
import pytest

from src.platform.exception.exceptions import TransientStoreFailureError
from src.platform.state.scoped_lock import ScopedLock, seat_lock_key, theater_lock_key


@pytest.mark.unit
class TestLockKeys:
    def test_theater_key(self) -> None:
        assert theater_lock_key('Hall 1') == 'showtime:theater:Hall 1'

    def test_seat_key_is_per_showtime_and_seat(self) -> None:
        assert seat_lock_key(showtime_id=3, seat_number=12) == 'booking:showtime:3:seat:12'
        assert seat_lock_key(showtime_id=3, seat_number=12) != seat_lock_key(
            showtime_id=4, seat_number=12
        )


@pytest.mark.unit
class TestScopedLock:
    @pytest.mark.asyncio
    async def test_same_key_is_mutually_exclusive(self) -> None:
        # Given
        lock = ScopedLock(acquire_timeout=1.0)
        inside = 0
        max_inside = 0

        async def critical() -> None:
            nonlocal inside, max_inside
            async with lock.hold('k'):
                inside += 1
                max_inside = max(max_inside, inside)
                await anyio.sleep(0.01)
                inside -= 1

        # When
        async with anyio.create_task_group() as tg:
            for _ in range(5):
                tg.start_soon(critical)

        # Then
        assert max_inside == 1

    @pytest.mark.asyncio
    async def test_different_keys_do_not_block_each_other(self) -> None:
        lock = ScopedLock(acquire_timeout=0.05)

        async with lock.hold('a'):
            async with lock.hold('b'):
                assert sorted(lock.active_keys()) == ['a', 'b']

    @pytest.mark.asyncio
    async def test_acquire_timeout_is_transient(self) -> None:
        # Given: another task holds 'k' until told to let go
        lock = ScopedLock(acquire_timeout=0.05)
        acquired = anyio.Event()
        release = anyio.Event()

        async def holder() -> None:
            async with lock.hold('k'):
                acquired.set()
                await release.wait()

        async with anyio.create_task_group() as tg:
            tg.start_soon(holder)
            await acquired.wait()

            # When / Then
            with pytest.raises(TransientStoreFailureError) as exc_info:
                async with lock.hold('k'):
                    pass
            release.set()

        assert exc_info.value.retryable is True
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_keys_are_dropped_once_released(self) -> None:
        lock = ScopedLock(acquire_timeout=0.05)

        async with lock.hold('k'):
            pass
        with pytest.raises(RuntimeError):
            async with lock.hold('k'):
                raise RuntimeError('boom')

        assert lock.active_keys() == []
