"""
LoguruIO - argument / return / exception logging for use cases and repositories

    @Logger.io
    async def book_seat(self, *, showtime_id: int, seat_number: int, holder_id: str): ...

Every call logs its arguments and its return value at DEBUG, with the time
spent inside the call, so waits on a contended theater or seat lock show up
next to the call that waited. Exceptions are logged once, at the innermost
decorated frame, and re-raised:

- CustomBaseError with a 4xx status (overlap, seat taken, bad input) is an
  expected refusal: WARNING, no traceback
- CustomBaseError with a 5xx status (transient store failure): ERROR, no traceback
- anything else: ERROR with traceback
"""

from collections.abc import Awaitable
from functools import wraps
from inspect import iscoroutinefunction
from time import perf_counter
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)

_F = TypeVar('_F', bound=Callable[..., Any])


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}
        self.depth = 2  # _enter/_leave -> wrapper -> caller

    def _bound(self, extra_depth: int = 0) -> 'LoguruLogger':
        return self._custom_logger.bind(**self.extra).opt(depth=self.depth + extra_depth)

    def _enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> float:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:  # mask_sensitive is not free
            self._bound().debug(
                f'args: {self.mask_sensitive(args)}, kwargs: {self.mask_sensitive(kwargs)}'
            )
        return perf_counter()

    def _leave(self, started: float, return_value: Any) -> None:
        if settings.DEBUG:
            elapsed_ms = (perf_counter() - started) * 1000
            self._bound().debug(
                f'return ({elapsed_ms:.1f}ms): {self.mask_sensitive(return_value)}'
            )

    def _fail(self, e: Exception) -> None:
        # Outer decorated frames see the same exception again
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]

        bound = self._bound(extra_depth=1)
        if not isinstance(e, CustomBaseError):
            bound.exception(f'{type(e).__name__}: {e}')
        elif e.status_code < 500:
            bound.warning(f'{type(e).__name__}: {e.message}')
        else:
            bound.error(f'{type(e).__name__}: {e.message}')

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def mask_sensitive(self, data: Any) -> Any:
        if isinstance(data, dict):
            processed_data: Any = {
                key: self.mask_sensitive(should_mask_keyword(key, value))
                for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            processed_data = type(data)(self.mask_sensitive(item) for item in data)
        else:
            processed_data = mask_sensitive(data)

        return truncate_content(processed_data) if self.truncate_content else processed_data

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                started = self._enter(args, kwargs)
                try:
                    return_value = await cast(Awaitable[Any], func(*args, **kwargs))
                except Exception as e:
                    self._fail(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()
                self._leave(started, return_value)
                return return_value

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            started = self._enter(args, kwargs)
            try:
                return_value = func(*args, **kwargs)
            except Exception as e:
                self._fail(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()
            self._leave(started, return_value)
            return return_value

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return decorator(func) if func else decorator
