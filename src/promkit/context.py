"""
    Copyright 2025 Inmanta

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

    Contact: code@inmanta.com
"""

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import TYPE_CHECKING, Optional, ParamSpec, Type, TypeVar, cast

from tornado import gen

if TYPE_CHECKING:
    from promkit.gauge import Gauge

LOGGER = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def is_coroutine(function: object) -> bool:
    return (
        inspect.iscoroutinefunction(function)
        or gen.is_coroutine_function(function)
        or isinstance(function, functools.partial)
        and is_coroutine(function.func)
    )


class GaugeContext:
    """
    Base class for scopes that update a gauge on entry and/or exit.

    Instances are context managers (``with`` and ``async with``) and decorators. When used as a decorator,
    every call of the decorated function runs in its own scope, so concurrent calls do not share state.
    Coroutine functions are wrapped in a coroutine, so the scope spans the awaited body.
    """

    def __init__(self, gauge: "Gauge") -> None:
        self.gauge = gauge

    def _recreate(self) -> "GaugeContext":
        return self

    def _log_failure(self, t: Optional[Type[BaseException]]) -> None:
        if t is not None:
            LOGGER.debug("Scope on gauge %s exited with %s", self.gauge.name, t.__name__)

    def __enter__(self) -> "GaugeContext":
        return self

    def __exit__(self, t: Optional[Type[BaseException]], v: Optional[BaseException], tb: Optional[TracebackType]) -> None:
        pass

    async def __aenter__(self) -> "GaugeContext":
        return self.__enter__()

    async def __aexit__(
        self, t: Optional[Type[BaseException]], v: Optional[BaseException], tb: Optional[TracebackType]
    ) -> None:
        self.__exit__(t, v, tb)

    def __call__(self, fn: Callable[P, R]) -> Callable[P, R]:
        if is_coroutine(fn):
            coro_fn = cast(Callable[P, Awaitable[object]], fn)

            @functools.wraps(fn)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> object:
                with self._recreate():
                    return await coro_fn(*args, **kwargs)

            return cast(Callable[P, R], async_wrapper)

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with self._recreate():
                return fn(*args, **kwargs)

        return wrapper


class RuntimeContext(GaugeContext):
    """
    Sets the gauge to the duration of the scope, in seconds.

    The clock starts when the context is created and restarts when the with-statement is entered. Without a
    with-statement, call :meth:`stop` to record the duration.
    """

    def __init__(self, gauge: "Gauge", timer: Callable[[], float]) -> None:
        super().__init__(gauge)
        self.timer = timer
        self.start_time = self.timer()

    def _recreate(self) -> "RuntimeContext":
        return RuntimeContext(self.gauge, self.timer)

    def stop(self) -> float:
        elapsed: float = self.timer() - self.start_time
        self.gauge.set(elapsed)
        return elapsed

    def __enter__(self) -> "RuntimeContext":
        self.start_time = self.timer()
        return self

    def __exit__(self, t: Optional[Type[BaseException]], v: Optional[BaseException], tb: Optional[TracebackType]) -> None:
        self.stop()
        self._log_failure(t)


class ConcurrencyContext(GaugeContext):
    """
    Increments the gauge when the scope is entered and decrements it when the scope is left, however it is left.
    A single instance may be entered any number of times concurrently.
    """

    def __enter__(self) -> "ConcurrencyContext":
        self.gauge.inc()
        return self

    def __exit__(self, t: Optional[Type[BaseException]], v: Optional[BaseException], tb: Optional[TracebackType]) -> None:
        self.gauge.dec()
        self._log_failure(t)
