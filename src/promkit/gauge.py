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

import time
from collections.abc import Callable, Iterator, Mapping
from threading import Lock
from typing import Optional, TypeVar

from promkit import Clock
from promkit.context import ConcurrencyContext, RuntimeContext
from promkit.metric import Metric, MetricType, Sample

T = TypeVar("T")


class Gauge(Metric):
    """
    A metric that holds a single value, which can go up and down arbitrarily.

    body_temperature = Gauge("body_temperature", "Human body temperature")
    body_temperature.set(98.6)

    # Running a fever...
    body_temperature.inc(1.8)
    # Partial recovery
    body_temperature.dec(0.6)

    body_temperature.get()  # => 99.8

    The gauge does no locking. Use :class:`SynchronizedGauge` when several threads modify the same gauge.
    """

    def __init__(
        self,
        name: str,
        docstring: str = "",
        labels: Optional[Mapping[str, str]] = None,
        clock: Clock = time,
        timer: Callable[[], float] = time.perf_counter,
    ) -> None:
        """
        :param clock: source of the current UNIX time, used by :meth:`set_to_current_time`
        :param timer: monotonic time source in seconds, used to measure durations
        """
        super().__init__(name, docstring, labels)
        self.clock = clock
        self.timer = timer
        self._value = 0.0

    def get(self) -> float:
        "get the current value"
        return self._value

    def set(self, x: int | float) -> None:
        "set the gauge to the given number"
        self._value = float(x)

    def inc(self, x: int | float = 1.0) -> None:
        "increment the gauge by x (default is 1)"
        self.set(self._value + float(x))

    def dec(self, x: int | float = 1.0) -> None:
        "decrement the gauge by x (default is 1)"
        self.set(self._value - float(x))

    def set_to_current_time(self) -> None:
        "set the gauge to the current UNIX timestamp, in seconds"
        self.set(self.clock.time())

    def track_runtime(self) -> RuntimeContext:
        """
        Returns a context which sets the gauge to the runtime of its scope. It can be used in a (async)
        with-statement or as a decorator.
        """
        return RuntimeContext(self, self.timer)

    def track_concurrent(self) -> ConcurrencyContext:
        """
        Returns a context which counts how many scopes are active at a time. It can be used in a (async)
        with-statement or as a decorator.
        """
        return ConcurrencyContext(self)

    def measure_runtime(self, body: Callable[[], T]) -> T:
        """
        Call body, then set the gauge to its runtime. The gauge is also set when body raises an exception,
        after which the exception is propagated.
        """
        with self.track_runtime():
            return body()

    def count_concurrent(self, body: Callable[[], T]) -> T:
        """
        Increment the gauge, call body, then decrement the gauge. Wrap your event handlers with this to find out
        how many events are being processed at a time.
        """
        with self.track_concurrent():
            return body()

    @classmethod
    def type(cls) -> MetricType:
        return MetricType.gauge

    def samples(self) -> Iterator[Sample]:
        "yields a single sample bearing the gauge value"
        yield Sample(self.get())


class SynchronizedGauge(Gauge):
    """
    A gauge that is safe to modify from multiple threads
    """

    def __init__(
        self,
        name: str,
        docstring: str = "",
        labels: Optional[Mapping[str, str]] = None,
        clock: Clock = time,
        timer: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__(name, docstring, labels, clock, timer)
        self.lock = Lock()

    def set(self, x: int | float) -> None:
        with self.lock:
            self._value = float(x)

    def inc(self, x: int | float = 1.0) -> None:
        with self.lock:
            self._value = self._value + float(x)

    def dec(self, x: int | float = 1.0) -> None:
        self.inc(-x)
