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

    Prometheus style metric primitives.
"""

from typing import Protocol


class Clock(Protocol):

    def time(self) -> float: ...


from .exceptions import InvalidLabelError as InvalidLabelError  # noqa F401
from .exceptions import InvalidMetricNameError as InvalidMetricNameError  # noqa F401
from .exceptions import MetricError as MetricError  # noqa F401
from .gauge import Gauge as Gauge  # noqa F401
from .gauge import SynchronizedGauge as SynchronizedGauge  # noqa F401
from .metric import Metric as Metric  # noqa F401
from .metric import MetricType as MetricType  # noqa F401
from .metric import Sample as Sample  # noqa F401
