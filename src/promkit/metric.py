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

import dataclasses
import logging
import re
from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Optional

from promkit.exceptions import InvalidLabelError, InvalidMetricNameError

LOGGER = logging.getLogger(__name__)

METRIC_NAME_RE = re.compile(r"[a-zA-Z_:][a-zA-Z0-9_:]*")
LABEL_NAME_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

# used by histograms and summaries to carry bucket bounds and quantiles
RESERVED_LABELS = frozenset(["le", "quantile"])


class MetricType(str, Enum):
    gauge = "gauge"
    counter = "counter"
    histogram = "histogram"
    summary = "summary"
    untyped = "untyped"


@dataclasses.dataclass(frozen=True)
class Sample:
    """
    A single observation emitted by a metric.

    :param value: the observed value
    :param labels: labels that distinguish this observation from the other samples of the same metric
    :param suffix: appended to the metric name when rendered, e.g. "sum" or "count"
    """

    value: float
    labels: Mapping[str, str] = dataclasses.field(default_factory=dict)
    suffix: str = ""

    def __hash__(self) -> int:
        return hash((self.value, frozenset(self.labels.items()), self.suffix))


def valid_metric_name(name: str) -> bool:
    return METRIC_NAME_RE.fullmatch(name) is not None


def valid_label_name(name: str) -> bool:
    return LABEL_NAME_RE.fullmatch(name) is not None and not name.startswith("__") and name not in RESERVED_LABELS


class Metric:
    """
    Base class for all metric types.

    A metric has a name, a help text and a fixed set of labels. Subclasses report their kind through
    :meth:`type` and their current state through :meth:`samples`.
    """

    def __init__(self, name: str, docstring: str = "", labels: Optional[Mapping[str, str]] = None) -> None:
        if not valid_metric_name(name):
            raise InvalidMetricNameError(name)
        labels = dict(labels or {})
        for label in labels:
            if not LABEL_NAME_RE.fullmatch(label):
                raise InvalidLabelError(label, "not a valid label name")
            if label.startswith("__"):
                raise InvalidLabelError(label, "names starting with '__' are reserved for internal use")
            if label in RESERVED_LABELS:
                raise InvalidLabelError(label, "reserved label")
        self.name = name
        self.docstring = docstring
        self.labels: Mapping[str, str] = MappingProxyType(labels)
        LOGGER.debug("Created %s %s", type(self).__name__, name)

    @classmethod
    def type(cls) -> MetricType:
        """
        Returns the kind of this metric, so a registry can dispatch on it without an instance.
        """
        raise NotImplementedError()

    def get_labels(self) -> dict[str, str]:
        return dict(self.labels)

    def samples(self) -> Iterator[Sample]:
        "A subclass of Metric should implement this method"
        raise NotImplementedError()

    def __repr__(self) -> str:
        return "%s(%r)" % (type(self).__name__, self.name)
