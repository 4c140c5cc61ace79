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


class MetricError(Exception):
    """
    Base class for all errors raised by promkit.
    """


class InvalidMetricNameError(MetricError, ValueError):
    """
    This exception is raised when a metric is given a name that is not valid in the exposition format.
    """

    def __init__(self, name: str) -> None:
        super().__init__("Invalid metric name %r" % name)
        self.name = name


class InvalidLabelError(MetricError, ValueError):
    """
    This exception is raised when a label name is malformed or reserved.
    """

    def __init__(self, label: str, reason: str) -> None:
        super().__init__("Invalid label %r: %s" % (label, reason))
        self.label = label
        self.reason = reason
