"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Exception hierarchy for profsink reporters and metric formatting.
"""

from __future__ import annotations


class ProfsinkError(RuntimeError):
    """Base error for reporter lifecycle failures."""


class ReporterStateError(ProfsinkError):
    """Raised when a reporter is used in a state that cannot serve the call."""


class ReporterNotConfiguredError(ReporterStateError):
    """Raised when a reporter has no credential and therefore no trace client."""


class ReporterClosedError(ReporterStateError):
    """Raised when a reporter is used after `close()`."""


class MetricFormatError(ValueError):
    """Base error for metric snapshots that cannot be flattened."""


class NullMetricValueError(MetricFormatError):
    """Raised when a metric value that must be stringified is `None`."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Metric '{key}' has a null value")
        self.key = key


class MetricShapeError(MetricFormatError):
    """Raised when a sequence mixes sub-metric mappings with other values."""
