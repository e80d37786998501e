"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Shared type aliases for metric snapshots and reporter arguments.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeAlias

MetricScalar: TypeAlias = str | int | float | bool
MetricValue: TypeAlias = (
    MetricScalar
    | list[MetricScalar]
    | list[Mapping[str, Any]]
    | Mapping[str, Mapping[str, Any]]
    | None
)
MetricsSnapshot: TypeAlias = Mapping[str, MetricValue]
FlattenedMetrics: TypeAlias = dict[str, str]
ReporterArguments: TypeAlias = Mapping[str, list[str]]


class SeverityLevel(str, Enum):
    """Trace severity levels understood by trace clients."""

    VERBOSE = "verbose"
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
