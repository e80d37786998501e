"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Output reporters for JVM profiling agent metrics.

The Application Insights reporter flattens each nested metrics snapshot into
string properties and sends it as one informational trace.

Quick start::

    from profsink import AppInsightsOutputReporter

    reporter = AppInsightsOutputReporter()
    reporter.update_arguments({"appinsights.instrumentationkey": ["<key>"]})
    reporter.report("CpuAndMemory", {"heapMemoryTotalUsed": 1024})
    reporter.close()
"""

from .errors import (
    MetricFormatError,
    MetricShapeError,
    NullMetricValueError,
    ProfsinkError,
    ReporterClosedError,
    ReporterNotConfiguredError,
    ReporterStateError,
)
from .flatten import classify_metric, flatten_metrics, sanitize_label
from .reporters import (
    AppInsightsOutputReporter,
    ConsoleOutputReporter,
    FileOutputReporter,
    Reporter,
    create_reporter,
)
from .settings import INSTRUMENTATION_KEY_ARGUMENT, ReporterSettings
from .types import SeverityLevel

__all__ = [
    "Reporter",
    "AppInsightsOutputReporter",
    "ConsoleOutputReporter",
    "FileOutputReporter",
    "create_reporter",
    "ReporterSettings",
    "INSTRUMENTATION_KEY_ARGUMENT",
    "SeverityLevel",
    "flatten_metrics",
    "classify_metric",
    "sanitize_label",
    "ProfsinkError",
    "ReporterStateError",
    "ReporterNotConfiguredError",
    "ReporterClosedError",
    "MetricFormatError",
    "NullMetricValueError",
    "MetricShapeError",
]
