"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Trace client backends and registry utilities.
"""

from .appinsights import AppInsightsTraceBackend, AppInsightsTraceClient
from .base import TraceClient, TraceClientBackend
from .inmemory import InMemoryTraceBackend, InMemoryTraceClient, RecordedTrace
from .otel import OpenTelemetryTraceBackend, OpenTelemetryTraceClient
from .registry import (
    TraceClientBackendError,
    create_trace_client,
    get_trace_backend,
    list_trace_backends,
    register_trace_backend,
)

# Register built-ins at import time.
register_trace_backend(AppInsightsTraceBackend())
register_trace_backend(InMemoryTraceBackend())
register_trace_backend(OpenTelemetryTraceBackend())

__all__ = [
    "TraceClient",
    "TraceClientBackend",
    "TraceClientBackendError",
    "register_trace_backend",
    "get_trace_backend",
    "list_trace_backends",
    "create_trace_client",
    "AppInsightsTraceBackend",
    "InMemoryTraceBackend",
    "OpenTelemetryTraceBackend",
    "AppInsightsTraceClient",
    "InMemoryTraceClient",
    "OpenTelemetryTraceClient",
    "RecordedTrace",
]
