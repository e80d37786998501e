"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Reporter settings and explicit environment loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

INSTRUMENTATION_KEY_ARGUMENT = "appinsights.instrumentationkey"
DEFAULT_EVENT_NAME = "cluster metrics"
DEFAULT_TRACE_BACKEND = "appinsights"
DEFAULT_CLOSE_GRACE_S = 5.0


@dataclass(frozen=True, slots=True)
class ReporterSettings:
    """
    Explicit settings used by the Application Insights reporter.

    Attributes:
        instrumentation_key: Backend credential. `None` leaves the reporter
            unconfigured until `update_arguments` supplies one.
        trace_backend: Trace client backend id (`appinsights`, `otel`, `inmemory`).
        event_name: Fixed trace message used for every report.
        close_grace_s: Seconds `close()` blocks after flushing.
    """

    instrumentation_key: str | None = None
    trace_backend: str = DEFAULT_TRACE_BACKEND
    event_name: str = DEFAULT_EVENT_NAME
    close_grace_s: float = DEFAULT_CLOSE_GRACE_S

    @staticmethod
    def from_env() -> "ReporterSettings":
        """Load settings from environment variables."""
        return ReporterSettings(
            instrumentation_key=os.getenv("PROFSINK_APPINSIGHTS_INSTRUMENTATION_KEY")
            or None,
            trace_backend=os.getenv("PROFSINK_TRACE_BACKEND", DEFAULT_TRACE_BACKEND),
            event_name=os.getenv("PROFSINK_EVENT_NAME", DEFAULT_EVENT_NAME),
            close_grace_s=float(
                os.getenv("PROFSINK_CLOSE_GRACE_S", str(DEFAULT_CLOSE_GRACE_S))
            ),
        )
