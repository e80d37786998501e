"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metrics reporter for Azure Application Insights.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping
from typing import Any

from ..clients import TraceClient, create_trace_client
from ..errors import ReporterClosedError, ReporterNotConfiguredError
from ..flatten import flatten_metrics
from ..settings import INSTRUMENTATION_KEY_ARGUMENT, ReporterSettings
from ..types import MetricsSnapshot, ReporterArguments, SeverityLevel
from .base import Reporter

logger = logging.getLogger("profsink.reporters.appinsights")


def _mask(secret: str) -> str:
    if len(secret) <= 4:
        return "***"
    return f"{secret[:4]}***"


class AppInsightsOutputReporter(Reporter):
    """
    Flatten profiler snapshots and send each one as an Application Insights trace.

    The reporter owns exactly one trace client. Without an instrumentation key
    it stays unconfigured and `report()` raises until `update_arguments`
    supplies `appinsights.instrumentationkey`.

    Usage::

        reporter = AppInsightsOutputReporter()
        reporter.update_arguments({"appinsights.instrumentationkey": ["<key>"]})
        reporter.report("CpuAndMemory", {"processCpuLoad": 0.25})
        reporter.close()
    """

    def __init__(
        self,
        *,
        instrumentation_key: str | None = None,
        backend: str | TraceClient | None = None,
        settings: ReporterSettings | None = None,
        client_config: Mapping[str, Any] | None = None,
    ) -> None:
        self._settings = settings or ReporterSettings.from_env()
        self._backend = backend if backend is not None else self._settings.trace_backend
        self._client_config = dict(client_config or {})
        self._lock = threading.RLock()
        self._client: TraceClient | None = None
        self._closed = False
        self._instrumentation_key = (
            instrumentation_key or self._settings.instrumentation_key
        )
        if self._instrumentation_key:
            self._client = self._create_client(self._instrumentation_key)

    @property
    def instrumentation_key(self) -> str | None:
        return self._instrumentation_key

    @property
    def client(self) -> TraceClient | None:
        """Live trace client, or `None` when unconfigured or closed."""
        return self._client

    @property
    def configured(self) -> bool:
        return self._client is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def _create_client(self, instrumentation_key: str) -> TraceClient:
        logger.info(
            "Initializing trace client (backend=%s, instrumentation_key=%s)",
            self._backend if isinstance(self._backend, str) else "custom",
            _mask(instrumentation_key),
        )
        return create_trace_client(
            self._backend,
            credential=instrumentation_key,
            config=self._client_config,
        )

    def _require_client(self) -> TraceClient:
        if self._closed:
            raise ReporterClosedError("AppInsightsOutputReporter is closed")
        if self._client is None:
            raise ReporterNotConfiguredError(
                "AppInsightsOutputReporter has no instrumentation key; "
                f"supply '{INSTRUMENTATION_KEY_ARGUMENT}'"
            )
        return self._client

    def report(self, profiler_name: str, metrics: MetricsSnapshot) -> None:
        """Flatten `metrics` and send them as one informational trace."""
        logger.debug("Profiler name: %s", profiler_name)
        with self._lock:
            client = self._require_client()
            formatted = flatten_metrics(metrics)
            if logger.isEnabledFor(logging.DEBUG):
                for key, value in formatted.items():
                    logger.debug("Formatted metric %s = %s", key, value)
            client.track_trace(
                self._settings.event_name,
                severity=SeverityLevel.INFORMATION,
                properties=formatted,
            )

    def update_arguments(self, arguments: ReporterArguments) -> None:
        """
        Re-initialize the trace client when an instrumentation key is supplied.

        Entries with other keys, empty keys, empty lists or an empty first
        value are ignored. The previous client is discarded without flushing.
        A prebuilt client passed as `backend` is kept as-is and a warning is
        logged, since it cannot be rebound to the new key.
        """
        with self._lock:
            if self._closed:
                raise ReporterClosedError("AppInsightsOutputReporter is closed")
            for key, values in arguments.items():
                if not key or not values:
                    continue
                value = values[0]
                if not value or key != INSTRUMENTATION_KEY_ARGUMENT:
                    continue
                logger.debug("Got instrumentation key %s", _mask(value))
                if not isinstance(self._backend, str):
                    logger.warning(
                        "Trace client instance ignores instrumentation key %s; "
                        "pass a backend id to rebuild the client",
                        _mask(value),
                    )
                self._client = self._create_client(value)
                self._instrumentation_key = value

    def close(self) -> None:
        """
        Flush, wait out the delivery grace period, then invalidate the client.

        Raises:
            ReporterClosedError: The reporter was already closed.
        """
        with self._lock:
            if self._closed:
                raise ReporterClosedError("AppInsightsOutputReporter already closed")
            if self._client is not None:
                self._client.flush()
                time.sleep(self._settings.close_grace_s)
            self._client = None
            self._closed = True
        logger.info("AppInsightsOutputReporter closed")
