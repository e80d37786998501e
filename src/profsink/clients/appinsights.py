"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Azure Application Insights trace client backed by the `applicationinsights` SDK.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..types import SeverityLevel

# The SDK maps Python logging level names onto its severity enum.
_SDK_SEVERITY: dict[SeverityLevel, str] = {
    SeverityLevel.VERBOSE: "DEBUG",
    SeverityLevel.INFORMATION: "INFO",
    SeverityLevel.WARNING: "WARNING",
    SeverityLevel.ERROR: "ERROR",
    SeverityLevel.CRITICAL: "CRITICAL",
}


@dataclass(slots=True)
class AppInsightsTraceClient:
    """
    Trace client that forwards events to Application Insights.

    The SDK client is built eagerly so an unusable credential or missing SDK
    fails at construction time. `sdk_client` injects a prebuilt client.
    """

    instrumentation_key: str
    endpoint: str | None = None
    sdk_client: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.sdk_client is None:
            self.sdk_client = self._build_sdk_client()

    def _build_sdk_client(self) -> Any:
        try:
            from applicationinsights import TelemetryClient, channel
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(
                "AppInsightsTraceClient requires 'applicationinsights'"
            ) from exc
        if self.endpoint is None:
            return TelemetryClient(self.instrumentation_key)
        sender = channel.SynchronousSender(service_endpoint_uri=self.endpoint)
        telemetry_channel = channel.TelemetryChannel(
            queue=channel.SynchronousQueue(sender)
        )
        return TelemetryClient(self.instrumentation_key, telemetry_channel)

    def track_trace(
        self,
        message: str,
        *,
        severity: SeverityLevel,
        properties: Mapping[str, str],
    ) -> None:
        self.sdk_client.track_trace(
            message,
            properties=dict(properties),
            severity=_SDK_SEVERITY[severity],
        )

    def flush(self) -> None:
        self.sdk_client.flush()


class AppInsightsTraceBackend:
    """Backend provider for Application Insights trace clients."""

    backend_id = "appinsights"

    def create_client(
        self,
        *,
        credential: str,
        config: Mapping[str, Any] | None = None,
    ) -> AppInsightsTraceClient:
        conf = dict(config or {})
        endpoint = conf.get("endpoint")
        return AppInsightsTraceClient(
            instrumentation_key=credential,
            endpoint=str(endpoint) if endpoint else None,
        )
