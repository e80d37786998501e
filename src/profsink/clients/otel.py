"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

OpenTelemetry trace client for collector-based telemetry pipelines.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..types import SeverityLevel

SEVERITY_ATTRIBUTE = "profsink.severity"
CREDENTIAL_ATTRIBUTE = "profsink.credential"


@dataclass(slots=True)
class OpenTelemetryTraceClient:
    """
    Trace client that emits each trace as one finished span.

    Flattened properties become span attributes. The credential is attached as
    an attribute only when `include_credential` is set. Without
    `tracer_provider` the globally configured provider is used.
    """

    credential: str
    tracer_name: str = "profsink.reporters"
    include_credential: bool = False
    tracer_provider: Any = field(default=None, repr=False)

    _tracer: Any = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._ensure_tracer()

    def _ensure_tracer(self) -> None:
        if self._tracer is not None:
            return
        try:
            from opentelemetry import trace
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(
                "OpenTelemetryTraceClient requires 'opentelemetry-api'"
            ) from exc
        if self.tracer_provider is None:
            self.tracer_provider = trace.get_tracer_provider()
        self._tracer = self.tracer_provider.get_tracer(self.tracer_name)

    def track_trace(
        self,
        message: str,
        *,
        severity: SeverityLevel,
        properties: Mapping[str, str],
    ) -> None:
        attributes = {str(key): str(value) for key, value in properties.items()}
        attributes[SEVERITY_ATTRIBUTE] = severity.value
        if self.include_credential:
            attributes[CREDENTIAL_ATTRIBUTE] = self.credential
        span = self._tracer.start_span(name=message)
        span.set_attributes(attributes)
        span.end()

    def flush(self) -> None:
        # The API's no-op provider has no force_flush.
        force_flush = getattr(self.tracer_provider, "force_flush", None)
        if callable(force_flush):
            force_flush()


class OpenTelemetryTraceBackend:
    """Backend provider for OpenTelemetry trace clients."""

    backend_id = "otel"

    def create_client(
        self,
        *,
        credential: str,
        config: Mapping[str, Any] | None = None,
    ) -> OpenTelemetryTraceClient:
        conf = dict(config or {})
        return OpenTelemetryTraceClient(
            credential=credential,
            tracer_name=str(conf.get("tracer_name", "profsink.reporters")),
            include_credential=bool(conf.get("include_credential", False)),
            tracer_provider=conf.get("tracer_provider"),
        )
