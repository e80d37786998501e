"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Trace client protocol and backend provider contract.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from ..types import SeverityLevel


class TraceClient(Protocol):
    """Live handle to a telemetry backend that accepts trace events."""

    def track_trace(
        self,
        message: str,
        *,
        severity: SeverityLevel,
        properties: Mapping[str, str],
    ) -> None:
        """Send one trace event with string-valued properties."""
        ...

    def flush(self) -> None:
        """Synchronously push any buffered telemetry to the backend."""
        ...


class TraceClientBackend(Protocol):
    """Provider contract used to construct trace clients."""

    backend_id: str

    def create_client(
        self,
        *,
        credential: str,
        config: Mapping[str, Any] | None = None,
    ) -> TraceClient:
        """Create one trace client bound to `credential`."""
        ...
