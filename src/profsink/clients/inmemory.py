"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

In-memory trace client for tests and local debugging.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..types import SeverityLevel


@dataclass(frozen=True, slots=True)
class RecordedTrace:
    """One trace event captured by `InMemoryTraceClient`."""

    message: str
    severity: SeverityLevel
    properties: dict[str, str]


@dataclass(slots=True)
class InMemoryTraceClient:
    """Trace client that stores emitted traces in process memory."""

    credential: str
    config: dict[str, Any] = field(default_factory=dict)
    flush_count: int = 0
    _traces: list[RecordedTrace] = field(default_factory=list)

    def track_trace(
        self,
        message: str,
        *,
        severity: SeverityLevel,
        properties: Mapping[str, str],
    ) -> None:
        self._traces.append(
            RecordedTrace(
                message=message,
                severity=severity,
                properties=dict(properties),
            )
        )

    def flush(self) -> None:
        self.flush_count += 1

    def traces(self) -> list[RecordedTrace]:
        return list(self._traces)


class InMemoryTraceBackend:
    """Backend provider for in-memory trace clients."""

    backend_id = "inmemory"

    def create_client(
        self,
        *,
        credential: str,
        config: Mapping[str, Any] | None = None,
    ) -> InMemoryTraceClient:
        return InMemoryTraceClient(credential=credential, config=dict(config or {}))
