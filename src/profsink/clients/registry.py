"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Registry for pluggable trace client backends.
"""

from __future__ import annotations

from collections.abc import Mapping
from threading import Lock
from typing import Any

from .base import TraceClient, TraceClientBackend

_BACKENDS: dict[str, TraceClientBackend] = {}
_LOCK = Lock()


class TraceClientBackendError(RuntimeError):
    """Raised when trace client backend registration/resolution fails."""


def register_trace_backend(backend: TraceClientBackend) -> None:
    """Register one trace client backend by its stable backend id."""
    backend_id = str(backend.backend_id).strip().lower()
    if not backend_id:
        raise TraceClientBackendError("Trace client backend id must be non-empty")
    with _LOCK:
        _BACKENDS[backend_id] = backend


def get_trace_backend(backend_id: str) -> TraceClientBackend:
    """Resolve one trace client backend by id."""
    key = str(backend_id).strip().lower()
    with _LOCK:
        backend = _BACKENDS.get(key)
    if backend is None:
        raise TraceClientBackendError(f"Unknown trace client backend '{backend_id}'")
    return backend


def list_trace_backends() -> list[str]:
    """Return sorted list of registered trace client backend ids."""
    with _LOCK:
        return sorted(_BACKENDS.keys())


def create_trace_client(
    backend: str | TraceClient,
    *,
    credential: str,
    config: Mapping[str, Any] | None = None,
) -> TraceClient:
    """
    Resolve a trace client from backend id or pass through a client instance.

    Args:
        backend: Backend id (`appinsights`, `otel`, `inmemory`) or client instance.
        credential: Backend credential, e.g. an instrumentation key.
        config: Optional backend-specific configuration payload.

    Returns:
        Materialized trace client.
    """
    if not isinstance(backend, str):
        return backend
    return get_trace_backend(backend).create_client(
        credential=credential,
        config=config,
    )
