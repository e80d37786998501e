from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import uuid4

import pytest

from profsink.clients import (
    AppInsightsTraceClient,
    InMemoryTraceClient,
    TraceClient,
    TraceClientBackendError,
    create_trace_client,
    list_trace_backends,
    register_trace_backend,
)
from profsink.types import SeverityLevel


class _FakeSDKClient:
    def __init__(self) -> None:
        self.traces: list[dict[str, Any]] = []
        self.flushes = 0

    def track_trace(self, name, properties=None, severity=None) -> None:
        self.traces.append({"name": name, "properties": properties, "severity": severity})

    def flush(self) -> None:
        self.flushes += 1


class _CustomBackend:
    def __init__(self, backend_id: str) -> None:
        self.backend_id = backend_id

    def create_client(
        self,
        *,
        credential: str,
        config: Mapping[str, Any] | None = None,
    ) -> TraceClient:
        return InMemoryTraceClient(credential=f"custom:{credential}", config=dict(config or {}))


def test_builtin_backends_are_registered():
    assert {"appinsights", "inmemory", "otel"} <= set(list_trace_backends())


def test_register_and_resolve_custom_backend():
    backend_id = f"custom-{uuid4().hex}"
    register_trace_backend(_CustomBackend(backend_id))
    client = create_trace_client(backend_id.upper(), credential="k", config={"a": 1})
    assert isinstance(client, InMemoryTraceClient)
    assert client.credential == "custom:k"
    assert client.config == {"a": 1}


def test_client_instance_passes_through():
    client = InMemoryTraceClient(credential="k")
    assert create_trace_client(client, credential="ignored") is client


def test_unknown_backend_raises_error():
    with pytest.raises(TraceClientBackendError):
        create_trace_client("unknown-backend", credential="k")


def test_appinsights_client_maps_severity_and_copies_properties():
    sdk = _FakeSDKClient()
    client = AppInsightsTraceClient(instrumentation_key="k", sdk_client=sdk)
    properties = {"cpu": "1"}
    client.track_trace("cluster metrics", severity=SeverityLevel.INFORMATION, properties=properties)
    client.flush()

    assert sdk.traces == [
        {"name": "cluster metrics", "properties": {"cpu": "1"}, "severity": "INFO"}
    ]
    assert sdk.traces[0]["properties"] is not properties
    assert sdk.flushes == 1


def test_appinsights_client_builds_sdk_client():
    pytest.importorskip("applicationinsights")
    client = AppInsightsTraceClient(instrumentation_key="00000000-0000-0000-0000-000000000000")
    assert client.sdk_client is not None
