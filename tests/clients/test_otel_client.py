from __future__ import annotations

import pytest

pytest.importorskip("opentelemetry.sdk")

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from profsink.clients import create_trace_client
from profsink.clients.otel import CREDENTIAL_ATTRIBUTE, SEVERITY_ATTRIBUTE
from profsink.reporters import AppInsightsOutputReporter
from profsink.settings import ReporterSettings
from profsink.types import SeverityLevel


def _provider() -> tuple[TracerProvider, InMemorySpanExporter]:
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return provider, exporter


def test_otel_client_emits_one_span_per_trace():
    provider, exporter = _provider()
    client = create_trace_client(
        "otel",
        credential="k",
        config={"tracer_provider": provider},
    )
    client.track_trace("cluster metrics", severity=SeverityLevel.INFORMATION, properties={"cpu": "1"})
    client.flush()

    [span] = exporter.get_finished_spans()
    assert span.name == "cluster metrics"
    assert span.attributes["cpu"] == "1"
    assert span.attributes[SEVERITY_ATTRIBUTE] == "information"
    assert CREDENTIAL_ATTRIBUTE not in span.attributes


def test_otel_client_can_attach_credential():
    provider, exporter = _provider()
    client = create_trace_client(
        "otel",
        credential="k",
        config={"tracer_provider": provider, "include_credential": True},
    )
    client.track_trace("cluster metrics", severity=SeverityLevel.WARNING, properties={})
    [span] = exporter.get_finished_spans()
    assert span.attributes[CREDENTIAL_ATTRIBUTE] == "k"


def test_reporter_over_otel_backend():
    provider, exporter = _provider()
    reporter = AppInsightsOutputReporter(
        instrumentation_key="k",
        settings=ReporterSettings(trace_backend="otel", close_grace_s=0.0),
        client_config={"tracer_provider": provider},
    )
    reporter.report("CpuAndMemory", {"disks": [{"name": "sda 1", "used": 3}]})
    reporter.close()

    [span] = exporter.get_finished_spans()
    assert span.attributes["disks-sda1-used"] == "3"
