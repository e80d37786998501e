from __future__ import annotations

from uuid import uuid4

import pytest

from profsink.reporters import (
    AppInsightsOutputReporter,
    ConsoleOutputReporter,
    Reporter,
    ReporterRegistryError,
    create_reporter,
    list_reporters,
    register_reporter,
)
from profsink.settings import ReporterSettings


class _CountingReporter(Reporter):
    def __init__(self) -> None:
        self.reports = 0

    def report(self, profiler_name, metrics) -> None:
        _ = profiler_name
        _ = metrics
        self.reports += 1

    def close(self) -> None:
        return None


def test_builtin_reporters_are_registered():
    assert {"appinsights", "console", "file"} <= set(list_reporters())


def test_create_builtin_reporter_with_kwargs():
    reporter = create_reporter(
        "AppInsights",
        instrumentation_key="k",
        settings=ReporterSettings(trace_backend="inmemory", close_grace_s=0.0),
    )
    assert isinstance(reporter, AppInsightsOutputReporter)
    assert reporter.configured
    assert isinstance(create_reporter("console"), ConsoleOutputReporter)


def test_register_and_resolve_custom_reporter():
    reporter_id = f"custom-{uuid4().hex}"
    register_reporter(reporter_id, _CountingReporter)
    reporter = create_reporter(reporter_id)
    reporter.report("CpuAndMemory", {})
    reporter.update_arguments({"ignored": ["x"]})
    assert reporter.reports == 1


def test_duplicate_registration_requires_overwrite():
    reporter_id = f"custom-{uuid4().hex}"
    register_reporter(reporter_id, _CountingReporter)
    with pytest.raises(ReporterRegistryError):
        register_reporter(reporter_id, _CountingReporter)
    register_reporter(reporter_id, _CountingReporter, overwrite=True)


def test_unknown_reporter_raises_error():
    with pytest.raises(ReporterRegistryError):
        create_reporter("unknown-reporter")


def test_blank_reporter_id_is_rejected():
    with pytest.raises(ReporterRegistryError):
        register_reporter("  ", _CountingReporter)
