from __future__ import annotations

from profsink.settings import (
    DEFAULT_CLOSE_GRACE_S,
    DEFAULT_EVENT_NAME,
    DEFAULT_TRACE_BACKEND,
    ReporterSettings,
)


def test_settings_defaults_from_empty_env(monkeypatch):
    for name in (
        "PROFSINK_APPINSIGHTS_INSTRUMENTATION_KEY",
        "PROFSINK_TRACE_BACKEND",
        "PROFSINK_EVENT_NAME",
        "PROFSINK_CLOSE_GRACE_S",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = ReporterSettings.from_env()
    assert settings.instrumentation_key is None
    assert settings.trace_backend == DEFAULT_TRACE_BACKEND
    assert settings.event_name == DEFAULT_EVENT_NAME
    assert settings.close_grace_s == DEFAULT_CLOSE_GRACE_S


def test_blank_env_key_means_unconfigured(monkeypatch):
    monkeypatch.setenv("PROFSINK_APPINSIGHTS_INSTRUMENTATION_KEY", "")
    monkeypatch.setenv("PROFSINK_EVENT_NAME", "jvm metrics")
    monkeypatch.setenv("PROFSINK_CLOSE_GRACE_S", "1.5")

    settings = ReporterSettings.from_env()
    assert settings.instrumentation_key is None
    assert settings.event_name == "jvm metrics"
    assert settings.close_grace_s == 1.5
