"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Thread-safe registry for reporter factories.
"""

from __future__ import annotations

from collections.abc import Callable
from threading import Lock
from typing import Any

from .base import Reporter

ReporterFactory = Callable[..., Reporter]

_REGISTRY: dict[str, ReporterFactory] = {}
_LOCK = Lock()


class ReporterRegistryError(RuntimeError):
    """Raised when reporter registration/resolution fails."""


def register_reporter(
    reporter_id: str,
    factory: ReporterFactory,
    *,
    overwrite: bool = False,
) -> None:
    """Register one reporter factory under its stable id."""
    key = reporter_id.strip().lower()
    if not key:
        raise ReporterRegistryError("Reporter id must be non-empty")

    with _LOCK:
        if key in _REGISTRY and not overwrite:
            raise ReporterRegistryError(f"Reporter already registered: {key}")
        _REGISTRY[key] = factory


def get_reporter_factory(reporter_id: str) -> ReporterFactory:
    """Resolve one registered reporter factory by id."""
    key = reporter_id.strip().lower()
    with _LOCK:
        factory = _REGISTRY.get(key)
    if factory is None:
        raise ReporterRegistryError(f"Unknown reporter '{reporter_id}'")
    return factory


def list_reporters() -> list[str]:
    """List registered reporter ids in deterministic order."""
    with _LOCK:
        return sorted(_REGISTRY.keys())


def create_reporter(reporter_id: str, **kwargs: Any) -> Reporter:
    """Instantiate the reporter registered under `reporter_id`."""
    return get_reporter_factory(reporter_id)(**kwargs)
