"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Flatten nested profiler metric snapshots into string-keyed trace properties.

Each raw metric value is classified once into a tagged variant:

- ``ScalarMetric``: ``key = str(value)``
- ``ScalarListMetric``: ``key = "a,b,c"`` (lists starting with a string)
- ``SubMetricList``: ``key-<name>-<field>`` or ``key-<field>-<position>``
- ``NestedMetricMap``: ``key-<group>-<field>-1``
- ``EmptyMetric``: nothing

Flattening then dispatches on the variant. ``None`` wherever a value must be
stringified raises ``NullMetricValueError`` for the whole snapshot.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from .errors import MetricShapeError, NullMetricValueError
from .types import FlattenedMetrics, MetricsSnapshot

logger = logging.getLogger("profsink.flatten")

NAME_FIELD = "name"
# Suffix for two-level mappings; existing dashboards key on the constant 1.
NESTED_SUFFIX = 1

_WHITESPACE = re.compile(r"\s")


def sanitize_label(name: str) -> str:
    """Remove every whitespace character from a sub-metric name."""
    return _WHITESPACE.sub("", name)


def _stringify(key: str, value: Any) -> str:
    if value is None:
        raise NullMetricValueError(key)
    return str(value)


@dataclass(frozen=True, slots=True)
class ScalarMetric:
    value: Any

    def emit(self, key: str, out: FlattenedMetrics) -> None:
        out[key] = _stringify(key, self.value)


@dataclass(frozen=True, slots=True)
class ScalarListMetric:
    """
    List whose first item is a string, joined with commas.

    A `None` item anywhere in the list raises `NullMetricValueError` instead of
    being rendered as the text "null".
    """

    items: tuple[Any, ...]

    def emit(self, key: str, out: FlattenedMetrics) -> None:
        out[key] = ",".join(_stringify(key, item) for item in self.items)


@dataclass(frozen=True, slots=True)
class SubMetricList:
    """Sequence of mappings, each optionally labelled by its `name` field."""

    entries: tuple[Mapping[str, Any], ...]

    def emit(self, key: str, out: FlattenedMetrics) -> None:
        for num, entry in enumerate(self.entries, start=1):
            label = _label_of(entry)
            for field_name, field_value in entry.items():
                if label:
                    if field_name == NAME_FIELD:
                        continue
                    flat_key = f"{key}-{label}-{field_name}"
                else:
                    flat_key = f"{key}-{field_name}-{num}"
                out[flat_key] = _stringify(flat_key, field_value)


@dataclass(frozen=True, slots=True)
class NestedMetricMap:
    """Two-level mapping; non-mapping groups are dropped."""

    groups: Mapping[str, Any]

    def emit(self, key: str, out: FlattenedMetrics) -> None:
        for group, inner in self.groups.items():
            if not isinstance(inner, Mapping):
                continue
            for field_name, field_value in inner.items():
                flat_key = f"{key}-{group}-{field_name}-{NESTED_SUFFIX}"
                out[flat_key] = _stringify(flat_key, field_value)


@dataclass(frozen=True, slots=True)
class EmptyMetric:
    def emit(self, key: str, out: FlattenedMetrics) -> None:
        _ = key
        _ = out


MetricVariant: TypeAlias = (
    ScalarMetric | ScalarListMetric | SubMetricList | NestedMetricMap | EmptyMetric
)


def _label_of(entry: Mapping[str, Any]) -> str | None:
    name = entry.get(NAME_FIELD)
    if not isinstance(name, str):
        return None
    return sanitize_label(name) or None


def classify_metric(key: str, value: Any) -> MetricVariant:
    """
    Classify one raw metric value into its tagged variant.

    Args:
        key: Metric name, used in error messages.
        value: Raw metric value from the snapshot.

    Returns:
        The variant that knows how to emit flat properties for `value`.

    Raises:
        NullMetricValueError: `value` is `None` or a scalar list starts with `None`.
        MetricShapeError: A sub-metric list contains a non-mapping item.
    """
    if value is None:
        raise NullMetricValueError(key)
    if isinstance(value, Mapping):
        if not value:
            return EmptyMetric()
        return NestedMetricMap(value)
    if not isinstance(value, (list, tuple)):
        return ScalarMetric(value)
    if not value:
        return EmptyMetric()

    first = value[0]
    if first is None:
        raise NullMetricValueError(key)
    if isinstance(first, Mapping):
        for position, item in enumerate(value, start=1):
            if not isinstance(item, Mapping):
                raise MetricShapeError(
                    f"Metric '{key}' item {position} is not a mapping "
                    f"(got {type(item).__name__})"
                )
        return SubMetricList(tuple(value))
    if not isinstance(first, str):
        logger.debug(
            "Dropping metric %s: only lists starting with a string are joined "
            "(got %s)",
            key,
            type(first).__name__,
        )
        return EmptyMetric()
    return ScalarListMetric(tuple(value))


def flatten_metrics(metrics: MetricsSnapshot) -> FlattenedMetrics:
    """
    Flatten one metrics snapshot into a string-to-string property map.

    Keys synthesized from different entries may collide; the later entry wins.
    """
    out: FlattenedMetrics = {}
    for key, value in metrics.items():
        logger.debug("Raw metric %s = %r", key, value)
        classify_metric(key, value).emit(key, out)
    return out
