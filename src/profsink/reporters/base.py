"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Reporter contract shared by every profiler output adapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..types import MetricsSnapshot, ReporterArguments


class Reporter(ABC):
    """Abstract base for profiler metrics reporters."""

    @abstractmethod
    def report(self, profiler_name: str, metrics: MetricsSnapshot) -> None:
        """
        Output one metrics snapshot in the reporter's format.

        Args:
            profiler_name: Name of the profiler that produced the snapshot.
            metrics: Metric name to value mapping.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release reporter resources at agent shutdown."""
        ...

    def update_arguments(self, arguments: ReporterArguments) -> None:
        """
        Apply reporter arguments supplied by the agent's config loader.

        Only the first element of each value list is meaningful. The default
        implementation ignores all arguments.
        """
        _ = arguments
