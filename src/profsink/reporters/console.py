"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Console reporter that prints each snapshot as one JSON line.
"""

from __future__ import annotations

import json
import sys
from typing import TextIO

from ..types import MetricsSnapshot
from .base import Reporter


class ConsoleOutputReporter(Reporter):
    """
    Print `<profiler>: <json>` lines to a text stream.

    Usage::

        reporter = ConsoleOutputReporter()
        reporter.report("Stacktrace", metrics)
    """

    def __init__(self, *, output: TextIO | None = None) -> None:
        self._output = output or sys.stdout

    def report(self, profiler_name: str, metrics: MetricsSnapshot) -> None:
        line = json.dumps(dict(metrics), default=str)
        self._output.write(f"{profiler_name}: {line}\n")
        self._output.flush()

    def close(self) -> None:
        self._output.flush()
