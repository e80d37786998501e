"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Profiler output reporters and registry utilities.
"""

from .appinsights import AppInsightsOutputReporter
from .base import Reporter
from .console import ConsoleOutputReporter
from .file import OUTPUT_DIR_ARGUMENT, FileOutputReporter
from .registry import (
    ReporterRegistryError,
    create_reporter,
    get_reporter_factory,
    list_reporters,
    register_reporter,
)

# Register built-ins at import time.
register_reporter("appinsights", AppInsightsOutputReporter)
register_reporter("console", ConsoleOutputReporter)
register_reporter("file", FileOutputReporter)

__all__ = [
    "Reporter",
    "AppInsightsOutputReporter",
    "ConsoleOutputReporter",
    "FileOutputReporter",
    "OUTPUT_DIR_ARGUMENT",
    "ReporterRegistryError",
    "register_reporter",
    "get_reporter_factory",
    "list_reporters",
    "create_reporter",
]
