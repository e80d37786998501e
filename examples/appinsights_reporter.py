"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Send one flattened profiler snapshot through the in-memory trace backend.
"""

from __future__ import annotations

import logging

from profsink import AppInsightsOutputReporter, ReporterSettings

logging.basicConfig(level=logging.DEBUG)

reporter = AppInsightsOutputReporter(
    settings=ReporterSettings(trace_backend="inmemory", close_grace_s=0.0),
)
reporter.update_arguments({"appinsights.instrumentationkey": ["demo-key"]})
reporter.report(
    "CpuAndMemory",
    {
        "processCpuLoad": 0.31,
        "hosts": ["worker-1", "worker-2"],
        "memoryPools": [
            {"name": "PS Eden Space", "used": 1024},
            {"name": "PS Old Gen", "used": 4096},
        ],
        "gc": {"young": {"count": 12, "time": 80}},
    },
)
for trace in reporter.client.traces():
    print(trace.message, trace.properties)
reporter.close()
