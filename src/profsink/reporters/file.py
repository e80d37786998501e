"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

File reporter that appends snapshots as JSONL, one file per profiler.
"""

from __future__ import annotations

import json
import logging
import tempfile
import threading
import time
from pathlib import Path
from typing import Any

from ..errors import ReporterClosedError
from ..types import MetricsSnapshot, ReporterArguments
from .base import Reporter

OUTPUT_DIR_ARGUMENT = "outputDir"

logger = logging.getLogger("profsink.reporters.file")


class FileOutputReporter(Reporter):
    """Append one JSON line per report to `<output_dir>/<profiler_name>.json`."""

    def __init__(self, *, output_dir: str | Path | None = None) -> None:
        self._output_dir = Path(output_dir) if output_dir is not None else None
        self._lock = threading.Lock()
        self._closed = False

    @property
    def output_dir(self) -> Path | None:
        return self._output_dir

    def update_arguments(self, arguments: ReporterArguments) -> None:
        values = arguments.get(OUTPUT_DIR_ARGUMENT)
        if values and values[0]:
            self._output_dir = Path(values[0])
            logger.debug("Using output directory %s", self._output_dir)

    def _resolve_dir(self) -> Path:
        if self._output_dir is None:
            self._output_dir = Path(tempfile.mkdtemp(prefix="profsink-"))
            logger.info("No output directory configured, using %s", self._output_dir)
        return self._output_dir

    def _path_for(self, profiler_name: str) -> Path:
        return self._resolve_dir() / f"{profiler_name}.json"

    def report(self, profiler_name: str, metrics: MetricsSnapshot) -> None:
        if self._closed:
            raise ReporterClosedError("FileOutputReporter is closed")
        payload = {"reported_at": time.time(), **dict(metrics)}
        line = json.dumps(payload, default=str, ensure_ascii=True)
        with self._lock:
            path = self._path_for(profiler_name)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")

    def read_all(self, profiler_name: str) -> list[dict[str, Any]]:
        """Read all reported rows for one profiler."""

        if self._output_dir is None:
            return []
        path = self._output_dir / f"{profiler_name}.json"
        if not path.exists():
            return []
        out: list[dict[str, Any]] = []
        with path.open("r", encoding="utf-8") as handle:
            for line in handle:
                row = line.strip()
                if not row:
                    continue
                out.append(json.loads(row))
        return out

    def close(self) -> None:
        self._closed = True
