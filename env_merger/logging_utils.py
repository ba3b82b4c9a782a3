"""
NDJSON merge reports: one JSON event per line.
"""

from __future__ import annotations

import json
import pathlib
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict

from .merger import MergeResult, Override


class MergeReport:
    """
    Writes merge events to a file, one JSON record per line.

    Records look like `{"ts": ..., "type": "input" | "override" | "merged",
    "payload": {...}}`; keys are sorted so reports diff cleanly between runs.
    """

    def __init__(self, path: pathlib.Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._path = path
        self._file = path.open("w", encoding="utf-8")

    def _emit(self, event_type: str, payload: Dict[str, Any]) -> None:
        record = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "type": event_type,
            "payload": payload,
        }
        self._file.write(json.dumps(record, sort_keys=True) + "\n")
        self._file.flush()

    def input(self, source: str) -> None:
        self._emit("input", {"path": source})

    def override(self, override: Override) -> None:
        self._emit("override", asdict(override))

    def merged(self, output: str, keys: int) -> None:
        self._emit("merged", {"output": output, "keys": keys})

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "MergeReport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def write_merge_report(path: str | pathlib.Path, result: MergeResult, output: str) -> None:
    with MergeReport(pathlib.Path(path)) as report:
        for source in result.inputs:
            report.input(source)
        for override in result.overrides:
            report.override(override)
        report.merged(str(output), len(result.values))
