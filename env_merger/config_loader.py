"""
Run configuration loaded from YAML or JSON.
"""

from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_OUTPUT = "merged.env"
LOG_LEVEL_ENV = "ENV_MERGER_LOG_LEVEL"


def load_config(path: str | pathlib.Path) -> Dict[str, Any]:
    path = pathlib.Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
        return {} if data is None else data
    return json.loads(text)


@dataclass
class MergeConfig:
    inputs: List[str] = field(default_factory=list)
    output: str = DEFAULT_OUTPUT
    sort_keys: bool = False
    report: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "MergeConfig":
        if not isinstance(data, dict):
            raise ValueError("merge config must be a mapping")
        inputs = data.get("inputs", [])
        if not isinstance(inputs, list):
            raise ValueError("merge config 'inputs' must be a list of paths")
        return cls(
            inputs=[str(item) for item in inputs],
            output=str(data.get("output", DEFAULT_OUTPUT)),
            sort_keys=bool(data.get("sort_keys", False)),
            report=data.get("report"),
        )

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "MergeConfig":
        return cls.from_dict(load_config(path))
