"""
Merge env files left to right and write the result back out.

Later files override earlier ones on key conflicts. Each key keeps the
position where it was first seen, so output order is stable across runs.
"""

from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .env_loader import ENCODING, ERRORS, parse_env_file

logger = logging.getLogger(__name__)

PathLike = str | pathlib.Path


@dataclass(slots=True)
class Override:
    key: str
    previous_value: str
    value: str
    previous_source: str
    source: str


@dataclass
class MergeResult:
    values: Dict[str, str] = field(default_factory=dict)
    sources: Dict[str, str] = field(default_factory=dict)
    overrides: List[Override] = field(default_factory=list)
    inputs: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)


def merge_env(layers: Iterable[Tuple[str, Mapping[str, str]]]) -> MergeResult:
    """
    Overlay already-parsed mappings in order.

    `layers` yields `(source, mapping)` pairs; the source label is only used
    for provenance and logging.
    """
    result = MergeResult()
    for source, env in layers:
        result.inputs.append(source)
        for key, value in env.items():
            if key in result.values:
                override = Override(
                    key=key,
                    previous_value=result.values[key],
                    value=value,
                    previous_source=result.sources[key],
                    source=source,
                )
                result.overrides.append(override)
                logger.info(
                    "%s: %s overrides value from %s",
                    key,
                    source,
                    override.previous_source,
                )
            result.values[key] = value
            result.sources[key] = source
    return result


def merge_env_files(paths: Sequence[PathLike]) -> MergeResult:
    """Parse each path in order and overlay them. The first OSError aborts."""

    def layers():
        for path in paths:
            yield str(path), parse_env_file(path)

    return merge_env(layers())


def format_env(env: Mapping[str, str], sort_keys: bool = False) -> str:
    keys = sorted(env) if sort_keys else list(env)
    return "".join(f"{key}={env[key]}\n" for key in keys)


def write_env(path: PathLike, env: Mapping[str, str], sort_keys: bool = False) -> None:
    out_path = pathlib.Path(path)
    with out_path.open("w", encoding=ENCODING, errors=ERRORS, newline="\n") as handle:
        handle.write(format_env(env, sort_keys=sort_keys))


def merge_to_file(
    output: PathLike,
    inputs: Sequence[PathLike],
    sort_keys: bool = False,
) -> MergeResult:
    # All inputs are read before the output is opened, so a bad input leaves
    # any existing output untouched.
    result = merge_env_files(inputs)
    write_env(output, result.values, sort_keys=sort_keys)
    logger.info("Wrote %d keys from %d files to %s", len(result), len(result.inputs), output)
    return result
