"""
env-merger package.

Merges several env files into one, later files taking precedence. Key modules:

- env_loader: KEY=VALUE line parser.
- merger: left-to-right overlay, provenance tracking and output writing.
- config_loader: optional YAML/JSON run configuration.
- logging_utils: NDJSON merge reports.
- cli: command line entry point.
"""

from .env_loader import parse_env_file, parse_env_lines
from .merger import MergeResult, Override, format_env, merge_env, merge_env_files, merge_to_file, write_env

__all__ = [
    "MergeResult",
    "Override",
    "format_env",
    "merge_env",
    "merge_env_files",
    "merge_to_file",
    "parse_env_file",
    "parse_env_lines",
    "write_env",
]
