"""
Parser for .env style files.

Reads KEY=VALUE pairs, ignoring blank lines, `#` comments and lines that carry
no `=`. Values are kept as written apart from surrounding whitespace.
"""

from __future__ import annotations

import logging
import pathlib
from typing import Dict, Iterable

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def parse_env_lines(lines: Iterable[str]) -> Dict[str, str]:
    env: Dict[str, str] = {}
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        # Last occurrence wins inside a single file.
        env[key.strip()] = value.strip()
    return env


def parse_env_file(path: str | pathlib.Path) -> Dict[str, str]:
    """
    Parse one env file. Raises OSError when it cannot be opened or read.

    Undecodable bytes are carried through as surrogate escapes and lines end
    only at newline characters, so a stray carriage return stays in the value.
    """
    env_path = pathlib.Path(path)
    with env_path.open("r", encoding=ENCODING, errors=ERRORS, newline="\n") as handle:
        env = parse_env_lines(handle)
    logger.debug("Parsed %d entries from %s", len(env), env_path)
    return env
