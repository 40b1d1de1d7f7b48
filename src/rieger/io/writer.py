"""
File writing helpers. Each writer overwrites the target and returns True on
success, False otherwise.

Writes are not atomic: a failed write may leave a truncated or empty file.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def write_text(
    path: Path | str | os.PathLike[str],
    content: str,
    encoding: str | None = None,
) -> bool:
    """Write content as text. Newlines are translated to the platform separator."""
    path = Path(path)
    try:
        with open(path, "w", encoding=encoding) as f:
            f.write(content)
    except (OSError, UnicodeError) as e:
        logger.debug("Cannot write text to %s: %s", path, e)
        return False
    return True


def write_bytes(
    path: Path | str | os.PathLike[str],
    data: bytes | bytearray | memoryview | Iterable[int],
) -> bool:
    """Write raw bytes. Accepts any bytes-like object or iterable of ints in 0..255."""
    path = Path(path)
    try:
        payload = bytes(data)
    except (TypeError, ValueError) as e:
        logger.debug("Cannot write bytes to %s: %s", path, e)
        return False
    try:
        with open(path, "wb") as f:
            f.write(payload)
    except OSError as e:
        logger.debug("Cannot write bytes to %s: %s", path, e)
        return False
    return True


def write_lines(
    path: Path | str | os.PathLike[str],
    lines: Iterable[str],
    encoding: str | None = None,
) -> bool:
    """
    Write each entry followed by a single newline (platform separator on disk).
    Entries are written as-is; embedded newlines are not escaped.
    """
    path = Path(path)
    try:
        with open(path, "w", encoding=encoding) as f:
            for line in lines:
                f.write(line)
                f.write("\n")
    except (OSError, UnicodeError) as e:
        logger.debug("Cannot write lines to %s: %s", path, e)
        return False
    return True
