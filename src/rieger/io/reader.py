"""
File reading helpers. Every reader returns None on failure instead of raising.

A path is readable when it exists and is not a directory; the handle is opened
for a single transfer and closed before returning.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _readable(path: Path) -> bool:
    """True if path exists and is not a directory."""
    if not path.exists() or path.is_dir():
        logger.debug("Not a readable file: %s", path)
        return False
    return True


def _decode(path: Path, encoding: str | None) -> str | None:
    """
    Read and decode the whole file. Only the platform line separator becomes
    "\\n"; any other carriage returns are kept as written.
    """
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeError) as e:
        logger.debug("Cannot read text from %s: %s", path, e)
        return None
    if os.linesep != "\n":
        text = text.replace(os.linesep, "\n")
    return text


def read_text(path: Path | str | os.PathLike[str], encoding: str | None = None) -> str | None:
    """
    Read the whole file as text. encoding=None uses the platform default.
    Returns None if the file is missing, a directory, unreadable or undecodable.
    """
    path = Path(path)
    if not _readable(path):
        return None
    return _decode(path, encoding)


def read_bytes(path: Path | str | os.PathLike[str]) -> bytes | None:
    """Read the whole file as raw bytes, or None on failure."""
    path = Path(path)
    if not _readable(path):
        return None
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        logger.debug("Cannot read bytes from %s: %s", path, e)
        return None


def read_lines(path: Path | str | os.PathLike[str], encoding: str | None = None) -> list[str] | None:
    """
    Read the file as a list of lines with line terminators removed.

    Only newlines split records (a lone carriage return stays in its line),
    and a final newline does not add an empty trailing entry.
    """
    path = Path(path)
    if not _readable(path):
        return None
    text = _decode(path, encoding)
    if text is None:
        return None
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def read_block(path: Path | str | os.PathLike[str], offset: int, size: int) -> bytes | None:
    """
    Read exactly `size` bytes starting `offset` bytes from the start of the file.

    Returns None when the file cannot be opened, the seek fails, or the file is
    shorter than offset + size. A short block is never returned.
    """
    path = Path(path)
    if offset < 0 or size < 0:
        logger.debug("Invalid block (offset=%d, size=%d) for %s", offset, size, path)
        return None
    if not _readable(path):
        return None
    try:
        with open(path, "rb") as f:
            file_size = os.fstat(f.fileno()).st_size
            if offset + size > file_size:
                logger.debug(
                    "Short block from %s: wanted %d bytes at offset %d, file has %d",
                    path,
                    size,
                    offset,
                    file_size,
                )
                return None
            f.seek(offset, os.SEEK_SET)
            block = f.read(size)
    except (OSError, OverflowError, ValueError) as e:
        logger.debug("Cannot read block from %s: %s", path, e)
        return None
    if len(block) != size:
        logger.debug(
            "Short block from %s: wanted %d bytes at offset %d, got %d",
            path,
            size,
            offset,
            len(block),
        )
        return None
    return block
