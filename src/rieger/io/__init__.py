"""
I/O subpackage: whole-file and block-level file helpers.

Reads return None and writes return False on failure; nothing here raises for
ordinary I/O errors.
"""

from rieger.io.reader import read_block, read_bytes, read_lines, read_text
from rieger.io.writer import write_bytes, write_lines, write_text

__all__ = [
    "read_block",
    "read_bytes",
    "read_lines",
    "read_text",
    "write_bytes",
    "write_lines",
    "write_text",
]
