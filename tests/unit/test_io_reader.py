"""Unit tests for file readers (read_text, read_bytes, read_lines, read_block)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from rieger.io import read_block, read_bytes, read_lines, read_text


@pytest.fixture
def ten_bytes(tmp_path: Path) -> Path:
    """A 10-byte binary file with values 0..9."""
    f = tmp_path / "ten.bin"
    f.write_bytes(bytes(range(10)))
    return f


# --- missing / directory ---


@pytest.mark.parametrize("reader", [read_text, read_bytes, read_lines])
def test_whole_file_readers_missing_path_returns_none(tmp_path: Path, reader) -> None:
    assert reader(tmp_path / "missing.txt") is None


@pytest.mark.parametrize("reader", [read_text, read_bytes, read_lines])
def test_whole_file_readers_directory_returns_none(tmp_path: Path, reader) -> None:
    assert reader(tmp_path) is None


def test_read_block_missing_and_directory(tmp_path: Path) -> None:
    assert read_block(tmp_path / "missing.bin", 0, 1) is None
    assert read_block(tmp_path, 0, 1) is None


# --- read_text ---


def test_read_text_returns_content(tmp_path: Path) -> None:
    f = tmp_path / "a.txt"
    f.write_text("hello\nworld", encoding="utf-8")
    assert read_text(f, encoding="utf-8") == "hello\nworld"


def test_read_text_accepts_str_path(tmp_path: Path) -> None:
    f = tmp_path / "a.txt"
    f.write_text("x")
    assert read_text(str(f)) == "x"


def test_read_text_empty_file(tmp_path: Path) -> None:
    f = tmp_path / "empty.txt"
    f.write_bytes(b"")
    assert read_text(f) == ""


def test_read_text_translates_platform_separator(tmp_path: Path) -> None:
    f = tmp_path / "sep.txt"
    f.write_bytes(f"a{os.linesep}b{os.linesep}".encode("ascii"))
    assert read_text(f, encoding="ascii") == "a\nb\n"


def test_read_text_keeps_lone_carriage_returns(tmp_path: Path) -> None:
    f = tmp_path / "cr.txt"
    f.write_bytes(b"a\rb\r")
    assert read_text(f, encoding="ascii") == "a\rb\r"


def test_read_text_undecodable_returns_none(tmp_path: Path) -> None:
    f = tmp_path / "bad.txt"
    f.write_bytes(b"\xff\xfe\xfa")
    assert read_text(f, encoding="utf-8") is None


def test_read_text_failure_logged_at_debug(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="rieger")
    assert read_text(tmp_path / "nope.txt") is None
    assert any("nope.txt" in r.getMessage() for r in caplog.records)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)


# --- read_bytes ---


def test_read_bytes_binary_safe(tmp_path: Path) -> None:
    data = b"\x00\xff\xfe\x00\r\n\x1a"
    f = tmp_path / "bin"
    f.write_bytes(data)
    result = read_bytes(f)
    assert isinstance(result, bytes)
    assert result == data


def test_read_bytes_empty_file(tmp_path: Path) -> None:
    f = tmp_path / "empty.bin"
    f.write_bytes(b"")
    assert read_bytes(f) == b""


# --- read_lines ---


def test_read_lines_example(tmp_path: Path) -> None:
    """'hello\\nworld' reads back as two lines."""
    f = tmp_path / "lines.txt"
    f.write_text("hello\nworld")
    assert read_lines(f) == ["hello", "world"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (b"", []),
        (b"a\n", ["a"]),
        (b"a\n\n", ["a", ""]),
        (b"\n", [""]),
        (b"a\rb\n", ["a\rb"]),
        (b"  padded  \n", ["  padded  "]),
        (b"tab\there\x0cformfeed\n", ["tab\there\x0cformfeed"]),
    ],
)
def test_read_lines_splits_only_on_line_ends(tmp_path: Path, raw: bytes, expected: list[str]) -> None:
    f = tmp_path / "lines.txt"
    f.write_bytes(raw)
    assert read_lines(f, encoding="ascii") == expected


def test_read_lines_undecodable_returns_none(tmp_path: Path) -> None:
    f = tmp_path / "bad.txt"
    f.write_bytes(b"ok\n\xff\xfe\n")
    assert read_lines(f, encoding="utf-8") is None


def test_read_lines_platform_separator(tmp_path: Path) -> None:
    f = tmp_path / "lines.txt"
    f.write_bytes(f"a{os.linesep}b{os.linesep}".encode("ascii"))
    assert read_lines(f, encoding="ascii") == ["a", "b"]


# --- read_block ---


def test_read_block_tail(ten_bytes: Path) -> None:
    assert read_block(ten_bytes, 5, 5) == bytes(range(5, 10))


def test_read_block_past_end_returns_none(ten_bytes: Path) -> None:
    """offset + size past end of file is rejected, never a short buffer."""
    assert read_block(ten_bytes, 5, 6) is None
    assert read_block(ten_bytes, 0, 11) is None
    assert read_block(ten_bytes, 20, 1) is None


def test_read_block_whole_file_matches_read_bytes(ten_bytes: Path) -> None:
    size = ten_bytes.stat().st_size
    assert read_block(ten_bytes, 0, size) == read_bytes(ten_bytes)


def test_read_block_middle(ten_bytes: Path) -> None:
    assert read_block(ten_bytes, 2, 3) == b"\x02\x03\x04"


def test_read_block_zero_size(ten_bytes: Path) -> None:
    assert read_block(ten_bytes, 4, 0) == b""
    assert read_block(ten_bytes, 10, 0) == b""


def test_read_block_negative_arguments_return_none(ten_bytes: Path) -> None:
    assert read_block(ten_bytes, -1, 2) is None
    assert read_block(ten_bytes, 0, -2) is None


def test_read_block_short_read_logged(ten_bytes: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="rieger.io.reader")
    assert read_block(ten_bytes, 8, 4) is None
    assert any("Short block" in r.getMessage() for r in caplog.records)


def test_read_block_offset_beyond_seekable_range_returns_none(ten_bytes: Path) -> None:
    assert read_block(ten_bytes, 2**64, 1) is None
    assert read_block(ten_bytes, 2**64, 0) is None


def test_read_block_huge_size_returns_none(ten_bytes: Path) -> None:
    """An oversized request is rejected before any buffer is allocated."""
    assert read_block(ten_bytes, 0, 2**62) is None


def test_read_block_zero_size_past_end_returns_none(ten_bytes: Path) -> None:
    assert read_block(ten_bytes, 11, 0) is None
