"""
Windows helpers: HRESULT messages and errors, alert dialogs, wide/narrow strings.

OS calls go through ctypes and only happen on Windows. Elsewhere, message lookup
falls back to "Unknown error" and alerts are written to the log.
"""

from __future__ import annotations

import enum
import logging
import sys
from typing import Any

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"

# winbase.h / winuser.h
FORMAT_MESSAGE_ALLOCATE_BUFFER = 0x00000100
FORMAT_MESSAGE_IGNORE_INSERTS = 0x00000200
FORMAT_MESSAGE_FROM_SYSTEM = 0x00001000
LANG_NEUTRAL = 0x00
SUBLANG_DEFAULT = 0x01
MB_OK = 0x00000000
MB_ICONERROR = 0x00000010
MB_ICONWARNING = 0x00000030
MB_ICONINFORMATION = 0x00000040


def is_supported() -> bool:
    """True when running on Windows, where the ctypes calls are available."""
    return sys.platform.startswith("win")


def _to_unsigned(hr: int) -> int:
    return hr & 0xFFFFFFFF


def failed(hr: int) -> bool:
    """True if the HRESULT has its severity bit set (negative as a signed 32-bit value)."""
    return bool(_to_unsigned(hr) & 0x80000000)


def get_hresult_error_message(hr: int) -> str:
    """System message text for an HRESULT, or "Unknown error" if there is none."""
    if not is_supported():
        return UNKNOWN_ERROR

    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.windll.kernel32
    kernel32.FormatMessageW.restype = wintypes.DWORD
    buffer = wintypes.LPWSTR()
    length = kernel32.FormatMessageW(
        FORMAT_MESSAGE_ALLOCATE_BUFFER | FORMAT_MESSAGE_FROM_SYSTEM | FORMAT_MESSAGE_IGNORE_INSERTS,
        None,
        wintypes.DWORD(_to_unsigned(hr)),
        (SUBLANG_DEFAULT << 10) | LANG_NEUTRAL,
        ctypes.byref(buffer),
        0,
        None,
    )
    if not length:
        return UNKNOWN_ERROR
    try:
        return buffer.value or UNKNOWN_ERROR
    finally:
        kernel32.LocalFree(ctypes.cast(buffer, ctypes.c_void_p))


class ComError(Exception):
    """Raised for a failed HRESULT."""

    def __init__(self, result: int) -> None:
        self.result = result
        super().__init__(result)

    def __str__(self) -> str:
        return (
            f"Failure with HRESULT of {_to_unsigned(self.result):08X}.\n"
            f"Error: {get_hresult_error_message(self.result)}\n"
        )


def throw_if_failed(hr: int) -> None:
    """Raise ComError if hr is a failure code."""
    if failed(hr):
        raise ComError(hr)


class AlertSeverity(enum.IntEnum):
    """MessageBox style flags for each alert level."""

    INFO = MB_ICONINFORMATION | MB_OK
    WARNING = MB_ICONWARNING | MB_OK
    ERROR = MB_ICONERROR | MB_OK


_LOG_LEVELS = {
    AlertSeverity.INFO: logging.INFO,
    AlertSeverity.WARNING: logging.WARNING,
    AlertSeverity.ERROR: logging.ERROR,
}


def show_message(
    message: str,
    severity: AlertSeverity,
    caption: str = "Alert",
    window: Any = None,
) -> None:
    """
    Show a modal alert. On Windows this is MessageBoxW owned by `window` (an HWND
    or None); elsewhere the message is logged at the matching level.
    """
    if not is_supported():
        logger.log(_LOG_LEVELS[severity], "%s: %s", caption, message)
        return

    import ctypes

    ctypes.windll.user32.MessageBoxW(window, message, caption, int(severity))


def wide_to_ansi(value: bytes) -> str:
    """Decode a UTF-16-LE wide string into text."""
    return value.decode("utf-16-le")


def ansi_to_wide(value: str) -> bytes:
    """Encode text as a UTF-16-LE wide string."""
    return value.encode("utf-16-le")
