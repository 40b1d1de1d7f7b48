"""Platform-specific helpers."""

from rieger.platform.windows import (
    AlertSeverity,
    ComError,
    ansi_to_wide,
    failed,
    get_hresult_error_message,
    is_supported,
    show_message,
    throw_if_failed,
    wide_to_ansi,
)

__all__ = [
    "AlertSeverity",
    "ComError",
    "ansi_to_wide",
    "failed",
    "get_hresult_error_message",
    "is_supported",
    "show_message",
    "throw_if_failed",
    "wide_to_ansi",
]
