"""Text and size formatting helpers for user-facing output."""

from __future__ import annotations

# Unified borderline style for REPL banners.
BORDERLINE_CHAR = "="
BORDERLINE_WIDTH = 80

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_bytes(size: int) -> str:
    """Format a byte count in base-1024 units with up to two decimals.

    Examples: ``0 Bytes``, ``512 Bytes``, ``1.5 KB``, ``1 MB``.
    """
    if size <= 0:
        return "0 Bytes"

    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    value_text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{value_text} {_SIZE_UNITS[unit_index]}"


def borderline() -> str:
    return BORDERLINE_CHAR * BORDERLINE_WIDTH
