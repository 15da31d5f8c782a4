"""Shared character constants for the conversion pipeline."""

from __future__ import annotations

__all__ = [
    "LINE_BREAK",
    "PARAGRAPH_SENTINEL",
    "NUMERIC_ENTITY_CEILING",
    "MAX_CODE_POINT",
    "ASCII_MAX",
]

LINE_BREAK: str = "\r\n"

# Private-use code point standing in for a line break while markup is stripped.
PARAGRAPH_SENTINEL: str = "\ue000"

NUMERIC_ENTITY_CEILING: int = 511
MAX_CODE_POINT: int = 0x10FFFF
ASCII_MAX: int = 127
