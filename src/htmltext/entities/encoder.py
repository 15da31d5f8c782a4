"""Re-encoding of non-ASCII characters as numeric references."""

from __future__ import annotations

from ..utils.constants import ASCII_MAX


def encode_special_chars(text: str) -> str:
    """Replace every character above U+007F with ``&#N;`` (decimal)."""

    if not text:
        return ""
    return "".join(ch if ord(ch) <= ASCII_MAX else f"&#{ord(ch)};" for ch in text)


__all__ = ["encode_special_chars"]
