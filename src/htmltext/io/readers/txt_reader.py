"""Plain-text reader.

:func:`read_text` loads a text file untouched: ``\\n``, ``\\r\\n`` and ``\\r``
survive as stored, and a UTF-8 byte-order mark is dropped by the default
``"utf-8-sig"`` codec.  ``FileNotFoundError`` and other ``OSError`` subclasses
propagate to the caller.
"""

from __future__ import annotations

import os

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Return the contents of ``path`` without newline translation."""

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


__all__ = ["read_text"]
