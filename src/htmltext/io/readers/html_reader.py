"""HTML document reader.

Purpose:
    Turn an HTML file on disk into a ``str`` for the converter.

Key responsibilities:
    - Pick the character encoding with :class:`bs4.dammit.UnicodeDammit`:
      a byte-order mark wins, then a ``<meta charset>`` / ``http-equiv``
      declaration, then the caller's fallback, then UTF-8 and Windows-1252.
    - Never abort on a bad byte; undecodable input falls back to replacement
      characters.

Notes/Edge cases:
    - UTF-32 byte-order marks begin with the UTF-16 ones, so they are decoded
      before the detector sees the data.
    - Unknown charset labels are skipped in favour of the fallback.
    - No markup is interpreted here; stripping happens in
      :mod:`htmltext.strip`.

Dependencies:
    - ``beautifulsoup4`` (encoding detection only).
"""

from __future__ import annotations

import codecs
import os
from pathlib import Path

from bs4.dammit import UnicodeDammit

from ...utils.logging import get_logger

logger = get_logger(__name__)

PathLikeStr = os.PathLike[str]

_UTF32_BOMS = (codecs.BOM_UTF32_LE, codecs.BOM_UTF32_BE)


def _decode(data: bytes, default: str) -> tuple[str, str]:
    if data.startswith(_UTF32_BOMS):
        return data.decode("utf-32"), "utf-32"
    dammit = UnicodeDammit(data, user_encodings=[default], is_html=True)
    encoding = dammit.original_encoding or default
    if dammit.tried_encodings and dammit.tried_encodings[-1][1] == "replace":
        logger.debug("decoded with replacement characters as %s", encoding)
    return dammit.unicode_markup or "", encoding


def sniff_encoding(data: bytes, default: str = "utf-8") -> str:
    """Return the encoding ``data`` decodes with."""

    return _decode(data, default)[1]


def read_html(path: str | PathLikeStr, *, encoding: str = "utf-8") -> str:
    """Read and decode the HTML file at ``path``.

    ``encoding`` is only used when the document does not declare its own.
    """

    return _decode(Path(path).read_bytes(), encoding)[0]


__all__ = ["read_html", "sniff_encoding"]
