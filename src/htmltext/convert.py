"""HTML to plain-text conversion.

:func:`html_to_text` wires the stripper, the entity decoder/encoder and the
normalizer together while keeping paragraph structure:

1. ``<br>``, ``<br/>`` and ``<br />`` are replaced with a private sentinel.
2. Two sentinels are inserted before every ``<p`` and ``<div``.
3. Markup is stripped; entities are decoded unless ``preserve_entity_codes``.
4. Sentinels become ``\\r\\n``.
5. With ``preserve_entity_codes`` named entities are decoded here instead.
6. Runs of spaces collapse to one.
7. With ``preserve_entity_codes`` every non-ASCII character is re-encoded as
   ``&#N;``.
8. Line breaks are normalized.

All tag matching is case-insensitive.  Other structure is discarded.
"""

from __future__ import annotations

import re

from .entities.decoder import decode_named_entities
from .entities.encoder import encode_special_chars
from .preprocess.normalizer import collapse_spaces, normalize_newlines
from .strip.scanner import strip_tags
from .utils.constants import LINE_BREAK, NUMERIC_ENTITY_CEILING, PARAGRAPH_SENTINEL

_BR_RE = re.compile(r"<br>|<br/>|<br />", re.IGNORECASE)
_BLOCK_OPEN_RE = re.compile(r"(?=<p|<div)", re.IGNORECASE)


def mark_paragraphs(html: str) -> str:
    """Replace line-break tags and prefix block openers with sentinels."""

    html = _BR_RE.sub(PARAGRAPH_SENTINEL, html).strip()
    return _BLOCK_OPEN_RE.sub(PARAGRAPH_SENTINEL * 2, html)


def html_to_text(
    html: str | None,
    preserve_entity_codes: bool = False,
    *,
    max_numeric_entity: int = NUMERIC_ENTITY_CEILING,
) -> str:
    """Convert an HTML document or fragment to plain text.

    Parameters
    ----------
    html:
        Markup to convert.  ``None`` and blank input return ``""``.
    preserve_entity_codes:
        Keep the output ASCII-only: characters above U+007F are written back
        as numeric references such as ``&#169;``.
    max_numeric_entity:
        Highest code point decoded from ``&#N;`` references.

    Returns
    -------
    str
        Text without markup, paragraphs separated by ``\\r\\n\\r\\n``.
    """

    if not html or not html.strip():
        return ""

    decode = not preserve_entity_codes
    text = strip_tags(
        mark_paragraphs(html),
        decode,
        decode,
        max_numeric_entity=max_numeric_entity,
    )
    text = text.replace(PARAGRAPH_SENTINEL, LINE_BREAK).strip()

    if preserve_entity_codes:
        text = decode_named_entities(text)

    text = collapse_spaces(text)

    if preserve_entity_codes:
        text = encode_special_chars(text)

    return normalize_newlines(text)


__all__ = ["html_to_text", "mark_paragraphs"]
