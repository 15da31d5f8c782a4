"""Safe, deterministic whitespace normalization.

:func:`normalize_newlines` tidies the text left behind once markup has been
removed so that paragraph breaks read naturally.  It is the final pass of both
:func:`~htmltext.strip.scanner.strip_tags` and
:func:`~htmltext.convert.html_to_text`.

Rules
-----
The following transforms are applied in order:

1. **Tab removal** – every ``\\t`` is deleted.
2. **Trailing blanks** – spaces directly before a line break are deleted.
3. **Leading blanks** – spaces directly after a line break are deleted.
4. **Blank-line cap** – a run of three or more line breaks (``\\r\\n``,
   ``\\n`` or a lone ``\\r``) becomes exactly ``\\r\\n\\r\\n``, leaving at
   most one blank line between paragraphs.

Single and double line breaks keep their original form.  The function is pure
and idempotent: ``normalize_newlines(normalize_newlines(s))`` equals
``normalize_newlines(s)``.

:func:`collapse_spaces` squeezes runs of literal spaces down to one space.

Example
-------

>>> normalize_newlines("One \\r\\n\\r\\n\\r\\n\\r\\n\\tTwo")
'One\\r\\n\\r\\nTwo'
"""

from __future__ import annotations

import re

from ..utils.constants import LINE_BREAK

_TRAILING_SPACES_RE = re.compile(r" +(?=[\r\n])")
_LEADING_SPACES_RE = re.compile(r"(?<=[\r\n]) +")
_BREAK_RUN_RE = re.compile(r"(?:\r\n|\r|\n){3,}")

_PARAGRAPH_BREAK = LINE_BREAK * 2


def normalize_newlines(text: str | None) -> str:
    """Normalize line breaks and surrounding blanks in ``text``.

    ``None`` and empty input return ``""``.
    """

    if not text:
        return ""

    text = text.replace("\t", "")
    text = _TRAILING_SPACES_RE.sub("", text)
    text = _LEADING_SPACES_RE.sub("", text)
    return _BREAK_RUN_RE.sub(_PARAGRAPH_BREAK, text)


def collapse_spaces(text: str) -> str:
    """Replace double spaces with single ones until none remain."""

    while "  " in text:
        text = text.replace("  ", " ")
    return text


__all__ = ["normalize_newlines", "collapse_spaces"]
