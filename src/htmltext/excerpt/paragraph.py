"""First-paragraph extraction.

A best-effort boundary search rather than a paragraph model.  Boundaries are
tried in order:

1. ``\\r\\n\\r\\n`` (cut at the earlier of it and ``\\r\\n\\r``);
2. ``\\r\\n\\r``;
3. a ``<br /><br />`` pair, after dropping one leading ``<p>``.

``<br />  <br />`` is first normalized to ``<br /><br />``.  Without a
boundary the whole input is returned.  The result is always trimmed.
"""

from __future__ import annotations

_DOUBLE_CRLF = "\r\n\r\n"
_CRLF_CR = "\r\n\r"
_DOUBLE_BR = "<br /><br />"
_SPACED_DOUBLE_BR = "<br />  <br />"
_LEADING_P = "<p>"


def first_paragraph(text: str | None) -> str:
    """Return the text before the first paragraph boundary in ``text``."""

    if not text:
        return ""

    text = text.replace(_SPACED_DOUBLE_BR, _DOUBLE_BR)

    double_crlf = text.find(_DOUBLE_CRLF)
    crlf_cr = text.find(_CRLF_CR)
    if double_crlf != -1:
        text = text[: min(double_crlf, crlf_cr)]
    elif crlf_cr != -1:
        text = text[:crlf_cr]
    elif _DOUBLE_BR in text:
        if text.startswith(_LEADING_P):
            text = text[len(_LEADING_P) :]
        text = text[: text.find(_DOUBLE_BR)]

    return text.strip()


__all__ = ["first_paragraph"]
