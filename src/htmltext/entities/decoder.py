"""Character reference decoding.

:func:`decode_entities` resolves named references from
:data:`~htmltext.entities.table.NAMED_ENTITIES` and decimal numeric references
``&#N;`` into literal characters.  Each reference is resolved exactly once in a
single left-to-right pass, so text produced by a substitution is never decoded
again: ``"&amp;lt;"`` becomes ``"&lt;"`` and ``"&#38;amp;"`` becomes
``"&amp;"``.

Unsupported references are kept verbatim:

* names missing from the table (``"&bogus;"``);
* numbers above ``max_numeric`` (511 unless configured otherwise);
* numbers that fall inside the UTF-16 surrogate block when the ceiling is
  widened, since those cannot be encoded;
* numbers written with leading zeros (``"&#065;"``) or with more than
  seven digits, which no code point needs.

Hexadecimal references (``&#x41;``) are not decoded.
"""

from __future__ import annotations

import re

from ..utils.constants import MAX_CODE_POINT, NUMERIC_ENTITY_CEILING
from .table import ENTITY_LOOKUP

_REFERENCE_RE = re.compile(r"&(?:#(0|[1-9][0-9]{0,6})|([A-Za-z][A-Za-z0-9]*));")

_SURROGATES = range(0xD800, 0xE000)


def _numeric_literal(digits: str, max_numeric: int) -> str | None:
    value = int(digits)
    if value > max_numeric or value in _SURROGATES:
        return None
    return chr(value)


def decode_entities(
    text: str,
    *,
    named: bool = True,
    numeric: bool = True,
    max_numeric: int = NUMERIC_ENTITY_CEILING,
) -> str:
    """Return ``text`` with supported character references replaced.

    Parameters
    ----------
    text:
        Input text, typically the output of the tag stripper.
    named:
        Decode named references such as ``&copy;``.
    numeric:
        Decode decimal references ``&#N;`` with ``0 <= N <= max_numeric``.
    max_numeric:
        Highest code point decoded from a numeric reference.  Values above
        ``0x10FFFF`` are clamped.
    """

    if not text or "&" not in text or not (named or numeric):
        return text or ""

    ceiling = min(max_numeric, MAX_CODE_POINT)

    def repl(match: re.Match[str]) -> str:
        digits = match.group(1)
        if digits is not None:
            if numeric:
                literal = _numeric_literal(digits, ceiling)
                if literal is not None:
                    return literal
        elif named:
            literal = ENTITY_LOOKUP.get(match.group(0))
            if literal is not None:
                return literal
        return match.group(0)

    return _REFERENCE_RE.sub(repl, text)


def decode_named_entities(text: str) -> str:
    """Decode only named references."""

    return decode_entities(text, named=True, numeric=False)


__all__ = ["decode_entities", "decode_named_entities"]
