"""Scanner states and the fixed lookahead tokens that switch between them."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "ScanState",
    "BLOCK_KEYWORDS",
    "COMMENT_OPEN",
    "COMMENT_CLOSE",
    "TAG_OPEN",
    "TAG_CLOSE",
    "ascii_lower",
    "is_tag_boundary",
]


class ScanState(Enum):
    """Mutually exclusive positions of the tag stripper.

    ``IN_ATTRIBUTE_VALUE`` is nested inside a tag; the scanner remembers the
    quote that opened it.  The block states (comment, script, style and
    noscript) suppress all output and ignore any markup inside their bodies.
    """

    PLAIN = "plain"
    IN_COMMENT = "comment"
    IN_SCRIPT = "script"
    IN_STYLE = "style"
    IN_NOSCRIPT = "noscript"
    IN_TAG = "tag"
    IN_ATTRIBUTE_VALUE = "attribute-value"


# Element blocks whose bodies are dropped; checked in this order after ``<!--``.
BLOCK_KEYWORDS: Mapping[ScanState, str] = MappingProxyType(
    {
        ScanState.IN_NOSCRIPT: "noscript",
        ScanState.IN_SCRIPT: "script",
        ScanState.IN_STYLE: "style",
    }
)

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
TAG_OPEN = "<"
TAG_CLOSE = ">"

_ASCII_LOWER_TABLE = str.maketrans({chr(code): chr(code + 32) for code in range(65, 91)})


def ascii_lower(text: str) -> str:
    """Lower-case ASCII letters only, keeping every index aligned with ``text``."""

    return text.translate(_ASCII_LOWER_TABLE)


def is_tag_boundary(ch: str) -> bool:
    """Return ``True`` if ``ch`` may follow an element name."""

    return ch.isspace() or ch == "/" or ch == TAG_CLOSE
