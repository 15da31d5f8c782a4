"""Single-pass markup stripper.

The :class:`TagScanner` walks the input once, left to right, and keeps only
the characters that sit outside of markup.  Every position belongs to exactly
one :class:`~htmltext.strip.state.ScanState`:

``PLAIN``
    Text is copied to the output.  ``<!--`` opens a comment; ``<noscript``,
    ``<script`` and ``<style`` (case-insensitive, followed by whitespace,
    ``/`` or ``>``) open a suppressed block; any other ``<`` opens a tag.
``IN_COMMENT``
    Everything is dropped up to and including ``-->``.
``IN_SCRIPT`` / ``IN_STYLE`` / ``IN_NOSCRIPT``
    Everything is dropped up to the matching closing tag.  ``</script>``
    ends the block directly; ``</script `` (whitespace or ``/`` after the
    name) skips ahead to the next ``>``.  Markup inside the body is not
    interpreted, so ``"<script>a = '<b>'</script>"`` leaves nothing behind.
``IN_TAG``
    A quote enters ``IN_ATTRIBUTE_VALUE``; ``>`` returns to ``PLAIN`` and
    emits a single space so the text of adjacent cells or list items does not
    run together.
``IN_ATTRIBUTE_VALUE``
    Only the quote that opened the value closes it; ``>`` is ignored.

Runs of characters that cannot change the state are consumed with
``str.find`` rather than one character at a time.

Malformed input never raises.  An unterminated comment, block, tag or
attribute value simply swallows the rest of the input; the condition is
logged at ``DEBUG`` level.
"""

from __future__ import annotations

import re

from ..entities.decoder import decode_entities
from ..preprocess.normalizer import normalize_newlines
from ..utils.constants import NUMERIC_ENTITY_CEILING
from ..utils.logging import get_logger
from .state import (
    BLOCK_KEYWORDS,
    COMMENT_CLOSE,
    COMMENT_OPEN,
    TAG_CLOSE,
    TAG_OPEN,
    ScanState,
    ascii_lower,
    is_tag_boundary,
)

logger = get_logger(__name__)

_TAG_STOP_RE = re.compile(r"[\"'>]")

_BODY_OPEN = "<body"
_BODY_CLOSE = "</body>"


class TagScanner:
    """Explicit state machine over one string.

    A scanner is single use: construct it with the source text and call
    :meth:`run`.
    """

    __slots__ = ("source", "lowered", "length", "pos", "state", "quote", "out")

    def __init__(self, source: str) -> None:
        self.source = source
        self.lowered = ascii_lower(source)
        self.length = len(source)
        self.pos = 0
        self.state = ScanState.PLAIN
        self.quote = '"'
        self.out: list[str] = []

    def run(self) -> str:
        """Scan the whole source and return the retained text."""

        while self.pos < self.length:
            state = self.state
            if state is ScanState.PLAIN:
                self._state_plain()
            elif state is ScanState.IN_TAG:
                self._state_tag()
            elif state is ScanState.IN_ATTRIBUTE_VALUE:
                self._state_attribute_value()
            elif state is ScanState.IN_COMMENT:
                self._state_comment()
            else:
                self._state_block()

        if self.state is not ScanState.PLAIN:
            logger.debug("input ended inside %s state", self.state.value)
        return "".join(self.out)

    # -- lookahead helpers -------------------------------------------------

    def _matches(self, token: str) -> bool:
        return self.lowered.startswith(token, self.pos)

    def _opens_block(self, keyword: str) -> bool:
        # ``<`` + keyword + one boundary character must all be present.
        boundary = self.pos + 1 + len(keyword)
        if boundary >= self.length:
            return False
        return self._matches(TAG_OPEN + keyword) and is_tag_boundary(self.source[boundary])

    # -- states ------------------------------------------------------------

    def _state_plain(self) -> None:
        idx = self.source.find(TAG_OPEN, self.pos)
        if idx == -1:
            self.out.append(self.source[self.pos :])
            self.pos = self.length
            return
        if idx > self.pos:
            self.out.append(self.source[self.pos : idx])
        self.pos = idx

        if self._matches(COMMENT_OPEN):
            self.pos += len(COMMENT_OPEN)
            self.state = ScanState.IN_COMMENT
            return
        for block_state, keyword in BLOCK_KEYWORDS.items():
            if self._opens_block(keyword):
                self.pos += 1 + len(keyword)
                self.state = block_state
                return
        self.pos += 1
        self.state = ScanState.IN_TAG

    def _state_tag(self) -> None:
        match = _TAG_STOP_RE.search(self.source, self.pos)
        if match is None:
            self.pos = self.length
            return
        ch = match.group(0)
        self.pos = match.end()
        if ch == TAG_CLOSE:
            self.out.append(" ")
            self.state = ScanState.PLAIN
        else:
            self.quote = ch
            self.state = ScanState.IN_ATTRIBUTE_VALUE

    def _state_attribute_value(self) -> None:
        idx = self.source.find(self.quote, self.pos)
        if idx == -1:
            self.pos = self.length
            return
        self.pos = idx + 1
        self.state = ScanState.IN_TAG

    def _state_comment(self) -> None:
        idx = self.source.find(COMMENT_CLOSE, self.pos)
        if idx == -1:
            self.pos = self.length
            return
        self.pos = idx + len(COMMENT_CLOSE)
        self.state = ScanState.PLAIN

    def _state_block(self) -> None:
        closing = "</" + BLOCK_KEYWORDS[self.state]
        idx = self.lowered.find(closing, self.pos)
        if idx == -1:
            self.pos = self.length
            return
        after = idx + len(closing)
        if after >= self.length:
            self.pos = self.length
            return
        ch = self.source[after]
        if ch == TAG_CLOSE:
            self.pos = after + 1
            self.state = ScanState.PLAIN
        elif ch.isspace() or ch == "/":
            gt = self.source.find(TAG_CLOSE, after)
            self.pos = self.length if gt == -1 else gt + 1
            self.state = ScanState.PLAIN
        else:
            # ``</scripts`` and the like do not close the block.
            self.pos = after


def body_bounds(html: str) -> tuple[int, int]:
    """Return the ``[start, end)`` range to scan.

    The range starts at the first ``<body`` and stops before the first
    ``</body>`` (both case-insensitive).  Missing markers fall back to the
    start and end of ``html``.
    """

    lowered = ascii_lower(html)
    start = lowered.find(_BODY_OPEN)
    end = lowered.find(_BODY_CLOSE)
    if start == -1:
        start = 0
    if end == -1 or end < start:
        end = len(html)
    return start, end


def scan(html: str) -> str:
    """Return the raw text left after removing markup from ``html``.

    No trimming, entity decoding or whitespace normalization is applied.
    """

    if not html:
        return ""
    return TagScanner(html).run()


def strip_tags(
    html: str | None,
    replace_named_entities: bool = True,
    replace_numbered_entities: bool = True,
    *,
    max_numeric_entity: int = NUMERIC_ENTITY_CEILING,
) -> str:
    """Strip all markup from ``html`` and return plain text.

    ``None`` and blank input return ``""``.  The input is trimmed and scanning
    is limited to the document body when ``<body``/``</body>`` are present.
    Entities are decoded according to the two flags, then the text is trimmed
    and its line breaks normalized.
    """

    if not html:
        return ""
    html = html.strip()
    if not html:
        return ""

    start, end = body_bounds(html)
    text = scan(html[start:end])
    text = decode_entities(
        text,
        named=replace_named_entities,
        numeric=replace_numbered_entities,
        max_numeric=max_numeric_entity,
    )
    return normalize_newlines(text.strip())


__all__ = ["TagScanner", "body_bounds", "scan", "strip_tags"]
