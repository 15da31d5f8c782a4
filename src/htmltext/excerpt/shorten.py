"""Length-limited excerpts."""

from __future__ import annotations

DEFAULT_ELLIPSIS = "..."


def shorten(text: str | None, length: int, *, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """Cut ``text`` to ``length`` characters, appending ``ellipsis`` when cut.

    Text that already fits is returned unchanged.  Negative lengths are
    treated as zero.
    """

    if not text:
        return ""
    length = max(length, 0)
    if len(text) > length:
        return text[:length] + ellipsis
    return text


__all__ = ["DEFAULT_ELLIPSIS", "shorten"]
