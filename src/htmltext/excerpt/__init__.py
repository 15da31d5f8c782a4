"""Excerpt helpers built on top of :func:`htmltext.convert.html_to_text`."""

from __future__ import annotations

from ..convert import html_to_text
from .paragraph import first_paragraph
from .shorten import DEFAULT_ELLIPSIS, shorten


def excerpt(
    html: str | None,
    length: int | None = None,
    *,
    ellipsis: str = DEFAULT_ELLIPSIS,
) -> str:
    """Return the first paragraph of ``html`` as plain text.

    When ``length`` is given the paragraph is shortened to that many
    characters followed by ``ellipsis``.
    """

    text = first_paragraph(html_to_text(html))
    if length is None:
        return text
    return shorten(text, length, ellipsis=ellipsis)


__all__ = ["DEFAULT_ELLIPSIS", "excerpt", "first_paragraph", "shorten"]
