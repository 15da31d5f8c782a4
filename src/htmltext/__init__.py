"""Plain-text extraction from HTML and XHTML.

The package turns arbitrary, possibly malformed markup into readable text for
excerpts, search indexing and email previews.  Tags, comments and the bodies
of ``<script>``, ``<style>`` and ``<noscript>`` blocks are removed by a
single-pass scanner, character references are decoded, and ``<br>``, ``<p>``
and ``<div>`` boundaries survive as line breaks.

The command line interface lives in :mod:`htmltext.cli`.
"""

from .convert import html_to_text
from .entities import decode_entities, encode_special_chars
from .excerpt import excerpt, first_paragraph, shorten
from .preprocess import normalize_newlines
from .strip import strip_tags

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "decode_entities",
    "encode_special_chars",
    "excerpt",
    "first_paragraph",
    "html_to_text",
    "normalize_newlines",
    "shorten",
    "strip_tags",
]
