"""Deterministic markup fuzzing utilities.

The helpers in this module introduce small perturbations into HTML fixtures
used for converter tests.  They stress the tag scanner's case handling and
its suppression of comments and script blocks without changing which text
is visible.

Examples of applied mutations:

* random upper/lower casing of element names (``<p>`` → ``<P>``)
* whitespace (spaces, tabs, line breaks) inserted after ``>``
* ``<!-- noise -->`` comments inserted after ``>``
* ``<script>noise()</script>`` blocks inserted after ``>``
* optional mixing of line ending styles

All edits are driven by a :class:`random.Random` seeded via
:func:`rng_from_seed`.  Given the same seed and options the output is fully
deterministic.  Inserted markup always carries the word :data:`NOISE_MARKER`,
which must never reach the converted text.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Iterable, Literal

NOISE_MARKER = "noise"

_WHITESPACE = [" ", "  ", "\t", "\n", "\r\n"]
_NOISE_MARKUP = [f"<!-- {NOISE_MARKER} -->", f"<script>{NOISE_MARKER}()</script>"]


@dataclass(slots=True, frozen=True)
class FuzzOptions:
    """Configuration for :func:`mutate_html`.

    Attributes mirror the probabilities for each mutation.  ``max_variants``
    controls how many mutated versions :func:`variants` yields.
    """

    max_variants: int = 25
    flip_case_prob: float = 0.5
    insert_whitespace_prob: float = 0.3
    insert_noise_prob: float = 0.2
    eol_style: Literal["mixed", "lf", "crlf"] = "mixed"


def rng_from_seed(seed: int) -> random.Random:
    """Return a deterministic :class:`~random.Random` seeded with ``seed``."""

    return random.Random(seed)


_TAG_NAME_RE = re.compile(r"(</?)([A-Za-z][A-Za-z0-9]*)")


def flip_tag_case(html: str, rng: random.Random, prob: float) -> str:
    """Randomly upper-case element names."""

    def repl(match: re.Match[str]) -> str:
        prefix, name = match.group(1), match.group(2)
        if rng.random() >= prob:
            return match.group(0)
        return prefix + name.upper()

    return _TAG_NAME_RE.sub(repl, html)


def _insert_after_tags(html: str, rng: random.Random, prob: float, choices: list[str]) -> str:
    out: list[str] = []
    for ch in html:
        out.append(ch)
        if ch == ">" and rng.random() < prob:
            out.append(rng.choice(choices))
    return "".join(out)


def insert_whitespace(html: str, rng: random.Random, prob: float) -> str:
    """Insert a random whitespace run after some ``>`` characters."""

    return _insert_after_tags(html, rng, prob, _WHITESPACE)


def insert_noise(html: str, rng: random.Random, prob: float) -> str:
    """Insert a comment or script block after some ``>`` characters."""

    return _insert_after_tags(html, rng, prob, _NOISE_MARKUP)


def random_eol_mix(text: str, rng: random.Random, style: Literal["mixed", "lf", "crlf"]) -> str:
    """Apply the requested line-ending style to ``text``."""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if style == "lf":
        return text
    if style == "crlf":
        return text.replace("\n", "\r\n")
    parts = text.split("\n")
    out: list[str] = []
    for i, part in enumerate(parts):
        out.append(part)
        if i < len(parts) - 1:
            out.append("\r\n" if rng.random() < 0.5 else "\n")
    return "".join(out)


def mutate_html(html: str, *, seed: int, opts: FuzzOptions) -> str:
    """Return a fuzzed variant of ``html`` using ``seed`` and ``opts``."""

    rng = rng_from_seed(seed)
    mutated = html
    mutated = flip_tag_case(mutated, rng, opts.flip_case_prob)
    mutated = insert_whitespace(mutated, rng, opts.insert_whitespace_prob)
    mutated = insert_noise(mutated, rng, opts.insert_noise_prob)
    mutated = random_eol_mix(mutated, rng, opts.eol_style)
    return mutated


def variants(html: str, *, base_seed: int, opts: FuzzOptions) -> Iterable[str]:
    """Yield deterministic fuzzed variants of ``html``."""

    for i in range(opts.max_variants):
        yield mutate_html(html, seed=base_seed + i, opts=opts)


__all__ = [
    "NOISE_MARKER",
    "FuzzOptions",
    "rng_from_seed",
    "flip_tag_case",
    "insert_whitespace",
    "insert_noise",
    "random_eol_mix",
    "mutate_html",
    "variants",
]
