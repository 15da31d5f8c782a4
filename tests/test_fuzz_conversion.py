"""Fuzzed fixtures keep the converter's output invariants.

Markup from :mod:`evaluation.fuzz` flips tag case, sprinkles whitespace and
inserts comments and script blocks.  None of it may leak into the text.
"""

from __future__ import annotations

import pytest

from evaluation.fixtures.loader import list_fixtures, load_fixture
from evaluation.fuzz import NOISE_MARKER, FuzzOptions, mutate_html, variants
from htmltext import html_to_text, normalize_newlines


@pytest.mark.parametrize("name", list_fixtures())
def test_fuzzed_fixture_invariants(name: str) -> None:
    html, _exp = load_fixture(name)
    opts = FuzzOptions(max_variants=10)
    for variant in variants(html, base_seed=1234, opts=opts):
        text = html_to_text(variant)
        assert "<" not in text
        assert NOISE_MARKER not in text
        assert "\t" not in text
        assert "\r\n\r\n\r\n" not in text
        assert normalize_newlines(text) == text


def test_mutation_is_deterministic() -> None:
    html, _exp = load_fixture("article")
    opts = FuzzOptions()
    assert mutate_html(html, seed=7, opts=opts) == mutate_html(html, seed=7, opts=opts)


def test_eol_style_lf() -> None:
    opts = FuzzOptions(insert_whitespace_prob=0.0, insert_noise_prob=0.0, eol_style="lf")
    assert "\r" not in mutate_html("<p>a</p>\r\n<p>b</p>", seed=1, opts=opts)
