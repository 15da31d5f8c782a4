"""Tests for the named character reference table."""

from __future__ import annotations

from htmltext.entities.table import ENTITY_LOOKUP, NAMED_ENTITIES


def test_references_are_unique_and_well_formed() -> None:
    refs = [ref for ref, _ in NAMED_ENTITIES]
    assert len(refs) == len(set(refs))
    for ref in refs:
        assert ref.startswith("&") and ref.endswith(";")
        assert ref[1:-1].isalnum()


def test_amp_is_last() -> None:
    assert NAMED_ENTITIES[-1] == ("&amp;", "&")


def test_lookup_is_case_sensitive() -> None:
    assert ENTITY_LOOKUP["&Alpha;"] == "Α"
    assert ENTITY_LOOKUP["&alpha;"] == "α"
    assert "&ALPHA;" not in ENTITY_LOOKUP


def test_plain_text_mappings() -> None:
    assert ENTITY_LOOKUP["&nbsp;"] == " "
    assert ENTITY_LOOKUP["&raquo;"] == "»"
    assert ENTITY_LOOKUP["&apos;"] == "'"
    assert ENTITY_LOOKUP["&euro;"] == "€"