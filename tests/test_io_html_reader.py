"""Tests for HTML encoding detection."""

from __future__ import annotations

import codecs
from pathlib import Path

import pytest

from htmltext.io.readers.html_reader import read_html, sniff_encoding


def test_bom_wins() -> None:
    data = codecs.BOM_UTF8 + b'<meta charset="latin-1"><p>x</p>'
    assert sniff_encoding(data) == "utf-8"


@pytest.mark.parametrize("codec", ["utf-8-sig", "utf-16", "utf-16-be", "utf-32", "utf-32-be"])
def test_read_html_byte_order_marks(tmp_path: Path, codec: str) -> None:
    path = tmp_path / "page.html"
    data = "<p>Hi café</p>".encode(codec)
    if codec == "utf-16-be":
        data = codecs.BOM_UTF16_BE + data
    elif codec == "utf-32-be":
        data = codecs.BOM_UTF32_BE + data
    path.write_bytes(data)
    assert read_html(path) == "<p>Hi café</p>"


def test_meta_charset() -> None:
    assert sniff_encoding(b'<meta charset="ISO-8859-1"><p>caf\xe9</p>') == "iso-8859-1"
    assert (
        sniff_encoding(
            b'<meta http-equiv="Content-Type" content="text/html; charset=windows-1252">'
            b"<p>caf\xe9</p>"
        )
        == "windows-1252"
    )


def test_unknown_charset_falls_back() -> None:
    assert sniff_encoding(b'<meta charset="no-such-codec"><p>x</p>', "ascii") == "ascii"


def test_read_html_declared_encoding(tmp_path: Path) -> None:
    path = tmp_path / "page.html"
    path.write_bytes(b'<meta charset="latin-1"><p>caf\xe9</p>')
    assert read_html(path).endswith("<p>café</p>")


def test_read_html_fallback_encoding(tmp_path: Path) -> None:
    path = tmp_path / "page.htm"
    path.write_bytes(b"<p>caf\xe9</p>")
    assert read_html(path, encoding="cp1252") == "<p>café</p>"


def test_read_html_empty(tmp_path: Path) -> None:
    path = tmp_path / "empty.html"
    path.write_bytes(b"")
    assert read_html(path) == ""
