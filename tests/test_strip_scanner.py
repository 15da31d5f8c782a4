"""Tests for the single-pass markup stripper."""

from __future__ import annotations

from htmltext.strip import ScanState, TagScanner, scan, strip_tags
from htmltext.strip.scanner import body_bounds


def test_simple_markup() -> None:
    assert strip_tags("<p>Hello <b>World</b></p>") == "Hello  World"


def test_none_and_blank() -> None:
    assert strip_tags(None) == ""
    assert strip_tags("   \r\n ") == ""


def test_comments_removed() -> None:
    assert strip_tags("a<!-- <b>hidden</b> -->b") == "ab"


def test_unterminated_comment_swallows_rest() -> None:
    assert strip_tags("visible<!-- never closed <p>text") == "visible"


def test_script_body_not_interpreted() -> None:
    assert strip_tags("x<script>a = '<b>' + \"</p>\";</script>y") == "xy"


def test_block_tags_case_insensitive() -> None:
    assert strip_tags("a<STYLE type='text/css'>p{}</Style>b") == "ab"
    assert strip_tags("a<NoScript>enable js</NOSCRIPT>b") == "ab"


def test_closing_tag_with_whitespace() -> None:
    assert strip_tags("a<script>x()</script >b") == "ab"


def test_block_keyword_needs_boundary() -> None:
    # ``<scripts>`` is an ordinary tag, not a script block.
    assert strip_tags("a<scripts>b</scripts>c") == "a b c"


def test_longer_closing_name_does_not_close_block() -> None:
    assert strip_tags("a<script>x</scripts>y</script>b") == "ab"


def test_gt_inside_quoted_attribute() -> None:
    assert strip_tags("<a title=\"1 > 0\" href='x>y'>link</a>") == "link"


def test_unterminated_tag_swallows_rest() -> None:
    assert strip_tags("text <a href='x") == "text"


def test_body_bounds() -> None:
    html = "<html><head><title>T</title></head><BODY>Hi</BODY></html>"
    assert strip_tags(html) == "Hi"
    assert body_bounds("no body") == (0, 7)
    assert body_bounds("</body><body>x") == (7, 14)


def test_entities_decoded_by_default() -> None:
    assert strip_tags("<i>&lt;&amp;&#62;</i>") == "<&>"


def test_entity_flags() -> None:
    html = "&copy; &#65;"
    assert strip_tags(html, False, True) == "&copy; A"
    assert strip_tags(html, True, False) == "© &#65;"


def test_decoded_markup_not_stripped() -> None:
    assert strip_tags("&lt;b&gt;bold&lt;/b&gt;") == "<b>bold</b>"


def test_max_numeric_entity() -> None:
    assert strip_tags("&#8364;") == "&#8364;"
    assert strip_tags("&#8364;", max_numeric_entity=0x10FFFF) == "€"


def test_output_normalized() -> None:
    assert strip_tags("<p>a</p>\n\n\n\n<p>b</p>") == "a\r\n\r\nb"


def test_scan_keeps_raw_text() -> None:
    assert scan("  <b>x</b>&amp; ") == "   x &amp; "
    assert scan("") == ""


def test_scanner_state_after_run() -> None:
    scanner = TagScanner("a<!-- open")
    assert scanner.run() == "a"
    assert scanner.state is ScanState.IN_COMMENT
