from htmltext.entities import encode_special_chars


def test_ascii_untouched() -> None:
    assert encode_special_chars("plain <text> & 123") == "plain <text> & 123"


def test_non_ascii_encoded_decimal() -> None:
    assert encode_special_chars("© café €") == "&#169; caf&#233; &#8364;"


def test_astral_character_single_reference() -> None:
    assert encode_special_chars("\U0001f600") == "&#128512;"


def test_empty() -> None:
    assert encode_special_chars("") == ""
