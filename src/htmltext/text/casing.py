"""Word casing helpers for titles and labels."""

from __future__ import annotations


def split_camel_case_words(text: str | None) -> str:
    """Insert a space before every upper-case character after the first.

    ``"HelloThereFriend"`` becomes ``"Hello There Friend"``.  Digits,
    punctuation and existing spaces are left alone.
    """

    if not text:
        return ""
    out = [text[0]]
    for ch in text[1:]:
        if ch.isupper() and out[-1] != " ":
            out.append(" ")
        out.append(ch)
    return "".join(out)


def capitalise_each_word(phrase: str | None) -> str:
    """Title-case each space separated word.

    Words longer than one character become ``"Xxxx"``; single characters
    are upper-cased.  Runs of spaces collapse and the result is trimmed.
    """

    if not phrase:
        return ""
    words: list[str] = []
    for word in phrase.split(" "):
        if len(word) > 1:
            words.append(word[0].upper() + word[1:].lower())
        elif word:
            words.append(word.upper())
    return " ".join(words)


__all__ = ["split_camel_case_words", "capitalise_each_word"]
