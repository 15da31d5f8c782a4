"""Small plain-text helpers that complement the converter."""

from .casing import capitalise_each_word, split_camel_case_words

__all__ = ["capitalise_each_word", "split_camel_case_words"]
