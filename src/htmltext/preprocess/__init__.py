"""Whitespace and line-break normalization."""

from .normalizer import collapse_spaces, normalize_newlines

__all__ = ["collapse_spaces", "normalize_newlines"]
