"""Markup stripping state machine."""

from .scanner import TagScanner, scan, strip_tags
from .state import ScanState

__all__ = ["ScanState", "TagScanner", "scan", "strip_tags"]
