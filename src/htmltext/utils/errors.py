"""Typed exceptions for I/O formats.

The conversion core never raises for malformed markup; these errors only
surface at the file boundary.
"""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
