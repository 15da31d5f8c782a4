"""Plain-text writer.

:func:`write_text` stores converted text on disk exactly as given.  With the
default ``newline=""`` the ``\\r\\n`` breaks produced by the converter are not
translated.  Parent directories are created as needed.
"""

from __future__ import annotations

import os
from pathlib import Path

PathLikeStr = os.PathLike[str]


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path``.

    Parameters
    ----------
    path:
        Destination file path.
    text:
        The Unicode string to be written.
    encoding:
        Output encoding.  Defaults to UTF-8 without a byte-order mark.
    newline:
        Forwarded to :func:`open`.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


__all__ = ["write_text"]
