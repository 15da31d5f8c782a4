"""Typer-based command line interface for the HTML to text converter.

Three commands share the same configuration and file registry:

``convert``
    Full conversion with paragraph breaks (:func:`htmltext.html_to_text`).
``strip``
    Markup removal only (:func:`htmltext.strip_tags`).
``excerpt``
    First paragraph of the converted text, optionally shortened, printed to
    stdout.

Exit codes
----------
0 success
3 I/O error (missing reader/writer, filesystem issues)
4 configuration error
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .convert import html_to_text
from .excerpt import excerpt as make_excerpt
from .io import read_file, write_file
from .strip.scanner import strip_tags
from .utils.errors import UnsupportedFormatError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="htmltext",
    help="Convert HTML to plain text. Use 'htmltext convert' for a full conversion.",
)

_ANY_BREAK_RE = re.compile(r"\r\n|\r|\n")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


def _apply_overrides(
    cfg: ConfigModel,
    *,
    preserve_entities: bool | None = None,
    max_numeric: int | None = None,
    length: int | None = None,
    newline_out: str | None = None,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if preserve_entities is not None:
        new_cfg.convert.preserve_entity_codes = preserve_entities
    if max_numeric is not None:
        new_cfg.entities.max_numeric = max_numeric
    if length is not None:
        new_cfg.excerpt.length = length
    if newline_out is not None:
        new_cfg.output.newline = newline_out
    return new_cfg


def _read_input(in_path: Path, encoding: str | None) -> str:
    kwargs = {"encoding": encoding} if encoding else {}
    try:
        return read_file(in_path, **kwargs)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))


def _write_output(out_path: Path, text: str, cfg: ConfigModel) -> None:
    if cfg.output.newline:
        text = _ANY_BREAK_RE.sub(cfg.output.newline, text)
    try:
        write_file(out_path, text, encoding=cfg.output.encoding)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Entry point for the htmltext command group."""

    configure_logging(verbose)


@app.command()
def convert(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input file (.html, .htm, .xhtml or .txt)"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output file (.txt)"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    encoding_in: Optional[str] = typer.Option(  # noqa: B008
        None, help="Input encoding (HTML files: fallback when undeclared)"
    ),
    newline_out: Optional[str] = typer.Option(  # noqa: B008
        None, help="Output line break; empty string keeps \\r\\n"
    ),
    preserve_entities: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--preserve-entities/--decode-entities",
        help="Keep output ASCII by re-encoding non-ASCII characters as &#N;",
    ),
    max_numeric: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-numeric", min=0, help="Highest code point decoded from &#N;"
    ),
) -> None:
    """Convert ``in_path`` to plain text with paragraph breaks."""

    cfg = _apply_overrides(
        _load(config_path),
        preserve_entities=preserve_entities,
        max_numeric=max_numeric,
        newline_out=newline_out,
    )
    logger.info("Loaded config")

    html = _read_input(in_path, encoding_in)
    logger.info("Read %d chars", len(html))

    with Timing() as t_conv:
        text = html_to_text(
            html,
            cfg.convert.preserve_entity_codes,
            max_numeric_entity=cfg.entities.max_numeric,
        )
    logger.info("Converted to %d chars in %.1f ms", len(text), t_conv.ms)

    _write_output(out_path, text, cfg)
    logger.info("Wrote %s", out_path)


@app.command()
def strip(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input file (.html, .htm, .xhtml or .txt)"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output file (.txt)"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    keep_named: bool = typer.Option(  # noqa: B008
        False, "--keep-named", help="Leave named entities such as &amp; untouched"
    ),
    keep_numeric: bool = typer.Option(  # noqa: B008
        False, "--keep-numeric", help="Leave numeric entities such as &#65; untouched"
    ),
) -> None:
    """Remove markup from ``in_path`` without restoring paragraph breaks."""

    cfg = _load(config_path)
    html = _read_input(in_path, None)

    with Timing() as t_strip:
        text = strip_tags(
            html,
            cfg.entities.decode_named and not keep_named,
            cfg.entities.decode_numeric and not keep_numeric,
            max_numeric_entity=cfg.entities.max_numeric,
        )
    logger.info("Stripped to %d chars in %.1f ms", len(text), t_strip.ms)

    _write_output(out_path, text, cfg)


@app.command()
def excerpt(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input file (.html, .htm, .xhtml or .txt)"
    ),
    length: Optional[int] = typer.Option(  # noqa: B008
        None, "--length", min=0, help="Shorten the paragraph to this many characters"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print the first paragraph of ``in_path`` as plain text."""

    cfg = _apply_overrides(_load(config_path), length=length)
    html = _read_input(in_path, None)
    typer.echo(make_excerpt(html, cfg.excerpt.length, ellipsis=cfg.excerpt.ellipsis))
