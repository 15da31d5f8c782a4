"""Lightweight profiling harness for conversion performance measurements.

This module exposes two helpers:

``profile_conversion``
    Time individual stages of :func:`htmltext.html_to_text` for a single
    document using the same in-process wiring (no I/O).

``profile_fixtures``
    Convenience wrapper that loads evaluation fixtures, synthesises larger
    documents by repeating their contents and returns per-stage timings for
    each.

Neither function prints or logs; results are returned to the caller so tests or
tools can aggregate them as needed.
"""

from __future__ import annotations

import os
from time import perf_counter
from typing import Dict, List

from evaluation.fixtures import loader as fixtures_loader
from htmltext.config import load_config
from htmltext.convert import mark_paragraphs
from htmltext.preprocess.normalizer import collapse_spaces, normalize_newlines
from htmltext.strip.scanner import strip_tags
from htmltext.utils.constants import LINE_BREAK, PARAGRAPH_SENTINEL

__all__ = ["profile_conversion", "profile_fixtures"]

PERF_REPEAT_ENV_VAR = "HTMLTEXT_PERF_REPEAT"


def profile_conversion(html: str, max_numeric_entity: int | None = None) -> Dict[str, float]:
    """Return per-stage timings (seconds) for converting ``html``.

    Stages mirror :func:`htmltext.html_to_text` with entity decoding enabled.
    ``total`` measures the full wall clock duration; values are floats
    expressed in seconds.
    """

    if max_numeric_entity is None:
        max_numeric_entity = load_config(env={}).entities.max_numeric

    timings: Dict[str, float] = {}
    total_start = perf_counter()

    t0 = perf_counter()
    marked = mark_paragraphs(html)
    timings["mark"] = perf_counter() - t0

    t0 = perf_counter()
    text = strip_tags(marked, max_numeric_entity=max_numeric_entity)
    timings["strip"] = perf_counter() - t0

    t0 = perf_counter()
    text = text.replace(PARAGRAPH_SENTINEL, LINE_BREAK).strip()
    timings["restore"] = perf_counter() - t0

    t0 = perf_counter()
    text = collapse_spaces(text)
    timings["collapse"] = perf_counter() - t0

    t0 = perf_counter()
    normalize_newlines(text)
    timings["normalize"] = perf_counter() - t0

    timings["total"] = perf_counter() - total_start
    return timings


def profile_fixtures(
    names: List[str] | None = None,
    *,
    repeat: int | None = None,
) -> List[Dict[str, object]]:
    """Return timing bundles for fixture documents.

    Parameters
    ----------
    names:
        Optional list of fixture basenames.  When ``None`` all fixtures are
        profiled.
    repeat:
        Number of times to repeat each fixture's markup when constructing the
        synthetic profiling document.  ``None`` consults the
        ``HTMLTEXT_PERF_REPEAT`` environment variable and falls back to ``10``.
    """

    all_names = fixtures_loader.list_fixtures()
    selected = all_names if names is None else [n for n in all_names if n in set(names)]

    if repeat is None:
        try:
            repeat = int(os.getenv(PERF_REPEAT_ENV_VAR, "10"))
        except ValueError:
            repeat = 10

    cfg = load_config(env={})

    results: List[Dict[str, object]] = []
    for name in selected:
        html, _exp = fixtures_loader.load_fixture(name)
        synthetic = "\n".join(html for _ in range(repeat))
        stages = profile_conversion(synthetic, cfg.entities.max_numeric)
        results.append(
            {
                "name": name,
                "chars": len(synthetic),
                "stages": stages,
                "repeat": repeat,
            }
        )
    return results


if __name__ == "__main__":  # pragma: no cover - convenience wrapper
    import argparse

    parser = argparse.ArgumentParser(description="Profile evaluation fixtures")
    parser.add_argument("--names", type=str, default=None, help="Comma separated fixture names")
    parser.add_argument("--repeat", type=int, default=None, help="Repeat count")
    args = parser.parse_args()

    names_arg = args.names.split(",") if args.names else None
    out = profile_fixtures(names_arg, repeat=args.repeat)

    header = f"{'name':<20} {'chars':>8} {'repeat':>6} {'total_ms':>9}"
    print(header)
    print("-" * len(header))
    for item in out:
        total_ms = item["stages"]["total"] * 1000.0  # type: ignore[index]
        print(f"{item['name']:<20} {item['chars']:>8} {item['repeat']:>6} {total_ms:>9.1f}")
