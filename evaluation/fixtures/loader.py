from __future__ import annotations

import json
from pathlib import Path
from typing import Any, cast

_ROOT = Path(__file__).resolve().parent


def list_fixtures(root: Path | str = _ROOT) -> list[str]:
    """Return fixture basenames where both .html and .expect.json exist."""
    root = Path(root)
    names: list[str] = []
    for html in root.glob("*.html"):
        if (root / f"{html.stem}.expect.json").exists():
            names.append(html.stem)
    return sorted(names)


def load_fixture(name: str) -> tuple[str, dict[str, Any]]:
    """Return (html, expectation dict) for fixture ``name``."""
    html_path = _ROOT / f"{name}.html"
    exp_path = _ROOT / f"{name}.expect.json"
    html = html_path.read_text(encoding="utf-8")
    exp = json.loads(exp_path.read_text(encoding="utf-8"))
    expected_doc = html_path.name
    if exp.get("doc") != expected_doc:
        raise ValueError(f"expectation doc mismatch: {exp.get('doc')} != {expected_doc}")
    return html, exp


def validate_expectations(text: str, exp: dict[str, Any]) -> list[str]:
    """Return a list of messages for expectations ``text`` does not meet."""
    errors: list[str] = []
    for needle in cast(list[str], exp.get("contains", [])):
        if needle not in text:
            errors.append(f"missing {needle!r}")
    for needle in cast(list[str], exp.get("excludes", [])):
        if needle in text:
            errors.append(f"unexpected {needle!r}")
    return errors
