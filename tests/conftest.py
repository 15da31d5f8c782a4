from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _wide_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rich-rendered help from truncating option names in narrow terminals."""
    monkeypatch.setenv("COLUMNS", "200")
