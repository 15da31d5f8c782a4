from pathlib import Path

import pytest
from pydantic import ValidationError

from htmltext.config import load_config


def test_max_numeric_above_unicode_range(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("entities:\n  max_numeric: 1114112\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_negative_excerpt_length(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("excerpt:\n  length: -1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_nested_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("entities:\n  decode_hex: true\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_empty_file_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yml"
    cfg_file.write_text("")
    assert load_config(cfg_file, env={}).entities.max_numeric == 511
