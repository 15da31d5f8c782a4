from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from htmltext.cli import app


def test_missing_file(tmp_path: Path) -> None:
    out_txt = tmp_path / "out.txt"
    missing = tmp_path / "missing.html"
    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--in", str(missing), "--out", str(out_txt)])
    assert result.exit_code == 3
    assert str(missing) in result.stderr


def test_unsupported_extension(tmp_path: Path) -> None:
    in_path = tmp_path / "foo.bin"
    in_path.write_text("data", encoding="utf-8")
    out_path = tmp_path / "out.txt"
    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--in", str(in_path), "--out", str(out_path)])
    assert result.exit_code == 3


def test_unsupported_output_extension(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_text("<p>x</p>", encoding="utf-8")
    out_path = tmp_path / "out.pdf"
    runner = CliRunner()
    result = runner.invoke(app, ["strip", "--in", str(in_path), "--out", str(out_path)])
    assert result.exit_code == 3
    assert not out_path.exists()


def test_bad_config(tmp_path: Path) -> None:
    in_path = tmp_path / "in.txt"
    in_path.write_text("hello", encoding="utf-8")
    out_path = tmp_path / "out.txt"
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "convert",
            "--in",
            str(in_path),
            "--out",
            str(out_path),
            "--config",
            str(bad_cfg),
        ],
    )
    assert result.exit_code == 4


def test_malformed_yaml(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_text("<p>x</p>", encoding="utf-8")
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("entities: [unclosed\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["excerpt", "--in", str(in_path), "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_missing_config(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_text("<p>x</p>", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app, ["excerpt", "--in", str(in_path), "--config", str(tmp_path / "nope.yml")]
    )
    assert result.exit_code == 4
