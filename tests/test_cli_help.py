from __future__ import annotations

from typer.testing import CliRunner

from sentsplitter.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "sentsplitter split" in result.stdout
    assert "demo" in result.stdout


def test_split_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["split", "--help"])
    assert "--in" in result.stdout
    assert "--out" in result.stdout
    assert "--config" in result.stdout
    assert "--mode" in result.stdout
    assert "--format" in result.stdout
