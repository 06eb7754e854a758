from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from sentsplitter.cli import app


def test_split_json_to_stdout(tmp_path: Path, monkeypatch: Any) -> None:
    monkeypatch.delenv("SENTSPLITTER_MODE", raising=False)
    in_path = tmp_path / "in.txt"
    in_path.write_text("Dr. Smith went home.\nHe left.", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["split", "--in", str(in_path), "--format", "json"])
    assert result.exit_code == 0
    records = json.loads(result.stdout)
    assert [(r["start"], r["end"]) for r in records] == [(0, 20), (21, 29)]
    assert records[1]["text"] == "He left."
    assert (records[1]["line"], records[1]["col"]) == (1, 0)


def test_split_tsv_to_file(tmp_path: Path) -> None:
    in_path = tmp_path / "in.txt"
    in_path.write_text("Samples were run. qPCR confirmed it.", encoding="utf-8")
    out_path = tmp_path / "nested" / "out.tsv"
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "split",
            "--in",
            str(in_path),
            "--out",
            str(out_path),
            "--mode",
            "corrected",
            "--lowercase-term",
            "qPCR",
        ],
    )
    assert result.exit_code == 0
    rows = out_path.read_text(encoding="utf-8").splitlines()
    assert rows[0].startswith("paragraph\tsentence\tstart\tend")
    assert rows[1:] == [
        "0\t0\t0\t17\t0\t0\tSamples were run.",
        "0\t1\t18\t36\t0\t18\tqPCR confirmed it.",
    ]


def test_split_with_abbreviation_option(tmp_path: Path) -> None:
    in_path = tmp_path / "in.txt"
    in_path.write_text("See approx. Figures later.", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app, ["split", "--in", str(in_path), "--format", "text", "--abbreviation", "approx."]
    )
    assert result.exit_code == 0
    assert result.stdout == "0--26: See approx. Figures later.\n"


def test_demo_bosnian_legacy() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["demo", "--mode", "legacy"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0].startswith("0--181: The development coincided")
    assert lines[1].startswith('181--236:  He added, "At the moment')
    assert len(lines) == 4


def test_demo_myosin() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["demo", "--passage", "myosin"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0] == "0--30: Wot about Fig. 2 and (Fig. 3)?"


def test_split_runs_repeatedly_in_one_process(tmp_path: Path) -> None:
    in_path = tmp_path / "in.txt"
    in_path.write_text("It rained. We stayed in.", encoding="utf-8")
    runner = CliRunner()
    args = ["split", "--in", str(in_path), "--format", "text"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args + ["--verbose"])
    third = runner.invoke(app, args)
    assert (first.exit_code, second.exit_code, third.exit_code) == (0, 0, 0)
    assert second.exception is None
    assert "0--10: It rained.\n" in third.stdout
