from __future__ import annotations

"""
Unit tests for the CLI application controller.

Invokes `main(argv)` in-process and inspects exit codes and the rendered
output streams.
"""

import json
from pathlib import Path

import pytest

from disktrace.interface.cli import app
from disktrace.interface.cli.app import _merge_config, main


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CLI from installing queue handlers on the test root logger."""
    monkeypatch.setattr(app, "configure_logging", lambda cfg: None)


def test_main_prints_human_summary(transcript_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--use-defaults", "-i", str(transcript_file)])

    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines() == [
        "Total size of directories under 100000: 95437",
        "Root directory size: 48381165",
        "Space to free: 8381165",
        "Smallest directory to delete: 24933642 (d)",
    ]


def test_main_prints_tree_before_summary(transcript_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--use-defaults", "-i", str(transcript_file), "--tree"])

    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines[0] == "/ (dir, size=48381165)"
    assert lines[14] == ""
    assert lines[15] == "Total size of directories under 100000: 95437"


def test_main_json_output(transcript_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--use-defaults", "-i", str(transcript_file), "--json", "--needed", "40000000"])

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["ok"] is True
    assert data["space_to_free"] == 18381165
    assert data["smallest_directory_size"] == 24933642
    assert data["smallest_directory_name"] == "d"


def test_main_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--use-defaults", "-i", str(tmp_path / "missing.txt")])

    assert code == 2
    assert "does not exist" in capsys.readouterr().err


def test_main_missing_input_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--use-defaults", "-i", str(tmp_path / "missing.txt"), "--json"])

    data = json.loads(capsys.readouterr().out)
    assert code == 2
    assert data["ok"] is False
    assert "does not exist" in data["error"]


def test_main_invalid_transcript(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("$ cd /\n$ pwd\n", encoding="utf-8")

    code = main(["--use-defaults", "-i", str(bad)])

    assert code == 1
    assert "ERROR: line 2: Invalid command 'pwd'" in capsys.readouterr().err


def test_main_reads_config_file(
        tmp_path: Path, transcript_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "settings.json"
    config.write_text(
        json.dumps({"input_path": str(transcript_file), "threshold": 1000}),
        encoding="utf-8",
    )

    code = main(["--config", str(config)])

    assert code == 0
    assert "Total size of directories under 1000: 584" in capsys.readouterr().out


def test_main_dump_config(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--use-defaults", "--dump-config", "--threshold", "42"])

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["threshold"] == 42
    assert data["input_path"] == "input.txt"


def test_merge_config_skips_none_values() -> None:
    merged = _merge_config({"threshold": 1, "input_path": "a"}, {"threshold": None, "input_path": "b"})

    assert merged == {"threshold": 1, "input_path": "b"}
