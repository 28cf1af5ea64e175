from __future__ import annotations

import json
from pathlib import Path

import pytest

from lazysort.cli import build_parser, main


def _write(tmp_path: Path, lines: list[str]) -> Path:
    path = tmp_path / "input.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_sort_by_length_with_top(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, ["a", "cat", "sat", "on", "the", "mat"])
    main(["sort", "--input", str(path), "--order", "length", "--top", "3"])
    assert capsys.readouterr().out.splitlines() == ["a", "on", "cat"]


def test_numeric_sort_with_nan_last_and_stats(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, ["9", "nan", "1", "3", "4", "4", "2", "4"])
    main(["sort", "--input", str(path), "--order", "numeric", "--incomparable", "last", "--stats"])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1", "2", "3", "4", "4", "4", "9", "nan"]
    stats = json.loads(captured.err.strip().splitlines()[-1])
    assert stats["emitted"] == 8


def test_config_file_supplies_defaults(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, ["10", "2", "33", "4"])
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text("order: numeric\ntop: 2\npivot: first\n", encoding="utf-8")
    main(["sort", "--input", str(path), "--config", str(cfg_path)])
    assert capsys.readouterr().out.splitlines() == ["2", "4"]


def test_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("pear\napple\n\nfig\n"))
    main(["sort"])
    assert capsys.readouterr().out.splitlines() == ["apple", "fig", "pear"]


def test_unparseable_number_exits(tmp_path: Path) -> None:
    path = _write(tmp_path, ["1", "two"])
    with pytest.raises(SystemExit):
        main(["sort", "--input", str(path), "--order", "numeric"])


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
