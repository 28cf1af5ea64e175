from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from lazysort.config import DEFAULTS, load_config, load_settings
from lazysort.pivot import get_pivot_rule, last_pivot, middle_pivot


def test_load_config_defaults():
    assert load_config(None) == DEFAULTS


def test_load_config_merges_file_and_overrides(tmp_path: Path) -> None:
    cfg_path = tmp_path / "lazysort.yaml"
    cfg_path.write_text("pivot: last\ntop: 3\norder: length\n", encoding="utf-8")

    cfg = load_config(str(cfg_path), overrides={"top": 10, "order": None})

    assert cfg["pivot"] == "last"
    assert cfg["top"] == 10
    assert cfg["order"] == "length"
    assert cfg["incomparable"] is None


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    cfg_path = tmp_path / "bad.yaml"
    cfg_path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(cfg_path))


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAZYSORT_PIVOT", "last")
    monkeypatch.setenv("LAZYSORT_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.pivot == "last"
    assert settings.log_level == "DEBUG"


def test_settings_reject_unknown_pivot(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAZYSORT_PIVOT", "random")
    with pytest.raises(ValidationError):
        load_settings()


def test_pivot_registry():
    assert get_pivot_rule("middle") is middle_pivot
    assert get_pivot_rule("last") is last_pivot
    assert middle_pivot(4, 10) == 7
    with pytest.raises(ValueError):
        get_pivot_rule("median-of-three")
