from __future__ import annotations

import logging
from pathlib import Path

import pytest

from spindraw.util.config import load_config, section


@pytest.mark.integration
def test_repo_default_config_has_scene_defaults() -> None:
    cfg = load_config()
    assert section(cfg, "canvas")["width"] == 600
    assert section(cfg, "scene")["circle"]["samples"] == 30
    assert section(cfg, "animation")["angle_wrap"] == "single"


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_root_config_overrides_top_level_sections(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "canvas: {width: 600}\nscene: {circle: {samples: 30}}\n")
    _write(tmp_path / "config.yaml", "canvas: {height: 300}\n")
    cfg = load_config(tmp_path)
    # トップレベル単位の上書き（ディープマージしない）
    assert cfg["canvas"] == {"height": 300}
    assert cfg["scene"] == {"circle": {"samples": 30}}


def test_missing_files_give_empty_config(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}


def test_invalid_yaml_is_fail_soft(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    _write(tmp_path / "configs" / "default.yaml", "canvas: [1, 2\n")
    with caplog.at_level(logging.WARNING, logger="spindraw.util.config"):
        assert load_config(tmp_path) == {}
    assert any("config load failed" in r.getMessage() for r in caplog.records)


def test_non_mapping_yaml_is_ignored(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "- a\n- b\n")
    assert load_config(tmp_path) == {}


def test_section_helper() -> None:
    assert section({"a": {"b": 1}}, "a") == {"b": 1}
    assert section({"a": 3}, "a") == {}
    assert section(None, "a") == {}
