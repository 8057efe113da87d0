"""
Tests for loading the game configuration.
"""

import json
import logging
from pathlib import Path

import pytest
from core.config import LOG_LEVEL_ENV, GameConfig, load_config
from core.logging import level_from_name


def test_defaults():
    config = GameConfig()
    assert config.first_level == 1
    assert config.level_path(3) == Path("data/levels") / "level3.txt"


def test_missing_file_gives_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    config = load_config(tmp_path / "missing.json")
    assert config == GameConfig()


def test_level_dir_is_relative_to_the_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"level_dir": "levels", "first_level": 2, "show_legend": False}),
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.level_dir == tmp_path / "levels"
    assert config.first_level == 2
    assert not config.show_legend
    assert config.level_path(2) == tmp_path / "levels" / "level2.txt"


def test_environment_overrides_log_level(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    config = load_config(tmp_path / "missing.json")
    assert level_from_name(config.log_level) == logging.DEBUG


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        json.dumps({"first_level": 0}),
        json.dumps({"level_template": "level.txt"}),
    ],
)
def test_invalid_files_raise(tmp_path: Path, content: str):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_unknown_log_level():
    with pytest.raises(ValueError):
        level_from_name("chatty")
