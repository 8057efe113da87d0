"""
Tests for loading levels from their textual description.
"""

from pathlib import Path

import pytest
from core.constants import Tile
from core.error_handling import LoadError
from dungeon.level_loader import load_level, parse_level, try_load_level

LEVEL = """\
3 4
1 2
+ - - $
- M ! -
@ - ? +
"""


@pytest.fixture
def level_file(tmp_path: Path) -> Path:
    path = tmp_path / "level1.txt"
    path.write_text(LEVEL, encoding="utf-8")
    return path


def test_load_level_reads_dimensions_and_start(level_file: Path):
    level = load_level(level_file)
    assert (level.rows, level.cols) == (3, 4)
    assert level.player.position == (1, 2)
    assert level.player.treasure == 0


def test_player_cell_is_forced_to_marker(level_file: Path):
    """The file holds the exit under the start position; the marker wins."""
    level = load_level(level_file)
    assert level.grid[1, 2] == Tile.PLAYER
    assert level.grid.count(Tile.PLAYER) == 1
    assert level.grid.count(Tile.EXIT) == 0


def test_tiles_are_read_in_row_major_order(level_file: Path):
    grid = load_level(level_file).grid
    assert grid.row(0) == ["+", "-", "-", "$"]
    assert grid.row(1) == ["-", "M", "o", "-"]
    assert grid.row(2) == ["@", "-", "?", "+"]


def test_symbols_without_whitespace_are_accepted():
    level = parse_level("2 3\n0 0\n-$+\nM-!\n")
    assert str(level.grid) == "o$+\nM-!"


def test_missing_file_returns_no_grid(tmp_path: Path):
    assert try_load_level(tmp_path / "missing.txt") is None


def test_missing_file_raises_load_error(tmp_path: Path):
    with pytest.raises(LoadError):
        load_level(tmp_path / "missing.txt")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "3 x\n0 0\n",
        "0 3\n0 0\n",
        "2 2\n2 0\n- - - -",
        "2 2\n0 0\n- - -",
    ],
)
def test_malformed_levels_raise_load_error(text: str):
    with pytest.raises(LoadError):
        parse_level(text)


@pytest.mark.parametrize(
    "text",
    [
        "10000000000 10000000000\n0 0\n-",
        "50000 50000\n0 0\n- - - -",
    ],
)
def test_oversized_header_is_rejected_as_load_error(text: str):
    with pytest.raises(LoadError, match="declares"):
        parse_level(text)


def test_oversized_level_file_returns_no_grid(tmp_path: Path):
    path = tmp_path / "huge.txt"
    path.write_text("10000000000 10000000000\n0 0\n-\n", encoding="utf-8")
    assert try_load_level(path) is None


def test_trailing_symbols_are_ignored():
    level = parse_level("1 2\n0 1\n- - M M")
    assert str(level.grid) == "-o"
