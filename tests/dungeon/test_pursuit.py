"""
Tests for monsters pursuing the player along the four lines of sight.
"""

import pytest
from core.constants import Tile
from dungeon.grid import TileGrid
from dungeon.player import Player
from dungeon.pursuit import do_monster_attack


def _player_on(grid: TileGrid) -> Player:
    row, col = grid.find(Tile.PLAYER)
    return Player(row=row, col=col)


def test_monster_left_of_player_steps_closer_each_call():
    grid = TileGrid.from_rows(["M---o"])
    player = _player_on(grid)

    assert do_monster_attack(grid, player) is False
    assert str(grid) == "-M--o"
    assert do_monster_attack(grid, player) is False
    assert str(grid) == "--M-o"


@pytest.mark.parametrize(
    "rows, expected",
    [
        (["o---M"], ["o--M-"]),
        (["M", "-", "o"], ["-", "M", "o"]),
        (["o", "-", "M"], ["o", "M", "-"]),
    ],
)
def test_monsters_approach_from_every_direction(rows: list[str], expected: list[str]):
    grid = TileGrid.from_rows(rows)
    assert do_monster_attack(grid, _player_on(grid)) is False
    assert grid == TileGrid.from_rows(expected)


def test_pillar_blocks_line_of_sight():
    grid = TileGrid.from_rows(["M+-o-+M"])
    before = grid.copy()
    assert do_monster_attack(grid, _player_on(grid)) is False
    assert grid == before


def test_adjacent_monster_reaches_player():
    grid = TileGrid.from_rows(["-Mo-"])
    player = _player_on(grid)
    assert do_monster_attack(grid, player) is True
    assert str(grid) == "--M-"
    # The engine never moves the player itself.
    assert player.position == (0, 2)


def test_each_monster_in_a_chain_moves_one_step():
    grid = TileGrid.from_rows(["MM-M-o"])
    assert do_monster_attack(grid, _player_on(grid)) is False
    assert str(grid) == "-MM-Mo"


def test_chain_next_to_player():
    grid = TileGrid.from_rows(["oMM"])
    assert do_monster_attack(grid, _player_on(grid)) is True
    assert str(grid) == "MM-"


def test_monsters_off_the_lines_of_sight_do_not_move():
    grid = TileGrid.from_rows(
        [
            "M---M",
            "--o--",
            "M---M",
        ]
    )
    before = grid.copy()
    assert do_monster_attack(grid, _player_on(grid)) is False
    assert grid == before


def test_no_monster_in_sight_leaves_grid_unchanged():
    grid = TileGrid.from_rows(["-$-", "@o?", "-!-"])
    before = grid.copy()
    assert do_monster_attack(grid, _player_on(grid)) is False
    assert grid == before


@pytest.mark.parametrize(
    "rows, expected",
    [
        (["M$o"], "$Mo"),
        (["M!-o"], "!M-o"),
        (["o?M"], "oM?"),
        (["M@-o-"], "@M-o-"),
    ],
)
def test_items_under_a_monster_stay_behind_it(rows: list[str], expected: str):
    grid = TileGrid.from_rows(rows)
    assert do_monster_attack(grid, _player_on(grid)) is False
    assert str(grid) == expected


def test_exit_survives_a_monster_walking_across_it():
    grid = TileGrid.from_rows(["M!-o"])
    player = _player_on(grid)
    do_monster_attack(grid, player)
    do_monster_attack(grid, player)
    assert str(grid) == "!-Mo"
    assert grid.count(Tile.EXIT) == 1


def test_monster_in_a_column_swaps_with_the_door_ahead():
    grid = TileGrid.from_rows(["M", "?", "-", "o"])
    assert do_monster_attack(grid, _player_on(grid)) is False
    assert grid == TileGrid.from_rows(["?", "M", "-", "o"])
