"""
Tests for doubling the size of the map.
"""

import pytest
from core.constants import Tile
from core.error_handling import GridReleasedError, MissingPlayerMarkerError
from dungeon.grid import TileGrid
from dungeon.resizer import resize_map


def test_resize_tiles_content_into_four_quadrants():
    old = TileGrid.from_rows(["+o$", "M-@"])
    reference = old.copy()
    reference[0, 1] = Tile.OPEN

    new = resize_map(old)

    assert new.shape == (4, 6)
    for i in range(new.rows):
        for j in range(new.cols):
            if (i, j) == (0, 1):
                continue
            assert new[i, j] == reference[i % 2, j % 3]


def test_player_marker_appears_once_at_its_position():
    new = resize_map(TileGrid.from_rows(["+o$", "M-@"]))
    assert new.count(Tile.PLAYER) == 1
    assert new.find(Tile.PLAYER) == (0, 1)
    # The copies of the player's cell are open.
    assert new[0, 4] == Tile.OPEN
    assert new[2, 1] == Tile.OPEN
    assert new[2, 4] == Tile.OPEN


def test_old_grid_is_released():
    old = TileGrid.from_rows(["o-"])
    new = resize_map(old)
    assert old.released
    assert not new.released
    with pytest.raises(GridReleasedError):
        old[0, 0]


def test_resize_of_a_single_cell():
    new = resize_map(TileGrid.from_rows(["o"]))
    assert str(new) == "o-\n--"


def test_missing_marker_is_rejected_and_grid_kept():
    old = TileGrid.from_rows(["-M", "$-"])
    with pytest.raises(MissingPlayerMarkerError):
        resize_map(old)
    assert not old.released
    assert str(old) == "-M\n$-"
