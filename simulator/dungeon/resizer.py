"""
Map resizing.

Picking up an amulet grows the dungeon: the grid doubles in both dimensions
and the old content is repeated into the four quadrants. The player keeps
the same numeric position, which lies in the top-left quadrant.
"""

from catchery import log_debug
from core.constants import Tile
from core.error_handling import MissingPlayerMarkerError

from dungeon.grid import TileGrid, create_map, delete_map


def resize_map(grid: TileGrid) -> TileGrid:
    """
    Returns a grid twice as tall and twice as wide as grid, tiled with its
    content, and releases grid.

    The player marker is not replicated: it appears once, at its original
    (row, col). The caller must install the returned grid in place of the
    old one and must not adjust the player coordinates.

    Args:
        grid (TileGrid): The current grid. It is released on success.

    Returns:
        TileGrid: The doubled grid.

    Raises:
        MissingPlayerMarkerError: If grid holds no player marker. The grid is
            left untouched and still owned by the caller.

    """
    marker = grid.find(Tile.PLAYER)
    if marker is None:
        raise MissingPlayerMarkerError(
            f"Cannot resize a {grid.rows}x{grid.cols} grid without a player marker"
        )
    old_rows, old_cols = grid.shape
    resized = create_map(2 * old_rows, 2 * old_cols)

    grid[marker] = Tile.OPEN
    for i in range(resized.rows):
        source_row = grid.row(i % old_rows)
        for j in range(resized.cols):
            resized[i, j] = source_row[j % old_cols]
    resized[marker] = Tile.PLAYER

    delete_map(grid)

    log_debug(
        f"Map resized from {old_rows}x{old_cols} to {resized.rows}x{resized.cols}",
        {"player": marker, "context": "map_resize"},
    )
    return resized
