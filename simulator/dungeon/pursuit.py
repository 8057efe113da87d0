"""
Monster pursuit.

Monsters only see along the four straight lines leaving the player's cell.
Every monster in sight, with no pillar between it and the player, takes one
step toward the player each turn.
"""

from catchery import log_debug
from core.constants import Tile
from core.logging import log_info

from dungeon.grid import TileGrid
from dungeon.player import Player

# (row, col) step of each ray, walking away from the player.
RAYS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
)


def _advance_along_ray(grid: TileGrid, player: Player, d_row: int, d_col: int) -> int:
    """
    Walks one ray outward from the player and moves every monster found on
    it one cell inward. Returns the number of monsters moved.
    """
    moved = 0
    row, col = player.row + d_row, player.col + d_col
    while grid.in_bounds(row, col):
        tile = grid[row, col]
        if tile == Tile.PILLAR:
            break
        if tile == Tile.MONSTER:
            # The cell behind has already been walked, so the monster is not
            # seen twice.
            ahead = grid[row - d_row, col - d_col]
            if ahead == Tile.PLAYER:
                ahead = Tile.OPEN
            grid[row - d_row, col - d_col] = Tile.MONSTER
            grid[row, col] = ahead
            moved += 1
        row, col = row + d_row, col + d_col
    return moved


def do_monster_attack(grid: TileGrid, player: Player) -> bool:
    """
    Moves every monster in line of sight of the player one step closer.

    Args:
        grid (TileGrid): The dungeon grid, updated in place.
        player (Player): The player; its coordinates are not modified.

    Returns:
        bool: True if a monster now stands on the player's cell.

    """
    moved = sum(_advance_along_ray(grid, player, d_row, d_col) for d_row, d_col in RAYS)
    caught = grid[player.row, player.col] == Tile.MONSTER
    if moved:
        log_debug(
            f"{moved} monster(s) advanced toward the player",
            {"player": player.position, "context": "monster_pursuit"},
        )
    if caught:
        log_info("A monster reached the player", {"player": player.position})
    return caught
