"""
Player movement.

Translates direction keys into destinations and resolves a single move of
the player against the tiles of the grid.
"""

from catchery import log_debug
from core.constants import Direction, MoveOutcome, Tile

from dungeon.grid import TileGrid
from dungeon.player import Player

# Tiles the player can never step onto.
BLOCKING_TILES = frozenset({Tile.PILLAR.value, Tile.MONSTER.value})


def get_direction(key: str, row: int, col: int) -> tuple[int, int]:
    """
    Returns the cell reached from (row, col) by the move bound to key.

    Args:
        key (str): The key typed by the user.
        row (int): The current row.
        col (int): The current column.

    Returns:
        tuple[int, int]: The next (row, col); unchanged for keys that are
        not bound to a direction.

    """
    direction = Direction.from_key(key)
    if direction is None:
        log_debug(
            f"Key {key!r} is not bound to a direction",
            {"key": key, "context": "direction_input"},
        )
        return row, col
    d_row, d_col = direction.delta
    return row + d_row, col + d_col


def _step(grid: TileGrid, player: Player, next_row: int, next_col: int) -> None:
    grid[player.row, player.col] = Tile.OPEN
    grid[next_row, next_col] = Tile.PLAYER
    player.move_to(next_row, next_col)


def do_player_move(
    grid: TileGrid, player: Player, next_row: int, next_col: int
) -> MoveOutcome:
    """
    Checks whether the player can move to (next_row, next_col) and performs
    the move if so.

    The player cannot leave the grid, nor step onto a pillar or a monster.
    The exit only lets the player through with at least one treasure.
    Stepping onto treasure increases the treasure count by one. On every
    accepted move the old cell becomes open and the new one holds the player
    marker; nothing else on the grid changes.

    Args:
        grid (TileGrid): The dungeon grid.
        player (Player): The player, updated when the move is accepted.
        next_row (int): Destination row.
        next_col (int): Destination column.

    Returns:
        MoveOutcome: What the move resulted in.

    """
    if not grid.in_bounds(next_row, next_col):
        return MoveOutcome.STAY

    tile = grid[next_row, next_col]
    if tile in BLOCKING_TILES:
        return MoveOutcome.STAY

    if tile == Tile.TREASURE:
        player.treasure += 1
        outcome = MoveOutcome.TREASURE
    elif tile == Tile.AMULET:
        outcome = MoveOutcome.AMULET
    elif tile == Tile.DOOR:
        outcome = MoveOutcome.LEAVE
    elif tile == Tile.EXIT:
        if player.treasure < 1:
            return MoveOutcome.STAY
        outcome = MoveOutcome.ESCAPE
    else:
        outcome = MoveOutcome.MOVE

    _step(grid, player, next_row, next_col)
    return outcome
