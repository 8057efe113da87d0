"""
Level loading functions.

A level file is plain whitespace-delimited text:

    rows cols
    player_row player_col
    <rows * cols tile symbols in row-major order>

Tile symbols are read one non-whitespace character at a time, so a row may
be written either as ``- - + M`` or as ``--+M``.
"""

from dataclasses import dataclass
from pathlib import Path

from catchery import log_warning
from core.constants import Tile
from core.error_handling import LoadError
from core.logging import log_error, log_info

from dungeon.grid import TileGrid, create_map
from dungeon.player import Player


@dataclass
class Level:
    """A freshly loaded level: the grid and the player standing on it."""

    grid: TileGrid
    player: Player

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols


def _read_header(tokens: list[str], source: str) -> tuple[int, int, int, int]:
    if len(tokens) < 4:
        raise LoadError(
            f"Level {source} is missing its header (rows cols row col)", source
        )
    try:
        rows, cols, player_row, player_col = (int(token) for token in tokens[:4])
    except ValueError as e:
        raise LoadError(f"Level {source} has a malformed header: {e}", source) from e
    return rows, cols, player_row, player_col


def parse_level(text: str, source: str = "<string>") -> Level:
    """
    Parses the textual description of a level.

    Args:
        text (str): The content of a level file.
        source (str): Name of the source, used in error messages.

    Returns:
        Level: The grid and the player in their starting state.

    Raises:
        LoadError: If the description is malformed or the grid cannot be
            allocated.

    """
    tokens = text.split()
    rows, cols, player_row, player_col = _read_header(tokens, source)

    # Tiles are counted before anything is allocated.
    symbols = "".join(tokens[4:])
    expected = rows * cols
    if len(symbols) < expected:
        raise LoadError(
            f"Level {source} declares {expected} tiles but only has {len(symbols)}",
            source,
        )

    # Fails before any tile is read, so no half-built grid escapes.
    grid = create_map(rows, cols)

    if not grid.in_bounds(player_row, player_col):
        raise LoadError(
            f"Player start ({player_row}, {player_col}) lies outside the "
            f"{rows}x{cols} level {source}",
            source,
        )

    if len(symbols) > expected:
        log_warning(
            f"Ignoring {len(symbols) - expected} trailing symbols in level {source}",
            {"source": source, "context": "level_parsing"},
        )

    for i in range(rows):
        for j in range(cols):
            grid[i, j] = symbols[i * cols + j]
    grid[player_row, player_col] = Tile.PLAYER

    return Level(grid=grid, player=Player(row=player_row, col=player_col))


def load_level(file_path: Path | str) -> Level:
    """
    Loads a level from a file.

    Args:
        file_path (Path | str): The path of the level file.

    Returns:
        Level: The grid and the player in their starting state.

    Raises:
        LoadError: If the file cannot be read or its content is malformed.

    """
    path = Path(file_path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"File unable to open: {path}", str(path)) from e
    level = parse_level(text, str(path))
    log_info(
        "Level loaded",
        {
            "file_path": str(path),
            "rows": level.rows,
            "cols": level.cols,
            "start": level.player.position,
        },
    )
    return level


def try_load_level(file_path: Path | str) -> Level | None:
    """
    Loads a level, returning None instead of raising when it fails.

    Args:
        file_path (Path | str): The path of the level file.

    Returns:
        Level | None: The level, or None if it could not be loaded.

    """
    try:
        return load_level(file_path)
    except LoadError as e:
        log_error(
            f"Failed to load level from {file_path}: {e}",
            {
                "file_path": str(file_path),
                "error": str(e),
                "context": "level_file_loading",
            },
        )
        return None
