"""
Core system module for the Dungeon Crawl Simulator.

This module contains the fundamental components shared by the engine and the
command-line shell: the tile alphabet and other enumerations, error types,
configuration, logging and console helpers.
"""

from .config import (
    GameConfig,
    load_config,
)
from .constants import (
    INPUT_QUIT,
    Direction,
    GameState,
    MoveOutcome,
    Tile,
)
from .error_handling import (
    ERROR_HANDLER,
    DungeonError,
    ErrorSeverity,
    GridReleasedError,
    LoadError,
    MissingPlayerMarkerError,
)
from .utils import (
    ccapture,
    cprint,
    crule,
)

__all__ = [
    # Import from config.py
    "GameConfig",
    "load_config",
    # Import from constants.py
    "INPUT_QUIT",
    "Direction",
    "GameState",
    "MoveOutcome",
    "Tile",
    # Import from error_handling.py
    "ERROR_HANDLER",
    "DungeonError",
    "ErrorSeverity",
    "GridReleasedError",
    "LoadError",
    "MissingPlayerMarkerError",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
]
