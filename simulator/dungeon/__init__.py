"""
Dungeon engine of the simulator.

Contains the tile grid, the level loader, and the rules applied each turn:
player movement, map growth and monster pursuit.
"""

from .grid import TileGrid, create_map, delete_map
from .level_loader import Level, load_level, parse_level, try_load_level
from .movement import do_player_move, get_direction
from .player import Player
from .pursuit import do_monster_attack
from .resizer import resize_map
from .session import GameSession, TurnResult

__all__ = [
    "TileGrid",
    "create_map",
    "delete_map",
    "Level",
    "load_level",
    "parse_level",
    "try_load_level",
    "do_player_move",
    "get_direction",
    "Player",
    "do_monster_attack",
    "resize_map",
    "GameSession",
    "TurnResult",
]
