"""
Game session module for the simulator.

Sequences the turns of a game: load the first level, then for every key
typed by the user move the player, react to what was stepped on (growing
the map, changing level, escaping) and let the monsters pursue the player,
until the game is won, lost or abandoned.
"""

from catchery import log_debug
from core.config import GameConfig
from core.constants import INPUT_QUIT, GameState, MoveOutcome
from core.logging import log_info
from pydantic import BaseModel, Field

from dungeon.grid import TileGrid, delete_map
from dungeon.level_loader import load_level
from dungeon.movement import do_player_move, get_direction
from dungeon.player import Player
from dungeon.pursuit import do_monster_attack
from dungeon.resizer import resize_map


class TurnResult(BaseModel):
    """Summary of a single turn, handed to the user interface."""

    outcome: MoveOutcome | None = Field(
        default=None,
        description="Outcome of the player's move, None if the player quit.",
    )
    state: GameState = Field(
        description="State of the game after the turn.",
    )
    caught: bool = Field(
        default=False,
        description="Whether a monster reached the player this turn.",
    )
    level_number: int = Field(
        description="Number of the level being played after the turn.",
    )
    treasure: int = Field(
        default=0,
        description="Treasure collected so far.",
    )
    resized: bool = Field(
        default=False,
        description="Whether the map doubled in size this turn.",
    )
    new_level: bool = Field(
        default=False,
        description="Whether the player went through a door into a new level.",
    )


class GameSession:
    """Owns the grid and the player for the duration of a game.

    The grid is replaced, never shared: when the map grows or a new level is
    entered the previous grid is released before the session holds the new
    one.
    """

    def __init__(self, config: GameConfig) -> None:
        """Initialize the session; no level is loaded until start() is called.

        Args:
            config (GameConfig): The game configuration.

        """
        self.config: GameConfig = config
        self.level_number: int = config.first_level
        self.grid: TileGrid | None = None
        self.player: Player = Player()
        self.state: GameState = GameState.PLAYING
        self.turn_number: int = 0

    def start(self) -> None:
        """Loads the first level.

        Raises:
            LoadError: If the level cannot be loaded.

        """
        self._enter_level(self.config.first_level)
        self.state = GameState.PLAYING
        self.turn_number = 0

    def _enter_level(self, number: int) -> None:
        """Loads level number, keeping the treasure collected so far."""
        level = load_level(self.config.level_path(number))
        if self.grid is not None:
            delete_map(self.grid)
        self.grid = level.grid
        self.player.move_to(level.player.row, level.player.col)
        self.level_number = number

    def _require_grid(self) -> TileGrid:
        if self.grid is None:
            raise RuntimeError("The session has not been started")
        return self.grid

    def _result(self, outcome: MoveOutcome | None, **kwargs) -> TurnResult:
        return TurnResult(
            outcome=outcome,
            state=self.state,
            level_number=self.level_number,
            treasure=self.player.treasure,
            **kwargs,
        )

    def take_turn(self, key: str) -> TurnResult:
        """Plays one turn: the player's move followed by the monsters' pursuit.

        Args:
            key (str): The key typed by the user.

        Returns:
            TurnResult: What happened during the turn.

        Raises:
            RuntimeError: If the session was not started or the game is over.
            LoadError: If the next level cannot be loaded after a door.

        """
        grid = self._require_grid()
        if self.state.is_over:
            raise RuntimeError(f"The game is over ({self.state})")

        key = key.strip().lower()
        if key == INPUT_QUIT:
            self.state = GameState.QUIT
            log_info("Player quit", {"turn": self.turn_number})
            return self._result(None)

        self.turn_number += 1
        next_row, next_col = get_direction(key, self.player.row, self.player.col)
        outcome = do_player_move(grid, self.player, next_row, next_col)
        log_debug(
            f"Turn {self.turn_number}: {outcome}",
            {"player": self.player.position, "context": "turn"},
        )

        resized = False
        new_level = False
        if outcome is MoveOutcome.AMULET:
            self.grid = resize_map(grid)
            resized = True
        elif outcome is MoveOutcome.LEAVE:
            self._enter_level(self.level_number + 1)
            new_level = True
        elif outcome is MoveOutcome.ESCAPE:
            self.state = GameState.WON
            log_info(
                "Player escaped",
                {"treasure": self.player.treasure, "turn": self.turn_number},
            )
            return self._result(outcome)

        caught = do_monster_attack(self._require_grid(), self.player)
        if caught:
            self.state = GameState.LOST
        return self._result(outcome, caught=caught, resized=resized, new_level=new_level)

    def close(self) -> None:
        """Releases the grid held by the session."""
        if self.grid is not None:
            delete_map(self.grid)
            self.grid = None
