"""
Constants and enumerations for the simulator.

Defines the tile alphabet shared by the level loader, the engine and the
renderer, the outcomes of a player move, the movement keys, and the states
of a game session.
"""

from enum import Enum

# Key used to leave the game from the prompt.
INPUT_QUIT = "q"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class Tile(str, NiceEnum):
    """Defines the symbol stored in a grid cell."""

    OPEN = "-"
    PILLAR = "+"
    MONSTER = "M"
    TREASURE = "$"
    AMULET = "@"
    DOOR = "?"
    EXIT = "!"
    PLAYER = "o"

    @property
    def symbol(self) -> str:
        """Returns the single character written in level files."""
        return self.value

    @property
    def color(self) -> str:
        """Returns the color string associated with this tile."""
        return {
            Tile.OPEN: "dim white",
            Tile.PILLAR: "bold white",
            Tile.MONSTER: "bold red",
            Tile.TREASURE: "bold yellow",
            Tile.AMULET: "bold magenta",
            Tile.DOOR: "bold cyan",
            Tile.EXIT: "bold green",
            Tile.PLAYER: "bold blue",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies tile color formatting to a message."""
        return f"[{self.color}]{message}[/]"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Tile | None":
        """Returns the tile for a symbol, or None if the symbol is not part of
        the alphabet."""
        try:
            return cls(symbol)
        except ValueError:
            return None


class MoveOutcome(NiceEnum):
    """Defines the result of a single player move attempt."""

    STAY = "STAY"
    MOVE = "MOVE"
    TREASURE = "TREASURE"
    AMULET = "AMULET"
    LEAVE = "LEAVE"
    ESCAPE = "ESCAPE"


class Direction(NiceEnum):
    """Defines the four cardinal moves and the key bound to each."""

    RIGHT = "d"
    LEFT = "a"
    UP = "w"
    DOWN = "s"

    @property
    def delta(self) -> tuple[int, int]:
        """Returns the (row, col) displacement of this direction."""
        return {
            Direction.RIGHT: (0, 1),
            Direction.LEFT: (0, -1),
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
        }[self]

    @classmethod
    def from_key(cls, key: str) -> "Direction | None":
        """Returns the direction bound to a key, or None for any other key."""
        try:
            return cls(key)
        except ValueError:
            return None


class GameState(NiceEnum):
    """Defines the state of a game session."""

    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"
    QUIT = "QUIT"

    @property
    def is_over(self) -> bool:
        return self is not GameState.PLAYING

    @property
    def color(self) -> str:
        """Returns the color string associated with this state."""
        return {
            GameState.PLAYING: "bold white",
            GameState.WON: "bold green",
            GameState.LOST: "bold red",
            GameState.QUIT: "bold yellow",
        }.get(self, "dim white")
