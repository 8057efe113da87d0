"""
User interface module for the simulator.

Provides the console front-end of the dungeon: the map drawn with rich,
direction keys read with prompt_toolkit, and messages for each turn.
"""

from core.constants import INPUT_QUIT, Direction, GameState, MoveOutcome, Tile
from core.utils import ccapture, cprint
from dungeon.grid import TileGrid
from dungeon.player import Player
from dungeon.session import TurnResult
from prompt_toolkit import ANSI, PromptSession
from rich.table import Table
from rich.text import Text

# Message printed for each move outcome that deserves one.
OUTCOME_MESSAGES: dict[MoveOutcome, str] = {
    MoveOutcome.TREASURE: "[bold yellow]You picked up some treasure![/]",
    MoveOutcome.AMULET: "[bold magenta]The amulet glows... the dungeon grows![/]",
    MoveOutcome.LEAVE: "[bold cyan]You go through the door into the next level.[/]",
    MoveOutcome.ESCAPE: "[bold green]You escaped the dungeon![/]",
}


def build_map_text(grid: TileGrid) -> Text:
    """
    Builds the colored picture of the grid.

    Args:
        grid (TileGrid): The grid to draw.

    Returns:
        Text: One line per row, one character per tile.

    """
    text = Text()
    for i, row in enumerate(grid.iter_rows()):
        if i:
            text.append("\n")
        for symbol in row:
            tile = Tile.from_symbol(symbol)
            text.append(symbol, style=tile.color if tile else "dim white")
    return text


def build_legend() -> Table:
    """Builds the table explaining the tile symbols and the keys."""
    table = Table(title="Legend", pad_edge=False, show_header=False)
    table.add_column("Symbol", style="bold")
    table.add_column("Meaning")
    for tile in Tile:
        table.add_row(tile.colorize(tile.symbol), tile.display_name)
    table.add_row()
    for direction in Direction:
        table.add_row(direction.value, f"Move {direction.display_name.lower()}")
    table.add_row(INPUT_QUIT, "Quit")
    return table


def describe_result(result: TurnResult) -> list[str]:
    """
    Returns the messages reporting a turn, in rich markup.

    Args:
        result (TurnResult): The turn to report.

    Returns:
        list[str]: The messages, possibly empty.

    """
    messages: list[str] = []
    if result.outcome in OUTCOME_MESSAGES:
        messages.append(OUTCOME_MESSAGES[result.outcome])
    if result.state is GameState.WON:
        messages.append(
            f"[{result.state.color}]You win, with {result.treasure} treasure![/]"
        )
    elif result.state is GameState.LOST:
        messages.append(f"[{result.state.color}]A monster caught you. You lose![/]")
    elif result.state is GameState.QUIT:
        messages.append(f"[{result.state.color}]Thanks for playing![/]")
    return messages


class PlayerInterface:
    """
    Command-line interface for the dungeon.

    Draws the map after every turn and reads one direction key at a time.
    The prompt session is created on first use and keeps the history.
    """

    def __init__(self, show_legend: bool = True) -> None:
        self.show_legend = show_legend
        self._session: PromptSession | None = None

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession(erase_when_done=True)
        return self._session

    def render(self, grid: TileGrid, player: Player, level_number: int) -> None:
        """Prints the map and the player's status."""
        cprint(f"[bold green]Level {level_number}[/]  {player.get_status_line()}")
        cprint(build_map_text(grid))
        if self.show_legend:
            cprint(build_legend())

    def read_direction(self) -> str:
        """
        Prompts until the user types a direction key or the quit key.

        Returns:
            str: The key typed, lowercase.

        """
        keys = ", ".join(d.value for d in Direction)
        prompt = "\n" + ccapture(f"[cyan]Move ({keys}, {INPUT_QUIT} to quit)[/]") + " > "
        while True:
            answer = self.session.prompt(ANSI(prompt)).strip().lower()
            if not answer:
                continue
            key = answer[0]
            if key == INPUT_QUIT or Direction.from_key(key) is not None:
                return key
            cprint(f"[red]Unknown key '{answer}'.[/]")

    def announce(self, result: TurnResult) -> None:
        for message in describe_result(result):
            cprint(message)
