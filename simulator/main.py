"""
Main entry point for the Dungeon Crawl Simulator.

Loads the configuration, sets up logging, then runs a game session in the
console: the map is drawn, one direction key is read per turn, and the game
goes on until the player escapes, is caught by a monster, or quits.

Usage:
    dungeon-crawl [config.json]
"""

import sys
from pathlib import Path

from core.config import load_config
from core.error_handling import ERROR_HANDLER, DungeonError
from core.logging import level_from_name, setup_logging
from core.utils import cprint, crule
from dungeon.session import GameSession
from ui.cli_interface import PlayerInterface

# Configuration used when none is given on the command line.
DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "data" / "config.json"


def run(session: GameSession, ui: PlayerInterface) -> int:
    """
    Plays a session until the game is over.

    Args:
        session (GameSession): A started session.
        ui (PlayerInterface): The console interface.

    Returns:
        int: The process exit code.

    Raises:
        RuntimeError: If the session has not been started.

    """
    if session.grid is None:
        raise RuntimeError("The session must be started before running")
    ui.render(session.grid, session.player, session.level_number)
    while not session.state.is_over:
        key = ui.read_direction()
        result = session.take_turn(key)
        if session.grid is not None and result.outcome is not None:
            ui.render(session.grid, session.player, session.level_number)
        ui.announce(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    config_path = Path(args[0]) if args else DEFAULT_CONFIG

    try:
        config = load_config(config_path)
    except ValueError as e:
        setup_logging()
        ERROR_HANDLER.handle_exception(DungeonError(str(e)), {"config": str(config_path)})
        return 2
    setup_logging(level_from_name(config.log_level))

    crule("Dungeon Crawl", style="bold green")
    session = GameSession(config)
    ui = PlayerInterface(show_legend=config.show_legend)
    try:
        session.start()
        return run(session, ui)
    except DungeonError as e:
        ERROR_HANDLER.handle_exception(e, {"level": session.level_number})
        cprint(f"[bold red]{e}[/]")
        return 1
    except (KeyboardInterrupt, EOFError):
        cprint("\n[bold yellow]Thanks for playing![/]")
        return 0
    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
