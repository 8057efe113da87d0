"""
Player state for the simulator.
"""

from pydantic import BaseModel, Field


class Player(BaseModel):
    """Position of the player on the grid and the treasure collected so far."""

    row: int = Field(
        default=0,
        ge=0,
        description="Row of the player on the grid.",
    )
    col: int = Field(
        default=0,
        ge=0,
        description="Column of the player on the grid.",
    )
    treasure: int = Field(
        default=0,
        ge=0,
        description="Number of treasure tiles picked up.",
    )

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def move_to(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def get_status_line(self) -> str:
        """Returns a short rich-markup summary of the player."""
        return (
            f"[bold blue]Player[/] at ({self.row}, {self.col})  "
            f"[bold yellow]Treasure:[/] {self.treasure}"
        )
