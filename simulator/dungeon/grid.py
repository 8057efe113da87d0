"""
Tile grid module for the simulator.

A dungeon level is a rectangular grid of single-character tile symbols. The
grid owns a flat list of cells addressed with a row stride; every access is
bounds-checked, and once released a grid refuses to be used again.
"""

from collections.abc import Iterator

from core.constants import Tile
from core.error_handling import GridReleasedError, LoadError

Coord = tuple[int, int]


def _symbol(value: str) -> str:
    # Plain str, so rendering never sees the enum name.
    return value.value if isinstance(value, Tile) else value


class TileGrid:
    """
    Rectangular, owned buffer of tile symbols.

    Cells are indexed with a (row, col) tuple: ``grid[row, col]``. Symbols
    outside the tile alphabet are stored verbatim.
    """

    __slots__ = ("_rows", "_cols", "_cells")

    def __init__(self, rows: int, cols: int, fill: str = Tile.OPEN) -> None:
        """
        Initialize a grid with every cell set to fill.

        Args:
            rows (int): Number of rows (height), at least 1.
            cols (int): Number of columns (width), at least 1.
            fill (str): The symbol every cell starts with.

        Raises:
            ValueError: If either dimension is smaller than 1.

        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells: list[str] | None = [_symbol(fill)] * (rows * cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Coord:
        return self._rows, self._cols

    @property
    def released(self) -> bool:
        return self._cells is None

    def _storage(self) -> list[str]:
        if self._cells is None:
            raise GridReleasedError("Grid has already been released")
        return self._cells

    def in_bounds(self, row: int, col: int) -> bool:
        """Returns True if (row, col) lies inside the grid."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _index(self, key: Coord) -> int:
        row, col = key
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) outside grid of {self._rows}x{self._cols}"
            )
        return row * self._cols + col

    def __getitem__(self, key: Coord) -> str:
        cells = self._storage()
        return cells[self._index(key)]

    def __setitem__(self, key: Coord, symbol: str) -> None:
        cells = self._storage()
        symbol = _symbol(symbol)
        if len(symbol) != 1:
            raise ValueError(f"Tile symbols are single characters, got {symbol!r}")
        cells[self._index(key)] = symbol

    def row(self, row: int) -> list[str]:
        """Returns a copy of one row of symbols."""
        cells = self._storage()
        if not 0 <= row < self._rows:
            raise IndexError(f"Row {row} outside grid of {self._rows} rows")
        start = row * self._cols
        return cells[start:start + self._cols]

    def iter_rows(self) -> Iterator[list[str]]:
        for row in range(self._rows):
            yield self.row(row)

    def find(self, symbol: str) -> Coord | None:
        """
        Returns the first cell (in row-major order) holding symbol.

        Args:
            symbol (str): The symbol to look for.

        Returns:
            Coord | None: The (row, col) of the first match, or None.

        """
        cells = self._storage()
        try:
            index = cells.index(symbol)
        except ValueError:
            return None
        return divmod(index, self._cols)

    def count(self, symbol: str) -> int:
        return self._storage().count(symbol)

    def copy(self) -> "TileGrid":
        """Returns an independent grid with the same content."""
        clone = TileGrid(self._rows, self._cols)
        clone._cells = list(self._storage())
        return clone

    def release(self) -> None:
        """
        Drops the storage of the grid. Any further access, including a second
        release, raises GridReleasedError.
        """
        self._storage()
        self._cells = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return self.shape == other.shape and self._storage() == other._storage()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.iter_rows())

    def __repr__(self) -> str:
        state = "released" if self.released else "live"
        return f"TileGrid({self._rows}x{self._cols}, {state})"

    @classmethod
    def from_rows(cls, rows: list[str]) -> "TileGrid":
        """
        Builds a grid from a list of equally long strings, one per row.

        Args:
            rows (list[str]): The rows of the grid.

        Returns:
            TileGrid: The new grid.

        """
        if not rows or not rows[0]:
            raise ValueError("A grid needs at least one row and one column")
        width = len(rows[0])
        if any(len(line) != width for line in rows):
            raise ValueError("All rows of a grid must have the same length")
        grid = cls(len(rows), width)
        grid._cells = [symbol for line in rows for symbol in line]
        return grid


def create_map(rows: int, cols: int) -> TileGrid:
    """
    Allocates a grid of the given dimensions with every cell Open.

    Args:
        rows (int): Number of rows (height).
        cols (int): Number of columns (width).

    Returns:
        TileGrid: The new grid.

    Raises:
        LoadError: If the grid cannot be allocated.

    """
    try:
        return TileGrid(rows, cols, Tile.OPEN)
    except (ValueError, OverflowError, MemoryError) as e:
        raise LoadError(f"Map unable to be allocated: {e}") from e


def delete_map(grid: TileGrid) -> None:
    """
    Releases a grid. The caller must drop its reference afterwards.

    Args:
        grid (TileGrid): The grid to release.

    """
    grid.release()
