"""Canvas - fixed-size 2D grid of cells that painters draw into."""

from dataclasses import dataclass, field
from typing import Iterator

from boxtui.core.cell import Cell


@dataclass
class Canvas:
    """
    A 2D grid of Cells.

    This is the drawing surface used by the Painter. Unlike a terminal
    screen it never flushes anywhere; callers read it back through
    rows() or lines().
    """
    width: int = 80
    height: int = 24
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the buffer."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {self.width}x{self.height}")
        if not self._buffer:
            self.clear()

    def clear(self) -> None:
        """Reset every cell to a blank space."""
        self._buffer = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self._buffer[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        self._buffer[y][x] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: canvas[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def put_char(
        self,
        x: int,
        y: int,
        char: str,
        bold: bool = False,
        reverse: bool = False,
    ) -> None:
        """Put a character at position with optional styling."""
        self.set(x, y, Cell(char=char, bold=bold, reverse=reverse))

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def lines(self, strip: bool = False) -> list[str]:
        """
        Return the characters of each row as plain strings.

        With strip=True, trailing spaces are dropped from each row.
        """
        lines = [''.join(cell.char for cell in row) for row in self._buffer]
        if strip:
            lines = [line.rstrip() for line in lines]
        return lines
