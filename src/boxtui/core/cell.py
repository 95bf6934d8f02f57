"""Cell - atomic unit of a drawing surface."""

from dataclasses import dataclass


@dataclass(slots=True)
class Cell:
    """
    A single character cell with styling attributes.

    Represents one position in the terminal grid with its character
    and the attributes a painter can set on it.
    """
    char: str = ' '
    bold: bool = False
    reverse: bool = False

    def is_default(self) -> bool:
        """Check if this cell is a blank, unstyled space."""
        return self.char == ' ' and not self.bold and not self.reverse
