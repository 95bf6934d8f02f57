"""Size policies - per-axis growth rules for widgets."""

from enum import Enum, auto


class SizePolicy(Enum):
    """
    How a widget's allocation may grow past its minimum size hint.

    MINIMUM:   Held at its minimum hint; grows only in the fair leftover pass.
    PREFERRED: Grows to its size hint, then shares leftover space.
    MAXIMUM:   Grows to its size hint and never past it.
    EXPANDING: Grows without bound, taking all remaining space.
    """
    MINIMUM = auto()
    PREFERRED = auto()
    MAXIMUM = auto()
    EXPANDING = auto()

    @property
    def grows_to_preferred(self) -> bool:
        """True for policies that fill up to the size hint in the preferred pass."""
        return self in (SizePolicy.PREFERRED, SizePolicy.MAXIMUM)

    @property
    def shares_leftover(self) -> bool:
        """True for policies that take part in fair leftover distribution."""
        return self in (SizePolicy.MINIMUM, SizePolicy.PREFERRED)
