"""Exceptions raised by boxtui."""


class BoxTuiError(Exception):
    """Base class for boxtui errors."""


class PainterStackError(BoxTuiError):
    """Raised when painter translate/restore calls are unbalanced."""
