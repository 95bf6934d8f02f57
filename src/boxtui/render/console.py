"""Render a canvas as rich Text for console display."""

from rich.style import Style
from rich.text import Text

from boxtui.core.canvas import Canvas


class ConsoleRenderer:
    """
    Render a Canvas to a rich Text object.

    Consecutive cells with the same attributes are emitted as one span,
    so the style only changes where the cell attributes change.
    """

    def __init__(self, focus_style: str = "reverse", bold_style: str = "bold"):
        self.focus_style = Style.parse(focus_style)
        self.bold_style = Style.parse(bold_style)

    def _style_for(self, bold: bool, reverse: bool) -> Style:
        style = Style()
        if bold:
            style += self.bold_style
        if reverse:
            style += self.focus_style
        return style

    def render(self, canvas: Canvas) -> Text:
        """Render canvas to rich Text, one line per row."""
        text = Text(no_wrap=True, overflow="crop")

        for y, row in enumerate(canvas.rows()):
            if y:
                text.append("\n")
            run: list[str] = []
            last: tuple[bool, bool] = (False, False)
            for cell in row:
                attrs = (cell.bold, cell.reverse)
                if attrs != last and run:
                    text.append(''.join(run), style=self._style_for(*last))
                    run = []
                last = attrs
                run.append(cell.char)
            if run:
                text.append(''.join(run), style=self._style_for(*last))

        return text
