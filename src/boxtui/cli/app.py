"""Typer CLI application."""

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from boxtui.core.event import Key, KeyEvent, Modifier
from boxtui.core.policy import SizePolicy
from boxtui.layout.allocator import SizeRequest, allocate

console = Console()


def parse_child(spec: str) -> SizeRequest:
    """
    Parse a child request written as ``min:preferred:policy``.

    The policy is optional and defaults to preferred.
    """
    parts = spec.split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"expected min:preferred[:policy], got {spec!r}")
    try:
        minimum, preferred = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"sizes must be integers in {spec!r}") from None
    if minimum < 0 or preferred < 0:
        raise ValueError(f"sizes must be non-negative in {spec!r}")
    policy = SizePolicy.PREFERRED
    if len(parts) == 3:
        try:
            policy = SizePolicy[parts[2].upper()]
        except KeyError:
            choices = ", ".join(p.name.lower() for p in SizePolicy)
            raise ValueError(f"unknown policy {parts[2]!r} (choose from {choices})") from None
    return SizeRequest(minimum=minimum, preferred=preferred, policy=policy)


def configure_logging(verbose: bool) -> None:
    """Send boxtui logging to stderr through rich, leaving the root logger alone."""
    logger = logging.getLogger("boxtui")
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="boxtui",
        help="Lay out and render terminal widget trees.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Lay out and render terminal widget trees."""
        configure_logging(verbose)

    @app.command()
    def demo(
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=1, help="Frame width (default: terminal)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-h", min=1, help="Frame height (default: terminal)")] = None,
        border: Annotated[bool, typer.Option("--border/--no-border", help="Draw panel borders")] = True,
        tabs: Annotated[int, typer.Option("--tabs", "-t", help="Tab presses to simulate (negative: Shift-Tab)")] = 0,
        plain: Annotated[bool, typer.Option("--plain", help="Print plain text without styling")] = False,
    ) -> None:
        """Render the sample dashboard once."""
        from boxtui.cli.demo import build_dashboard
        from boxtui.render.console import ConsoleRenderer
        from boxtui.ui import UI

        width = width or console.size.width
        height = height or console.size.height - 1

        root, chain = build_dashboard(border=border)
        ui = UI(root, chain)
        ui.focus_default()

        if tabs >= 0:
            key = KeyEvent(Key.TAB)
        else:
            key = KeyEvent(Key.BACKTAB, modifiers=Modifier.SHIFT)
        for _ in range(abs(tabs)):
            ui.dispatch(key)

        canvas = ui.render(width, height)
        if plain:
            console.print("\n".join(canvas.lines(strip=True)), markup=False, highlight=False)
        else:
            console.print(ConsoleRenderer().render(canvas))

    @app.command(name="allocate")
    def allocate_cmd(
        space: Annotated[int, typer.Argument(min=0, help="Cells available along the axis")],
        children: Annotated[list[str], typer.Argument(help="Children as min:preferred[:policy]")],
    ) -> None:
        """Show how space is divided among children."""
        try:
            requests = [parse_child(spec) for spec in children]
        except ValueError as e:
            console.print(f"[red]Invalid child:[/] {e}")
            raise typer.Exit(2)

        result = allocate(requests, space)

        table = Table(title=f"Allocation of {space} cells")
        table.add_column("#", justify="right")
        table.add_column("Policy")
        table.add_column("Min", justify="right")
        table.add_column("Preferred", justify="right")
        table.add_column("Size", justify="right", style="bold")
        for i, (request, size) in enumerate(zip(requests, result.sizes)):
            marker = " [red](starved)[/]" if i in result.starved else ""
            table.add_row(
                str(i),
                request.policy.name.lower(),
                str(request.minimum),
                str(request.preferred),
                f"{size}{marker}",
            )
        console.print(table)
        console.print(f"Used {result.used} of {space}, {result.remaining} unallocated")
        if result.degraded:
            console.print("[yellow]Not enough space for every minimum size[/]")

    return app
