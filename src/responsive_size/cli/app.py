"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from responsive_size.config import ResponsiveConfig, resolve_config
from responsive_size.core.classifier import current_breakpoint, get_screen_size
from responsive_size.core.constraints import BoxConstraints
from responsive_size.core.errors import BreakpointConfigError, BreakpointError
from responsive_size.core.handler import BreakpointsHandler, normalize_values
from responsive_size.core.sizes import parse_size
from responsive_size.screen.adapters import LayoutValueResolver, ScreenValueResolver
from responsive_size.screen.data import ScreenSizeData
from responsive_size.screen.metrics import TerminalMetrics

logger = logging.getLogger("responsive_size.cli")

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="JSON config file (default: $RESPONSIVE_SIZE_CONFIG)"),
]
GranularOption = Annotated[
    bool, typer.Option("--granular", "-g", help="Use the 13-category granular table")
]
HeightOption = Annotated[
    Optional[float],
    typer.Option("--height", min=0, help="Height of the box (default: same as width)"),
]
ShortestSideOption = Annotated[
    bool,
    typer.Option(
        "--shortest-side", "-s",
        help="Classify by min(width, height) instead of width",
    ),
]


def parse_value_args(pairs: list[str]) -> dict[str, str]:
    """Parse ``CATEGORY=VALUE`` arguments."""
    values: dict[str, str] = {}
    for pair in pairs:
        category, sep, value = pair.partition("=")
        if not sep or not category.strip():
            raise BreakpointConfigError(f"Expected CATEGORY=VALUE, got {pair!r}")
        values[category.strip()] = value
    return values


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="responsive-size",
        help="Classify sizes into breakpoint categories and resolve responsive values.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def load(config: Optional[Path], granular: bool) -> ResponsiveConfig:
        try:
            return resolve_config(config, granular=granular)
        except BreakpointConfigError as e:
            err_console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

    def box_of(width: float, height: Optional[float]) -> BoxConstraints:
        return BoxConstraints.loose(width, width if height is None else height)

    @app.callback()
    def main_options(
        verbose: Annotated[bool, typer.Option("--verbose", help="Log resolution details")] = False,
    ) -> None:
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=err_console, show_path=False)],
            )

    @app.command()
    def classify(
        width: Annotated[float, typer.Argument(min=0, help="Width in logical units")],
        height: HeightOption = None,
        shortest_side: ShortestSideOption = False,
        granular: GranularOption = False,
        config: ConfigOption = None,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show which category a size falls into."""
        cfg = load(config, granular)
        dimension = box_of(width, height).dimension(shortest_side or cfg.use_shortest_side)

        size = get_screen_size(dimension, cfg.breakpoints)
        threshold = current_breakpoint(size, cfg.breakpoints)

        if json_output:
            data = {
                "dimension": dimension,
                "category": size.value,
                "threshold": threshold,
                "kind": cfg.kind,
            }
            print(json.dumps(data, indent=2))
        elif size is cfg.breakpoints.catch_all:
            console.print(f"[bold cyan]{size.value}[/] (below every threshold)")
        else:
            console.print(f"[bold cyan]{size.value}[/] (>= {threshold:g})")

    @app.command()
    def table(
        granular: GranularOption = False,
        config: ConfigOption = None,
    ) -> None:
        """Show the breakpoint table."""
        cfg = load(config, granular)

        values = normalize_values(cfg.breakpoints, cfg.values)
        out = Table(title=f"{cfg.kind.capitalize()} breakpoints")
        out.add_column("Category", style="bold")
        out.add_column("Minimum", justify="right")
        out.add_column("Value")
        for size, threshold in cfg.breakpoints.values.items():
            minimum = "(catch-all)" if size is cfg.breakpoints.catch_all else f"{threshold:g}"
            value = values[size]
            out.add_row(size.value, minimum, "" if value is None else str(value))
        console.print(out)

    @app.command()
    def resolve(
        width: Annotated[float, typer.Argument(min=0, help="Width in logical units")],
        value: Annotated[
            Optional[list[str]],
            typer.Option("--value", "-v", help="CATEGORY=VALUE, repeatable"),
        ] = None,
        height: HeightOption = None,
        shortest_side: ShortestSideOption = False,
        granular: GranularOption = False,
        config: ConfigOption = None,
    ) -> None:
        """Resolve a value for a size, with fallback to nearby categories.

        Values come from the config file and any --value options, the
        options taking precedence.
        """
        cfg = load(config, granular)

        try:
            size_enum = cfg.breakpoints.size_enum
            values = {parse_size(size_enum, k): v for k, v in cfg.values.items()}
            for k, v in parse_value_args(value or []).items():
                values[parse_size(size_enum, k)] = v
            handler = BreakpointsHandler(
                values,
                breakpoints=cfg.breakpoints,
                on_changed=lambda size: logger.debug("Category is now %s", size.value),
            )
        except BreakpointError as e:
            err_console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

        resolver = LayoutValueResolver(
            handler, use_shortest_side=shortest_side or cfg.use_shortest_side
        )
        print(resolver.resolve(box_of(width, height)))

    @app.command()
    def terminal(
        granular: GranularOption = False,
        config: ConfigOption = None,
    ) -> None:
        """Classify the current terminal width (in columns)."""
        cfg = load(config, granular)
        metrics = TerminalMetrics.read()

        if any(v is not None for v in cfg.values.values()):
            resolver = ScreenValueResolver(
                cfg.handler(), use_shortest_side=cfg.use_shortest_side
            )
            data = resolver.data(metrics)
            resolved = resolver.resolve(metrics)
        else:
            data = ScreenSizeData.from_metrics(
                metrics, cfg.breakpoints, use_shortest_side=cfg.use_shortest_side
            )
            resolved = None

        console.print(
            f"[bold]Terminal:[/] {metrics.logical_width:g}x{metrics.logical_height:g} "
            f"({data.orientation.value})"
        )
        console.print(f"[bold]Category:[/] [cyan]{data.screen_size.value}[/]")
        if resolved is not None:
            console.print(f"[bold]Value:[/] {escape(str(resolved))}")

    return app
