"""
Saikoro CLI

Command-line interface for drawing reproducible random values.

Usage:
    saikoro sample uint --seed 12345        First value of seed 12345
    saikoro sample below --max 6 -n 10      Ten dice rolls (0-5)
    saikoro bytes 16 --seed 7               Sixteen bytes as hex
    saikoro seed                            A fresh default seed
    saikoro info                            Configuration and golden check
"""

import logging
from enum import Enum
from typing import Callable, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from saikoro import __version__
from saikoro.config import SourceKind, get_settings
from saikoro.defaults import get_seed
from saikoro.errors import InvalidArgumentError
from saikoro.factory import create_source
from saikoro.source import RandomSource
from saikoro.xorshift import XorShiftRandom

logger = logging.getLogger(__name__)

# Create the main app
app = typer.Typer(
    name="saikoro",
    help="Saikoro (サイコロ) - Fast deterministic random numbers",
    add_completion=False,
)

# Console for rich output
console = Console()

GOLDEN_SEED = 12345
GOLDEN_FIRST_UINT = 353605593


class Kind(str, Enum):
    """Value kinds the sample command can draw."""

    NEXT = "next"
    BELOW = "below"
    RANGE = "range"
    DOUBLE = "double"
    DOUBLE_NON_ZERO = "double-non-zero"
    FLOAT = "float"
    UINT = "uint"
    INT = "int"
    ULONG = "ulong"
    BOOL = "bool"
    BYTE = "byte"


def _drawer(rng: RandomSource, kind: Kind, min_value: int, max_value: int) -> Callable[[], object]:
    """Get a zero-argument function drawing one value of kind."""
    if kind is Kind.BELOW:
        return lambda: rng.next_below(max_value)
    if kind is Kind.RANGE:
        return lambda: rng.next_range(min_value, max_value)
    return getattr(rng, "next" if kind is Kind.NEXT else f"next_{kind.value.replace('-', '_')}")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(code=1)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def sample(
    kind: Kind = typer.Argument(Kind.UINT, help="Kind of value to draw"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="64-bit seed (default: seed source)"),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of values"),
    min_value: int = typer.Option(0, "--min", help="Inclusive lower bound for 'range'"),
    max_value: int = typer.Option(100, "--max", help="Exclusive upper bound for 'below' and 'range'"),
    source: Optional[SourceKind] = typer.Option(None, "--source", help="Random source implementation"),
) -> None:
    """Draw values and print one per line."""
    try:
        rng = create_source(source, seed)
        draw = _drawer(rng, kind, min_value, max_value)
        values = [draw() for _ in range(count)]
    except InvalidArgumentError as e:
        logger.debug(f"sample failed: {e}")
        _fail(str(e))

    for value in values:
        console.print(str(value), highlight=False, soft_wrap=True)


@app.command("bytes")
def random_bytes(
    length: int = typer.Argument(..., min=0, help="Number of bytes"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="64-bit seed (default: seed source)"),
) -> None:
    """Fill a buffer of LENGTH bytes and print it as hex."""
    try:
        rng = XorShiftRandom(seed)
    except InvalidArgumentError as e:
        _fail(str(e))

    buffer = bytearray(length)
    rng.next_bytes(buffer)
    console.print(buffer.hex(), highlight=False, soft_wrap=True)


@app.command()
def seed() -> None:
    """Print one fresh seed from the default seed source."""
    console.print(str(get_seed()), highlight=False, soft_wrap=True)


@app.command()
def info() -> None:
    """Show configuration and verify the reference output."""
    console.print()
    console.print(
        Panel.fit(
            "[bold blue]Saikoro Info[/bold blue]",
            border_style="blue",
        )
    )
    console.print()

    settings = get_settings()

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Details")

    table.add_row(
        "Root seed",
        str(settings.seed) if settings.seed is not None else "[dim]○ OS entropy[/dim]",
        "SAIKORO_SEED",
    )
    table.add_row("Default source", settings.source.value, "SAIKORO_SOURCE")

    first = XorShiftRandom(GOLDEN_SEED).next_uint()
    table.add_row(
        "Golden check",
        "[green]✓ Passed[/green]" if first == GOLDEN_FIRST_UINT else "[red]✗ Failed[/red]",
        f"seed {GOLDEN_SEED} -> {first}",
    )

    console.print(table)
    console.print()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    """Saikoro (サイコロ) - Fast deterministic random numbers."""
    if version:
        console.print(f"Saikoro version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print()
        console.print(
            Panel.fit(
                "[bold blue]Saikoro (サイコロ)[/bold blue]\n"
                "[dim]Fast deterministic random numbers[/dim]\n\n"
                f"Version {__version__}",
                border_style="blue",
            )
        )
        console.print()
        console.print("Use [cyan]saikoro --help[/cyan] for available commands.")
        console.print()


if __name__ == "__main__":
    app()
