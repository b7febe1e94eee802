"""
detrand CLI

Command-line front end for deterministic random sequences.

Usage:
    detrand ints 5 --seed 42            Raw 32-bit generator output
    detrand ints 5 --lower 1 --upper 6  Dice rolls
    detrand floats 3 --text "level-1"   Floats seeded from text
    detrand shuffle a b c d --seed 7    Shuffle the given items
    detrand choice a b c --seed 7       Pick one of the given items
    detrand seed "hello world!"         Show the seed derived from text
    detrand generators                  List available generators
"""

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from detrand import __version__
from detrand.core.config import get_settings
from detrand.core.models import RandomConfig
from detrand.errors import RandomError
from detrand.generators import available_generators, create_generator
from detrand.random import Random

# Create the main app
app = typer.Typer(
    name="detrand",
    help="detrand - Deterministic random numbers",
    add_completion=False,
)

# Console for rich output
console = Console()


# =============================================================================
# Helpers
# =============================================================================


def _fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def _validation_message(error: ValidationError) -> str:
    """Flatten a pydantic error into "field: message" parts."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def _build_random(seed: Optional[int], text: Optional[str], generator: Optional[str]) -> Random:
    """Build a Random from CLI options, falling back to DETRAND_* settings."""
    if seed is not None and text is not None:
        _fail("--seed and --text are mutually exclusive")

    try:
        settings = get_settings()
        config = RandomConfig(
            seed=seed if seed is not None else settings.seed,
            generator=generator or settings.generator,
        )
    except ValidationError as e:
        _fail(_validation_message(e))

    if text is not None:
        rng = Random(seed=0, generator=create_generator(config.generator))
        rng.set_string_seed(text)
        return rng

    return Random.from_config(config, settings.entropy_fallback_rounds)


SeedOption = typer.Option(None, "--seed", "-s", help="64-bit integer seed")
TextOption = typer.Option(None, "--text", "-t", help="Seed derived from text")
GeneratorOption = typer.Option(None, "--generator", "-g", help="Generator kind (see 'detrand generators')")


# =============================================================================
# Main Commands
# =============================================================================


@app.command()
def ints(
    count: int = typer.Argument(..., min=1, help="Number of values"),
    lower: Optional[int] = typer.Option(None, "--lower", "-l", help="Inclusive lower bound"),
    upper: Optional[int] = typer.Option(None, "--upper", "-u", help="Inclusive upper bound"),
    seed: Optional[int] = SeedOption,
    text: Optional[str] = TextOption,
    generator: Optional[str] = GeneratorOption,
) -> None:
    """Print random integers.

    Without bounds, prints raw signed 32-bit generator output.
    """
    if (lower is None) != (upper is None):
        _fail("--lower and --upper must be given together")

    rng = _build_random(seed, text, generator)
    try:
        for _ in range(count):
            if lower is None:
                value = rng.next_int()
            else:
                value = rng.random_int(lower, upper)
            typer.echo(value)
    except RandomError as e:
        _fail(str(e))


@app.command()
def floats(
    count: int = typer.Argument(..., min=1, help="Number of values"),
    seed: Optional[int] = SeedOption,
    text: Optional[str] = TextOption,
    generator: Optional[str] = GeneratorOption,
) -> None:
    """Print random floats in [0, 1)."""
    rng = _build_random(seed, text, generator)
    for _ in range(count):
        typer.echo(repr(rng.random()))


@app.command()
def shuffle(
    items: list[str] = typer.Argument(..., help="Items to shuffle"),
    seed: Optional[int] = SeedOption,
    text: Optional[str] = TextOption,
    generator: Optional[str] = GeneratorOption,
) -> None:
    """Print the given items in shuffled order, one per line."""
    rng = _build_random(seed, text, generator)
    items = list(items)
    rng.shuffle(items)
    for item in items:
        typer.echo(item)


@app.command()
def choice(
    items: list[str] = typer.Argument(..., help="Items to choose from"),
    seed: Optional[int] = SeedOption,
    text: Optional[str] = TextOption,
    generator: Optional[str] = GeneratorOption,
) -> None:
    """Print one of the given items."""
    rng = _build_random(seed, text, generator)
    try:
        typer.echo(rng.choice(items))
    except RandomError as e:
        _fail(str(e))


@app.command()
def seed(
    text: str = typer.Argument(..., help="Text to derive a seed from"),
) -> None:
    """Print the 64-bit seed derived from text."""
    rng = Random(seed=0)
    rng.set_string_seed(text)
    typer.echo(rng.seed)


@app.command()
def generators() -> None:
    """List available generators."""
    table = Table(title="Generators")
    table.add_column("Kind", style="cyan")
    table.add_column("Class")
    table.add_column("Uses all bits")

    for kind in available_generators():
        bits = create_generator(kind)
        table.add_row(
            escape(kind.value),
            type(bits).__name__,
            "[green]yes[/green]" if bits.uses_all_bits else "[yellow]no[/yellow]",
        )

    console.print(table)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """detrand - Deterministic random numbers."""
    if version:
        console.print(f"detrand version {__version__}")
        raise typer.Exit()

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if ctx.invoked_subcommand is None:
        console.print()
        console.print(
            Panel.fit(
                "[bold blue]detrand[/bold blue]\n"
                "[dim]Deterministic random numbers[/dim]\n\n"
                f"Version {__version__}",
                border_style="blue",
            )
        )
        console.print()
        console.print("Use [cyan]detrand --help[/cyan] for available commands.")
        console.print()


if __name__ == "__main__":
    app()
