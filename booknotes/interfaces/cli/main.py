"""
CLI Main - Typer-based command-line interface.

Usage:
    booknotes author notes/above-the-clouds.md
    booknotes title notes/above-the-clouds.md
    booknotes field "Category" notes/above-the-clouds.md
    booknotes summary notes/above-the-clouds.md
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from booknotes.config import BooknotesError, MissingFieldPolicy, Settings, get_settings
from booknotes.domains.extraction import FieldLabel
from booknotes.domains.orchestration import BooknotesService, CommandResult

app = typer.Typer(
    name="booknotes",
    help="Booknotes - Metadata extraction for Markdown book notes",
    add_completion=False,
)
console = Console()

logger = logging.getLogger(__name__)


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for all commands."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _service(strict: bool | None) -> BooknotesService:
    """Build a service, applying the --strict override if given."""
    settings: Settings = get_settings()
    if strict is not None:
        policy = MissingFieldPolicy.ERROR if strict else MissingFieldPolicy.EMPTY
        settings = settings.model_copy(update={"missing_field_policy": policy})
    return BooknotesService(settings=settings)


def _emit(result: CommandResult) -> None:
    """Print result lines and exit with its code."""
    for line in result.lines:
        typer.echo(line)
    if not result.ok:
        logger.debug("Exiting with %d (%s)", result.exit_code, result.error)
        raise typer.Exit(result.exit_code)


STRICT_OPTION = typer.Option(
    None,
    "--strict/--no-strict",
    help="Fail when the field is absent instead of printing an empty line",
)


@app.command()
def author(
    file: str | None = typer.Argument(None, help="Path to notes file"),
    strict: bool | None = STRICT_OPTION,
) -> None:
    """Print the Author field of a notes file."""
    _emit(_service(strict).get_author(file))


@app.command()
def title(
    file: str | None = typer.Argument(None, help="Path to notes file"),
    strict: bool | None = STRICT_OPTION,
) -> None:
    """Print the Full Title field of a notes file."""
    _emit(_service(strict).get_title(file))


@app.command()
def field(
    label: str = typer.Argument(..., help="Field label, e.g. 'Category'"),
    file: str | None = typer.Argument(None, help="Path to notes file"),
    strict: bool | None = STRICT_OPTION,
) -> None:
    """Print any labelled field of a notes file."""
    _emit(_service(strict).get_field(file, label))


@app.command()
def summary(
    file: str | None = typer.Argument(None, help="Path to notes file"),
    labels: list[str] | None = typer.Option(
        None, "--label", "-l", help="Additional label to show (repeatable)"
    ),
) -> None:
    """Show Author, Full Title and extra fields as a table."""
    wanted: list[FieldLabel | str] = [FieldLabel.AUTHOR, FieldLabel.FULL_TITLE]
    wanted.extend(labels or [])

    try:
        fields = _service(None).get_fields(file, wanted)
    except BooknotesError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(e.exit_code)

    table = Table(title=escape(file or ""))
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Line", style="dim", justify="right")

    for name, extracted in fields.items():
        if extracted.found:
            table.add_row(
                escape(name),
                escape(extracted.value or ""),
                str(extracted.line_number),
            )
        else:
            table.add_row(escape(name), "[dim]not found[/dim]", "-")

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from booknotes import __version__

    console.print(f"Booknotes v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
