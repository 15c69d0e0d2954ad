"""CLI entry point for javadoc-zip.

Invoked as::

    javadoc-zip [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m javadoc_zip

Commands
--------
info        Show the library metadata stored in an archive
classes     List the classes documented in an archive
url         Print the documentation URL of a class
show        Print the raw XML of a class entry
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from javadoc_zip import JavadocZipFile

console = Console()
err_console = Console(stderr=True)


def _open_or_exit(path: str) -> "JavadocZipFile":
    """Open an archive, printing the error and exiting on failure."""
    from javadoc_zip import JavadocZipError, open_library

    try:
        return open_library(path)
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except JavadocZipError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="javadoc-zip")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Inspect Javadoc ZIP archives and resolve class documentation URLs."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from javadoc_zip import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]javadoc-zip[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# info command
# ---------------------------------------------------------------------------


@cli.command(name="info")
@click.argument("archive", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
def info_command(archive: str, output_format: str) -> None:
    """Show the metadata from an archive's info.xml.

    ARCHIVE is the path to the Javadoc ZIP file.
    """
    from javadoc_zip.metadata import MetadataSerializer

    library = _open_or_exit(archive)
    serializer = MetadataSerializer()

    if output_format == "json":
        click.echo(serializer.to_json(library.metadata))
        return
    if output_format == "yaml":
        click.echo(serializer.to_yaml(library.metadata), nl=False)
        return

    table = Table(title=str(library.path), show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for key, value in serializer.to_dict(library.metadata).items():
        table.add_row(key, value if value is not None else "[dim]-[/dim]")
    console.print(table)


# ---------------------------------------------------------------------------
# classes command
# ---------------------------------------------------------------------------


@cli.command(name="classes")
@click.argument("archive", type=click.Path(exists=False))
@click.option("--limit", "-n", type=int, default=None, help="Show at most N classes")
def classes_command(archive: str, limit: int | None) -> None:
    """List the classes documented in an archive, sorted by name.

    ARCHIVE is the path to the Javadoc ZIP file.
    """
    library = _open_or_exit(archive)

    try:
        with library.list_classes() as classes:
            names = sorted(str(c) for c in classes)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    shown = names if limit is None else names[:limit]
    for name in shown:
        click.echo(name)

    if len(shown) < len(names):
        err_console.print(f"[dim]... {len(names) - len(shown)} more[/dim]")


# ---------------------------------------------------------------------------
# url command
# ---------------------------------------------------------------------------


@cli.command(name="url")
@click.argument("archive", type=click.Path(exists=False))
@click.argument("class_name")
@click.option("--frames", is_flag=True, default=False, help="Link to the frame-style page")
def url_command(archive: str, class_name: str, frames: bool) -> None:
    """Print the documentation URL of a class.

    ARCHIVE is the path to the Javadoc ZIP file; CLASS_NAME is a
    fully-qualified name such as java.lang.String.
    """
    library = _open_or_exit(archive)
    url = library.get_url(class_name, frames=frames)
    if url is None:
        err_console.print(f"[red]Error:[/red] {archive} defines no base URL or URL pattern")
        sys.exit(1)
    click.echo(url)


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("archive", type=click.Path(exists=False))
@click.argument("class_name")
def show_command(archive: str, class_name: str) -> None:
    """Print the raw XML documentation of a class.

    ARCHIVE is the path to the Javadoc ZIP file; CLASS_NAME is a
    fully-qualified name such as java.lang.String.
    """
    library = _open_or_exit(archive)
    try:
        data = library.read_class_xml(class_name)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    if data is None:
        err_console.print(f"[red]Error:[/red] Class not found: {class_name}")
        sys.exit(1)

    text = data.decode("utf-8", errors="replace")
    console.print(Syntax(text, "xml", line_numbers=True))


if __name__ == "__main__":
    cli()
