"""
screensync.cli - Typer CLI entry point.

Provides subcommands to classify, preview, and export screenplays.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from screensync import __version__
from screensync.config import ScreenSyncConfig, find_config, load_config
from screensync.elements import Screenplay
from screensync.exceptions import ConfigError, ScreenSyncError
from screensync.io import read_text
from screensync.logging import configure_logging, logger
from screensync.store import ScriptStore
from screensync.utils import compute_stats, suggest_filename

app = typer.Typer(
    name="screensync",
    help="Screenplay element classification and Final Draft export.\n\n"
    "Classifies plain screenplay text line by line and writes Final Draft "
    "(.fdx) documents.",
    add_completion=False,
)
console = Console()


def resolve_config(config_path: str | None) -> ScreenSyncConfig:
    """Load an explicit config file, else the nearest screensync.yaml, else defaults."""
    if config_path:
        path = Path(config_path)
    else:
        path = find_config()
        if path is None:
            logger.debug("No screensync.yaml found, using defaults")
            return ScreenSyncConfig()

    try:
        return load_config(path)
    except (FileNotFoundError, ConfigError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def read_script(file: str) -> str:
    try:
        return read_text(Path(file))
    except FileNotFoundError:
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)
    except UnicodeDecodeError:
        console.print(f"[red]Error: {file} is not a UTF-8 text file[/red]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error: Cannot read {file}: {e}[/red]")
        raise typer.Exit(1)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"screensync {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """ScreenSync - screenplay classification and Final Draft export."""
    configure_logging(verbose)


@app.command("classify")
def classify_lines(
    file: str = typer.Argument(..., help="Screenplay text file, or '-' for stdin"),
) -> None:
    """Classify each non-blank line of a screenplay."""
    screenplay = Screenplay.from_text("", read_script(file))

    table = Table(title="Screenplay Elements")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Element", style="cyan")
    table.add_column("Text")

    for i, line in enumerate(screenplay.lines, 1):
        table.add_row(str(i), line.element.display_name, escape(line.text))

    console.print(table)


@app.command("export")
def export_screenplay(
    file: str = typer.Argument(..., help="Screenplay text file, or '-' for stdin"),
    title: str = typer.Option(..., "--title", "-t", help="Screenplay title"),
    filename: str | None = typer.Option(
        None, "--filename", "-f", help="Output file name without extension (default: from title)"
    ),
    output_dir: str | None = typer.Option(
        None, "--output-dir", "-d", help="Directory to write to (default: downloads_dir)"
    ),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Path to screensync.yaml"),
) -> None:
    """Export a screenplay to Final Draft (.fdx)."""
    config = resolve_config(config_path)
    content = read_script(file)

    if filename is None:
        filename = suggest_filename(title)

    downloads_dir = Path(output_dir) if output_dir else config.resolve_downloads_dir()
    store = ScriptStore(downloads_dir, config.file_extension)

    try:
        result = store.save(title, content, filename)
    except ScreenSyncError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] {result.message}: {result.path}")
    console.print(f"[dim]  Download: {result.download_url}[/dim]")


@app.command("stats")
def show_stats(
    file: str = typer.Argument(..., help="Screenplay text file, or '-' for stdin"),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Path to screensync.yaml"),
) -> None:
    """Show word count, character count, and estimated pages."""
    config = resolve_config(config_path)
    stats = compute_stats(read_script(file), config.words_per_page)

    table = Table(title="Screenplay Stats")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Words", str(stats.words))
    table.add_row("Characters", str(stats.characters))
    table.add_row("Pages", str(stats.pages))

    console.print(table)


@app.command("preview")
def preview_screenplay(
    file: str = typer.Argument(..., help="Screenplay text file, or '-' for stdin"),
    title: str = typer.Option(..., "--title", "-t", help="Screenplay title"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output HTML path"),
    open_browser: bool = typer.Option(False, "--open", help="Open in browser"),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Path to screensync.yaml"),
) -> None:
    """Render an HTML preview of the classified screenplay."""
    from screensync.reports.preview import generate_preview

    config = resolve_config(config_path)
    screenplay = Screenplay.from_text(title, read_script(file))

    output_path = Path(output) if output else Path(f"{suggest_filename(title)}.html")

    try:
        generate_preview(
            screenplay,
            output_path,
            words_per_page=config.words_per_page,
            open_browser=open_browser,
        )
    except OSError as e:
        console.print(f"[red]Error generating preview: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Preview generated: {output_path}")


@app.command("download")
def download_screenplay(
    name: str = typer.Argument(..., help="Stored file name, with or without extension"),
    output_dir: str | None = typer.Option(
        None, "--output-dir", "-d", help="Directory to look in (default: downloads_dir)"
    ),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Path to screensync.yaml"),
) -> None:
    """Print the path of a stored screenplay."""
    config = resolve_config(config_path)
    downloads_dir = Path(output_dir) if output_dir else config.resolve_downloads_dir()
    store = ScriptStore(downloads_dir, config.file_extension)

    try:
        path = store.get(name)
    except ScreenSyncError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(str(path), soft_wrap=True)


if __name__ == "__main__":
    app()
