# ABOUTME: The `comicshelf inspect` command for viewing comic archive metadata.
# ABOUTME: Shows the normalized ComicInfo fields and the chosen cover entry for one file.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from comicshelf.core.scanner import comic_format
from comicshelf.formats.comic import ComicParser
from comicshelf.metadata.types import ComicFile

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect(path: Path) -> None:
    """Show metadata extracted from a CBZ/CBR file."""
    ebook_format = comic_format(path) or path.suffix.lower().lstrip(".")
    result = ComicParser().parse(ComicFile(path=path, ebook_format=ebook_format))
    if result is None:
        console.print(f"[red]Error:[/red] could not read comic archive {path}")
        raise SystemExit(1)

    table = Table(title=str(path.name), show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Format", result.ebook_format or "[dim]unknown[/dim]")
    table.add_row("Cover", result.cover_entry_name or "[dim]none[/dim]")

    meta = result.metadata
    if meta is None:
        table.add_row("ComicInfo", "[dim]none[/dim]")
        console.print(table)
        return

    table.add_row("Title", meta.title or "[dim]unknown[/dim]")
    table.add_row("Series", meta.series_label or "[dim]none[/dim]")
    table.add_row("Author", meta.author or "[dim]unknown[/dim]")
    table.add_row("Publisher", meta.publisher or "[dim]unknown[/dim]")
    table.add_row("Language", meta.language or "[dim]unknown[/dim]")
    if meta.published_year is not None:
        table.add_row("Year", str(meta.published_year))
    if meta.page_count is not None:
        table.add_row("Pages", str(meta.page_count))
    if meta.genres:
        table.add_row("Genres", ", ".join(meta.genres))
    if meta.isbn:
        table.add_row("ISBN", meta.isbn)
    table.add_row("Description", meta.description or "[dim]none[/dim]")

    console.print(table)
