# ABOUTME: The `comicshelf scan` command for listing comic archives under a directory.
# ABOUTME: Optionally parses each archive to report ComicInfo and cover coverage.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from comicshelf.core.scanner import scan_directory
from comicshelf.formats.comic import ComicParser

console = Console()


@click.command("scan")
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--parse",
    "parse_archives",
    is_flag=True,
    default=False,
    help="Open each archive and report ComicInfo and cover status.",
)
def scan(path: Path, parse_archives: bool) -> None:
    """Find CBZ/CBR files in a directory tree."""
    result = scan_directory(path)

    if result.total_comics == 0:
        console.print(f"No comic archives found in {path}")
        return

    console.print(f"Found [bold]{result.total_comics}[/bold] comic archive(s) in {path}")
    counts = ", ".join(f"{fmt}: {n}" for fmt, n in sorted(result.format_counts.items()))
    console.print(f"Formats: {counts}")

    table = Table(pad_edge=False)
    table.add_column("File")
    table.add_column("Format")
    if parse_archives:
        table.add_column("Title")
        table.add_column("Cover")

    parser = ComicParser() if parse_archives else None
    for comic in result.comics:
        row = [str(comic.path.relative_to(path)), comic.ebook_format]
        if parser is not None:
            parsed = parser.parse(comic)
            if parsed is None:
                row += ["[red]unreadable[/red]", ""]
            else:
                title = parsed.metadata.title if parsed.metadata else None
                row += [title or "[dim]-[/dim]", parsed.cover_entry_name or "[dim]-[/dim]"]
        table.add_row(*row)

    console.print(table)
