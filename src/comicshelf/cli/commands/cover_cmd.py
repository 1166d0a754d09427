# ABOUTME: The `comicshelf cover` command for pulling a cover image out of an archive.
# ABOUTME: Uses the first page image unless an explicit entry name is given.

from pathlib import Path

import click
from rich.console import Console

from comicshelf.core.scanner import comic_format
from comicshelf.formats.comic import ComicParser
from comicshelf.metadata.types import ComicFile

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--entry",
    "entry_name",
    default=None,
    help="Archive entry to extract (default: first page image).",
)
def cover(path: Path, output: Path, entry_name: str | None) -> None:
    """Write the cover image of a CBZ/CBR file to OUTPUT."""
    parser = ComicParser()

    if entry_name is None:
        ebook_format = comic_format(path) or path.suffix.lower().lstrip(".")
        result = parser.parse(ComicFile(path=path, ebook_format=ebook_format))
        if result is None:
            console.print(f"[red]Error:[/red] could not read comic archive {path}")
            raise SystemExit(1)
        if result.cover_entry_name is None:
            console.print(f"[red]Error:[/red] no cover image found in {path.name}")
            raise SystemExit(1)
        entry_name = result.cover_entry_name

    if not parser.extract_cover(path, entry_name, output):
        console.print(f"[red]Error:[/red] failed to extract {entry_name} from {path.name}")
        raise SystemExit(1)

    console.print(f"[green]Wrote[/green] {entry_name} -> {output}")
