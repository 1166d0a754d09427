# ABOUTME: Directory scanner that finds comic archives to hand to the parser.
# ABOUTME: Walks a directory tree and builds ComicFile descriptors with format counts.

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path

from comicshelf.config import COMIC_EXTENSIONS
from comicshelf.core.ordering import natural_sort_key
from comicshelf.metadata.types import ComicFile


@dataclass
class ScanResult:
    """Aggregated results from scanning a directory tree for comic archives."""

    comics: list[ComicFile]
    format_counts: dict[str, int]
    scan_root: Path

    @property
    def total_comics(self) -> int:
        """Total number of comic archives found."""
        return len(self.comics)


def comic_format(path: Path) -> str | None:
    """Format tag for a path ('cbz', 'cbr'), or None if it is not a comic archive."""
    suffix = path.suffix.lower()
    if suffix not in COMIC_EXTENSIONS:
        return None
    return suffix.lstrip(".")


def scan_directory(root: Path) -> ScanResult:
    """Walk a directory tree and collect every comic archive.

    Comics are returned in natural order of their path relative to root,
    so "Issue 2.cbz" comes before "Issue 10.cbz".

    Args:
        root: The top-level directory to scan.

    Returns:
        A ScanResult with all discovered comics and per-format counts.
    """
    comics: list[ComicFile] = []
    format_counts: dict[str, int] = defaultdict(int)

    for path in root.rglob("*"):
        if not path.is_file():
            continue
        ebook_format = comic_format(path)
        if ebook_format is None:
            continue
        comics.append(ComicFile(path=path, ebook_format=ebook_format))
        format_counts[ebook_format] += 1

    comics.sort(key=lambda comic: natural_sort_key(comic.path.relative_to(root).as_posix()))

    return ScanResult(
        comics=comics,
        format_counts=dict(format_counts),
        scan_root=root,
    )
