# ABOUTME: Core data structures for comic metadata and parse results.
# ABOUTME: ParsedComicResult is the interchange format handed back to the scan pipeline.

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class SeriesEntry:
    """A series the comic belongs to, with its issue number if known."""

    name: str
    sequence: str | None = None


@dataclass
class ComicMetadata:
    """Canonical metadata normalized from a ComicInfo.xml sidecar.

    Every field is optional: sidecars in the wild range from a lone
    <Series> tag to a full ComicRack export.
    """

    title: str | None = None
    series: list[SeriesEntry] = field(default_factory=list)
    description: str | None = None
    authors: list[str] = field(default_factory=list)
    publisher: str | None = None
    genres: list[str] = field(default_factory=list)
    language: str | None = None
    published_year: int | None = None
    page_count: int | None = None
    isbn: str | None = None

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors) if self.authors else ""

    @property
    def series_label(self) -> str:
        """Display string such as 'Saga #12', joined for multiple series."""
        labels = [f"{s.name} #{s.sequence}" if s.sequence else s.name for s in self.series]
        return ", ".join(labels)


@dataclass(frozen=True)
class ComicFile:
    """Input descriptor for a comic archive: where it lives and its format tag."""

    path: Path
    ebook_format: str


@dataclass
class ParsedComicResult:
    """Output of parsing one comic archive.

    metadata and cover_entry_name are independent: an archive can have a
    cover without a sidecar and vice versa.
    """

    path: Path
    ebook_format: str
    metadata: ComicMetadata | None = None
    cover_entry_name: str | None = None

    @property
    def has_metadata(self) -> bool:
        return self.metadata is not None

    @property
    def has_cover(self) -> bool:
        return self.cover_entry_name is not None
