# ABOUTME: Comic archive (CBZ/CBR) metadata parsing and cover extraction.
# ABOUTME: Degrades to partial or None results instead of raising; sessions are always closed.

import logging
from collections.abc import Callable, Sequence
from pathlib import Path, PurePosixPath
from typing import Any

from comicshelf.config import DEFAULT_CONFIG, ParserConfig
from comicshelf.formats.archive import (
    ArchiveDecoder,
    ArchiveEntry,
    ArchiveError,
    ComicArchiveDecoder,
    list_sorted_entries,
    open_session,
)
from comicshelf.formats.storage import LocalStorage, Storage, load_archive_bytes
from comicshelf.metadata.comicinfo import ComicInfoParseError, xml_to_object
from comicshelf.metadata.normalizer import normalize_comic_info
from comicshelf.metadata.types import ComicFile, ComicMetadata, ParsedComicResult

logger = logging.getLogger(__name__)

XmlDecoder = Callable[[str], dict[str, Any] | None]
Normalizer = Callable[[dict[str, Any]], ComicMetadata | None]


def entry_extension(name: str) -> str:
    """Lowercase extension of an entry's final path component, without the dot.

    Dotfiles have no extension: ".jpg" -> "".
    """
    return PurePosixPath(name).suffix.lower().lstrip(".")


def find_comic_info_entry(
    entries: Sequence[ArchiveEntry], filename: str
) -> ArchiveEntry | None:
    """Return the first entry named exactly `filename`; later duplicates are ignored."""
    return next((entry for entry in entries if entry.name == filename), None)


def select_cover_entry(
    entries: Sequence[ArchiveEntry], image_types: frozenset[str]
) -> ArchiveEntry | None:
    """Return the first entry, in the given order, whose extension is an image type."""
    return next((entry for entry in entries if entry_extension(entry.name) in image_types), None)


class ComicParser:
    """Parses comic archives and extracts cover images.

    Every collaborator is injectable so tests can substitute fakes; the
    defaults read from the local filesystem and decode zip/rar containers.
    """

    def __init__(
        self,
        config: ParserConfig = DEFAULT_CONFIG,
        decoder: ArchiveDecoder | None = None,
        storage: Storage | None = None,
        xml_decoder: XmlDecoder = xml_to_object,
        normalizer: Normalizer = normalize_comic_info,
    ) -> None:
        self.config = config
        self.decoder = decoder or ComicArchiveDecoder()
        self.storage = storage or LocalStorage()
        self.xml_decoder = xml_decoder
        self.normalizer = normalizer

    def parse(self, comic_file: ComicFile) -> ParsedComicResult | None:
        """Parse metadata and locate the cover entry of a comic archive.

        Args:
            comic_file: The archive's path and format tag.

        Returns:
            A ParsedComicResult whose metadata and cover_entry_name may each
            be None, or None if the file is unreadable or not an archive.
        """
        comic_path = comic_file.path
        logger.debug("Parsing metadata from comic at %s", comic_path)

        data = load_archive_bytes(comic_path, self.storage)
        if data is None:
            return None

        try:
            with open_session(self.decoder, data) as session:
                entries = list_sorted_entries(session)
                metadata = self._read_comic_info(comic_path, entries)
                cover = select_cover_entry(entries, self.config.image_types)
        except ArchiveError as exc:
            logger.error("Failed to parse comic metadata at %s: %s", comic_path, exc)
            return None

        if cover is None:
            logger.warning("Cover image not found in comic at %s", comic_path)

        return ParsedComicResult(
            path=comic_path,
            ebook_format=comic_file.ebook_format,
            metadata=metadata,
            cover_entry_name=cover.name if cover else None,
        )

    def _read_comic_info(
        self, comic_path: Path, entries: Sequence[ArchiveEntry]
    ) -> ComicMetadata | None:
        """Extract, decode and normalize the sidecar; any failure yields None."""
        entry = find_comic_info_entry(entries, self.config.comic_info_filename)
        if entry is None:
            return None

        try:
            payload = entry.extract()
            if not payload:
                logger.warning("Empty %s in comic at %s", entry.name, comic_path)
                return None
            document = self.xml_decoder(payload.decode("utf-8-sig"))
            if not document:
                return None
            return self.normalizer(document)
        except (
            ArchiveError,
            UnicodeDecodeError,
            ComicInfoParseError,
            ValueError,
            TypeError,
            KeyError,
        ) as exc:
            logger.warning("Failed to read %s in comic at %s: %s", entry.name, comic_path, exc)
            return None

    def extract_cover(self, comic_path: Path, entry_name: str, output_path: Path) -> bool:
        """Write the raw bytes of one archive entry to output_path.

        Args:
            comic_path: Path to the comic archive.
            entry_name: Name of the entry inside the archive, usually the
                cover_entry_name from a previous parse.
            output_path: Where to write the image bytes.

        Returns:
            True only if the entry was extracted and fully written.
        """
        data = load_archive_bytes(comic_path, self.storage)
        if data is None:
            return False

        try:
            with open_session(self.decoder, data) as session:
                image = session.extract(entry_name)
                if not image:
                    logger.error(
                        "Invalid file entry data for comic %s entry %s", comic_path, entry_name
                    )
                    return False
                self.storage.write_bytes(output_path, image)
        except (ArchiveError, OSError) as exc:
            logger.error(
                "Failed to extract image %s from comic %s into %s: %s",
                entry_name,
                comic_path,
                output_path,
                exc,
            )
            return False

        return True


def parse_comic(comic_file: ComicFile) -> ParsedComicResult | None:
    """Parse a comic archive with the default configuration."""
    return ComicParser().parse(comic_file)


def extract_cover_image(comic_path: Path, entry_name: str, output_path: Path) -> bool:
    """Extract one entry of a comic archive with the default configuration."""
    return ComicParser().extract_cover(comic_path, entry_name, output_path)
