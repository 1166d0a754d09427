# ABOUTME: Metadata package for ComicInfo.xml decoding and the canonical comic schema.
# ABOUTME: Exports ComicMetadata and the parse result types used throughout comicshelf.

from comicshelf.metadata.comicinfo import ComicInfoParseError, xml_to_object
from comicshelf.metadata.normalizer import normalize_comic_info
from comicshelf.metadata.types import ComicFile, ComicMetadata, ParsedComicResult, SeriesEntry

__all__ = [
    "ComicFile",
    "ComicInfoParseError",
    "ComicMetadata",
    "ParsedComicResult",
    "SeriesEntry",
    "normalize_comic_info",
    "xml_to_object",
]
