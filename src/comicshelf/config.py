# ABOUTME: Process-wide configuration values for comic archive parsing.
# ABOUTME: ParserConfig is immutable and injected into ComicParser at construction.

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

# Extensions (lowercase, no dot) treated as page images when choosing a cover.
SUPPORTED_IMAGE_TYPES: frozenset[str] = frozenset({"jpg", "jpeg", "png", "gif", "webp"})

# Reserved sidecar filename, matched exactly (case-sensitive).
COMIC_INFO_FILENAME = "ComicInfo.xml"

COMIC_EXTENSIONS: frozenset[str] = frozenset({".cbz", ".cbr"})


def _normalize_extension(ext: str) -> str:
    return ext.strip().lower().lstrip(".")


@dataclass(frozen=True)
class ParserConfig:
    """Immutable settings shared by every parse and cover extraction call."""

    image_types: frozenset[str] = field(default=SUPPORTED_IMAGE_TYPES)
    comic_info_filename: str = COMIC_INFO_FILENAME

    def with_image_types(self, image_types: Iterable[str]) -> "ParserConfig":
        """Return a copy recognizing the given extensions ('.PNG' and 'png' are equivalent)."""
        normalized = frozenset(_normalize_extension(ext) for ext in image_types)
        return replace(self, image_types=frozenset(ext for ext in normalized if ext))


DEFAULT_CONFIG = ParserConfig()
