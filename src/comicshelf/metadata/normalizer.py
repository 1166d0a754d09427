# ABOUTME: Maps a converted ComicInfo.xml document onto the canonical ComicMetadata schema.
# ABOUTME: Trims values, splits comma lists, and derives the title from series and number.

import re
from typing import Any

from comicshelf.metadata.types import ComicMetadata, SeriesEntry

_ROOT_KEY = "comicinfo"

# Splits credit and genre lists: "Brian K. Vaughan, Fiona Staples"
_LIST_SEPARATOR_RE = re.compile(r"\s*[,;]\s*")
_YEAR_RE = re.compile(r"^\d{4}$")


def _first_text(info: dict[str, Any], key: str) -> str | None:
    """Return the first non-empty text value for a tag, or None."""
    values = info.get(key)
    if not values:
        return None
    value = values[0] if isinstance(values, list) else values
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _split_list(text: str | None) -> list[str]:
    """Split a comma/semicolon list, dropping blanks and duplicates in order."""
    if not text:
        return []
    seen: dict[str, None] = {}
    for part in _LIST_SEPARATOR_RE.split(text):
        if part:
            seen.setdefault(part, None)
    return list(seen)


def _parse_year(text: str | None) -> int | None:
    if text is None or not _YEAR_RE.match(text):
        return None
    year = int(text)
    return year if year > 0 else None


def _parse_count(text: str | None) -> int | None:
    if text is None or not text.isdecimal():
        return None
    count = int(text)
    return count if count > 0 else None


def _detect_isbn(gtin: str | None) -> str | None:
    """Keep a GTIN only when it looks like an ISBN-10 or ISBN-13."""
    if gtin is None:
        return None
    cleaned = gtin.replace("-", "").replace(" ", "")
    if len(cleaned) == 13 and cleaned.isdigit() and cleaned.startswith(("978", "979")):
        return cleaned
    if len(cleaned) == 10 and cleaned[:9].isdigit() and cleaned[9] in "0123456789xX":
        return cleaned.upper()
    return None


def normalize_comic_info(document: dict[str, Any] | None) -> ComicMetadata | None:
    """Build ComicMetadata from the output of xml_to_object.

    The title is "<Series> <Number>" when the sidecar names a series,
    falling back to <Title> otherwise.

    Returns:
        ComicMetadata, or None if the document has no ComicInfo root.
    """
    if not document:
        return None
    info = document.get(_ROOT_KEY)
    if not isinstance(info, dict):
        return None

    series_name = _first_text(info, "series")
    number = _first_text(info, "number")

    series: list[SeriesEntry] = []
    title = None
    if series_name:
        series.append(SeriesEntry(name=series_name, sequence=number))
        title = f"{series_name} {number}" if number else series_name
    if title is None:
        title = _first_text(info, "title")

    return ComicMetadata(
        title=title,
        series=series,
        description=_first_text(info, "summary"),
        authors=_split_list(_first_text(info, "writer")),
        publisher=_first_text(info, "publisher"),
        genres=_split_list(_first_text(info, "genre")),
        language=_first_text(info, "languageiso"),
        published_year=_parse_year(_first_text(info, "year")),
        page_count=_parse_count(_first_text(info, "pagecount")),
        isbn=_detect_isbn(_first_text(info, "gtin")),
    )
