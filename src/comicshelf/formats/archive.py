# ABOUTME: Archive sessions over in-memory CBZ (zip) and CBR (rar) containers.
# ABOUTME: open_session guarantees every successfully opened session is closed exactly once.

import io
import logging
import zipfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import rarfile

from comicshelf.core.ordering import natural_sort_key

logger = logging.getLogger(__name__)


class ArchiveError(Exception):
    """Base class for failures raised while working with a comic archive."""


class ArchiveDecodeError(ArchiveError):
    """Raised when bytes are not a recognized or readable archive container."""


class ArchiveEntryError(ArchiveError):
    """Raised when a single entry cannot be extracted."""


class ArchiveSessionClosedError(ArchiveError):
    """Raised when an entry is accessed after its session was closed."""


@dataclass
class ArchiveEntry:
    """One file inside an open archive.

    `info` is the decoder's own record for this member (a ZipInfo or
    RarInfo), so extract() reads this exact member even when another
    entry shares its name. Only valid while the owning session is open;
    extract() raises ArchiveSessionClosedError afterwards.
    """

    name: str
    session: "ArchiveSession" = field(repr=False, compare=False)
    info: Any = field(default=None, repr=False, compare=False)

    def extract(self) -> bytes | None:
        """Return this entry's raw bytes, or None if the archive yields no data."""
        if self.session.closed:
            raise ArchiveSessionClosedError(f"Session closed, cannot extract: {self.name}")
        return self.session.extract(self.name if self.info is None else self.info)


@runtime_checkable
class ArchiveSession(Protocol):
    """An open handle over archive bytes.

    extract() takes either an entry name or the `info` of a listed entry.
    """

    @property
    def closed(self) -> bool: ...

    def list_entries(self) -> list[ArchiveEntry]: ...

    def extract(self, member: Any) -> bytes | None: ...

    def close(self) -> None: ...


@runtime_checkable
class ArchiveDecoder(Protocol):
    """Opens archive bytes into a session. Raises ArchiveDecodeError on bad input."""

    def open(self, data: bytes) -> ArchiveSession: ...


class ZipArchiveSession:
    """Session over a zip container (CBZ)."""

    def __init__(self, data: bytes) -> None:
        try:
            self._zf = zipfile.ZipFile(io.BytesIO(data), mode="r")
        except (zipfile.BadZipFile, OSError, ValueError) as exc:
            raise ArchiveDecodeError(f"Failed to open zip archive: {exc}") from exc
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def list_entries(self) -> list[ArchiveEntry]:
        self._check_open()
        return [
            ArchiveEntry(name=info.filename, session=self, info=info)
            for info in self._zf.infolist()
            if not info.is_dir()
        ]

    def extract(self, member: "str | zipfile.ZipInfo") -> bytes | None:
        self._check_open()
        if isinstance(member, str):
            try:
                member = self._zf.getinfo(member)
            except KeyError:
                return None
        try:
            return self._zf.read(member)
        except Exception as exc:
            raise ArchiveEntryError(f"Failed to extract {member.filename}: {exc}") from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._zf.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ArchiveSessionClosedError("Zip session is closed")


class RarArchiveSession:
    """Session over a rar container (CBR).

    Listing works on any system; extracting needs an unrar backend that
    rarfile can find (unrar, unar, 7z or bsdtar).
    """

    def __init__(self, data: bytes) -> None:
        try:
            self._rf = rarfile.RarFile(io.BytesIO(data), mode="r")
        except (rarfile.Error, OSError, ValueError) as exc:
            raise ArchiveDecodeError(f"Failed to open rar archive: {exc}") from exc
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def list_entries(self) -> list[ArchiveEntry]:
        self._check_open()
        return [
            ArchiveEntry(name=info.filename, session=self, info=info)
            for info in self._rf.infolist()
            if not info.is_dir()
        ]

    def extract(self, member: "str | rarfile.RarInfo") -> bytes | None:
        self._check_open()
        if isinstance(member, str):
            try:
                member = self._rf.getinfo(member)
            except rarfile.NoRarEntry:
                return None
        try:
            return self._rf.read(member)
        except (rarfile.Error, OSError) as exc:
            raise ArchiveEntryError(f"Failed to extract {member.filename}: {exc}") from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._rf.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ArchiveSessionClosedError("Rar session is closed")


def _is_rar(data: bytes) -> bool:
    return data.startswith(rarfile.RAR_ID) or data.startswith(rarfile.RAR5_ID)


class ComicArchiveDecoder:
    """Default decoder: detects zip or rar from the leading bytes."""

    def open(self, data: bytes) -> ArchiveSession:
        if not data:
            raise ArchiveDecodeError("Archive is empty")
        if _is_rar(data):
            logger.debug("Opening %d bytes as rar", len(data))
            return RarArchiveSession(data)
        if zipfile.is_zipfile(io.BytesIO(data)):
            logger.debug("Opening %d bytes as zip", len(data))
            return ZipArchiveSession(data)
        raise ArchiveDecodeError("Unrecognized archive format")


@contextmanager
def open_session(decoder: ArchiveDecoder, data: bytes) -> Iterator[ArchiveSession]:
    """Open a session for the duration of a with-block.

    If decoder.open raises, nothing is closed. Once it succeeds, close()
    runs exactly once however the block exits.
    """
    session = decoder.open(data)
    try:
        yield session
    finally:
        session.close()


def list_sorted_entries(session: ArchiveSession) -> list[ArchiveEntry]:
    """List every entry in the session, naturally sorted by name.

    Nothing is filtered here. The sort is stable, so names that compare
    equal (e.g. differing only by case) keep their archive order.
    """
    entries = session.list_entries()
    return sorted(entries, key=lambda entry: natural_sort_key(entry.name))
