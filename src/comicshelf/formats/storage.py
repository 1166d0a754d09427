# ABOUTME: Storage access for comic archives: existence checks, whole-file reads and writes.
# ABOUTME: The byte loader turns missing or unreadable files into None instead of raising.

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Storage(Protocol):
    """Protocol for the filesystem primitives the parser depends on.

    read_bytes and write_bytes raise OSError on failure.
    """

    def exists(self, path: Path) -> bool: ...

    def read_bytes(self, path: Path) -> bytes: ...

    def write_bytes(self, path: Path, data: bytes) -> None: ...


class LocalStorage:
    """Storage backed by the local filesystem."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Write through a sibling temp file so a failed write leaves no partial target."""
        target = Path(path)
        partial = target.with_name(f".{target.name}.part")
        try:
            partial.write_bytes(data)
            partial.replace(target)
        except OSError:
            partial.unlink(missing_ok=True)
            raise


def load_archive_bytes(path: Path, storage: Storage) -> bytes | None:
    """Read a whole comic archive into memory.

    Args:
        path: Path to the archive file.
        storage: Storage used for the existence check and the read.

    Returns:
        The file contents, or None if the file is missing or cannot be read.
    """
    if not storage.exists(path):
        logger.warning("Comic path does not exist: %s", path)
        return None

    try:
        return storage.read_bytes(path)
    except OSError as exc:
        logger.error("Failed to read comic at %s: %s", path, exc)
        return None
