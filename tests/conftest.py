# ABOUTME: Shared pytest fixtures for comicshelf tests.
# ABOUTME: Builds real CBZ archives (valid, sidecar-less, image-less, corrupt) in tmp_path.

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from tests.fixtures.comic_samples import COMIC_INFO_XML, PAGE_BYTES


@pytest.fixture
def make_cbz(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a zip archive with the given entries (in that order)."""

    def _make(filename: str, entries: dict[str, bytes | str]) -> Path:
        filepath = tmp_path / filename
        with zipfile.ZipFile(filepath, "w") as zf:
            for name, content in entries.items():
                zf.writestr(name, content)
        return filepath

    return _make


@pytest.fixture
def sample_cbz(make_cbz: Callable[..., Path]) -> Path:
    """A CBZ whose pages are stored out of natural order, plus a ComicInfo.xml."""
    return make_cbz(
        "saga_012.cbz",
        {
            "page2.jpg": PAGE_BYTES["page2.jpg"],
            "page10.jpg": PAGE_BYTES["page10.jpg"],
            "ComicInfo.xml": COMIC_INFO_XML,
            "page1.jpg": PAGE_BYTES["page1.jpg"],
        },
    )


@pytest.fixture
def no_sidecar_cbz(make_cbz: Callable[..., Path]) -> Path:
    """A CBZ with pages but no ComicInfo.xml."""
    return make_cbz(
        "no_sidecar.cbz",
        {
            "Page 003.png": b"png-3",
            "Page 001.png": b"png-1",
            "comicinfo.xml": COMIC_INFO_XML,
        },
    )


@pytest.fixture
def no_images_cbz(make_cbz: Callable[..., Path]) -> Path:
    """A CBZ with a sidecar but nothing that looks like a page image."""
    return make_cbz(
        "text_only.cbz",
        {
            "ComicInfo.xml": COMIC_INFO_XML,
            "readme.txt": "scanned by nobody",
            "page1.tiff": b"tiff",
        },
    )


@pytest.fixture
def corrupt_cbz(tmp_path: Path) -> Path:
    """A file with a comic extension that is not an archive."""
    filepath = tmp_path / "corrupt.cbz"
    filepath.write_text("this is not a valid comic archive")
    return filepath


@pytest.fixture
def comic_tree(tmp_path: Path, make_cbz: Callable[..., Path]) -> Path:
    """A library directory with comics in nested folders.

    Layout:
        Comics/
            Saga/
                Saga 2.cbz
                Saga 10.cbz
                notes.txt
            Monstress/
                Monstress 1.cbr
    """
    root = tmp_path / "Comics"
    saga = root / "Saga"
    monstress = root / "Monstress"
    saga.mkdir(parents=True)
    monstress.mkdir(parents=True)

    pages = {"page1.jpg": PAGE_BYTES["page1.jpg"]}
    make_cbz("Comics/Saga/Saga 10.cbz", pages)
    make_cbz("Comics/Saga/Saga 2.cbz", pages)
    (saga / "notes.txt").write_text("reading order")
    (monstress / "Monstress 1.cbr").write_bytes(b"fake rar")

    return root
