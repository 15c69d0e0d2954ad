"""Shared test fixtures for javadoc-zip.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Archives are built on the fly in
``tmp_path`` so each test sees exactly the entries it declares.
"""
from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

ZipFactory = Callable[..., Path]

JSOUP_INFO = (
    '<info name="jsoup" version="1.8.1" '
    'baseUrl="http://jsoup.org/apidocs" projectUrl="http://jsoup.org" />'
)

CLASS_XML = '<class name="{simple}" package="{package}"><description>Docs</description></class>'


def class_xml(fully_qualified: str) -> str:
    package, _, simple = fully_qualified.rpartition(".")
    return CLASS_XML.format(simple=simple, package=package)


@pytest.fixture()
def make_zip(tmp_path: Path) -> ZipFactory:
    """Return a factory that writes a ZIP archive from ``{entry: text}``."""

    def _make(entries: dict[str, str | bytes], name: str = "library.zip") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as zf:
            for entry, content in entries.items():
                zf.writestr(entry, content)
        return path

    return _make


@pytest.fixture()
def jsoup_zip(make_zip: ZipFactory) -> Path:
    """An archive with a descriptor and two root-level classes."""
    return make_zip(
        {
            "info.xml": JSOUP_INFO,
            "org.jsoup.Jsoup.xml": class_xml("org.jsoup.Jsoup"),
            "org.jsoup.nodes.Document.xml": class_xml("org.jsoup.nodes.Document"),
        },
        name="jsoup.zip",
    )


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def damage_entry() -> Callable[[Path, str], None]:
    """Return a helper that corrupts one entry of a written archive.

    ``make_zip`` stores entries uncompressed, so ``marker`` appears
    verbatim in the file.  Flipping its case leaves the central directory
    readable but makes the entry fail its CRC-32 check when read.
    """

    def _damage(path: Path, marker: str) -> None:
        data = path.read_bytes()
        raw = marker.encode("ascii")
        assert data.count(raw) == 1, f"{marker!r} must occur exactly once in {path}"
        path.write_bytes(data.replace(raw, raw.swapcase()))

    return _damage


class ArchiveTracker:
    """Records every ``ZipArchive`` opened and closed during a test."""

    def __init__(self) -> None:
        self.opened: list[object] = []
        self.closed: list[object] = []

    @property
    def still_open(self) -> list[object]:
        return [a for a in self.opened if a not in self.closed]


@pytest.fixture()
def archive_tracker(monkeypatch: pytest.MonkeyPatch) -> ArchiveTracker:
    """Patch ``ZipArchive`` so each open and close is recorded."""
    from javadoc_zip.archive.accessor import ZipArchive

    tracker = ArchiveTracker()
    original_init = ZipArchive.__init__
    original_close = ZipArchive.close

    def tracking_init(self: ZipArchive, path: Path) -> None:
        original_init(self, path)
        tracker.opened.append(self)

    def tracking_close(self: ZipArchive) -> None:
        tracker.closed.append(self)
        original_close(self)

    monkeypatch.setattr(ZipArchive, "__init__", tracking_init)
    monkeypatch.setattr(ZipArchive, "close", tracking_close)
    return tracker
