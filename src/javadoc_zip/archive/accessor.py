"""Read-only view onto the internal file tree of a ZIP archive.

Internal paths are absolute and ``/``-separated, with ``/`` naming the
archive root::

    with open_archive(path) as archive:
        if archive.exists("/info.xml"):
            data = archive.read_bytes("/info.xml")
        with archive.list_dir("/", lambda name: name.endswith(".xml")) as names:
            for name in names:
                ...

An archive handle is meant to be short-lived: open it for a single
operation and close it before returning.
"""
from __future__ import annotations

import logging
import zipfile
import zlib
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Final

from javadoc_zip.errors import ArchiveError

logger = logging.getLogger(__name__)

ROOT: Final[str] = "/"

# Raised by zipfile while inflating or checking a damaged entry.
ENTRY_ERRORS: Final = (zipfile.BadZipFile, zlib.error, EOFError)


def _to_member(path: str) -> str:
    """Convert an absolute internal path to a ZIP member name."""
    return path.lstrip("/")


class DirectoryListing:
    """Closeable iterator over the child names of one archive directory.

    The names are captured when the listing is created, so the listing
    is finite and unaffected by later changes to the archive object.
    """

    def __init__(self, names: list[str]) -> None:
        self._names: Iterator[str] = iter(names)
        self._closed = False

    def __iter__(self) -> "DirectoryListing":
        return self

    def __next__(self) -> str:
        if self._closed:
            raise StopIteration
        return next(self._names)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True
        self._names = iter(())

    def __enter__(self) -> "DirectoryListing":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class ZipArchive:
    """An open ZIP archive exposed as a tiny virtual filesystem.

    Parameters
    ----------
    path:
        Filesystem path of the ZIP file.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ArchiveError
        If ``path`` is not a readable ZIP archive.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        try:
            self._zip = zipfile.ZipFile(path)
        except zipfile.BadZipFile as exc:
            raise ArchiveError(path, str(exc)) from exc
        self._members: frozenset[str] = frozenset(self._zip.namelist())
        logger.debug("Opened archive %s (%d entries)", path, len(self._members))

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def exists(self, path: str) -> bool:
        """Return True if ``path`` names a file or directory in the archive.

        Directories exist either as explicit ``name/`` entries or
        implicitly because some file lives beneath them.
        """
        member = _to_member(path)
        if not member:
            return True
        if member in self._members:
            return True
        prefix = member.rstrip("/") + "/"
        return any(name.startswith(prefix) for name in self._members)

    def is_file(self, path: str) -> bool:
        member = _to_member(path)
        return bool(member) and not member.endswith("/") and member in self._members

    def open_read(self, path: str) -> IO[bytes]:
        """Open the file at ``path`` for binary reading.

        Raises
        ------
        FileNotFoundError
            If no file exists at ``path``.
        ArchiveError
            If the entry's header is damaged.
        """
        if not self.is_file(path):
            raise FileNotFoundError(f"No entry {path!r} in archive {str(self._path)!r}")
        with self.entry_errors(path):
            return self._zip.open(_to_member(path))

    def read_bytes(self, path: str) -> bytes:
        """Return the whole content of the file at ``path``.

        Raises
        ------
        FileNotFoundError
            If no file exists at ``path``.
        ArchiveError
            If the entry's data fails to decompress or its CRC check.
        """
        with self.open_read(path) as stream, self.entry_errors(path):
            return stream.read()

    @contextmanager
    def entry_errors(self, path: str) -> Iterator[None]:
        """Re-raise damage found while reading the entry ``path`` as :class:`ArchiveError`."""
        try:
            yield
        except ENTRY_ERRORS as exc:
            raise ArchiveError(self._path, f"{path}: {exc}") from exc

    def list_dir(
        self, path: str = ROOT, predicate: Callable[[str], bool] | None = None
    ) -> DirectoryListing:
        """List the names of the direct children of the directory ``path``.

        Parameters
        ----------
        path:
            Absolute internal directory path.
        predicate:
            Optional filter applied to each child name.

        Returns
        -------
        DirectoryListing
            Child names in archive order, each reported once.

        Raises
        ------
        FileNotFoundError
            If nothing exists at ``path``.
        """
        if not self.exists(path):
            raise FileNotFoundError(f"No directory {path!r} in archive {str(self._path)!r}")
        prefix = _to_member(path).rstrip("/")
        if prefix:
            prefix += "/"

        seen: set[str] = set()
        children: list[str] = []
        for member in self._zip.namelist():
            if not member.startswith(prefix) or member == prefix:
                continue
            child = member[len(prefix):].split("/", 1)[0]
            if not child or child in seen:
                continue
            seen.add(child)
            if predicate is None or predicate(child):
                children.append(child)
        return DirectoryListing(children)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._zip.close()
        logger.debug("Closed archive %s", self._path)

    def __enter__(self) -> "ZipArchive":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@contextmanager
def open_archive(path: Path | str) -> Iterator[ZipArchive]:
    """Open ``path`` as a :class:`ZipArchive` for the duration of a block."""
    archive = ZipArchive(Path(path))
    try:
        yield archive
    finally:
        archive.close()
