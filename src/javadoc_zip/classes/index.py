"""Enumerate and locate per-class XML entries in an archive.

Each documented class is stored as its own entry at the archive root,
named after the class (``java.lang.String.xml``).  Lookups also accept
the nested layout (``java/lang/String.xml``), but enumeration only
covers the root; entries in subdirectories are not listed.
"""
from __future__ import annotations

import logging
from pathlib import Path
from xml.etree import ElementTree

from javadoc_zip.archive.accessor import ROOT, DirectoryListing, ZipArchive
from javadoc_zip.archive.layout import CLASS_FILE_EXTENSION, INFO_FILE_NAME
from javadoc_zip.archive.xml_reader import read_xml
from javadoc_zip.classes.names import ClassName, ClassRef, as_class_name

logger = logging.getLogger(__name__)


def is_class_entry(entry_name: str) -> bool:
    """Return True if a root entry name holds class documentation."""
    return entry_name.endswith(CLASS_FILE_EXTENSION) and entry_name != INFO_FILE_NAME


class ClassIterator:
    """Lazily yields the :class:`ClassName` of every class in an archive.

    The iterator owns an open archive until :meth:`close` is called or the
    ``with`` block exits.  It is single-pass; once exhausted or closed it
    only raises ``StopIteration``.

    Parameters
    ----------
    path:
        Filesystem path of the ZIP file.

    Example
    -------
    ::

        with ClassIterator(path) as classes:
            first = next(classes, None)
    """

    def __init__(self, path: Path) -> None:
        self._archive: ZipArchive | None = ZipArchive(path)
        try:
            self._listing: DirectoryListing | None = self._archive.list_dir(ROOT, is_class_entry)
        except BaseException:
            self._archive.close()
            self._archive = None
            raise

    def __iter__(self) -> "ClassIterator":
        return self

    def __next__(self) -> ClassName:
        if self._listing is None:
            raise StopIteration
        return ClassName.from_entry_name(next(self._listing))

    @property
    def closed(self) -> bool:
        return self._archive is None

    def close(self) -> None:
        """Release the listing and the archive.  Safe to call more than once."""
        listing, self._listing = self._listing, None
        archive, self._archive = self._archive, None
        if listing is not None:
            try:
                listing.close()
            except OSError:
                logger.debug("Ignoring error while closing class listing", exc_info=True)
        if archive is not None:
            archive.close()

    def __enter__(self) -> "ClassIterator":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def find_class_entry(archive: ZipArchive, class_name: ClassRef) -> str | None:
    """Return the internal path of a class's entry, or ``None``.

    ``/java.lang.String.xml`` is tried first, then
    ``/java/lang/String.xml``.
    """
    name = as_class_name(class_name)
    path = "/" + name.fully_qualified + CLASS_FILE_EXTENSION
    if archive.is_file(path):
        return path

    nested = "/" + name.slashed + CLASS_FILE_EXTENSION
    if archive.is_file(nested):
        logger.debug("Found %s under nested path %s", name, nested)
        return nested

    logger.debug("Class %s not found in %s", name, archive.path)
    return None


def read_class_document(path: Path, class_name: ClassRef) -> ElementTree.ElementTree | None:
    """Parse the entry for ``class_name``, or return ``None`` if absent.

    Raises
    ------
    MalformedXmlError
        If the entry exists but is not well-formed XML.
    ArchiveError
        If the entry's data is corrupt.
    """
    with ZipArchive(path) as archive:
        entry = find_class_entry(archive, class_name)
        if entry is None:
            return None
        return read_xml(archive, entry)


def read_class_bytes(path: Path, class_name: ClassRef) -> bytes | None:
    """Return the raw XML of the entry for ``class_name``, or ``None``."""
    with ZipArchive(path) as archive:
        entry = find_class_entry(archive, class_name)
        if entry is None:
            return None
        return archive.read_bytes(entry)
