"""``JavadocZipFile``: one Javadoc ZIP archive on disk.

The archive is identified by its canonical path.  Metadata is read once
when the object is created; every other operation opens the archive,
does its work, and closes it again.

Usage
-----
::

    from javadoc_zip import JavadocZipFile

    library = JavadocZipFile("jsoup-1.8.1.zip")
    library.name                                  # 'jsoup'
    library.get_url("org.jsoup.nodes.Document")   # 'http://jsoup.org/apidocs/...'

    with library.list_classes() as classes:
        for class_name in classes:
            print(class_name)
"""
from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Any

from javadoc_zip.archive.accessor import open_archive
from javadoc_zip.classes.index import ClassIterator, find_class_entry, read_class_bytes, read_class_document
from javadoc_zip.classes.info import ClassDocument, ClassInfoParser
from javadoc_zip.classes.names import ClassRef
from javadoc_zip.metadata.loader import load_metadata
from javadoc_zip.metadata.model import LibraryMetadata
from javadoc_zip.urls.pattern import KNOWN_FIELDS, UrlTemplate
from javadoc_zip.urls.resolver import resolve_url

logger = logging.getLogger(__name__)


class JavadocZipFile:
    """A Javadoc ZIP file produced by oakbot-doclet.

    Parameters
    ----------
    path:
        Path to the ZIP file.  Symlinks are resolved immediately.
    class_parser:
        Callable that turns a class's XML document into the object
        returned by :meth:`read_class`.  Defaults to
        :meth:`ClassDocument.parse`.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ArchiveError
        If ``path`` is not a ZIP archive or its ``info.xml`` is damaged.
    MalformedXmlError
        If the archive's ``info.xml`` is not well-formed.
    """

    __slots__ = ("_path", "_metadata", "_template", "_class_parser")

    def __init__(
        self,
        path: str | PathLike[str],
        class_parser: ClassInfoParser[Any] = ClassDocument.parse,
    ) -> None:
        self._path: Path = Path(path).resolve(strict=True)
        self._class_parser = class_parser

        with open_archive(self._path) as archive:
            self._metadata: LibraryMetadata = load_metadata(archive)

        pattern = self._metadata.url_pattern
        self._template: UrlTemplate | None = UrlTemplate.compile(pattern) if pattern else None
        if self._template is not None:
            unknown = [f for f in self._template.fields if f not in KNOWN_FIELDS]
            if unknown:
                logger.debug("URL pattern %r has unknown placeholders %s", pattern, unknown)
        logger.debug("Loaded library %r from %s", self._metadata.name, self._path)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path:
        """Canonical path of the ZIP file."""
        return self._path

    @property
    def metadata(self) -> LibraryMetadata:
        return self._metadata

    @property
    def name(self) -> str | None:
        """The library's name (e.g. ``"jsoup"``), or ``None``."""
        return self._metadata.name

    @property
    def base_url(self) -> str | None:
        """Base URL of the online Javadoc, ending with ``/``, or ``None``."""
        return self._metadata.base_url

    @property
    def version(self) -> str | None:
        return self._metadata.version

    @property
    def project_url(self) -> str | None:
        return self._metadata.project_url

    @property
    def url_pattern(self) -> str | None:
        return self._metadata.url_pattern

    # ------------------------------------------------------------------
    # Classes
    # ------------------------------------------------------------------

    def list_classes(self) -> ClassIterator:
        """Return a lazy iterator over the names of every class in the archive.

        The iterator keeps the archive open; close it (or use it as a
        context manager) when done, even if it was not fully consumed.
        """
        return ClassIterator(self._path)

    def has_class(self, class_name: ClassRef) -> bool:
        with open_archive(self._path) as archive:
            return find_class_entry(archive, class_name) is not None

    def read_class(self, class_name: ClassRef) -> Any | None:
        """Read and parse a class's documentation.

        Parameters
        ----------
        class_name:
            The class, as a ``ClassName`` (e.g. from :meth:`list_classes`)
            or a dotted string such as ``"java.lang.String"``.

        Returns
        -------
        Any | None
            Whatever the class-info parser returns, or ``None`` if the
            class is not in the archive.
        """
        document = read_class_document(self._path, class_name)
        if document is None:
            return None
        return self._class_parser(document, self)

    def read_class_xml(self, class_name: ClassRef) -> bytes | None:
        """Return a class's raw XML, or ``None`` if it is not in the archive."""
        return read_class_bytes(self._path, class_name)

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------

    def get_url(self, class_name: ClassRef, frames: bool = False) -> str | None:
        """Return the URL of a class's Javadoc page.

        Parameters
        ----------
        class_name:
            The class, as a ``ClassName`` or dotted string.
        frames:
            ``True`` for the frame-style page.  Ignored if the library
            defines a URL pattern.

        Returns
        -------
        str | None
            The URL, or ``None`` if neither a pattern nor a base URL was
            defined.
        """
        return resolve_url(self._metadata, class_name, frames=frames, template=self._template)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JavadocZipFile):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"JavadocZipFile(path={str(self._path)!r}, name={self._metadata.name!r})"
