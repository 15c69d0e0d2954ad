"""javadoc-zip: read Javadoc ZIP archives and resolve class documentation URLs.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import javadoc_zip

    library = javadoc_zip.open_library("jsoup-1.8.1.zip")

    # Descriptor metadata from info.xml
    library.name, library.version, library.base_url

    # URL of a class page
    library.get_url("org.jsoup.Jsoup")
    library.get_url("org.jsoup.Jsoup", frames=True)

    # Enumerate classes (close the iterator when done)
    with library.list_classes() as classes:
        names = [str(c) for c in classes]

    # Read a class document
    doc = library.read_class("org.jsoup.Jsoup")

    javadoc_zip.__version__
    '0.1.0'
"""
from __future__ import annotations

from os import PathLike
from typing import TYPE_CHECKING, Any

__version__: str = "0.1.0"

from javadoc_zip.classes.info import ClassDocument, ClassInfoParser
from javadoc_zip.classes.names import ClassName
from javadoc_zip.errors import ArchiveError, JavadocZipError, MalformedXmlError
from javadoc_zip.library import JavadocZipFile
from javadoc_zip.metadata.model import LibraryMetadata

if TYPE_CHECKING:
    from javadoc_zip.classes.names import ClassRef


def open_library(
    path: str | PathLike[str],
    class_parser: ClassInfoParser[Any] = ClassDocument.parse,
) -> JavadocZipFile:
    """Open a Javadoc ZIP file and load its metadata.

    Parameters
    ----------
    path:
        Path to the ZIP file.
    class_parser:
        Parser applied to class documents by ``read_class``.

    Returns
    -------
    JavadocZipFile
        The library handle.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    javadoc_zip.ArchiveError
        If ``path`` is not a ZIP archive.
    javadoc_zip.MalformedXmlError
        If the archive's ``info.xml`` cannot be parsed.
    """
    return JavadocZipFile(path, class_parser=class_parser)


def resolve_url(
    metadata: LibraryMetadata, class_name: "ClassRef", frames: bool = False
) -> str | None:
    """Resolve a class URL from metadata alone, without opening an archive.

    Parameters
    ----------
    metadata:
        Library metadata.
    class_name:
        The class, as a ``ClassName`` or dotted string.
    frames:
        ``True`` for the frame-style page.

    Returns
    -------
    str | None
        The URL, or ``None`` if it cannot be determined.
    """
    from javadoc_zip.urls.resolver import resolve_url as _resolve_url

    return _resolve_url(metadata, class_name, frames=frames)


__all__ = [
    "__version__",
    "ArchiveError",
    "ClassDocument",
    "ClassInfoParser",
    "ClassName",
    "JavadocZipError",
    "JavadocZipFile",
    "LibraryMetadata",
    "MalformedXmlError",
    "open_library",
    "resolve_url",
]
