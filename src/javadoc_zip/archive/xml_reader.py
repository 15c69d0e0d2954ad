"""Parse XML entries stored inside an archive."""
from __future__ import annotations

from xml.etree import ElementTree

from javadoc_zip.archive.accessor import ZipArchive
from javadoc_zip.errors import MalformedXmlError


def read_xml(archive: ZipArchive, path: str) -> ElementTree.ElementTree:
    """Read and parse the XML entry at ``path``.

    Parameters
    ----------
    archive:
        An open archive.
    path:
        Absolute internal path of the entry.

    Returns
    -------
    xml.etree.ElementTree.ElementTree
        The parsed document.

    Raises
    ------
    FileNotFoundError
        If the entry does not exist.
    MalformedXmlError
        If the entry is not well-formed XML.
    ArchiveError
        If the entry's data is corrupt.
    """
    with archive.open_read(path) as stream, archive.entry_errors(path):
        try:
            return ElementTree.parse(stream)
        except ElementTree.ParseError as exc:
            raise MalformedXmlError(path, str(exc)) from exc
