"""Archive access module.

Exports the ``ZipArchive`` view, the ``open_archive`` context manager,
the XML entry reader, and the entry-naming constants of the layout.
"""
from __future__ import annotations

from javadoc_zip.archive.accessor import ROOT, DirectoryListing, ZipArchive, open_archive
from javadoc_zip.archive.layout import CLASS_FILE_EXTENSION, INFO_FILE_NAME
from javadoc_zip.archive.xml_reader import read_xml

__all__ = [
    "CLASS_FILE_EXTENSION",
    "INFO_FILE_NAME",
    "ROOT",
    "DirectoryListing",
    "ZipArchive",
    "open_archive",
    "read_xml",
]
