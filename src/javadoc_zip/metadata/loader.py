"""Load :class:`LibraryMetadata` from the archive descriptor.

The descriptor is an optional ``info.xml`` entry at the archive root::

    <info name="jsoup" version="1.8.1"
          baseUrl="http://jsoup.org/apidocs/"
          projectUrl="http://jsoup.org" />

A missing descriptor and a descriptor whose root element is not
``<info>`` both yield an all-absent record.
"""
from __future__ import annotations

import logging
from typing import Final
from xml.etree import ElementTree

from javadoc_zip.archive.accessor import ZipArchive
from javadoc_zip.archive.layout import INFO_FILE_NAME
from javadoc_zip.archive.xml_reader import read_xml
from javadoc_zip.metadata.model import LibraryMetadata

logger = logging.getLogger(__name__)

INFO_ELEMENT: Final[str] = "info"

# XML attribute -> LibraryMetadata field
_ATTRIBUTES: Final[dict[str, str]] = {
    "baseUrl": "base_url",
    "name": "name",
    "version": "version",
    "projectUrl": "project_url",
    "javadocUrlPattern": "url_pattern",
}


def metadata_from_element(element: ElementTree.Element) -> LibraryMetadata:
    """Build metadata from an ``<info>`` element, mapping empty attributes to ``None``."""
    values: dict[str, str | None] = {}
    for attribute, field_name in _ATTRIBUTES.items():
        value = element.get(attribute, "")
        values[field_name] = value or None
    return LibraryMetadata(**values)


def load_metadata(archive: ZipArchive) -> LibraryMetadata:
    """Read the descriptor of an open archive.

    Raises
    ------
    MalformedXmlError
        If ``info.xml`` exists but is not well-formed XML.
    """
    info_path = "/" + INFO_FILE_NAME
    if not archive.is_file(info_path):
        logger.debug("No %s in %s", INFO_FILE_NAME, archive.path)
        return LibraryMetadata.empty()

    root = read_xml(archive, info_path).getroot()
    if root is None or root.tag != INFO_ELEMENT:
        logger.debug(
            "Descriptor in %s has root <%s>, expected <%s>",
            archive.path,
            None if root is None else root.tag,
            INFO_ELEMENT,
        )
        return LibraryMetadata.empty()

    return metadata_from_element(root)
