"""Library metadata module.

Exports the ``LibraryMetadata`` record, the descriptor loader, and the
JSON/YAML serializer.
"""
from __future__ import annotations

from javadoc_zip.metadata.loader import INFO_ELEMENT, load_metadata, metadata_from_element
from javadoc_zip.metadata.model import LibraryMetadata, normalize_base_url
from javadoc_zip.metadata.serializer import MetadataSerializer

__all__ = [
    "INFO_ELEMENT",
    "LibraryMetadata",
    "MetadataSerializer",
    "load_metadata",
    "metadata_from_element",
    "normalize_base_url",
]
