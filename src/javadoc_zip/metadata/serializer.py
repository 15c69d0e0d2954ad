"""Export :class:`LibraryMetadata` as JSON or YAML.

Keys use the descriptor's attribute names so the output can be read
alongside ``info.xml``.  Absent fields are emitted as ``null``.

Usage
-----
::

    from javadoc_zip.metadata import MetadataSerializer

    serializer = MetadataSerializer()
    print(serializer.to_yaml(library.metadata))
"""
from __future__ import annotations

import json

import yaml

from javadoc_zip.metadata.model import LibraryMetadata


class MetadataSerializer:
    """Renders ``LibraryMetadata`` as a plain dict, JSON, or YAML."""

    def to_dict(self, metadata: LibraryMetadata) -> dict[str, str | None]:
        return {
            "name": metadata.name,
            "version": metadata.version,
            "baseUrl": metadata.base_url,
            "projectUrl": metadata.project_url,
            "javadocUrlPattern": metadata.url_pattern,
        }

    def to_json(self, metadata: LibraryMetadata, indent: int = 2) -> str:
        return json.dumps(self.to_dict(metadata), indent=indent, ensure_ascii=False)

    def to_yaml(self, metadata: LibraryMetadata) -> str:
        return yaml.dump(
            self.to_dict(metadata), default_flow_style=False, allow_unicode=True, sort_keys=False
        )
