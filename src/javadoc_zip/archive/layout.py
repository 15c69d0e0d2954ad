"""Names of the entries a Javadoc ZIP archive is expected to contain.

Everything lives at the archive root: an optional ``info.xml``
descriptor plus one ``<fully.qualified.Name>.xml`` entry per class.
"""
from __future__ import annotations

from typing import Final

CLASS_FILE_EXTENSION: Final[str] = ".xml"
INFO_FILE_NAME: Final[str] = "info" + CLASS_FILE_EXTENSION
