"""Error types for javadoc-zip.

Every recoverable fault is an ``OSError`` subclass so callers can treat
archive and XML problems the same way they treat an unreadable file.
"Not found" conditions are never errors: they are reported as ``None``.
"""
from __future__ import annotations

from pathlib import Path


class JavadocZipError(OSError):
    """Base class for I/O faults raised while reading a Javadoc ZIP file."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ArchiveError(JavadocZipError):
    """Raised when a file is not a readable ZIP archive or an entry is damaged.

    Parameters
    ----------
    path:
        Filesystem path of the archive.
    reason:
        Short description of the underlying failure.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Cannot read archive {str(path)!r}: {reason}")
        self.path = Path(path)
        self.reason = reason


class MalformedXmlError(JavadocZipError):
    """Raised when an XML entry inside the archive fails to parse.

    Parameters
    ----------
    entry:
        Absolute internal path of the entry (e.g. ``"/info.xml"``).
    reason:
        The parser's description of the problem.
    """

    def __init__(self, entry: str, reason: str) -> None:
        super().__init__(f"Malformed XML in {entry!r}: {reason}")
        self.entry = entry
        self.reason = reason
