"""Library metadata read from an archive's ``info.xml`` descriptor."""
from __future__ import annotations

from dataclasses import dataclass, fields


def normalize_base_url(base_url: str) -> str:
    """Return ``base_url`` with exactly one guaranteed trailing ``/``.

    Already-terminated URLs are returned unchanged, so the operation is
    idempotent.
    """
    return base_url if base_url.endswith("/") else base_url + "/"


@dataclass(frozen=True)
class LibraryMetadata:
    """Descriptive information about the library documented by an archive.

    Every field is optional.  ``None`` means the descriptor did not
    specify a value; it is never replaced by an empty string.

    Parameters
    ----------
    base_url:
        Root URL of the library's online Javadoc (always ends with ``/``).
    name:
        Project name, e.g. ``"jsoup"``.
    version:
        Version of the library the documentation was generated from.
    project_url:
        URL of the project's home page.
    url_pattern:
        Template used to build class URLs, e.g.
        ``"{baseUrl}{full /}.html"``.
    """

    base_url: str | None = None
    name: str | None = None
    version: str | None = None
    project_url: str | None = None
    url_pattern: str | None = None

    def __post_init__(self) -> None:
        if self.base_url is not None:
            object.__setattr__(self, "base_url", normalize_base_url(self.base_url))

    @classmethod
    def empty(cls) -> "LibraryMetadata":
        """Return a record with every field absent."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))
