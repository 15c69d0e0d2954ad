"""Resolve the documentation URL of a class.

Resolution order:

1. If the library defines a URL pattern, render it (the frame flag is
   ignored).
2. Otherwise, if there is no base URL, no URL can be built.
3. Otherwise use the standard Javadoc layout:
   ``<baseUrl>java/lang/String.html`` or, with frames,
   ``<baseUrl>index.html?java/lang/String.html``.
"""
from __future__ import annotations

from typing import Final

from javadoc_zip.classes.names import ClassRef, as_class_name
from javadoc_zip.metadata.model import LibraryMetadata
from javadoc_zip.urls.pattern import UrlTemplate

FRAMES_PAGE: Final[str] = "index.html?"
PAGE_SUFFIX: Final[str] = ".html"


def resolve_url(
    metadata: LibraryMetadata,
    class_name: ClassRef,
    frames: bool = False,
    template: UrlTemplate | None = None,
) -> str | None:
    """Return the URL of a class's Javadoc page.

    Parameters
    ----------
    metadata:
        Metadata of the library the class belongs to.
    class_name:
        The class, as a :class:`ClassName` or dotted string.
    frames:
        ``True`` for the frame-style page.  Ignored when a URL pattern
        is defined.
    template:
        A pre-compiled form of ``metadata.url_pattern``.  Compiled on
        the fly when omitted.

    Returns
    -------
    str | None
        The URL, or ``None`` if the library defines neither a pattern
        nor a base URL.
    """
    name = as_class_name(class_name)

    if metadata.url_pattern is not None:
        if template is None:
            template = UrlTemplate.compile(metadata.url_pattern)
        return template.render(metadata.base_url, name.fully_qualified)

    if metadata.base_url is None:
        return None

    if frames:
        return metadata.base_url + FRAMES_PAGE + name.slashed + PAGE_SUFFIX
    return metadata.base_url + name.slashed + PAGE_SUFFIX
