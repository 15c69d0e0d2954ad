"""URL pattern templates.

A library may describe where its class pages live with a
``javadocUrlPattern``.  The pattern is literal text interleaved with
placeholders in braces:

``{baseUrl}``
    The library's base URL (with its trailing ``/``).
``{full}``
    The class's fully-qualified name, e.g. ``java.lang.String``.
``{full <delimiter>}``
    The fully-qualified name with every ``.`` replaced by
    ``<delimiter>``.  The delimiter is everything after the first run of
    ASCII whitespace up to the closing brace, taken verbatim.

Unknown placeholders expand to the empty string.  Expansion is a
single left-to-right pass; expanded values are never re-scanned.  There
is no escape for a literal ``}`` inside a delimiter.

Example::

    template = UrlTemplate.compile("{baseUrl}javadoc/{full _}.html")
    template.render("http://x/", "a.b.C")
    # 'http://x/javadoc/a_b_C.html'
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Union

_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"\{(.*?)(\s+(.*?))?\}", re.ASCII)

FIELD_BASE_URL: Final[str] = "baseUrl"
FIELD_FULL: Final[str] = "full"
KNOWN_FIELDS: Final[frozenset[str]] = frozenset({FIELD_BASE_URL, FIELD_FULL})


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Literal:
    """Text copied to the output unchanged."""

    text: str


@dataclass(frozen=True)
class Placeholder:
    """A ``{field}`` or ``{field delimiter}`` occurrence.

    Parameters
    ----------
    field:
        The placeholder name.
    delimiter:
        The optional argument after the field name, or ``None``.
    """

    field: str
    delimiter: str | None = None

    def expand(self, base_url: str | None, fully_qualified: str) -> str:
        if self.field == FIELD_BASE_URL:
            return base_url or ""
        if self.field == FIELD_FULL:
            if self.delimiter is None:
                return fully_qualified
            return fully_qualified.replace(".", self.delimiter)
        return ""


Segment = Union[Literal, Placeholder]


def tokenize_pattern(pattern: str) -> list[Segment]:
    """Split ``pattern`` into literal and placeholder segments.

    Empty literals are omitted, so ``"{baseUrl}{full}"`` yields two
    placeholders and nothing else.
    """
    segments: list[Segment] = []
    pos = 0
    for match in _PLACEHOLDER.finditer(pattern):
        if match.start() > pos:
            segments.append(Literal(pattern[pos:match.start()]))
        segments.append(Placeholder(field=match.group(1), delimiter=match.group(3)))
        pos = match.end()
    if pos < len(pattern):
        segments.append(Literal(pattern[pos:]))
    return segments


# ---------------------------------------------------------------------------
# Compiled template
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UrlTemplate:
    """A tokenized URL pattern, ready to render for any class."""

    pattern: str
    segments: tuple[Segment, ...]

    @classmethod
    def compile(cls, pattern: str) -> "UrlTemplate":
        return cls(pattern=pattern, segments=tuple(tokenize_pattern(pattern)))

    @property
    def fields(self) -> tuple[str, ...]:
        """Names of the placeholders in order of appearance."""
        return tuple(s.field for s in self.segments if isinstance(s, Placeholder))

    def render(self, base_url: str | None, fully_qualified: str) -> str:
        """Expand the template for one class.

        Parameters
        ----------
        base_url:
            Value for ``{baseUrl}``; ``None`` expands to an empty string.
        fully_qualified:
            Dotted class name for ``{full}``.
        """
        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, Literal):
                parts.append(segment.text)
            else:
                parts.append(segment.expand(base_url, fully_qualified))
        return "".join(parts)
