"""The hand-off point between the archive reader and class-info parsers.

This package does not interpret the per-class XML schema.  When a class
is read, its parsed document and the owning library are passed to a
*class-info parser*: any callable matching :class:`ClassInfoParser`.
The default, :meth:`ClassDocument.parse`, simply keeps both.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TypeVar
from xml.etree import ElementTree

if TYPE_CHECKING:
    from javadoc_zip.library import JavadocZipFile

T_co = TypeVar("T_co", covariant=True)


class ClassInfoParser(Protocol[T_co]):
    """Turns a class's XML document into a richer object."""

    def __call__(self, document: ElementTree.ElementTree, library: "JavadocZipFile") -> T_co: ...


@dataclass(frozen=True)
class ClassDocument:
    """An unparsed class document together with the library it came from.

    Parameters
    ----------
    document:
        The parsed XML tree of the class entry.
    library:
        The archive the entry was read from.
    """

    document: ElementTree.ElementTree = field(compare=False)
    library: "JavadocZipFile"

    @classmethod
    def parse(cls, document: ElementTree.ElementTree, library: "JavadocZipFile") -> "ClassDocument":
        return cls(document=document, library=library)

    @property
    def root(self) -> ElementTree.Element:
        return self.document.getroot()

    def to_xml(self) -> str:
        """Serialize the document back to an XML string."""
        return ElementTree.tostring(self.root, encoding="unicode")
