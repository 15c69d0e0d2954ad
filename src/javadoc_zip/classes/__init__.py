"""Class index module.

Exports ``ClassName``, the lazy ``ClassIterator``, entry lookup helpers,
and the class-info parser seam.
"""
from __future__ import annotations

from javadoc_zip.classes.index import (
    ClassIterator,
    find_class_entry,
    is_class_entry,
    read_class_bytes,
    read_class_document,
)
from javadoc_zip.classes.info import ClassDocument, ClassInfoParser
from javadoc_zip.classes.names import ClassName, ClassRef, as_class_name

__all__ = [
    "ClassDocument",
    "ClassInfoParser",
    "ClassIterator",
    "ClassName",
    "ClassRef",
    "as_class_name",
    "find_class_entry",
    "is_class_entry",
    "read_class_bytes",
    "read_class_document",
]
