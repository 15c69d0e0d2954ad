"""Fully-qualified class names."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from javadoc_zip.archive.layout import CLASS_FILE_EXTENSION


@dataclass(frozen=True, order=True)
class ClassName:
    """A dotted, fully-qualified class name such as ``java.lang.String``.

    Two names are equal only if their strings match exactly.
    """

    fully_qualified: str

    def __str__(self) -> str:
        return self.fully_qualified

    @classmethod
    def from_entry_name(cls, entry_name: str) -> "ClassName":
        """Build a name from an archive entry such as ``java.lang.String.xml``."""
        if entry_name.endswith(CLASS_FILE_EXTENSION):
            entry_name = entry_name[: -len(CLASS_FILE_EXTENSION)]
        return cls(entry_name)

    @property
    def simple(self) -> str:
        """The name without its package, e.g. ``String``."""
        return self.fully_qualified.rpartition(".")[2]

    @property
    def package(self) -> str | None:
        """The package portion, e.g. ``java.lang``, or ``None`` for the default package."""
        package, dot, _ = self.fully_qualified.rpartition(".")
        return package if dot else None

    @property
    def slashed(self) -> str:
        """The name with ``.`` replaced by ``/``, e.g. ``java/lang/String``."""
        return self.fully_qualified.replace(".", "/")


ClassRef = Union[ClassName, str]


def as_class_name(class_name: ClassRef) -> ClassName:
    """Accept either a :class:`ClassName` or a dotted string."""
    if isinstance(class_name, ClassName):
        return class_name
    return ClassName(class_name)
