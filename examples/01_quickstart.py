#!/usr/bin/env python3
"""Example: Quickstart: javadoc-zip

Build a small Javadoc ZIP archive, open it, list its classes, and
resolve documentation URLs with and without a URL pattern.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install javadoc-zip
"""
from __future__ import annotations

import tempfile
import zipfile
from pathlib import Path

import javadoc_zip

INFO_XML = '<info name="demo" version="1.0" baseUrl="https://example.com/apidocs" />'
PATTERN_INFO_XML = (
    '<info name="demo-pattern" baseUrl="https://example.com/" '
    'javadocUrlPattern="{baseUrl}javadoc/{full _}.html" />'
)


def build_archive(path: Path, info_xml: str) -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("info.xml", info_xml)
        zf.writestr("com.example.Widget.xml", '<class name="Widget" package="com.example" />')
        zf.writestr("com.example.util.Strings.xml", '<class name="Strings" package="com.example.util" />')
    return path


def main() -> None:
    print(f"javadoc-zip version: {javadoc_zip.__version__}")

    with tempfile.TemporaryDirectory() as tmp:
        # Step 1: Open an archive and read its metadata
        library = javadoc_zip.open_library(build_archive(Path(tmp) / "demo.zip", INFO_XML))
        print(f"Library: {library.name} {library.version} ({library.base_url})")

        # Step 2: Enumerate classes
        with library.list_classes() as classes:
            for class_name in sorted(classes):
                print(f"  {class_name}")

        # Step 3: Resolve URLs using the standard Javadoc layout
        print(library.get_url("com.example.Widget"))
        print(library.get_url("com.example.Widget", frames=True))

        # Step 4: Resolve URLs using a URL pattern
        patterned = javadoc_zip.open_library(build_archive(Path(tmp) / "pattern.zip", PATTERN_INFO_XML))
        print(patterned.get_url("com.example.Widget"))

        # Step 5: Read a class document
        doc = library.read_class("com.example.util.Strings")
        print(f"Root element: <{doc.root.tag} name={doc.root.get('name')!r}>")


if __name__ == "__main__":
    main()
