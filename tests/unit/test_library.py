"""Unit tests for javadoc_zip.library: the JavadocZipFile handle."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from xml.etree import ElementTree

import pytest

from javadoc_zip import ClassDocument, ClassName, JavadocZipFile, LibraryMetadata, open_library
from javadoc_zip.errors import ArchiveError, MalformedXmlError


# ---------------------------------------------------------------------------
# Construction and metadata
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_metadata_accessors(self, jsoup_zip: Path) -> None:
        library = JavadocZipFile(jsoup_zip)
        assert library.name == "jsoup"
        assert library.version == "1.8.1"
        assert library.base_url == "http://jsoup.org/apidocs/"
        assert library.project_url == "http://jsoup.org"
        assert library.url_pattern is None
        assert library.metadata == LibraryMetadata(
            base_url="http://jsoup.org/apidocs/",
            name="jsoup",
            version="1.8.1",
            project_url="http://jsoup.org",
        )

    def test_path_is_canonical(self, jsoup_zip: Path) -> None:
        library = JavadocZipFile(str(jsoup_zip.parent / "." / jsoup_zip.name))
        assert library.path == jsoup_zip.resolve()
        assert library.path.is_absolute()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            JavadocZipFile(tmp_path / "missing.zip")

    def test_not_a_zip(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.zip"
        path.write_text("plain text", encoding="utf-8")
        with pytest.raises(ArchiveError):
            JavadocZipFile(path)

    def test_malformed_descriptor(self, make_zip) -> None:
        with pytest.raises(MalformedXmlError):
            JavadocZipFile(make_zip({"info.xml": "<info"}))

    def test_without_descriptor(self, make_zip) -> None:
        library = JavadocZipFile(make_zip({"a.B.xml": "<class />"}))
        assert library.metadata.is_empty
        assert library.get_url("a.B") is None

    def test_corrupt_descriptor(self, make_zip, damage_entry) -> None:
        path = make_zip({"info.xml": '<info name="Scrambled" />'})
        damage_entry(path, "Scrambled")
        with pytest.raises(ArchiveError) as excinfo:
            JavadocZipFile(path)
        assert isinstance(excinfo.value, OSError)

    def test_unknown_placeholders_are_logged(self, make_zip, caplog: pytest.LogCaptureFixture) -> None:
        path = make_zip({"info.xml": '<info javadocUrlPattern="{baseUrl}{fqn}.html" />'})
        with caplog.at_level(logging.DEBUG, logger="javadoc_zip.library"):
            JavadocZipFile(path)
        assert "unknown placeholders" in caplog.text
        assert "fqn" in caplog.text

    def test_open_library(self, jsoup_zip: Path) -> None:
        assert open_library(jsoup_zip) == JavadocZipFile(jsoup_zip)

    def test_repr(self, jsoup_zip: Path) -> None:
        text = repr(JavadocZipFile(jsoup_zip))
        assert "JavadocZipFile" in text
        assert "jsoup" in text


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


class TestIdentity:
    def test_independent_handles_are_equal(self, jsoup_zip: Path) -> None:
        first = JavadocZipFile(jsoup_zip)
        second = JavadocZipFile(jsoup_zip)
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_is_same_library(self, jsoup_zip: Path, tmp_path: Path) -> None:
        link = tmp_path / "link.zip"
        try:
            link.symlink_to(jsoup_zip)
        except OSError:
            pytest.skip("cannot create symlinks here")
        assert JavadocZipFile(link) == JavadocZipFile(jsoup_zip)

    def test_different_files_differ(self, make_zip) -> None:
        first = JavadocZipFile(make_zip({"info.xml": '<info name="x" />'}, name="one.zip"))
        second = JavadocZipFile(make_zip({"info.xml": '<info name="x" />'}, name="two.zip"))
        assert first != second

    def test_not_equal_to_other_types(self, jsoup_zip: Path) -> None:
        assert JavadocZipFile(jsoup_zip) != str(jsoup_zip)


# ---------------------------------------------------------------------------
# Classes
# ---------------------------------------------------------------------------


class TestClasses:
    def test_list_classes(self, jsoup_zip: Path) -> None:
        with JavadocZipFile(jsoup_zip).list_classes() as classes:
            names = {str(c) for c in classes}
        assert names == {"org.jsoup.Jsoup", "org.jsoup.nodes.Document"}

    def test_each_listing_is_independent(self, jsoup_zip: Path) -> None:
        library = JavadocZipFile(jsoup_zip)
        first = library.list_classes()
        second = library.list_classes()
        next(first)
        first.close()
        assert len(list(second)) == 2
        second.close()

    def test_read_class_default_parser(self, jsoup_zip: Path) -> None:
        library = JavadocZipFile(jsoup_zip)
        info = library.read_class("org.jsoup.Jsoup")
        assert isinstance(info, ClassDocument)
        assert info.library is library
        assert info.root.get("name") == "Jsoup"
        assert info.to_xml().startswith("<class")

    def test_read_class_nested_layout(self, make_zip) -> None:
        library = JavadocZipFile(make_zip({"a/B.xml": '<class name="B" />'}))
        info = library.read_class("a.B")
        assert info is not None
        assert info.root.get("name") == "B"

    def test_read_missing_class(self, jsoup_zip: Path) -> None:
        assert JavadocZipFile(jsoup_zip).read_class("org.jsoup.Missing") is None

    def test_custom_parser_receives_document_and_library(self, jsoup_zip: Path) -> None:
        calls: list[tuple[ElementTree.ElementTree, JavadocZipFile]] = []

        def parser(document: ElementTree.ElementTree, library: JavadocZipFile) -> str:
            calls.append((document, library))
            return document.getroot().get("package", "")

        library = JavadocZipFile(jsoup_zip, class_parser=parser)
        assert library.read_class("org.jsoup.nodes.Document") == "org.jsoup.nodes"
        assert calls[0][1] is library

    def test_custom_parser_not_called_for_missing_class(self, jsoup_zip: Path) -> None:
        def parser(document: ElementTree.ElementTree, library: JavadocZipFile) -> str:
            raise AssertionError("parser should not run")

        assert JavadocZipFile(jsoup_zip, class_parser=parser).read_class("no.Such") is None

    def test_has_class(self, jsoup_zip: Path) -> None:
        library = JavadocZipFile(jsoup_zip)
        assert library.has_class("org.jsoup.Jsoup")
        assert not library.has_class("org.jsoup.Missing")

    def test_read_class_xml(self, jsoup_zip: Path) -> None:
        data = JavadocZipFile(jsoup_zip).read_class_xml("org.jsoup.Jsoup")
        assert data is not None
        assert b'name="Jsoup"' in data

    def test_names_from_listing_are_accepted(self, jsoup_zip: Path) -> None:
        library = JavadocZipFile(jsoup_zip)
        with library.list_classes() as classes:
            name = next(classes)
        assert isinstance(name, ClassName)
        assert library.has_class(name)
        info = library.read_class(name)
        assert info is not None
        assert info.root.get("name") == name.simple
        assert library.read_class_xml(name) == library.read_class_xml(str(name))

    def test_corrupt_class_entry(self, make_zip, damage_entry) -> None:
        path = make_zip({"a.B.xml": '<class name="Mangled" />'})
        damage_entry(path, "Mangled")
        library = JavadocZipFile(path)
        assert library.has_class("a.B")
        with pytest.raises(ArchiveError):
            library.read_class("a.B")
        with pytest.raises(ArchiveError):
            library.read_class_xml("a.B")


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


class TestUrls:
    def test_default_url(self, jsoup_zip: Path) -> None:
        library = JavadocZipFile(jsoup_zip)
        assert library.get_url("org.jsoup.Jsoup") == "http://jsoup.org/apidocs/org/jsoup/Jsoup.html"

    def test_frames_url(self, jsoup_zip: Path) -> None:
        library = JavadocZipFile(jsoup_zip)
        url = library.get_url(ClassName("org.jsoup.Jsoup"), frames=True)
        assert url == "http://jsoup.org/apidocs/index.html?org/jsoup/Jsoup.html"

    def test_pattern_url(self, make_zip) -> None:
        path = make_zip(
            {"info.xml": '<info baseUrl="http://x" javadocUrlPattern="{baseUrl}javadoc/{full _}.html" />'}
        )
        library = JavadocZipFile(path)
        assert library.get_url("a.b.C") == "http://x/javadoc/a_b_C.html"
        assert library.get_url("a.b.C", frames=True) == "http://x/javadoc/a_b_C.html"


# ---------------------------------------------------------------------------
# Archive lifecycle
# ---------------------------------------------------------------------------


class TestArchiveLifecycle:
    """Each operation opens the archive once and closes it before returning."""

    def test_construction(self, jsoup_zip: Path, archive_tracker) -> None:
        JavadocZipFile(jsoup_zip)
        assert len(archive_tracker.opened) == 1
        assert archive_tracker.still_open == []

    def test_construction_with_malformed_descriptor(self, make_zip, archive_tracker) -> None:
        path = make_zip({"info.xml": "<info"})
        with pytest.raises(MalformedXmlError):
            JavadocZipFile(path)
        assert len(archive_tracker.opened) == 1
        assert archive_tracker.still_open == []

    @pytest.mark.parametrize("class_name", ["org.jsoup.Jsoup", "org.jsoup.Missing"])
    def test_read_class(self, jsoup_zip: Path, archive_tracker, class_name: str) -> None:
        library = JavadocZipFile(jsoup_zip)
        library.read_class(class_name)
        assert len(archive_tracker.opened) == 2
        assert archive_tracker.still_open == []

    def test_read_class_malformed(self, make_zip, archive_tracker) -> None:
        library = JavadocZipFile(make_zip({"a.B.xml": "<class"}))
        with pytest.raises(MalformedXmlError):
            library.read_class("a.B")
        assert len(archive_tracker.opened) == 2
        assert archive_tracker.still_open == []

    def test_read_class_xml(self, jsoup_zip: Path, archive_tracker) -> None:
        library = JavadocZipFile(jsoup_zip)
        library.read_class_xml("org.jsoup.Jsoup")
        library.read_class_xml("org.jsoup.Missing")
        assert len(archive_tracker.opened) == 3
        assert archive_tracker.still_open == []

    def test_has_class(self, jsoup_zip: Path, archive_tracker) -> None:
        library = JavadocZipFile(jsoup_zip)
        library.has_class("org.jsoup.Jsoup")
        library.has_class("org.jsoup.Missing")
        assert len(archive_tracker.opened) == 3
        assert archive_tracker.still_open == []

    def test_get_url_does_not_open_archive(self, jsoup_zip: Path, archive_tracker) -> None:
        library = JavadocZipFile(jsoup_zip)
        library.get_url("org.jsoup.Jsoup")
        assert len(archive_tracker.opened) == 1
