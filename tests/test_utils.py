"""Tests for svg2laminar.utils module."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lxml import etree

from svg2laminar.utils import (
    SVG_NAMESPACES,
    find_first,
    get_local_name,
    get_namespace_uri,
    is_element,
    iter_elements,
    module_name_for,
    parse_svg_string,
    qualified_name,
    quote_string,
    strip_svg_extension,
)


class TestGetLocalName:
    """Tests for get_local_name function."""

    def test_with_namespace(self):
        assert get_local_name("{http://www.w3.org/2000/svg}rect") == "rect"

    def test_with_inkscape_namespace(self):
        tag = "{http://www.inkscape.org/namespaces/inkscape}label"
        assert get_local_name(tag) == "label"

    def test_without_namespace(self):
        assert get_local_name("rect") == "rect"

    def test_empty_namespace(self):
        assert get_local_name("{}rect") == "rect"

    def test_complex_local_name(self):
        assert get_local_name("{http://example.com}my-element") == "my-element"


class TestGetNamespaceUri:
    """Tests for get_namespace_uri function."""

    def test_with_namespace(self):
        assert get_namespace_uri("{http://www.w3.org/1999/xlink}href") == SVG_NAMESPACES["xlink"]

    def test_without_namespace(self):
        assert get_namespace_uri("href") is None


class TestQualifiedName:
    """Tests for qualified_name function."""

    def test_plain_attribute(self):
        root = parse_svg_string('<svg xmlns="http://www.w3.org/2000/svg" width="1"/>')
        assert qualified_name(root, "width") == "width"

    def test_declared_prefix(self):
        root = parse_svg_string(
            '<svg xmlns="http://www.w3.org/2000/svg" '
            'xmlns:xl="http://www.w3.org/1999/xlink"><use xl:href="#a"/></svg>'
        )
        use = root[0]
        name = next(iter(use.attrib))
        assert qualified_name(use, name) == "xl:href"

    def test_xml_namespace(self):
        root = parse_svg_string('<svg xml:space="preserve"/>')
        name = next(iter(root.attrib))
        assert qualified_name(root, name) == "xml:space"

    def test_unknown_namespace_falls_back_to_local_name(self):
        elem = etree.Element("svg")
        assert qualified_name(elem, "{http://example.com/ns}thing") == "thing"


class TestParsing:
    """Tests for parse_svg_string."""

    def test_keeps_comments_and_processing_instructions(self):
        root = parse_svg_string("<svg><!-- note --><?render fast?><g/></svg>")
        kinds = [child.tag for child in root]
        assert kinds[0] is etree.Comment
        assert kinds[1] is etree.ProcessingInstruction
        assert kinds[2] == "g"

    def test_parse_bytes_with_declaration(self):
        root = parse_svg_string(
            b'<?xml version="1.0" encoding="UTF-8"?>\n'
            b'<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0"/></svg>'
        )
        assert get_local_name(root.tag) == "svg"
        assert len(root) == 1

    def test_parse_invalid_xml(self):
        with pytest.raises(etree.XMLSyntaxError):
            parse_svg_string("<svg><g></svg>")


class TestElementLookup:
    """Tests for is_element, iter_elements and find_first."""

    def test_is_element(self):
        root = parse_svg_string("<svg><!-- c --><g/></svg>")
        assert is_element(root[0]) is False
        assert is_element(root[1]) is True

    def test_iter_elements_in_document_order(self):
        root = parse_svg_string(
            '<svg xmlns="http://www.w3.org/2000/svg">'
            '<g><rect id="a"/></g><rect id="b"/></svg>'
        )
        assert [e.get("id") for e in iter_elements(root, "rect")] == ["a", "b"]

    def test_find_first_missing(self):
        root = parse_svg_string("<svg><g/></svg>")
        assert find_first(root, "title") is None


class TestQuoteString:
    """Tests for quote_string function."""

    def test_plain(self):
        assert quote_string("M0 0") == '"M0 0"'

    def test_escapes_quotes_and_backslashes(self):
        assert quote_string('a"b\\c') == '"a\\"b\\\\c"'

    def test_escapes_newlines(self):
        assert quote_string("a\nb") == '"a\\nb"'


class TestModuleNames:
    """Tests for module_name_for and strip_svg_extension."""

    def test_capitalizes_first_letter_only(self):
        assert module_name_for(Path("icons/arrowLeft.svg")) == "ArrowLeft"

    def test_already_capitalized(self):
        assert module_name_for(Path("Electron.svg")) == "Electron"

    def test_upper_case_extension(self):
        assert strip_svg_extension("logo.SVG") == "logo"

    def test_other_extension_kept(self):
        assert strip_svg_extension("notes.txt") == "notes.txt"
