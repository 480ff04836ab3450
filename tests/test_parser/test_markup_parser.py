"""Tests for the markup scanner."""

from pathlib import Path

import pytest

from semantic_css.errors import SourceReadError
from semantic_css.parser.markup import MarkupParser

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def parser() -> MarkupParser:
    return MarkupParser()


# ---------------------------------------------------------------------------
# Attribute scanning
# ---------------------------------------------------------------------------


class TestParseContent:
    def test_class_attribute(self, parser):
        doc = parser.parse_content('<div class="flex p-4">x</div>')
        [ref] = doc.class_refs
        assert ref.classes == ("flex", "p-4")
        assert ref.element == "div"

    def test_classname_attribute_single_quotes(self, parser):
        doc = parser.parse_content("<span className='text-lg font-bold'></span>")
        [ref] = doc.class_refs
        assert ref.classes == ("text-lg", "font-bold")
        assert ref.element == "span"

    def test_offsets_cover_attribute_value(self, parser):
        content = '<p class="mt-2 text-sm">hi</p>'
        [ref] = parser.parse_content(content).class_refs
        assert content[ref.start:ref.end] == "mt-2 text-sm"

    def test_non_utility_classes_are_dropped(self, parser):
        [ref] = parser.parse_content('<div class="card-shell flex">').class_refs
        assert ref.classes == ("flex",)

    def test_attribute_without_utilities_is_skipped(self, parser):
        doc = parser.parse_content('<div class="card-shell sr-only">')
        assert doc.class_refs == ()

    def test_dotted_component_element(self, parser):
        [ref] = parser.parse_content('<Accordion.Trigger class="px-4">').class_refs
        assert ref.element == "Accordion.Trigger"

    def test_multiple_attributes_in_order(self, parser):
        doc = parser.parse_content('<div class="flex"><a class="p-2"></a></div>')
        assert [r.element for r in doc.class_refs] == ["div", "a"]

    def test_content_without_tag(self, parser):
        [ref] = parser.parse_content('class="flex"').class_refs
        assert ref.element == "element"

    def test_path_is_recorded(self, parser):
        assert parser.parse_content("", path="a.html").path == "a.html"


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestParseFile:
    def test_fixture(self, parser):
        doc = parser.parse_file(FIXTURES / "qwik-otp.tsx")
        assert doc.path.endswith("qwik-otp.tsx")
        assert [r.element for r in doc.class_refs] == ["Otp.Root", "div", "Otp.Item"]

    def test_missing_file_raises(self, parser, tmp_path):
        missing = tmp_path / "nope.html"
        with pytest.raises(SourceReadError) as excinfo:
            parser.parse_file(missing)
        assert excinfo.value.path == str(missing)

    def test_undecodable_file_raises(self, parser, tmp_path):
        bad = tmp_path / "bad.html"
        bad.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(SourceReadError):
            parser.parse_file(bad)
