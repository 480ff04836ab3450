"""Tests for the converter: grouping, naming and rule assembly."""

from pathlib import Path

import pytest

from semantic_css.converter import Converter
from semantic_css.model.rule import UNKNOWN_CLASSES, CSSProperty
from semantic_css.model.token import UtilityToken
from semantic_css.parser.markup import MarkupParser

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _on(element: str, *names: str) -> list[UtilityToken]:
    return [UtilityToken(n, context=element) for n in names]


class _FixedResolver:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def convert_unknown_class(self, class_name: str) -> list[CSSProperty]:
        self.calls.append(class_name)
        return [CSSProperty("z-index", class_name.rsplit("-", 1)[-1])]


@pytest.fixture
def converter() -> Converter:
    return Converter()


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class TestConvertDocument:
    @pytest.fixture
    def result(self, converter):
        doc = MarkupParser().parse_file(FIXTURES / "qwik-otp.tsx")
        return converter.convert_document(doc)

    def test_component_from_filename(self, result):
        assert result.component == "otp"

    def test_rule_selectors(self, result):
        assert [r.selector for r in result.rules] == [".otp-item", ".otp-root", ".otp-container"]

    def test_mappings_pair_classes_with_names(self, result):
        root = next(m for m in result.mappings if m.semantic_name == "otp-root")
        assert root.original_classes == "flex items-center justify-center min-h-screen"

    def test_root_properties(self, result):
        root = result.rules[1]
        assert list(root.properties) == [
            CSSProperty("display", "flex"),
            CSSProperty("align-items", "center"),
            CSSProperty("justify-content", "center"),
            CSSProperty("min-height", "100vh"),
        ]

    def test_nothing_unresolved(self, result):
        assert result.unresolved == ()

    def test_empty_document(self, converter):
        result = converter.convert_document(MarkupParser().parse_content("<div></div>"))
        assert result.is_empty
        assert result.mappings == ()


# ---------------------------------------------------------------------------
# Rule assembly
# ---------------------------------------------------------------------------


class TestAssembly:
    def test_last_write_wins_in_first_position(self, converter):
        props = converter.convert_and_deduplicate_properties(
            _on("div", "p-4", "flex", "p-2")
        )
        assert props == [CSSProperty("padding", "0.5rem"), CSSProperty("display", "flex")]

    def test_hover_entries_merge_by_declared_property(self, converter):
        props = converter.convert_and_deduplicate_properties(
            _on("a", "hover:bg-blue-600", "hover:text-gray-900", "hover:bg-red-500")
        )
        assert [p.value for p in props] == ["background-color: #ef4444", "color: #111827"]

    def test_unknown_tokens_aggregated(self, converter):
        result = converter.convert(_on("div", "flex", "z-10", "ring-offset-2"))
        [rule] = result.rules
        assert rule.properties[-1] == CSSProperty(UNKNOWN_CLASSES, "z-10 ring-offset-2")
        assert result.unresolved == ("z-10", "ring-offset-2")

    def test_unknown_annotation_is_not_a_declaration(self, converter):
        [rule] = converter.convert(_on("div", "flex", "z-10")).rules
        assert rule.declarations == [CSSProperty("display", "flex")]

    def test_identical_annotations_are_kept(self):
        class _Placeholder:
            def convert_unknown_class(self, class_name):
                return [CSSProperty("/* Add manual conversion */", "")]

        converter = Converter(unknown_resolver=_Placeholder())
        props = converter.convert_and_deduplicate_properties(_on("div", "z-10", "z-20"))
        assert props == [CSSProperty("/* Add manual conversion */", "")] * 2

    def test_resolver_consulted_for_unknown_tokens(self):
        resolver = _FixedResolver()
        converter = Converter(unknown_resolver=resolver)
        [rule] = converter.convert(_on("div", "flex", "z-10")).rules
        assert resolver.calls == ["z-10"]
        assert CSSProperty("z-index", "10") in rule.properties
        assert all(p.name != UNKNOWN_CLASSES for p in rule.properties)


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class TestNaming:
    def test_duplicate_names_are_suffixed(self, converter):
        tokens = _on("Otp.Root", "flex") + _on("otp.root", "grid")
        result = converter.convert(tokens)
        assert [r.name for r in result.rules] == ["otp-root", "otp-root-2"]

    def test_fresh_converters_are_reproducible(self):
        tokens = _on("div", "opacity-50") + _on("span", "flex")
        first = Converter().convert(tokens)
        second = Converter().convert(tokens)
        assert first == second

    def test_reset_clears_names(self, converter):
        tokens = _on("Otp.Root", "flex")
        converter.convert(tokens)
        converter.reset()
        assert converter.convert(tokens).rules[0].name == "otp-root"

    def test_context_from_filename(self, converter):
        result = converter.convert_with_context(_on("input", "border-2", "w-12"), "otp_input.tsx")
        assert result.rules[0].name == "otp-input"
        assert converter.component_context == "otp"
