"""Tests for token classification, utility recognition and extraction."""

from pathlib import Path

import pytest

from semantic_css.model.token import Category, UtilityToken
from semantic_css.parser.classes import (
    ClassExtractor,
    classify,
    group_by_element,
    is_utility_class,
)
from semantic_css.parser.markup import MarkupParser

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassify:
    @pytest.mark.parametrize(
        "token,category",
        [
            ("flex", Category.DISPLAY),
            ("grid-cols-2", Category.DISPLAY),
            ("hidden", Category.DISPLAY),
            ("items-center", Category.ALIGNMENT),
            ("w-12", Category.SIZING),
            ("min-h-screen", Category.SIZING),
            ("gap-2", Category.SPACING),
            ("text-lg", Category.TYPOGRAPHY),
            ("bg-blue-600", Category.VISUAL),
            ("rounded-lg", Category.EFFECTS),
            ("hover:bg-blue-700", Category.RESPONSIVE),
            ("cursor-pointer", Category.UTILITY),
        ],
    )
    def test_categories(self, token, category):
        assert classify(token) == category

    def test_first_rule_wins(self):
        # "flex" prefix beats the variant check
        assert classify("flex:hidden") == Category.DISPLAY


class TestIsUtilityClass:
    @pytest.mark.parametrize(
        "token",
        [
            "flex", "p-4", "text-center", "container", "fixed", "md:grid-cols-3", "@container-md",
            "shadow", "z-10", "top-0", "-left-4", "max-w-md", "min-h-screen", "content-center",
            "place-items-center", "cursor-pointer", "transition-colors", "size-8",
        ],
    )
    def test_recognized(self, token):
        assert is_utility_class(token)

    @pytest.mark.parametrize(
        "token",
        [
            "", "card-shell", "sr-only", "otp-hidden", "content-wrapper", "top-bar",
            "left-panel", "max-results", "z-stack", "cursor-trail", "shadowbox", "place-holder",
        ],
    )
    def test_rejected(self, token):
        assert not is_utility_class(token)


# ---------------------------------------------------------------------------
# Extraction and grouping
# ---------------------------------------------------------------------------


class TestClassExtractor:
    @pytest.fixture
    def tokens(self) -> list[UtilityToken]:
        doc = MarkupParser().parse_file(FIXTURES / "qwik-otp.tsx")
        return ClassExtractor().extract(doc)

    def test_sorted_by_name(self, tokens):
        names = [t.name for t in tokens]
        assert names == sorted(names)

    def test_deduplicated(self, tokens):
        names = [t.name for t in tokens]
        assert names.count("flex") == 1
        assert len(tokens) == 12

    def test_first_element_is_context(self, tokens):
        flex = next(t for t in tokens if t.name == "flex")
        assert flex.context == "Otp.Root"

    def test_category_assigned(self, tokens):
        gap = next(t for t in tokens if t.name == "gap-2")
        assert gap.category == Category.SPACING

    def test_empty_document(self):
        doc = MarkupParser().parse_content("<div></div>")
        assert ClassExtractor().extract(doc) == []


class TestGroupByElement:
    def test_groups_in_first_seen_order(self):
        tokens = [
            UtilityToken("a", context="div"),
            UtilityToken("b", context="span"),
            UtilityToken("c", context="div"),
        ]
        groups = group_by_element(tokens)
        assert list(groups) == ["div", "span"]
        assert [t.name for t in groups["div"]] == ["a", "c"]

    def test_case_sensitive(self):
        groups = group_by_element([UtilityToken("a", context="Div"), UtilityToken("b", context="div")])
        assert len(groups) == 2
