"""Tests for component context, UI pattern detection and semantic naming."""

import pytest

from semantic_css.model.token import UtilityToken
from semantic_css.naming import (
    UI_PATTERNS,
    SemanticNamer,
    StyleSignals,
    detect_component_context,
    detect_ui_pattern,
    extract_component_from_filename,
)


def _tokens(*names: str) -> list[UtilityToken]:
    return [UtilityToken(n) for n in names]


@pytest.fixture
def namer() -> SemanticNamer:
    return SemanticNamer()


# ---------------------------------------------------------------------------
# Component context
# ---------------------------------------------------------------------------


class TestFilenameExtraction:
    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("qwik-otp.tsx", "otp"),
            ("product-card.tsx", "card"),
            ("otp_input.tsx", "otp"),
            ("", ""),
            ("src/components/react-date-picker.jsx", "date-picker"),
            ("Modal.vue", "modal"),
            ("MyDropdownThing.tsx", "dropdown"),
            ("widget.html", "widget"),
            ("C:\\ui\\navbar.html", "navbar"),
        ],
    )
    def test_examples(self, filename, expected):
        assert extract_component_from_filename(filename) == expected


class TestDetectComponentContext:
    def test_explicit_wins(self):
        assert detect_component_context(["modal-x"], "otp") == "otp"

    def test_keyword_in_tokens(self):
        assert detect_component_context(["flex", "accordion-item"]) == "accordion"

    def test_nav_maps_to_navigation(self):
        assert detect_component_context(["navlink"]) == "navigation"

    def test_no_context(self):
        assert detect_component_context(["flex", "p-4"]) == ""


# ---------------------------------------------------------------------------
# UI patterns
# ---------------------------------------------------------------------------


class TestUIPatterns:
    def test_precedence_order(self):
        assert [p.name for p in UI_PATTERNS] == [
            "modal-overlay",
            "dropdown-menu",
            "card-container",
            "toast-notification",
            "hero-section",
        ]

    def test_modal_overlay(self):
        assert detect_ui_pattern("fixed inset-0 bg-black").name == "modal-overlay"

    def test_dropdown_menu(self):
        assert detect_ui_pattern("absolute top-full shadow-lg bg-white").name == "dropdown-menu"

    def test_toast(self):
        assert detect_ui_pattern("fixed bottom-4 bg-green-500").name == "toast-notification"

    def test_card_before_hero(self):
        classes = "rounded shadow bg-white p-4 min-h-screen flex items-center justify-center"
        assert detect_ui_pattern(classes).name == "card-container"

    def test_no_pattern(self):
        assert detect_ui_pattern("flex p-4") is None


class TestStyleSignals:
    def test_signals(self):
        signals = StyleSignals.from_classes("border-2 w-12 hover:bg-blue-700 text-lg")
        assert signals.is_input
        assert signals.is_interactive
        assert signals.is_typography
        assert not signals.is_container


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class TestSemanticNamer:
    def test_dotted_syntax_ignores_context(self, namer):
        assert namer.generate_semantic_name("Accordion.Trigger", _tokens("p-4"), "modal") == (
            "accordion-trigger"
        )

    def test_dotted_syntax_keeps_two_segments(self, namer):
        assert namer.generate_semantic_name("Foo.Bar.Baz", _tokens("flex")) == "foo-bar"

    def test_modal_overlay_with_context(self, namer):
        name = namer.generate_semantic_name("div", _tokens("fixed", "inset-0", "bg-black"), "modal")
        assert name == "modal-overlay"

    def test_pattern_generic_name(self, namer):
        name = namer.generate_semantic_name("div", _tokens("min-h-screen", "flex", "items-center", "justify-center"))
        assert name == "hero-section"

    def test_otp_root(self, namer):
        name = namer.generate_semantic_name("div", _tokens("flex", "min-h-screen", "justify-center"), "otp")
        assert name == "otp-root"

    def test_button_names(self, namer):
        assert namer.generate_semantic_name("button", _tokens("hover:bg-blue-700")) == "button-primary"
        assert namer.generate_semantic_name("button", _tokens("p-2"), "otp") == "otp-trigger"

    def test_heading_without_context(self, namer):
        assert namer.generate_semantic_name("h2", _tokens("text-2xl")) == "h2-text"

    def test_div_fallbacks(self, namer):
        assert namer.generate_semantic_name("div", _tokens("grid", "grid-cols-2")) == "grid-container"
        assert namer.generate_semantic_name("div", _tokens("flex", "text-lg")) == "content-container"

    def test_counter_disambiguates(self, namer):
        first = namer.generate_semantic_name("div", _tokens("opacity-50"))
        second = namer.generate_semantic_name("div", _tokens("opacity-50"))
        assert (first, second) == ("container-1", "container-2")

    def test_counter_counts_every_call(self, namer):
        namer.generate_semantic_name("Otp.Root", _tokens("flex"))
        assert namer.counter == 1

    def test_reset_is_reproducible(self, namer):
        tokens = _tokens("opacity-50")
        first = namer.generate_semantic_name("div", tokens)
        namer.reset()
        assert namer.generate_semantic_name("div", tokens) == first

    def test_unknown_element_with_context(self, namer):
        assert namer.generate_semantic_name("span", _tokens("opacity-50"), "card") == "card-span"
