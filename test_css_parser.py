"""Tests for the CSS parser and the selector/specificity model."""

import pytest

from render_engine.core.errors import CSSSyntaxError, StructuralError
from render_engine.css import (
    AUTO, Color, CSSParser, Declaration, Keyword, Length, SimpleSelector, Specificity, parse_css,
)


# ---------------------------------------------------------------------------
# Specificity
# ---------------------------------------------------------------------------

class TestSpecificity:
    def test_counts_id_classes_and_tag(self):
        selector = SimpleSelector('div', 'main', ['a', 'b'])
        assert selector.specificity() == Specificity(1, 2, 1)

    def test_universal_selector_is_zero(self):
        selector = SimpleSelector()
        assert selector.is_universal()
        assert selector.specificity() == Specificity(0, 0, 0)

    def test_id_outranks_any_number_of_classes_and_types(self):
        assert Specificity(1, 0, 0) > Specificity(0, 10, 10)

    def test_class_outranks_types(self):
        assert Specificity(0, 1, 0) > Specificity(0, 0, 5)

    def test_equal_triples_compare_equal(self):
        assert not Specificity(0, 1, 1) < Specificity(0, 1, 1)
        assert not Specificity(0, 1, 1) > Specificity(0, 1, 1)


# ---------------------------------------------------------------------------
# Rules and selectors
# ---------------------------------------------------------------------------

class TestRules:
    def test_single_rule(self):
        stylesheet = parse_css("div { width: 100px; margin-left: auto; }")
        assert len(stylesheet.rules) == 1
        rule = stylesheet.rules[0]
        assert rule.selectors == [SimpleSelector('div')]
        assert rule.declarations == [
            Declaration('width', Length(100)),
            Declaration('margin-left', AUTO),
        ]

    def test_rules_keep_source_order(self):
        stylesheet = parse_css("p { display: block; } div { display: none; }")
        assert [str(rule.selectors[0]) for rule in stylesheet.rules] == ['p', 'div']

    def test_compound_selector(self):
        rule = parse_css("div#main.note.wide { padding: 0; }").rules[0]
        selector = rule.selectors[0]
        assert selector.tag_name == 'div'
        assert selector.id == 'main'
        assert selector.classes == ['note', 'wide']

    def test_universal_selector(self):
        rule = parse_css("* { display: block; }").rules[0]
        assert rule.selectors[0].is_universal()

    def test_selectors_sorted_most_specific_first(self):
        rule = parse_css("div, #answer, .note, div.note { display: block; }").rules[0]
        assert [str(selector) for selector in rule.selectors] == ['#answer', 'div.note', '.note', 'div']

    def test_equal_specificity_keeps_source_order(self):
        rule = parse_css("h1, h2, h3 { margin: auto; }").rules[0]
        assert [str(selector) for selector in rule.selectors] == ['h1', 'h2', 'h3']

    def test_tag_names_are_lower_cased(self):
        rule = parse_css("DIV { display: block; }").rules[0]
        assert rule.selectors[0].tag_name == 'div'

    def test_comments_are_ignored(self):
        stylesheet = parse_css("/* header */ div /* x */ { width: 1px; /* y */ }")
        assert stylesheet.rules[0].declarations == [Declaration('width', Length(1))]


class TestStructuralErrors:
    def test_missing_block_raises(self):
        with pytest.raises(CSSSyntaxError):
            parse_css("div, p")

    def test_syntax_error_is_structural(self):
        with pytest.raises(StructuralError):
            parse_css("div")

    def test_descendant_combinator_raises(self):
        with pytest.raises(CSSSyntaxError):
            parse_css("div p { display: block; }")

    def test_pseudo_class_raises(self):
        with pytest.raises(CSSSyntaxError):
            parse_css("a:hover { display: block; }")

    def test_empty_selector_in_list_raises(self):
        with pytest.raises(CSSSyntaxError):
            parse_css("h1, , h2 { display: block; }")

    def test_error_carries_location(self):
        with pytest.raises(CSSSyntaxError) as excinfo:
            parse_css("p { display: block; }\ndiv > p { display: none; }")
        assert excinfo.value.line == 2


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def _value(css_value):
    rule = parse_css(f"div {{ prop: {css_value}; }}").rules[0]
    assert len(rule.declarations) == 1
    return rule.declarations[0].value


class TestValues:
    def test_keyword(self):
        assert _value("block") == Keyword('block')

    def test_auto_is_its_own_variant(self):
        assert _value("auto") is AUTO
        assert _value("AUTO") is AUTO

    def test_pixel_length(self):
        assert _value("12.5px") == Length(12.5)

    def test_unitless_zero(self):
        assert _value("0") == Length(0)

    def test_six_digit_hex_color(self):
        assert _value("#ff8000") == Color(255, 128, 0, 255)

    def test_three_digit_hex_color(self):
        assert _value("#abc") == Color(0xaa, 0xbb, 0xcc, 255)

    def test_eight_digit_hex_color_keeps_alpha(self):
        assert _value("#00000080") == Color(0, 0, 0, 0x80)

    def test_named_color(self):
        assert _value("red") == Color(255, 0, 0, 255)

    def test_rgba_function(self):
        assert _value("rgba(0, 0, 255, 0.5)") == Color(0, 0, 255, 128)

    def test_length_to_px(self):
        assert Length(7).to_px() == 7.0
        assert AUTO.to_px() == 0.0
        assert Keyword('block').to_px() == 0.0
        assert Color(1, 2, 3).to_px() == 0.0


class TestRecoverableValues:
    def test_percentage_is_skipped_with_warning(self):
        parser = CSSParser()
        stylesheet = parser.parse("div { width: 50%; height: 10px; }")
        assert stylesheet.rules[0].declarations == [Declaration('height', Length(10))]
        assert len(parser.warnings) == 1

    def test_multi_token_value_is_skipped(self):
        stylesheet = parse_css("div { margin: 0 auto; display: block; }")
        assert stylesheet.rules[0].declarations == [Declaration('display', Keyword('block'))]

    def test_unitless_number_is_skipped(self):
        stylesheet = parse_css("div { width: 10; }")
        assert stylesheet.rules[0].declarations == []

    def test_at_rule_is_skipped(self):
        parser = CSSParser()
        stylesheet = parser.parse("@media screen { div { display: none; } } p { display: block; }")
        assert len(stylesheet.rules) == 1
        assert str(stylesheet.rules[0].selectors[0]) == 'p'
        assert parser.warnings
