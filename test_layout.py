"""Tests for layout tree construction and the block layout algorithm."""

import pytest

from render_engine.core.errors import LayoutError, StructuralError
from render_engine.css import parse_css
from render_engine.dom import elem, text
from render_engine.layout import BoxType, Dimensions, EdgeSizes, LayoutBox, Rect, build_layout_tree, layout_tree
from render_engine.style import style_tree


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

VIEWPORT_WIDTH = 800.0


def _viewport() -> Dimensions:
    return Dimensions.viewport(VIEWPORT_WIDTH, 600.0)


def _layout(dom, css: str) -> LayoutBox:
    return layout_tree(style_tree(dom, parse_css(css)), _viewport())


def _horizontal_sum(box: LayoutBox) -> float:
    d = box.dimensions
    return (d.margin.left + d.border.left + d.padding.left + d.content.width
            + d.padding.right + d.border.right + d.margin.right)


# ---------------------------------------------------------------------------
# Box model geometry
# ---------------------------------------------------------------------------

class TestDimensions:
    def test_expanded_by(self):
        rect = Rect(10, 20, 100, 50).expanded_by(EdgeSizes(1, 2, 3, 4))
        assert rect == Rect(9, 17, 103, 57)

    def test_padding_box_uses_padding(self):
        d = Dimensions(Rect(10, 10, 100, 50), padding=EdgeSizes(5, 5, 5, 5), border=EdgeSizes(1, 1, 1, 1))
        assert d.padding_box() == Rect(5, 5, 110, 60)
        assert d.border_box() == Rect(4, 4, 112, 62)

    def test_edges_are_not_shared(self):
        first = Dimensions()
        second = Dimensions()
        first.margin.left = 10
        assert second.margin.left == 0

    def test_box_identities_hold_after_layout(self):
        dom = elem('div', {}, [elem('p')])
        root = _layout(dom, "div, p { display: block; margin: 7px; border-width: 3px; padding: 2px; }")
        for box in (root, root.children[0]):
            d = box.dimensions
            assert d.margin_box() == d.border_box().expanded_by(d.margin)
            assert d.border_box() == d.padding_box().expanded_by(d.border)


# ---------------------------------------------------------------------------
# Width
# ---------------------------------------------------------------------------

class TestBlockWidth:
    def test_auto_margins_center_fixed_width(self):
        root = _layout(elem('div'), "div { width: 100px; margin-left: auto; margin-right: auto; }")
        d = root.dimensions
        assert d.content.width == 100
        assert d.margin.left == 350
        assert d.margin.right == 350
        assert d.content.x == 350

    @pytest.mark.parametrize("css, expected", [
        # width set, both margins set: margin-right absorbs the underflow
        ("width: 100px; margin-left: 10px; margin-right: 10px;", (10, 100, 690)),
        # width set, margin-right auto
        ("width: 100px; margin-left: 10px; margin-right: auto;", (10, 100, 690)),
        # width set, margin-left auto
        ("width: 100px; margin-left: auto; margin-right: 10px;", (690, 100, 10)),
        # width auto fills the container
        ("margin-left: 10px; margin-right: auto;", (10, 790, 0)),
        # width auto with too-wide margins: margin-right takes the deficit
        ("margin-left: 500px; margin-right: 400px;", (500, 0, 300)),
        # too wide with auto margins: they become 0, then margin-right goes negative
        ("width: 1000px; margin: auto;", (0, 1000, -200)),
        # width set, both margins auto
        ("width: 200px; margin: auto; padding: 10px; border-width: 5px;", (285, 200, 285)),
    ])
    def test_width_cases(self, css, expected):
        root = _layout(elem('div'), f"div {{ display: block; {css} }}")
        d = root.dimensions
        assert (d.margin.left, d.content.width, d.margin.right) == expected
        assert _horizontal_sum(root) == VIEWPORT_WIDTH

    def test_padding_and_border_reduce_auto_width(self):
        root = _layout(elem('div'), "div { padding: 10px; border-width: 2px; border-left-width: 4px; }")
        d = root.dimensions
        assert (d.padding.left, d.padding.right) == (10, 10)
        assert (d.border.left, d.border.right) == (4, 2)
        assert d.content.width == 800 - 20 - 6

    def test_child_width_comes_from_parent_content_width(self):
        dom = elem('div', {}, [elem('p')])
        root = _layout(dom, "div { display: block; width: 300px; padding: 25px; } p { display: block; }")
        child = root.children[0]
        assert child.dimensions.content.width == 300
        assert _horizontal_sum(child) == 300


# ---------------------------------------------------------------------------
# Position and height
# ---------------------------------------------------------------------------

class TestBlockPositionAndHeight:
    def test_content_position_includes_edges(self):
        root = _layout(elem('div'), "div { margin: 10px; border-width: 3px; padding: 5px; }")
        d = root.dimensions
        assert d.content.x == 18
        assert d.content.y == 18
        assert d.padding.bottom == 5
        assert d.border.bottom == 3
        assert d.margin.bottom == 10

    def test_auto_vertical_margins_are_zero(self):
        root = _layout(elem('div'), "div { margin: auto; width: 100px; }")
        assert root.dimensions.margin.top == 0
        assert root.dimensions.margin.bottom == 0

    def test_auto_height_is_sum_of_children_margin_boxes(self):
        dom = elem('div', {}, [elem('p', {'class': 'a'}), elem('p', {'class': 'b'})])
        css = ("div, p { display: block; } p { margin: 10px; } "
               ".a { height: 50px; } .b { height: 30px; padding: 5px; }")
        root = _layout(dom, css)
        heights = [child.dimensions.margin_box().height for child in root.children]
        assert heights == [70, 60]
        assert root.dimensions.content.height == 130

    def test_declared_height_overrides_children(self):
        dom = elem('div', {}, [elem('p')])
        root = _layout(dom, "div { display: block; height: 40px; } p { display: block; height: 100px; }")
        assert root.dimensions.content.height == 40
        assert root.children[0].dimensions.content.height == 100

    def test_children_stack_without_overlap(self):
        dom = elem('div', {}, [elem('p'), elem('p'), elem('p')])
        root = _layout(dom, "div, p { display: block; } p { height: 20px; margin: 10px; border-width: 1px; }")
        children = root.children
        for earlier, later in zip(children, children[1:]):
            bottom = earlier.dimensions.margin_box().y + earlier.dimensions.margin_box().height
            assert later.dimensions.content.y >= bottom
        assert [child.dimensions.content.y for child in children] == [11, 53, 95]

    def test_empty_block_has_zero_height(self):
        root = _layout(elem('div'), "div { display: block; }")
        assert root.dimensions.content.height == 0


# ---------------------------------------------------------------------------
# Layout tree construction
# ---------------------------------------------------------------------------

class TestBuildLayoutTree:
    def test_root_box_type_follows_display(self):
        assert build_layout_tree(style_tree(elem('div'), parse_css("div { display: block; }"))).box_type \
            == BoxType.BLOCK_NODE
        assert build_layout_tree(style_tree(elem('div'), parse_css(""))).box_type == BoxType.INLINE_NODE

    def test_display_none_root_is_structural_error(self):
        styled = style_tree(elem('div'), parse_css("div { display: none; }"))
        with pytest.raises(LayoutError):
            build_layout_tree(styled)
        with pytest.raises(StructuralError):
            layout_tree(styled, _viewport())

    def test_consecutive_inlines_share_one_anonymous_block(self):
        dom = elem('div', {}, [elem('span'), text('a'), elem('p'), elem('span')])
        root = build_layout_tree(style_tree(dom, parse_css("div, p { display: block; }")))

        assert [child.box_type for child in root.children] == [
            BoxType.ANONYMOUS_BLOCK, BoxType.BLOCK_NODE, BoxType.ANONYMOUS_BLOCK,
        ]
        assert len(root.children[0].children) == 2
        assert len(root.children[2].children) == 1
        assert root.children[1].style_node.node is dom.children[2]

    def test_inline_parent_takes_inline_children_directly(self):
        dom = elem('span', {}, [elem('em'), elem('b')])
        root = build_layout_tree(style_tree(dom, parse_css("")))
        assert [child.box_type for child in root.children] == [BoxType.INLINE_NODE, BoxType.INLINE_NODE]

    def test_display_none_subtree_is_skipped(self):
        dom = elem('div', {}, [elem('p', {'id': 'hidden'}, [elem('p')]), elem('p')])
        root = build_layout_tree(style_tree(dom, parse_css("div, p { display: block; } #hidden { display: none; }")))
        assert len(root.children) == 1
        assert root.children[0].style_node.node is dom.children[1]

    def test_anonymous_block_has_no_style_node(self):
        box = LayoutBox(BoxType.ANONYMOUS_BLOCK)
        with pytest.raises(LayoutError):
            box.get_style_node()


# ---------------------------------------------------------------------------
# Anonymous blocks and the layout entry point
# ---------------------------------------------------------------------------

class TestAnonymousLayout:
    def test_anonymous_block_fills_parent_and_stacks(self):
        dom = elem('div', {}, [elem('span'), elem('span'), elem('p')])
        css = "div { display: block; padding: 10px; } span { height: 20px; } p { display: block; height: 5px; }"
        root = _layout(dom, css)
        anonymous, block = root.children

        assert anonymous.box_type == BoxType.ANONYMOUS_BLOCK
        assert anonymous.dimensions.content.width == 780
        assert anonymous.dimensions.content.x == 10
        assert anonymous.dimensions.content.y == 10
        assert anonymous.dimensions.content.height == 40
        assert [span.dimensions.content.y for span in anonymous.children] == [10, 30]

        assert block.dimensions.content.y == 50
        assert root.dimensions.content.height == 45


class TestLayoutTree:
    def test_containing_block_is_not_modified(self):
        viewport = _viewport()
        layout_tree(style_tree(elem('div'), parse_css("div { display: block; height: 10px; }")), viewport)
        assert viewport.content == Rect(0, 0, 800, 600)

    def test_root_starts_at_viewport_origin(self):
        root = _layout(elem('div'), "div { display: block; height: 10px; }")
        assert root.dimensions.content == Rect(0, 0, 800, 10)

    def test_layout_is_repeatable(self):
        dom = elem('div', {}, [elem('p'), elem('p')])
        styled = style_tree(dom, parse_css("div, p { display: block; } p { height: 10px; }"))
        root = build_layout_tree(styled)
        root.layout(_viewport())
        root.layout(_viewport())
        assert root.dimensions.content.height == 20

    def test_debug_structure_lists_every_box(self):
        dom = elem('div', {}, [elem('span'), elem('p')])
        root = _layout(dom, "div, p { display: block; }")
        lines = root.debug_structure().splitlines()
        assert lines[0].startswith("block <div>")
        assert lines[1].strip().startswith("anonymous")
        assert lines[2].strip().startswith("inline <span>")
        assert lines[3].strip().startswith("block <p>")
