"""
Block layout.
This module turns a style tree into a tree of LayoutBoxes and computes the
geometry of every box under the normal-flow block formatting model.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..core.errors import LayoutError
from ..css import AUTO, Auto, Length, Value
from ..style import Display, StyledNode
from .box_metrics import Dimensions

logger = logging.getLogger(__name__)

ZERO = Length(0.0)


class BoxType(Enum):
    """Kinds of layout box."""
    BLOCK_NODE = "block"
    INLINE_NODE = "inline"
    ANONYMOUS_BLOCK = "anonymous"


def _size_value(value: Optional[Value]) -> Value:
    """A ``width``/``height`` value: a Length, or AUTO for anything else."""
    if isinstance(value, Length):
        return value
    return AUTO


def _margin_value(value: Value) -> Value:
    """A horizontal margin: a Length, AUTO, or zero for any other value."""
    if isinstance(value, (Length, Auto)):
        return value
    return ZERO


class LayoutBox:
    """
    A node in the layout tree.

    Block and inline boxes carry the StyledNode they were generated from.
    Anonymous blocks wrap inline content that sits next to block siblings
    and have no styled node.
    """

    def __init__(self, box_type: BoxType, style_node: Optional[StyledNode] = None):
        """
        Initialize a layout box.

        Args:
            box_type: The kind of box
            style_node: The styled node, required unless box_type is ANONYMOUS_BLOCK
        """
        if (box_type == BoxType.ANONYMOUS_BLOCK) != (style_node is None):
            raise ValueError("Only anonymous blocks are created without a style node")
        self.box_type = box_type
        self.style_node = style_node
        self.dimensions = Dimensions()
        self.children: List['LayoutBox'] = []

    def get_style_node(self) -> StyledNode:
        """
        Return the styled node of a block or inline box.

        Raises:
            LayoutError: If this is an anonymous block
        """
        if self.style_node is None:
            raise LayoutError("Anonymous block box has no style node")
        return self.style_node

    def layout(self, containing_block: Dimensions) -> None:
        """
        Lay out this box and its descendants.

        Inline boxes are stacked like blocks, since inline flow is not
        supported.

        Args:
            containing_block: Dimensions of the parent box
        """
        if self.box_type == BoxType.ANONYMOUS_BLOCK:
            self.layout_anonymous(containing_block)
        else:
            self.layout_block(containing_block)

    def layout_block(self, containing_block: Dimensions) -> None:
        """Lay out a block-level element and its descendants."""
        # Child width can depend on parent width, so this box's width is
        # calculated before its children are laid out.
        self.calculate_block_width(containing_block)

        self.calculate_block_position(containing_block)

        self.layout_block_children()

        # Parent height can depend on child height, so it comes last.
        self.calculate_block_height()

    def layout_anonymous(self, containing_block: Dimensions) -> None:
        """
        Lay out an anonymous block.

        It takes the full content width of its containing block, has no
        edges, sits below the previous siblings and is as tall as its children.
        """
        d = self.dimensions
        d.content.width = containing_block.content.width
        d.content.x = containing_block.content.x
        d.content.y = containing_block.content.y + containing_block.content.height

        self.layout_block_children()

    def calculate_block_width(self, containing_block: Dimensions) -> None:
        """
        Calculate the width of a block-level non-replaced element in normal flow.

        Sets the horizontal margin, border and padding sizes and the content
        width so that together they add up to the containing block's width.
        See http://www.w3.org/TR/CSS2/visudet.html#blockwidth
        """
        style = self.get_style_node()

        # `width` has initial value `auto`, margin, border and padding 0.
        width = _size_value(style.value('width'))

        margin_left = _margin_value(style.lookup('margin-left', 'margin', ZERO))
        margin_right = _margin_value(style.lookup('margin-right', 'margin', ZERO))

        border_left = style.lookup('border-left-width', 'border-width', ZERO).to_px()
        border_right = style.lookup('border-right-width', 'border-width', ZERO).to_px()

        padding_left = style.lookup('padding-left', 'padding', ZERO).to_px()
        padding_right = style.lookup('padding-right', 'padding', ZERO).to_px()

        total = (margin_left.to_px() + margin_right.to_px()
                 + border_left + border_right
                 + padding_left + padding_right
                 + width.to_px())

        # If width is not auto and the total is wider than the container,
        # auto margins are treated as 0.
        if width is not AUTO and total > containing_block.content.width:
            if margin_left is AUTO:
                margin_left = ZERO
            if margin_right is AUTO:
                margin_right = ZERO

        # Each branch grows the total by exactly `underflow`, leaving only
        # absolute lengths.
        underflow = containing_block.content.width - total

        width_auto = width is AUTO
        left_auto = margin_left is AUTO
        right_auto = margin_right is AUTO

        if not width_auto and not left_auto and not right_auto:
            # Over-constrained: adjust the right margin.
            margin_right = Length(margin_right.to_px() + underflow)
        elif not width_auto and not left_auto and right_auto:
            margin_right = Length(underflow)
        elif not width_auto and left_auto and not right_auto:
            margin_left = Length(underflow)
        elif width_auto:
            # Any other auto values become 0.
            if left_auto:
                margin_left = ZERO
            if right_auto:
                margin_right = ZERO

            if underflow >= 0.0:
                width = Length(underflow)
            else:
                # Width can't be negative, the right margin absorbs the deficit.
                width = ZERO
                margin_right = Length(margin_right.to_px() + underflow)
        else:
            # Both margins auto: center the box.
            margin_left = Length(underflow / 2.0)
            margin_right = Length(underflow / 2.0)

        d = self.dimensions
        d.content.width = width.to_px()

        d.padding.left = padding_left
        d.padding.right = padding_right

        d.border.left = border_left
        d.border.right = border_right

        d.margin.left = margin_left.to_px()
        d.margin.right = margin_right.to_px()

    def calculate_block_position(self, containing_block: Dimensions) -> None:
        """
        Finish the vertical edge sizes and position the box in its container.

        See http://www.w3.org/TR/CSS2/visudet.html#normal-block
        """
        style = self.get_style_node()
        d = self.dimensions

        # An `auto` vertical margin is 0.
        d.margin.top = style.lookup('margin-top', 'margin', ZERO).to_px()
        d.margin.bottom = style.lookup('margin-bottom', 'margin', ZERO).to_px()

        d.border.top = style.lookup('border-top-width', 'border-width', ZERO).to_px()
        d.border.bottom = style.lookup('border-bottom-width', 'border-width', ZERO).to_px()

        d.padding.top = style.lookup('padding-top', 'padding', ZERO).to_px()
        d.padding.bottom = style.lookup('padding-bottom', 'padding', ZERO).to_px()

        d.content.x = (containing_block.content.x
                       + d.margin.left + d.border.left + d.padding.left)

        # Position the box below all the previous boxes in the container.
        d.content.y = (containing_block.content.y + containing_block.content.height
                       + d.margin.top + d.border.top + d.padding.top)

    def layout_block_children(self) -> None:
        """
        Lay out the children within this box's content area.

        Sets the content height to the total height of the children.
        """
        d = self.dimensions
        d.content.height = 0.0
        for child in self.children:
            child.layout(d)
            # Each child is laid out below the previous one.
            d.content.height += child.dimensions.margin_box().height

    def calculate_block_height(self) -> None:
        """An explicit `height` overrides the height of the children."""
        height = self.get_style_node().value('height')
        if isinstance(height, Length):
            self.dimensions.content.height = height.to_px()

    def get_inline_container(self) -> 'LayoutBox':
        """
        Where a new inline child should go.

        Inline and anonymous boxes take inline children directly. A block
        reuses its trailing anonymous block, or appends a new one.
        """
        if self.box_type in (BoxType.INLINE_NODE, BoxType.ANONYMOUS_BLOCK):
            return self

        if not self.children or self.children[-1].box_type != BoxType.ANONYMOUS_BLOCK:
            self.children.append(LayoutBox(BoxType.ANONYMOUS_BLOCK))
        return self.children[-1]

    def debug_structure(self, indent: int = 0) -> str:
        """
        Describe this box and its descendants, one box per line.

        Returns:
            str: Indented description of the layout tree
        """
        if self.style_node is None:
            label = "anonymous"
        elif self.style_node.node.is_element():
            label = f"{self.box_type.value} <{self.style_node.node.tag_name}>"
        else:
            label = f"{self.box_type.value} #text"

        lines = [f"{'  ' * indent}{label} {self.dimensions.content!r}"]
        for child in self.children:
            lines.append(child.debug_structure(indent + 1))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"LayoutBox({self.box_type.value}, {len(self.children)} children)"


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """
    Build the tree of LayoutBoxes, without computing any geometry.

    Args:
        style_node: Root of the style tree

    Returns:
        LayoutBox: Root of the layout tree

    Raises:
        LayoutError: If the root has ``display: none``
    """
    display = style_node.display()
    if display == Display.BLOCK:
        root = LayoutBox(BoxType.BLOCK_NODE, style_node)
    elif display == Display.INLINE:
        root = LayoutBox(BoxType.INLINE_NODE, style_node)
    else:
        raise LayoutError("Root node has display: none")

    for child in style_node.children:
        child_display = child.display()
        if child_display == Display.BLOCK:
            root.children.append(build_layout_tree(child))
        elif child_display == Display.INLINE:
            root.get_inline_container().children.append(build_layout_tree(child))
        # display: none boxes are skipped with their subtree

    return root


def layout_tree(style_node: StyledNode, containing_block: Dimensions) -> LayoutBox:
    """
    Transform a style tree into a laid out layout tree.

    Args:
        style_node: Root of the style tree
        containing_block: The initial containing block, usually the viewport.
            It is not modified.

    Returns:
        LayoutBox: Root of the layout tree with all geometry computed
    """
    # The layout algorithm expects the container height to start at 0.
    initial_block = containing_block.copy()
    initial_block.content.height = 0.0

    root = build_layout_tree(style_node)
    root.layout(initial_block)

    logger.debug(f"Laid out tree: root content {root.dimensions.content!r}")
    return root
