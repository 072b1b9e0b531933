"""
Style tree.
This module applies a stylesheet to a whole DOM tree, producing a parallel
tree of StyledNodes that each hold the specified values of one DOM node.
"""

import logging
from enum import Enum
from typing import List

from ..css import Keyword, Stylesheet, Value
from ..dom import Node
from .cascade import PropertyMap, specified_values

logger = logging.getLogger(__name__)


class Display(Enum):
    """Values of the ``display`` property the layout stage understands."""
    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


class StyledNode:
    """
    A DOM node together with its specified values.

    Styled nodes are built once by style_tree() and only read afterwards.
    """

    def __init__(self, node: Node, specified_values: PropertyMap, children: List['StyledNode']):
        """
        Initialize a styled node.

        Args:
            node: The DOM node (not owned)
            specified_values: Property name to value map
            children: Styled children in document order
        """
        self.node = node
        self.specified_values = specified_values
        self.children = children

    def value(self, name: str):
        """Return the specified value of a property, or None if it is not set."""
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Return the value of ``name``, else of ``fallback_name``, else ``default``.

        Used for longhand properties with a shorthand fallback, e.g.
        ``margin-left`` then ``margin``.
        """
        value = self.value(name)
        if value is not None:
            return value
        value = self.value(fallback_name)
        if value is not None:
            return value
        return default

    def display(self) -> Display:
        """The value of the display property, ``inline`` unless set otherwise."""
        value = self.value('display')
        if isinstance(value, Keyword):
            if value.name == Display.BLOCK.value:
                return Display.BLOCK
            if value.name == Display.NONE.value:
                return Display.NONE
        return Display.INLINE

    def __repr__(self) -> str:
        return f"StyledNode({self.node!r}, {self.specified_values!r})"


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """
    Apply a stylesheet to an entire DOM tree.

    Elements get the values computed by the cascade, text nodes an empty map.

    Args:
        root: Root of the DOM tree
        stylesheet: The stylesheet to apply

    Returns:
        StyledNode: Root of the style tree
    """
    if root.is_element():
        values = specified_values(root, stylesheet)
    else:
        values = {}

    return StyledNode(root, values, [style_tree(child, stylesheet) for child in root.children])
