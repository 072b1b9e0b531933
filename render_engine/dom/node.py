"""
Node implementation for the DOM.
This module implements the minimal document tree the style and layout stages read:
elements with a tag name, an attribute map and ordered children, and text leaves.
"""

from enum import IntEnum
from typing import Dict, List, Optional, Set


class NodeType(IntEnum):
    """Node types, numbered as in the DOM standard."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3


class Node:
    """
    Base Node implementation for the DOM.

    A node owns its children. Nodes are never mutated by the style or layout
    stages, which only keep references to them.
    """

    def __init__(self, node_type: NodeType, children: Optional[List['Node']] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            children: Child nodes in document order
        """
        self.node_type = node_type
        self.children: List['Node'] = list(children) if children else []

    def is_element(self) -> bool:
        """Whether this node is an element."""
        return self.node_type == NodeType.ELEMENT_NODE


class Element(Node):
    """
    Element node implementation for the DOM.

    Tag names are stored lower-cased.
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Dict[str, str]] = None,
                 children: Optional[List[Node]] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Attribute name to value map
            children: Child nodes in document order
        """
        super().__init__(NodeType.ELEMENT_NODE, children)
        self.tag_name = tag_name.lower()
        self.attributes: Dict[str, str] = dict(attributes) if attributes else {}

    def get_attribute(self, name: str) -> Optional[str]:
        """Get an attribute value, or None when it is absent."""
        return self.attributes.get(name)

    def id(self) -> Optional[str]:
        """The element's id attribute, or None."""
        return self.attributes.get('id')

    def classes(self) -> Set[str]:
        """The set of classes in the element's class attribute."""
        class_attr = self.attributes.get('class')
        if not class_attr:
            return set()
        return set(class_attr.split())

    def __repr__(self) -> str:
        return f"Element({self.tag_name!r}, {self.attributes!r}, {len(self.children)} children)"


class Text(Node):
    """Text leaf of the DOM."""

    def __init__(self, data: str):
        """
        Initialize a text node.

        Args:
            data: The text content
        """
        super().__init__(NodeType.TEXT_NODE)
        self.data = data if data is not None else ""

    def __repr__(self) -> str:
        return f"Text({self.data!r})"


def text(data: str) -> Text:
    """Create a text node."""
    return Text(data)


def elem(tag_name: str, attributes: Optional[Dict[str, str]] = None,
         children: Optional[List[Node]] = None) -> Element:
    """Create an element node."""
    return Element(tag_name, attributes, children)
