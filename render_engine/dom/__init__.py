"""
DOM implementation for the render engine.
"""

from .node import Node, NodeType, Element, Text, elem, text

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'elem', 'text'
]
