"""
HTML parser implementation.
This module turns markup text into the engine's DOM using BeautifulSoup.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import NavigableString, PreformattedString, Tag

from ..core.errors import ConfigError
from ..dom import Element, Node, Text

logger = logging.getLogger(__name__)

# "html.parser" builds the tree exactly as written (no implicit html/head/body,
# no nesting repair). "html5lib" applies the full HTML5 tree construction rules.
SUPPORTED_TREE_BUILDERS = ('html.parser', 'html5lib')


class HTMLParser:
    """HTML parser using BeautifulSoup, converting the soup into engine DOM nodes."""

    def __init__(self, tree_builder: str = 'html.parser'):
        """
        Initialize the HTML parser.

        Args:
            tree_builder: BeautifulSoup tree builder, one of SUPPORTED_TREE_BUILDERS

        Raises:
            ConfigError: If the tree builder is not supported
        """
        if tree_builder not in SUPPORTED_TREE_BUILDERS:
            raise ConfigError(
                f"Unsupported HTML tree builder {tree_builder!r}, "
                f"expected one of {', '.join(SUPPORTED_TREE_BUILDERS)}")
        self.tree_builder = tree_builder
        logger.debug(f"HTML parser initialized with tree builder {tree_builder}")

    def parse(self, html_content: str) -> Element:
        """
        Parse HTML content into a DOM tree.

        A single top-level element becomes the root. Several top-level nodes
        are wrapped in an ``html`` element.

        Args:
            html_content: HTML content to parse

        Returns:
            Element: Root of the DOM tree
        """
        try:
            soup = BeautifulSoup(html_content, self.tree_builder)
        except FeatureNotFound as e:
            raise ConfigError(f"Tree builder {self.tree_builder!r} is not installed: {e}") from e

        nodes = self._convert_children(soup)

        if len(nodes) == 1 and isinstance(nodes[0], Element):
            root = nodes[0]
        else:
            logger.debug(f"Wrapping {len(nodes)} top-level nodes in an html element")
            root = Element('html', {}, nodes)

        logger.debug(f"Parsed HTML into tree rooted at <{root.tag_name}>")
        return root

    def _convert_children(self, tag: Tag) -> List[Node]:
        """
        Convert the children of a soup tag.

        Args:
            tag: The BeautifulSoup tag (or the soup itself)

        Returns:
            List of converted DOM nodes in document order
        """
        nodes = []
        for child in tag.children:
            node = self._convert_node(child)
            if node is not None:
                nodes.append(node)
        return nodes

    def _convert_node(self, soup_node) -> Optional[Node]:
        """
        Convert one soup node.

        Comments, doctypes, processing instructions and whitespace-only
        text are dropped.

        Args:
            soup_node: A BeautifulSoup Tag or NavigableString

        Returns:
            The DOM node, or None if the node is dropped
        """
        if isinstance(soup_node, Tag):
            return Element(soup_node.name,
                           self._convert_attributes(soup_node),
                           self._convert_children(soup_node))

        if isinstance(soup_node, PreformattedString):
            return None

        if isinstance(soup_node, NavigableString):
            data = str(soup_node)
            if not data.strip():
                return None
            return Text(data)

        return None

    def _convert_attributes(self, tag: Tag) -> dict:
        """Flatten multi-valued attributes such as ``class`` into strings."""
        attributes = {}
        for name, value in tag.attrs.items():
            if isinstance(value, (list, tuple)):
                value = ' '.join(value)
            attributes[name.lower()] = value
        return attributes


def parse_html(html_content: str, tree_builder: str = 'html.parser') -> Element:
    """Parse HTML content with a one-off parser."""
    return HTMLParser(tree_builder).parse(html_content)
