"""
RenderEngine - the document rendering pipeline.

This class ties the HTML parser, CSS parser, style tree, layout and painter
together: markup and stylesheet text in, a laid out tree and a pixel buffer out.
"""

import logging
from typing import Dict, Optional

from ..css import Color, CSSParser, Stylesheet
from ..dom import Node
from ..layout import Dimensions, LayoutBox, layout_tree
from ..parser import HTMLParser
from ..rendering import Canvas, DisplayList, build_display_list, paint
from ..style import StyledNode, style_tree
from ..utils.config import Config
from ..utils.logging import StageTimer
from .errors import ConfigError

logger = logging.getLogger(__name__)


class RenderResult:
    """Every intermediate product of one render() call, and the seconds each stage took."""

    def __init__(self, dom: Node, stylesheet: Stylesheet, style_root: StyledNode,
                 layout_root: LayoutBox, display_list: DisplayList, canvas: Canvas,
                 timings: Optional[Dict[str, float]] = None):
        self.dom = dom
        self.stylesheet = stylesheet
        self.style_root = style_root
        self.layout_root = layout_root
        self.display_list = display_list
        self.canvas = canvas
        self.timings = timings or {}


class RenderEngine:
    """
    Main rendering pipeline.

    The engine keeps no state between calls apart from its configuration, so
    rendering the same inputs twice gives the same result.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the render engine.

        Args:
            config: Configuration, the built-in defaults when omitted

        Raises:
            ConfigError: If a configuration value is invalid
        """
        self.config = config if config is not None else Config()

        self.viewport_width = self.config.get_int('viewport.width')
        self.viewport_height = self.config.get_int('viewport.height')

        background = self.config.get('canvas.background', '#ffffff')
        try:
            self.background = Color.from_hex(str(background).lstrip('#'))
        except ValueError as e:
            raise ConfigError(f"Invalid canvas.background {background!r}: {e}") from e

        self.html_parser = HTMLParser(self.config.get('html.tree_builder', 'html.parser'))
        self.css_parser = CSSParser()

        logger.info(f"RenderEngine initialized with viewport {self.viewport_width}x{self.viewport_height}")

    def viewport(self) -> Dimensions:
        """The initial containing block: the viewport at the origin with zero edges."""
        return Dimensions.viewport(float(self.viewport_width), float(self.viewport_height))

    def parse_html(self, html_content: str) -> Node:
        return self.html_parser.parse(html_content)

    def parse_css(self, css_content: str) -> Stylesheet:
        return self.css_parser.parse(css_content)

    def style(self, dom: Node, stylesheet: Stylesheet) -> StyledNode:
        return style_tree(dom, stylesheet)

    def layout(self, style_root: StyledNode, containing_block: Optional[Dimensions] = None) -> LayoutBox:
        """
        Build and lay out the layout tree.

        Args:
            style_root: Root of the style tree
            containing_block: Initial containing block, the viewport by default

        Returns:
            LayoutBox: Root of the laid out tree
        """
        if containing_block is None:
            containing_block = self.viewport()
        return layout_tree(style_root, containing_block)

    def paint(self, layout_root: LayoutBox) -> Canvas:
        return paint(layout_root, self.viewport().content, self.background)

    def render(self, html_content: str, css_content: str) -> RenderResult:
        """
        Run the whole pipeline.

        Args:
            html_content: Markup text
            css_content: Stylesheet text

        Returns:
            RenderResult: The DOM, stylesheet, trees, display list, canvas
            and the duration of each stage

        Raises:
            StructuralError: If the stylesheet is malformed or the tree has no
                box to root the layout on
        """
        timer = StageTimer(logger)

        with timer.stage("parse_html"):
            dom = self.parse_html(html_content)
        with timer.stage("parse_css"):
            stylesheet = self.parse_css(css_content)
        with timer.stage("style"):
            style_root = self.style(dom, stylesheet)
        with timer.stage("layout"):
            layout_root = self.layout(style_root)
        with timer.stage("paint"):
            display_list = build_display_list(layout_root)
            canvas = self.paint(layout_root)

        logger.info(f"Rendered document: {len(stylesheet)} rules, "
                    f"{len(display_list)} display commands in {timer.summary()}")
        return RenderResult(dom, stylesheet, style_root, layout_root, display_list, canvas,
                            dict(timer.timings))
