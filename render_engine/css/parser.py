"""
CSS Parser implementation.
This module parses the engine's CSS dialect into a Stylesheet using tinycss2:
simple selectors (``tag#id.class``, ``*``) in comma separated lists, and
declarations whose value is a keyword, a pixel length or a color.
"""

import logging
from typing import List, Optional

import tinycss2
from tinycss2 import color3

from ..core.errors import CSSSyntaxError
from .selector import SimpleSelector
from .stylesheet import Declaration, Rule, Stylesheet
from .values import AUTO, Color, Keyword, Length, Unit, Value

logger = logging.getLogger(__name__)

# Token types that carry no meaning inside a value
_INSIGNIFICANT_TOKENS = ('whitespace', 'comment')


class CSSParser:
    """
    CSS Parser for the engine's CSS dialect.

    Malformed rule structure raises CSSSyntaxError. Declarations whose value
    falls outside the supported grammar are dropped with a warning and the
    rest of the rule is kept.
    """

    def __init__(self):
        """Initialize the CSS parser."""
        self.warnings: List[str] = []
        logger.debug("CSS Parser initialized")

    def parse(self, css_content: str) -> Stylesheet:
        """
        Parse CSS content into a stylesheet.

        Args:
            css_content: CSS content to parse

        Returns:
            Stylesheet: The rules in source order

        Raises:
            CSSSyntaxError: If a rule is malformed or uses unsupported selector syntax
        """
        self.warnings = []
        rules = []

        for node in tinycss2.parse_stylesheet(css_content, skip_comments=True, skip_whitespace=True):
            if node.type == 'qualified-rule':
                rules.append(self._parse_rule(node))
            elif node.type == 'at-rule':
                self._warn(f"Skipping unsupported at-rule @{node.at_keyword}", node)
            elif node.type == 'error':
                raise CSSSyntaxError(f"Malformed rule: {node.message}",
                                     node.source_line, node.source_column)

        logger.debug(f"Parsed stylesheet with {len(rules)} rules")
        return Stylesheet(rules)

    def _parse_rule(self, node) -> Rule:
        """
        Parse one qualified rule.

        Args:
            node: tinycss2 QualifiedRule

        Returns:
            Rule: The selectors sorted most specific first, and the declarations
        """
        selectors = self.parse_selectors(node.prelude, node.source_line, node.source_column)
        declarations = self._parse_declarations(node.content)
        return Rule(selectors, declarations)

    def parse_selectors(self, tokens, line: Optional[int] = None,
                        column: Optional[int] = None) -> List[SimpleSelector]:
        """
        Parse a comma separated list of simple selectors.

        Args:
            tokens: The rule prelude tokens
            line: Source line of the rule, for error reporting
            column: Source column of the rule, for error reporting

        Returns:
            Selectors with the highest specificity first. Ties keep source order.

        Raises:
            CSSSyntaxError: On an empty selector, a combinator, or any other
                unsupported selector syntax
        """
        groups = [[]]
        for token in tokens:
            if token.type == 'literal' and token.value == ',':
                groups.append([])
            elif token.type != 'comment':
                groups[-1].append(token)

        selectors = [self._parse_simple_selector(group, line, column) for group in groups]

        # sorted() is stable with reverse=True, equal specificities keep source order
        return sorted(selectors, key=lambda selector: selector.specificity(), reverse=True)

    def _parse_simple_selector(self, tokens, line: Optional[int],
                               column: Optional[int]) -> SimpleSelector:
        """Parse one simple selector such as ``div#main.note``."""
        # Surrounding whitespace is insignificant, inner whitespace is a combinator
        while tokens and tokens[0].type == 'whitespace':
            tokens = tokens[1:]
        while tokens and tokens[-1].type == 'whitespace':
            tokens = tokens[:-1]

        if not tokens:
            raise CSSSyntaxError("Empty selector", line, column)

        selector = SimpleSelector()
        position = 0
        while position < len(tokens):
            token = tokens[position]

            if token.type == 'ident' and position == 0:
                selector.tag_name = token.lower_value
            elif token.type == 'literal' and token.value == '*' and position == 0:
                pass
            elif token.type == 'hash' and token.is_identifier and selector.id is None:
                selector.id = token.value
            elif (token.type == 'literal' and token.value == '.'
                  and position + 1 < len(tokens) and tokens[position + 1].type == 'ident'):
                position += 1
                selector.classes.append(tokens[position].value)
            else:
                raise CSSSyntaxError(
                    f"Unsupported selector syntax near {tinycss2.serialize([token])!r}",
                    line, column)

            position += 1

        return selector

    def _parse_declarations(self, content) -> List[Declaration]:
        """
        Parse the contents of a ``{ ... }`` block.

        Args:
            content: The block's tokens

        Returns:
            Declarations in source order
        """
        declarations = []

        for node in tinycss2.parse_declaration_list(content, skip_comments=True, skip_whitespace=True):
            if node.type != 'declaration':
                self._warn(f"Skipping invalid declaration: {getattr(node, 'message', node.type)}", node)
                continue

            value = self.parse_value(node.value)
            if value is None:
                self._warn(f"Skipping unsupported value for {node.lower_name}: "
                           f"{tinycss2.serialize(node.value).strip()!r}", node)
                continue

            declarations.append(Declaration(node.lower_name, value))

        return declarations

    def parse_value(self, tokens) -> Optional[Value]:
        """
        Parse a declaration value.

        Args:
            tokens: The declaration's value tokens

        Returns:
            The value, or None if it is outside the supported grammar
        """
        tokens = [token for token in tokens if token.type not in _INSIGNIFICANT_TOKENS]
        if len(tokens) != 1:
            return None

        token = tokens[0]

        if token.type == 'ident':
            if token.lower_value == 'auto':
                return AUTO
            color = self._parse_color(token)
            if color is not None:
                return color
            return Keyword(token.lower_value)

        if token.type == 'dimension':
            if token.lower_unit == Unit.PX.value:
                return Length(token.value, Unit.PX)
            return None

        if token.type == 'number':
            # Only zero may omit its unit
            if token.value == 0:
                return Length(0.0, Unit.PX)
            return None

        if token.type == 'hash':
            try:
                return Color.from_hex(token.value)
            except ValueError:
                return None

        if token.type == 'function':
            return self._parse_color(token)

        return None

    def _parse_color(self, token) -> Optional[Color]:
        """Parse a named color or an ``rgb()``/``rgba()``/``hsl()`` function."""
        rgba = color3.parse_color(token)
        if rgba is None or not isinstance(rgba, tuple):
            # None for non-colors, the string 'currentColor' for that keyword
            return None
        red, green, blue, alpha = (int(round(channel * 255)) for channel in rgba)
        return Color(red, green, blue, alpha)

    def _warn(self, message: str, node=None) -> None:
        """Record and log a recoverable problem."""
        line = getattr(node, 'source_line', None)
        if line is not None:
            message = f"{message} (line {line})"
        self.warnings.append(message)
        logger.warning(message)


def parse_css(css_content: str) -> Stylesheet:
    """Parse CSS content with a one-off parser."""
    return CSSParser().parse(css_content)
