"""
Markup parsing for the render engine.
"""

from .html_parser import HTMLParser, parse_html, SUPPORTED_TREE_BUILDERS

__all__ = ['HTMLParser', 'parse_html', 'SUPPORTED_TREE_BUILDERS']
