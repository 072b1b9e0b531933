"""
CSS implementation for the render engine.
This package provides CSS values, selectors, stylesheets and the CSS parser.
"""

from .values import AUTO, Auto, Color, Keyword, Length, Unit, Value, WHITE
from .selector import Selector, SimpleSelector, Specificity, matches_selector
from .stylesheet import Declaration, Rule, Stylesheet
from .parser import CSSParser, parse_css

__all__ = [
    'AUTO', 'Auto', 'Color', 'Keyword', 'Length', 'Unit', 'Value', 'WHITE',
    'Selector', 'SimpleSelector', 'Specificity', 'matches_selector',
    'Declaration', 'Rule', 'Stylesheet',
    'CSSParser', 'parse_css',
]
