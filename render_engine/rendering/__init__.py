"""
Rendering implementation for the render engine.
This package turns layout trees into display lists and pixels.
"""

from .renderer import Canvas, DisplayList, SolidColor, build_display_list, paint

__all__ = ['Canvas', 'DisplayList', 'SolidColor', 'build_display_list', 'paint']
