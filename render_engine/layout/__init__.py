"""
Layout implementation for the render engine.
This package provides the box model geometry and the block layout algorithm.
"""

from .box_metrics import Dimensions, EdgeSizes, Rect
from .layout import BoxType, LayoutBox, build_layout_tree, layout_tree

__all__ = [
    'Dimensions', 'EdgeSizes', 'Rect',
    'BoxType', 'LayoutBox', 'build_layout_tree', 'layout_tree',
]
