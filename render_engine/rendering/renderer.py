"""
Painting.
This module turns a laid out layout tree into a display list of solid color
rectangles and rasterizes that list onto a pixel buffer.
"""

import logging
from typing import List, Optional

from PIL import Image

from ..css import Color, WHITE
from ..layout import LayoutBox, Rect

logger = logging.getLogger(__name__)


class SolidColor:
    """Display command: fill a rectangle with a color."""

    __slots__ = ('color', 'rect')

    def __init__(self, color: Color, rect: Rect):
        self.color = color
        self.rect = rect

    def __eq__(self, other) -> bool:
        return isinstance(other, SolidColor) and (other.color, other.rect) == (self.color, self.rect)

    def __repr__(self) -> str:
        return f"SolidColor({self.color!r}, {self.rect!r})"


DisplayCommand = SolidColor
DisplayList = List[DisplayCommand]


def build_display_list(layout_root: LayoutBox) -> DisplayList:
    """
    Build the display list for a layout tree.

    Boxes are painted in tree order: a box's background, then its borders,
    then its children.
    """
    display_list: DisplayList = []
    render_layout_box(display_list, layout_root)
    return display_list


def render_layout_box(display_list: DisplayList, layout_box: LayoutBox) -> None:
    render_background(display_list, layout_box)
    render_borders(display_list, layout_box)
    for child in layout_box.children:
        render_layout_box(display_list, child)


def render_background(display_list: DisplayList, layout_box: LayoutBox) -> None:
    """Fill the border box with the background color, if there is one."""
    color = get_color(layout_box, 'background-color', 'background')
    if color is None:
        return
    display_list.append(SolidColor(color, layout_box.dimensions.border_box()))


def render_borders(display_list: DisplayList, layout_box: LayoutBox) -> None:
    """Draw the four border strips in the border color, if there is one."""
    color = get_color(layout_box, 'border-color')
    if color is None:
        return

    d = layout_box.dimensions
    border_box = d.border_box()

    # Left border
    display_list.append(SolidColor(color, Rect(
        border_box.x, border_box.y, d.border.left, border_box.height)))

    # Right border
    display_list.append(SolidColor(color, Rect(
        border_box.x + border_box.width - d.border.right, border_box.y,
        d.border.right, border_box.height)))

    # Top border
    display_list.append(SolidColor(color, Rect(
        border_box.x, border_box.y, border_box.width, d.border.top)))

    # Bottom border
    display_list.append(SolidColor(color, Rect(
        border_box.x, border_box.y + border_box.height - d.border.bottom,
        border_box.width, d.border.bottom)))


def get_color(layout_box: LayoutBox, name: str, fallback_name: Optional[str] = None) -> Optional[Color]:
    """
    Return the color value of a property of the box's styled node.

    Anonymous boxes, missing properties and non-color values give None.
    """
    if layout_box.style_node is None:
        return None

    value = layout_box.style_node.value(name)
    if value is None and fallback_name:
        value = layout_box.style_node.value(fallback_name)

    if isinstance(value, Color):
        return value
    return None


def _clamp(value: float, lower: int, upper: int) -> int:
    return int(min(max(value, lower), upper))


class Canvas:
    """
    An RGBA pixel buffer backed by a Pillow image.

    Painting is not antialiased and not blended: each command overwrites the
    pixels it covers, alpha channel included.
    """

    def __init__(self, width: int, height: int, background: Color = WHITE):
        """
        Initialize a blank canvas.

        Args:
            width: Width in pixels
            height: Height in pixels
            background: Initial color of every pixel
        """
        self.width = width
        self.height = height
        self.image = Image.new('RGBA', (width, height), background.as_tuple())

    def paint_item(self, item: DisplayCommand) -> None:
        """Paint a single display command, clipped to the canvas."""
        if isinstance(item, SolidColor):
            rect = item.rect
            x0 = _clamp(rect.x, 0, self.width)
            y0 = _clamp(rect.y, 0, self.height)
            x1 = _clamp(rect.x + rect.width, 0, self.width)
            y1 = _clamp(rect.y + rect.height, 0, self.height)

            # The paste box excludes its right and bottom edges
            if x0 < x1 and y0 < y1:
                self.image.paste(item.color.as_tuple(), (x0, y0, x1, y1))

    def get_pixel(self, x: int, y: int) -> Color:
        return Color(*self.image.getpixel((x, y)))

    @property
    def pixels(self) -> List[Color]:
        """Every pixel in row-major order."""
        data = self.image.tobytes()
        return [Color(*data[i:i + 4]) for i in range(0, len(data), 4)]

    def to_image(self) -> Image.Image:
        """A copy of the buffer as an RGBA Pillow image."""
        return self.image.copy()

    def save(self, path: str, image_format: Optional[str] = None) -> None:
        """Save the canvas as an image file, PNG unless the path says otherwise."""
        self.image.save(path, format=image_format)
        logger.info(f"Saved {self.width}x{self.height} canvas to {path}")


def paint(layout_root: LayoutBox, bounds: Rect, background: Color = WHITE) -> Canvas:
    """
    Paint a layout tree onto a new canvas the size of ``bounds``.

    Args:
        layout_root: Root of a laid out layout tree
        bounds: The area to paint, usually the viewport
        background: Canvas color where nothing is painted

    Returns:
        Canvas: The painted pixel buffer
    """
    display_list = build_display_list(layout_root)
    canvas = Canvas(int(bounds.width), int(bounds.height), background)
    for item in display_list:
        canvas.paint_item(item)

    logger.debug(f"Painted {len(display_list)} display commands")
    return canvas
