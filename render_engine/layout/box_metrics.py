"""
CSS box model geometry. All sizes are in px.
"""

import copy


class Rect:
    """An axis-aligned rectangle."""

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def expanded_by(self, edge: 'EdgeSizes') -> 'Rect':
        """Return a new rectangle grown outward by the given edge sizes."""
        return Rect(
            self.x - edge.left,
            self.y - edge.top,
            self.width + edge.left + edge.right,
            self.height + edge.top + edge.bottom,
        )

    def __eq__(self, other) -> bool:
        return (isinstance(other, Rect)
                and (other.x, other.y, other.width, other.height)
                == (self.x, self.y, self.width, self.height))

    def __repr__(self) -> str:
        return f"Rect(x={self.x:g}, y={self.y:g}, width={self.width:g}, height={self.height:g})"


class EdgeSizes:
    """Sizes of the four edges of a box."""

    def __init__(self, left: float = 0.0, right: float = 0.0, top: float = 0.0, bottom: float = 0.0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom

    def __eq__(self, other) -> bool:
        return (isinstance(other, EdgeSizes)
                and (other.left, other.right, other.top, other.bottom)
                == (self.left, self.right, self.top, self.bottom))

    def __repr__(self) -> str:
        return (f"EdgeSizes(left={self.left:g}, right={self.right:g}, "
                f"top={self.top:g}, bottom={self.bottom:g})")


class Dimensions:
    """
    The content rectangle of a box plus its padding, border and margin edges.

    Each Dimensions owns its own Rect and EdgeSizes instances.
    """

    def __init__(self, content: Rect = None, padding: EdgeSizes = None,
                 border: EdgeSizes = None, margin: EdgeSizes = None):
        self.content = content if content is not None else Rect()
        self.padding = padding if padding is not None else EdgeSizes()
        self.border = border if border is not None else EdgeSizes()
        self.margin = margin if margin is not None else EdgeSizes()

    @classmethod
    def viewport(cls, width: float, height: float) -> 'Dimensions':
        """An initial containing block at the origin with zero edges."""
        return cls(Rect(0.0, 0.0, width, height))

    def padding_box(self) -> Rect:
        """The area covered by the content area plus its padding."""
        return self.content.expanded_by(self.padding)

    def border_box(self) -> Rect:
        """The area covered by the content area plus padding and borders."""
        return self.padding_box().expanded_by(self.border)

    def margin_box(self) -> Rect:
        """The area covered by the content area plus padding, borders, and margin."""
        return self.border_box().expanded_by(self.margin)

    def copy(self) -> 'Dimensions':
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (f"Dimensions(content={self.content!r}, padding={self.padding!r}, "
                f"border={self.border!r}, margin={self.margin!r})")
