"""
CSS value types.

A declared value is exactly one of Keyword, Auto, Length or Color. ``auto`` has
its own variant so that layout code can test for it by identity instead of
comparing keyword strings.
"""

from enum import Enum
from typing import Tuple, Union


class Unit(Enum):
    """Length units understood by the engine."""
    PX = "px"


class Keyword:
    """An identifier value such as ``block`` or ``none``."""

    __slots__ = ('name',)

    def __init__(self, name: str):
        self.name = name

    def to_px(self) -> float:
        return 0.0

    def __eq__(self, other) -> bool:
        return isinstance(other, Keyword) and other.name == self.name

    def __hash__(self) -> int:
        return hash(('keyword', self.name))

    def __repr__(self) -> str:
        return f"Keyword({self.name!r})"


class Auto:
    """The ``auto`` value. Use the module-level AUTO instance."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def to_px(self) -> float:
        return 0.0

    def __repr__(self) -> str:
        return "AUTO"


AUTO = Auto()


class Length:
    """A length with a unit."""

    __slots__ = ('value', 'unit')

    def __init__(self, value: float, unit: Unit = Unit.PX):
        self.value = float(value)
        self.unit = unit

    def to_px(self) -> float:
        return self.value

    def __eq__(self, other) -> bool:
        return isinstance(other, Length) and other.value == self.value and other.unit == self.unit

    def __hash__(self) -> int:
        return hash(('length', self.value, self.unit))

    def __repr__(self) -> str:
        return f"Length({self.value:g}{self.unit.value})"


class Color:
    """An RGBA color, each channel an integer from 0 to 255."""

    __slots__ = ('r', 'g', 'b', 'a')

    def __init__(self, r: int, g: int, b: int, a: int = 255):
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    def to_px(self) -> float:
        return 0.0

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """
        Build a color from hex digits (without the leading ``#``).

        Accepts the 3, 4, 6 and 8 digit forms.

        Raises:
            ValueError: If the digits are not a valid hex color
        """
        if len(value) in (3, 4):
            value = ''.join(digit * 2 for digit in value)
        if len(value) == 6:
            value += 'ff'
        if len(value) != 8:
            raise ValueError(f"Invalid hex color: #{value}")
        channels = [int(value[i:i + 2], 16) for i in range(0, 8, 2)]
        return cls(*channels)

    def __eq__(self, other) -> bool:
        return isinstance(other, Color) and other.as_tuple() == self.as_tuple()

    def __hash__(self) -> int:
        return hash(('color',) + self.as_tuple())

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"


Value = Union[Keyword, Auto, Length, Color]

WHITE = Color(255, 255, 255, 255)
