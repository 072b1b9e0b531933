"""
Stylesheet model: rules made of selectors and declarations.
"""

from typing import List

from .selector import Selector
from .values import Value


class Declaration:
    """A single ``name: value`` pair."""

    __slots__ = ('name', 'value')

    def __init__(self, name: str, value: Value):
        self.name = name
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Declaration) and (other.name, other.value) == (self.name, self.value)

    def __repr__(self) -> str:
        return f"Declaration({self.name!r}, {self.value!r})"


class Rule:
    """
    A style rule.

    The selectors are alternatives (comma separated in the source). The CSS
    parser stores them most specific first.
    """

    def __init__(self, selectors: List[Selector], declarations: List[Declaration]):
        self.selectors = selectors
        self.declarations = declarations

    def __repr__(self) -> str:
        selector_text = ', '.join(str(selector) for selector in self.selectors)
        return f"Rule({selector_text!r}, {len(self.declarations)} declarations)"


class Stylesheet:
    """An ordered list of rules."""

    def __init__(self, rules: List[Rule]):
        self.rules = rules

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        return f"Stylesheet({len(self.rules)} rules)"
