"""
CSS Selector model.
This module holds simple selectors, their specificity and the matching predicate.
"""

from typing import List, NamedTuple, Optional

from ..dom import Element


class Specificity(NamedTuple):
    """
    Selector precedence as (id count, class count, type count).

    Tuple comparison is lexicographic, so an id always outranks any number
    of classes or types.
    """
    ids: int
    classes: int
    types: int


class SimpleSelector:
    """
    A simple selector: ``tag#id.class1.class2``.

    Every part is optional. An empty tag name, id and class list is the
    universal selector ``*``.
    """

    def __init__(self, tag_name: Optional[str] = None, id: Optional[str] = None,
                 classes: Optional[List[str]] = None):
        """
        Initialize a simple selector.

        Args:
            tag_name: Required tag name, or None for any tag
            id: Required id, or None for any id
            classes: Classes the element must all carry
        """
        self.tag_name = tag_name.lower() if tag_name else None
        self.id = id or None
        self.classes: List[str] = list(classes) if classes else []

    def specificity(self) -> Specificity:
        return Specificity(
            1 if self.id else 0,
            len(self.classes),
            1 if self.tag_name else 0,
        )

    def is_universal(self) -> bool:
        return not self.tag_name and not self.id and not self.classes

    def __eq__(self, other) -> bool:
        return (isinstance(other, SimpleSelector)
                and other.tag_name == self.tag_name
                and other.id == self.id
                and other.classes == self.classes)

    def __hash__(self) -> int:
        return hash((self.tag_name, self.id, tuple(self.classes)))

    def __str__(self) -> str:
        if self.is_universal():
            return '*'
        text = self.tag_name or ''
        if self.id:
            text += f'#{self.id}'
        for class_name in self.classes:
            text += f'.{class_name}'
        return text

    def __repr__(self) -> str:
        return f"SimpleSelector({str(self)!r}, specificity={tuple(self.specificity())})"


Selector = SimpleSelector


def matches_selector(element: Element, selector: Selector) -> bool:
    """
    Check if an element matches a selector.

    Tag name, id and classes must all hold. Parts the selector leaves
    unspecified match anything.

    Args:
        element: The element to match against
        selector: The selector to check

    Returns:
        True if the element matches the selector, False otherwise
    """
    if selector.tag_name and selector.tag_name != element.tag_name.lower():
        return False

    if selector.id and selector.id != element.id():
        return False

    if selector.classes:
        element_classes = element.classes()
        if any(class_name not in element_classes for class_name in selector.classes):
            return False

    return True
