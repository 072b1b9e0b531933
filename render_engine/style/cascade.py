"""
Cascade resolution.
This module finds the rules that match an element and merges their
declarations into the element's property map.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..css import Rule, Specificity, Stylesheet, Value, matches_selector
from ..dom import Element

logger = logging.getLogger(__name__)

PropertyMap = Dict[str, Value]
MatchedRule = Tuple[Specificity, Rule]


def match_rule(element: Element, rule: Rule) -> Optional[MatchedRule]:
    """
    Check a rule against an element.

    Args:
        element: The element to match
        rule: The rule to check

    Returns:
        The highest specificity among the rule's matching selectors together
        with the rule, or None if no selector matches
    """
    specificities = [selector.specificity()
                     for selector in rule.selectors
                     if matches_selector(element, selector)]
    if not specificities:
        return None
    return max(specificities), rule


def matching_rules(element: Element, stylesheet: Stylesheet) -> List[MatchedRule]:
    """Find all rules that match the element, in stylesheet order."""
    matched = []
    for rule in stylesheet.rules:
        match = match_rule(element, rule)
        if match is not None:
            matched.append(match)
    return matched


def specified_values(element: Element, stylesheet: Stylesheet) -> PropertyMap:
    """
    Compute the specified values of an element.

    Matched rules are applied from lowest to highest specificity, so the most
    specific declaration wins. The sort is stable: among equally specific
    rules the later one in the stylesheet wins.

    Args:
        element: The element to style
        stylesheet: The stylesheet to apply

    Returns:
        Property name to value map, empty when no rule matches
    """
    values: PropertyMap = {}

    rules = sorted(matching_rules(element, stylesheet), key=lambda match: match[0])
    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value

    logger.debug(f"<{element.tag_name}> matched {len(rules)} rules, {len(values)} properties")
    return values
