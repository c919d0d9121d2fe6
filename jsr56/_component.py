"""
Comparison of individual version-id components.

A component is compared as a number only when both operands parse as a
"Java int": a non-empty run of ASCII digits no larger than 2147483647.
Anything else, including a numeral that overflows that bound, is compared
character by character.
"""

from __future__ import annotations

JAVA_INT_MAX = 2147483647


def parse_java_int(component: str) -> int | None:
    """
    Return the value of `component` if it is a bounded, non-negative integer,
    or `None` if it must be compared as text.

    Parsing stops at the first non-digit or as soon as the value exceeds
    `JAVA_INT_MAX`, so arbitrarily long numerals are never converted.
    """
    if not component:
        return None
    value = 0
    for char in component:
        if not ("0" <= char <= "9"):
            return None
        value = value * 10 + (ord(char) - ord("0"))
        if value > JAVA_INT_MAX:
            return None
    return value


def compare_component(a: str, b: str) -> int:
    """
    Compare two components in the manner of `strcmp`.

    Returns a negative number, zero, or a positive number as `a` sorts before,
    equal to, or after `b`.
    """
    left = parse_java_int(a)
    right = parse_java_int(b)
    if left is not None and right is not None:
        return left - right
    return (a > b) - (a < b)
