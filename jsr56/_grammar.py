"""
Validation and parsing of version-strings against the JSR 56 grammar.

The grammar for a simple-element is:

    simple-element ::= version-id | version-id modifier
    modifier       ::= '+' | '*'
    version-id     ::= string ( separator string )*
    string         ::= char ( char )*
    char           ::= any ASCII character except a space, an ampersand,
                       a separator or a modifier
    separator      ::= '.' | '-' | '_'

Once a trailing modifier has been removed, a version-id is valid when it
contains no space, ampersand or modifier, neither begins nor ends with a
separator, and never has two separators in a row.
"""

from __future__ import annotations

import logging

from jsr56._release import (
    AT_LEAST_MODIFIER,
    ELEMENT_DELIMITER,
    PREFIX_MODIFIER,
    SIMPLE_ELEMENT_DELIMITER,
)
from jsr56._types import Element, Modifier, SimpleElement, VersionString
from jsr56._util import iter_spans
from jsr56._version_id import SEPARATORS

logger = logging.getLogger(__name__)

_FORBIDDEN = frozenset(
    {ELEMENT_DELIMITER, SIMPLE_ELEMENT_DELIMITER, AT_LEAST_MODIFIER, PREFIX_MODIFIER}
)


class VersionStringError(ValueError):
    """
    Raised when a version-string does not conform to the grammar.
    """

    def __init__(self, version_string: str | None, reason: str) -> None:
        super().__init__(f"invalid version string {version_string!r}: {reason}")
        self.version_string = version_string
        self.reason = reason


def _split_modifier(simple_element: str) -> tuple[str, Modifier | None]:
    if simple_element[-1] in (AT_LEAST_MODIFIER, PREFIX_MODIFIER):
        return simple_element[:-1], Modifier(simple_element[-1])
    return simple_element, None


def _simple_element_problem(simple_element: str) -> str | None:
    if not simple_element:
        return "empty simple-element"
    version_id, _ = _split_modifier(simple_element)
    if not version_id:
        return f"modifier without a version-id in {simple_element!r}"

    forbidden = sorted(_FORBIDDEN.intersection(version_id))
    if forbidden:
        return f"forbidden character {forbidden[0]!r} in {simple_element!r}"
    if version_id[0] in SEPARATORS:
        return f"leading separator in {simple_element!r}"
    if version_id[-1] in SEPARATORS:
        return f"trailing separator in {simple_element!r}"
    for current, following in zip(version_id, version_id[1:]):
        if current in SEPARATORS and following in SEPARATORS:
            return f"adjacent separators in {simple_element!r}"
    return None


def _element_problem(element: str) -> str | None:
    if not element:
        return "empty element"
    for simple_element in iter_spans(element, SIMPLE_ELEMENT_DELIMITER):
        problem = _simple_element_problem(simple_element)
        if problem is not None:
            return problem
    return None


def explain_invalid(version_string: str | None) -> str | None:
    """
    Return a human-readable reason why `version_string` is invalid, or `None`
    if it conforms to the grammar.

    Only the first problem found, scanning left to right, is reported.
    """
    if not version_string:
        return "empty version string"
    for element in iter_spans(version_string, ELEMENT_DELIMITER):
        problem = _element_problem(element)
        if problem is not None:
            return problem
    return None


def is_valid_simple_element(simple_element: str | None) -> bool:
    """
    Is `simple_element` a well-formed simple-element?
    """
    return _simple_element_problem(simple_element or "") is None


def is_valid_element(element: str | None) -> bool:
    """
    Is `element` a well-formed, `&`-separated intersection of simple-elements?
    """
    return _element_problem(element or "") is None


def is_valid_version_string(version_string: str | None) -> bool:
    """
    Is `version_string` well-formed?

    Every element must be valid on its own, even though matching only
    requires one of them to accept a release.
    """
    return explain_invalid(version_string) is None


def parse_version_string(version_string: str | None) -> VersionString:
    """
    Parse `version_string` into a `VersionString`.

    Raises `VersionStringError` if `version_string` does not conform to the
    grammar.
    """
    if not version_string:
        raise VersionStringError(version_string, "empty version string")
    problem = explain_invalid(version_string)
    if problem is not None:
        raise VersionStringError(version_string, problem)

    elements = []
    for element in iter_spans(version_string, ELEMENT_DELIMITER):
        simple_elements = []
        for simple_element in iter_spans(element, SIMPLE_ELEMENT_DELIMITER):
            version_id, modifier = _split_modifier(simple_element)
            simple_elements.append(SimpleElement(version_id, modifier))
        elements.append(Element(tuple(simple_elements)))

    parsed = VersionString(tuple(elements))
    logger.debug(f"parsed {version_string!r} into {len(parsed.elements)} element(s)")
    return parsed
