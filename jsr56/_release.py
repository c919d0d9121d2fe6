"""
Deciding whether a release satisfies a version-string.

A version-string is a space-separated union of elements; an element is an
`&`-separated intersection of simple-elements; a simple-element is a
version-id with an optional trailing modifier:

* `+` accepts the version-id or anything newer (Exact Match ordering),
* `*` accepts anything the version-id is a prefix of (Prefix Match),
* no modifier accepts only an Exact Match.

Releases containing a hyphen are milestone (non-FCS) builds. They never
satisfy a `+` or `*` requirement unless the requirement names them
byte-for-byte.

None of the functions here validate the version-string; see
`jsr56._grammar` for that.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from jsr56._util import iter_spans
from jsr56._version_id import exact_version_compare, prefix_version_compare

logger = logging.getLogger(__name__)

ELEMENT_DELIMITER = " "
"""Separates the elements of a version-string (union)."""

SIMPLE_ELEMENT_DELIMITER = "&"
"""Separates the simple-elements of an element (intersection)."""

AT_LEAST_MODIFIER = "+"
PREFIX_MODIFIER = "*"

MILESTONE_MARKER = "-"
"""A release containing this character is a milestone (non-FCS) build."""


def is_milestone(release: str) -> bool:
    """
    Is `release` a milestone (non-FCS) build?
    """
    return MILESTONE_MARKER in release


def accepts_simple_element(release: str | None, simple_element: str | None) -> bool:
    """
    Return whether `release` satisfies a single simple-element.

    An empty release, an empty simple-element, or a bare modifier never
    accepts anything.
    """
    if not release or not simple_element:
        return False

    modifier = simple_element[-1]
    if modifier not in (AT_LEAST_MODIFIER, PREFIX_MODIFIER):
        return exact_version_compare(release, simple_element) == 0

    version_id = simple_element[:-1]
    if not version_id:
        return False
    if is_milestone(release):
        return release == version_id
    if modifier == PREFIX_MODIFIER:
        return prefix_version_compare(release, version_id) == 0
    return exact_version_compare(release, version_id) >= 0


def accepts_element(release: str | None, element: str | None) -> bool:
    """
    Return whether `release` satisfies every simple-element of `element`.
    """
    for simple_element in iter_spans(element or "", SIMPLE_ELEMENT_DELIMITER):
        if not accepts_simple_element(release, simple_element):
            logger.debug(f"{release!r} rejected by simple-element {simple_element!r}")
            return False
    return True


def matching_element(release: str | None, version_string: str | None) -> str | None:
    """
    Return the first element of `version_string` that `release` satisfies,
    or `None` if there is no such element.
    """
    for element in iter_spans(version_string or "", ELEMENT_DELIMITER):
        if accepts_element(release, element):
            return element
    return None


def is_acceptable_release(release: str | None, version_string: str | None) -> bool:
    """
    Return whether `release` satisfies at least one element of `version_string`.

    `version_string` is not validated. A malformed expression still produces
    an answer, but callers wanting a structural guarantee should check it with
    `is_valid_version_string` first.
    """
    return matching_element(release, version_string) is not None


def acceptable_releases(releases: Iterable[str], version_string: str | None) -> list[str]:
    """
    Return the releases that satisfy `version_string`, in their original order.
    """
    return [release for release in releases if is_acceptable_release(release, version_string)]


def select_release(releases: Iterable[str], version_string: str | None) -> str | None:
    """
    Return the newest release that satisfies `version_string`.

    Releases are ordered by Exact Match. Of several acceptable releases that
    compare equal (such as `1.8` and `1.8.0`), the first one seen is chosen.
    Returns `None` if no release is acceptable.
    """
    selected: str | None = None
    for release in acceptable_releases(releases, version_string):
        if selected is None or exact_version_compare(release, selected) > 0:
            selected = release
    logger.debug(f"selected {selected!r} for {version_string!r}")
    return selected
