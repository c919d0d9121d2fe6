"""
The `jsr56` APIs.

Version-id comparison, release matching and version-string validation
following the JSR 56 version-string grammar.
"""

from jsr56._component import compare_component
from jsr56._grammar import (
    VersionStringError,
    explain_invalid,
    is_valid_element,
    is_valid_simple_element,
    is_valid_version_string,
    parse_version_string,
)
from jsr56._release import (
    acceptable_releases,
    accepts_element,
    accepts_simple_element,
    is_acceptable_release,
    matching_element,
    select_release,
)
from jsr56._types import Element, Modifier, ReleaseMatch, SimpleElement, VersionString
from jsr56._version import __version__
from jsr56._version_id import exact_version_compare, iter_components, prefix_version_compare

__all__ = [
    "__version__",
    "Element",
    "Modifier",
    "ReleaseMatch",
    "SimpleElement",
    "VersionString",
    "VersionStringError",
    "acceptable_releases",
    "accepts_element",
    "accepts_simple_element",
    "compare_component",
    "exact_version_compare",
    "explain_invalid",
    "is_acceptable_release",
    "is_valid_element",
    "is_valid_simple_element",
    "is_valid_version_string",
    "iter_components",
    "matching_element",
    "parse_version_string",
    "prefix_version_compare",
    "select_release",
]
