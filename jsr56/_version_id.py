"""
Component-wise comparison of version-ids.

A version-id such as `1.8.0_202` is a sequence of components separated by
any of `.`, `-` or `_`. Two comparison policies are defined, and they differ
only in what happens once one operand runs out of components:

* Prefix Match stops, so unmatched trailing components are ignored
  (`1.2` matches `1.2.3`).
* Exact Match keeps going, treating each missing component as `0`
  (`1.2` matches `1.2.0` but not `1.2.1`).
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import zip_longest

from jsr56._component import compare_component
from jsr56._util import iter_spans

SEPARATORS = frozenset(".-_")
"""Characters separating the components of a version-id."""

ZERO_COMPONENT = "0"
"""The component an exhausted version-id contributes under Exact Match."""


def iter_components(version_id: str | None) -> Iterator[str]:
    """
    Lazily yield the components of `version_id`, left to right.
    """
    return iter_spans(version_id or "", SEPARATORS)


def prefix_version_compare(id1: str | None, id2: str | None) -> int:
    """
    Compare two version-ids for a Prefix Match.

    Components are compared pairwise until one pair differs or either
    version-id has no components left; the last comparison decides.
    """
    result = 0
    for left, right in zip(iter_components(id1), iter_components(id2)):
        result = compare_component(left, right)
        if result != 0:
            break
    return result


def exact_version_compare(id1: str | None, id2: str | None) -> int:
    """
    Compare two version-ids for an Exact Match.

    Components are compared pairwise until one pair differs or both
    version-ids are exhausted. The shorter version-id is padded with `0`.
    """
    result = 0
    for left, right in zip_longest(
        iter_components(id1), iter_components(id2), fillvalue=ZERO_COMPONENT
    ):
        result = compare_component(left, right)
        if result != 0:
            break
    return result
