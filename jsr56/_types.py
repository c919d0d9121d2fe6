"""
Parsed representations of version-strings.

These types mirror the textual grammar one-to-one: rendering a parsed
`VersionString` with `str()` reproduces the text it was parsed from. Use
`jsr56.parse_version_string` to build them from text.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from jsr56._release import (
    ELEMENT_DELIMITER,
    SIMPLE_ELEMENT_DELIMITER,
    accepts_simple_element,
    select_release,
)
from jsr56._version_id import iter_components


@enum.unique
class Modifier(str, enum.Enum):
    """
    The optional trailing modifier of a simple-element.
    """

    AtLeast = "+"
    Prefix = "*"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SimpleElement:
    """
    A version-id with an optional modifier, e.g. `1.6+` or `1.8*`.
    """

    version_id: str
    """The version-id being matched against."""

    modifier: Modifier | None = None
    """The match relaxation, or `None` for an Exact Match."""

    @property
    def components(self) -> tuple[str, ...]:
        """The components of this simple-element's version-id."""
        return tuple(iter_components(self.version_id))

    def accepts(self, release: str) -> bool:
        """
        Does `release` satisfy this simple-element?
        """
        return accepts_simple_element(release, str(self))

    def __str__(self) -> str:
        if self.modifier is None:
            return self.version_id
        return f"{self.version_id}{self.modifier}"


@dataclass(frozen=True)
class Element:
    """
    An intersection of simple-elements, e.g. `1.6+&1.7*`.
    """

    simple_elements: tuple[SimpleElement, ...]

    def accepts(self, release: str) -> bool:
        """
        Does `release` satisfy every simple-element?
        """
        return all(simple_element.accepts(release) for simple_element in self.simple_elements)

    def __iter__(self) -> Iterator[SimpleElement]:
        return iter(self.simple_elements)

    def __str__(self) -> str:
        return SIMPLE_ELEMENT_DELIMITER.join(str(s) for s in self.simple_elements)


@dataclass(frozen=True)
class VersionString:
    """
    A union of elements, e.g. `1.5+ 1.6* 1.7*`.
    """

    elements: tuple[Element, ...]

    def matching_element(self, release: str) -> Element | None:
        """
        Return the first element `release` satisfies, or `None`.
        """
        return next((element for element in self.elements if element.accepts(release)), None)

    def accepts(self, release: str) -> bool:
        """
        Does `release` satisfy at least one element?
        """
        return self.matching_element(release) is not None

    def select(self, releases: Iterable[str]) -> str | None:
        """
        Return the newest of `releases` satisfying this version-string.

        See `jsr56.select_release`.
        """
        return select_release(releases, str(self))

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __str__(self) -> str:
        return ELEMENT_DELIMITER.join(str(e) for e in self.elements)


@dataclass(frozen=True)
class ReleaseMatch:
    """
    The outcome of checking one release against a version-string.
    """

    release: str
    """The release that was checked."""

    matched_element: str | None = None
    """The first element the release satisfied, or `None` if it was rejected."""

    @property
    def is_acceptable(self) -> bool:
        """Whether the release satisfied the version-string."""
        return self.matched_element is not None
