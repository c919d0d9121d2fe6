"""
Interfaces for formatting release match results into a string representation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from jsr56._types import ReleaseMatch


class MatchFormat(ABC):
    """
    Represents an abstract string representation for release match results.
    """

    @property
    @abstractmethod
    def is_manifest(self) -> bool:  # pragma: no cover
        """
        Is this format a "manifest" format, i.e. one that prints a summary
        of all results?

        Manifest formats are always rendered, even when no releases were
        checked and the version string was only validated.
        """
        raise NotImplementedError

    @abstractmethod
    def format(
        self,
        version_string: str,
        matches: list[ReleaseMatch],
        selected: str | None,
    ) -> str:  # pragma: no cover
        """
        Convert the results of checking releases against `version_string` into a string.

        `selected` is the release chosen by `--select`, if any.
        """
        raise NotImplementedError
