"""
Functionality for formatting release match results as a set of human-readable columns.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest
from typing import Any

from jsr56._types import ReleaseMatch

from .interface import MatchFormat


def tabulate(rows: Iterable[Iterable[Any]]) -> tuple[list[str], list[int]]:
    """Return a list of formatted rows and a list of column sizes.
    For example::
    >>> tabulate([['1.8.0_202', 'yes'], ['1.7']])
    (['1.8.0_202 yes', '1.7'], [9, 3])
    """
    rows = [tuple(map(str, row)) for row in rows]
    sizes = [max(map(len, col)) for col in zip_longest(*rows, fillvalue="")]
    table = [" ".join(map(str.ljust, row, sizes)).rstrip() for row in rows]
    return table, sizes


class ColumnsFormat(MatchFormat):
    """
    An implementation of `MatchFormat` that formats release match results as a set of columns.
    """

    @property
    def is_manifest(self) -> bool:
        """
        See `MatchFormat.is_manifest`.
        """
        return False

    def format(
        self,
        version_string: str,
        matches: list[ReleaseMatch],
        selected: str | None,
    ) -> str:
        """
        Returns a column formatted string for the results of checking releases against
        `version_string`.

        See `MatchFormat.format`.
        """
        match_data: list[list[Any]] = [["Release", "Acceptable", "Matched Element"]]
        for match in matches:
            match_data.append(self._format_match(match))

        columns_string = ""

        # If it's just a header, don't bother adding it to the output
        if len(match_data) > 1:
            match_strings, sizes = tabulate(match_data)
            match_strings.insert(1, " ".join("-" * size for size in sizes))
            columns_string = "\n".join(match_strings)

        if selected is not None:
            if columns_string:
                columns_string += "\n\n"
            columns_string += f"Selected: {selected}"

        return columns_string

    def _format_match(self, match: ReleaseMatch) -> list[Any]:
        return [
            match.release,
            "yes" if match.is_acceptable else "no",
            match.matched_element or "",
        ]
