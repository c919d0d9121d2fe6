"""
Functionality for formatting release match results as a JSON object.
"""

from __future__ import annotations

import json
from typing import Any

from jsr56._types import ReleaseMatch

from .interface import MatchFormat


class JsonFormat(MatchFormat):
    """
    An implementation of `MatchFormat` that formats release match results as a JSON object.
    """

    @property
    def is_manifest(self) -> bool:
        """
        See `MatchFormat.is_manifest`.
        """
        return True

    def format(
        self,
        version_string: str,
        matches: list[ReleaseMatch],
        selected: str | None,
    ) -> str:
        """
        Returns a JSON formatted string for the results of checking releases against
        `version_string`.

        See `MatchFormat.format`.
        """
        output_json: dict[str, Any] = {
            "version_string": version_string,
            "releases": [self._format_match(match) for match in matches],
            "selected": selected,
        }
        return json.dumps(output_json)

    def _format_match(self, match: ReleaseMatch) -> dict[str, Any]:
        return {
            "release": match.release,
            "acceptable": match.is_acceptable,
            "matched_element": match.matched_element,
        }
