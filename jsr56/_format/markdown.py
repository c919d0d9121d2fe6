"""
Functionality for formatting release match results as a Markdown table.
"""

from __future__ import annotations

from textwrap import dedent

from jsr56._types import ReleaseMatch

from .interface import MatchFormat


class MarkdownFormat(MatchFormat):
    """
    An implementation of `MatchFormat` that formats release match results as a Markdown table.
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
        Returns a Markdown formatted string representing the results of checking releases
        against `version_string`.
        """
        output = self._format_matches(matches)
        if selected is not None:
            # If we wrote the results table already, we need a blank line to
            # keep the selection out of the table.
            if output:
                output += "\n\n"
            output += f"Selected: `{selected}`"
        return output

    def _format_matches(self, matches: list[ReleaseMatch]) -> str:
        header = "Release | Acceptable | Matched Element"
        border = "--- | --- | ---"

        match_rows = [self._format_match(match) for match in matches]
        if not match_rows:
            return ""

        return (
            dedent(
                f"""
            {header}
            {border}
            """
            )
            + "\n".join(match_rows)
        )

    def _format_match(self, match: ReleaseMatch) -> str:
        acceptable = "yes" if match.is_acceptable else "no"
        matched_element = f"`{match.matched_element}`" if match.matched_element else ""
        return f"{match.release} | {acceptable} | {matched_element}"
