"""
Command-line entrypoints for `jsr56`.
"""

from __future__ import annotations

import argparse
import enum
import logging
import os
import re
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterable, Iterator, NoReturn

from jsr56 import __version__
from jsr56._format import ColumnsFormat, JsonFormat, MarkdownFormat, MatchFormat
from jsr56._grammar import VersionStringError, parse_version_string
from jsr56._release import matching_element, select_release
from jsr56._types import ReleaseMatch
from jsr56._util import assert_never

logging.basicConfig()
logger = logging.getLogger(__name__)

# NOTE: We configure the top package logger, rather than the root logger,
# to avoid overly verbose logging in third-party code by default.
package_logger = logging.getLogger("jsr56")
package_logger.setLevel(os.environ.get("JSR56_LOGLEVEL", "INFO").upper())

_COMMENT_RE = re.compile(r"(?:^|\s)#.*$", re.DOTALL)


@contextmanager
def _output_io(name: Path) -> Iterator[IO[str]]:  # pragma: no cover
    """
    A context managing wrapper for the `--output` flag. This allows us
    to avoid `argparse.FileType`'s "eager" file creation, which is generally
    the wrong/unexpected behavior when dealing with fallible processes.
    """
    if str(name) in {"stdout", "-"}:
        yield sys.stdout
    else:
        with name.open("w") as io:
            yield io


@enum.unique
class OutputFormatChoice(str, enum.Enum):
    """
    Output formats supported by the `jsr56` CLI.
    """

    Columns = "columns"
    Json = "json"
    Markdown = "markdown"

    def to_format(self) -> MatchFormat:
        if self is OutputFormatChoice.Columns:
            return ColumnsFormat()
        elif self is OutputFormatChoice.Json:
            return JsonFormat()
        elif self is OutputFormatChoice.Markdown:
            return MarkdownFormat()
        else:
            assert_never(self)  # pragma: no cover

    def __str__(self) -> str:
        return self.value


def _enum_help(msg: str, e: type[enum.Enum]) -> str:  # pragma: no cover
    """
    Render a `--help`-style string for the given enumeration.
    """
    return f"{msg} (choices: {', '.join(str(v) for v in e)})"


def _fatal(msg: str) -> NoReturn:  # pragma: no cover
    """
    Log a fatal error to the standard error stream and exit.
    """
    logger.error(msg)
    sys.exit(1)


def _parser() -> argparse.ArgumentParser:  # pragma: no cover
    parser = argparse.ArgumentParser(
        prog="jsr56",
        description="check releases against a JSR 56 version string",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "version_string",
        metavar="VERSION_STRING",
        help="the version string to check releases against, e.g. '1.6+ 1.8*'",
    )
    parser.add_argument(
        "releases",
        metavar="RELEASE",
        nargs="*",
        help="a release to check; if no releases are given, only validate the version string",
    )
    parser.add_argument(
        "-r",
        "--release-file",
        type=argparse.FileType("r"),
        metavar="FILE",
        action="append",
        dest="release_files",
        default=[],
        help="check the releases listed in the given file, one per line; "
        "this option can be used multiple times",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=OutputFormatChoice,
        choices=OutputFormatChoice,
        default=OutputFormatChoice.Columns,
        metavar="FORMAT",
        help=_enum_help("the format to emit match results in", OutputFormatChoice),
    )
    parser.add_argument(
        "--select",
        action="store_true",
        help="also report the newest acceptable release",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="check releases without first validating the version string; "
        "malformed version strings still produce a result, but it may be meaningless",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="run with additional debug logging; supply multiple times to increase verbosity",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="output results to the given file",
        default="stdout",
    )
    return parser


def _parse_args(parser: argparse.ArgumentParser) -> argparse.Namespace:  # pragma: no cover
    args = parser.parse_args()

    # Configure logging upfront, so that we don't miss anything.
    if args.verbose >= 1:
        package_logger.setLevel("DEBUG")
    if args.verbose >= 2:
        logging.getLogger().setLevel("DEBUG")

    logger.debug(f"parsed arguments: {args}")

    return args


def _read_releases(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield the releases listed in `lines`, skipping blank lines and `#` comments.

    A comment starts at a `#` that begins the line or follows whitespace; a `#`
    inside a release is part of the release.
    """
    for line in lines:
        release = _COMMENT_RE.sub("", line).strip()
        if release:
            yield release


def check() -> None:  # pragma: no cover
    """
    The primary entrypoint for `jsr56`.
    """
    parser = _parser()
    args = _parse_args(parser)

    formatter = args.format.to_format()

    releases: list[str] = list(args.releases)
    for release_file in args.release_files:
        with release_file:
            releases.extend(_read_releases(release_file))

    if args.no_validate:
        if not releases:
            parser.error("The --no-validate flag requires at least one release to check")
        logger.warning("Not validating the version string; results may be meaningless")
    else:
        try:
            parse_version_string(args.version_string)
        except VersionStringError as e:
            _fatal(str(e))

    matches: list[ReleaseMatch] = []
    for release in releases:
        element = matching_element(release, args.version_string)
        logger.debug(f"Checked {release}: matched element {element!r}")
        matches.append(ReleaseMatch(release, element))

    selected = select_release(releases, args.version_string) if args.select else None

    if not releases:
        print(f"Valid version string: {args.version_string}", file=sys.stderr)
        if formatter.is_manifest:
            with _output_io(args.output) as io:
                print(formatter.format(args.version_string, matches, selected), file=io)
        return

    accepted_count = sum(1 for match in matches if match.is_acceptable)
    summary_msg = (
        f"Found {accepted_count} acceptable "
        f"{'release' if accepted_count == 1 else 'releases'} "
        f"out of {len(matches)}"
    )
    if selected is not None:
        summary_msg += f"; selected {selected}"
    print(summary_msg, file=sys.stderr)

    with _output_io(args.output) as io:
        print(formatter.format(args.version_string, matches, selected), file=io)

    if accepted_count == 0:
        sys.exit(1)
