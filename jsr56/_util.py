"""
Utility functions for `jsr56`.
"""

from __future__ import annotations

from collections.abc import Container, Iterator
from typing import NoReturn  # pragma: no cover


def assert_never(x: NoReturn) -> NoReturn:  # pragma: no cover
    """
    A hint to the typechecker that a branch can never occur.
    """
    assert False, f"unhandled type: {type(x).__name__}"


def iter_spans(text: str, delimiters: Container[str]) -> Iterator[str]:
    """
    Lazily yield the substrings of `text` bounded by any of `delimiters`.

    Like `str.split`, adjacent delimiters produce empty spans and the empty
    string produces a single empty span. `text` is never modified, so calling
    this again on the same input starts a fresh traversal.
    """
    start = 0
    for index, char in enumerate(text):
        if char in delimiters:
            yield text[start:index]
            start = index + 1
    yield text[start:]
