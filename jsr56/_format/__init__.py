"""
Output format interfaces and implementations for `jsr56`.
"""

from .columns import ColumnsFormat
from .interface import MatchFormat
from .json import JsonFormat
from .markdown import MarkdownFormat

__all__ = [
    "ColumnsFormat",
    "MatchFormat",
    "JsonFormat",
    "MarkdownFormat",
]
