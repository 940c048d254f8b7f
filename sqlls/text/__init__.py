"""Source text coordinates."""

from sqlls.text.text import LineIndex, SourcePosition, SourceRange, TextRange

__all__ = [
    "LineIndex",
    "SourcePosition",
    "SourceRange",
    "TextRange",
]
