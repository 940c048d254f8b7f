"""Parser boundary: sqlglot in, tagged outcomes out."""

from sqlls.parser.options import ParserOptions
from sqlls.parser.outcome import InternalFailure, ParseOutcome, Parsed, SyntaxFailure
from sqlls.parser.sql import parse_sql

__all__ = [
    "InternalFailure",
    "ParseOutcome",
    "Parsed",
    "ParserOptions",
    "SyntaxFailure",
    "parse_sql",
]
