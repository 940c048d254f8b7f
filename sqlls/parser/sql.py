"""sqlglot-backed parser adapter."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import sqlglot
from sqlglot.errors import ParseError, TokenError

from sqlls.diagnostics import PARSER_SYNTAX_ERROR, PARSER_TOKEN_ERROR
from sqlls.parser.options import ParserOptions
from sqlls.parser.outcome import InternalFailure, ParseOutcome, Parsed, SyntaxFailure
from sqlls.text import SourceRange

logger = logging.getLogger(__name__)


def parse_sql(text: str, options: ParserOptions | None = None) -> ParseOutcome:
    """Parse `text`, classifying failures instead of raising them."""
    resolved = options if options is not None else ParserOptions()
    try:
        expressions = sqlglot.parse(text, read=resolved.dialect)
    except ParseError as exc:
        return _syntax_failure_from_parse_error(exc, text)
    except TokenError as exc:
        return SyntaxFailure(
            message=str(exc) or PARSER_TOKEN_ERROR.message,
            location=SourceRange.new(1, 1, 1, 1),
        )
    except Exception as exc:
        logger.debug("sqlglot failed with an unclassified error: %r", exc)
        return InternalFailure(cause=exc)

    return Parsed(statements=tuple(expression for expression in expressions if expression is not None))


def _syntax_failure_from_parse_error(exc: ParseError, text: str) -> SyntaxFailure:
    if not exc.errors:
        return SyntaxFailure(
            message=str(exc) or PARSER_SYNTAX_ERROR.message,
            location=SourceRange.new(1, 1, 1, 1),
        )
    first = exc.errors[0]
    message = first.get("description") or str(exc) or PARSER_SYNTAX_ERROR.message
    return SyntaxFailure(message=message, location=_error_location(first, text))


def _error_location(error: Mapping[str, Any], text: str) -> SourceRange:
    # sqlglot reports the line and column of the last character of the offending token.
    end_line = max(int(error.get("line") or 1), 1)
    last_column = max(int(error.get("col") or 1), 1)
    highlight = error.get("highlight") or ""
    first_segment, *rest = highlight.split("\n")
    if not rest:
        start_column = max(last_column - len(highlight) + 1, 1)
        return SourceRange.new(end_line, start_column, end_line, last_column + 1)

    start_line = max(end_line - len(rest), 1)
    lines = text.split("\n")
    start_line_text = lines[start_line - 1] if start_line <= len(lines) else ""
    start_column = max(len(start_line_text) - len(first_segment) + 1, 1)
    return SourceRange.new(start_line, start_column, end_line, last_column + 1)
