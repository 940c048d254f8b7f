"""Diagnostics."""

from sqlls.diagnostics.codes import (
    LINT_RESERVED_WORD_CASE,
    LINT_SELECT_STAR,
    LINT_SPACE_SURROUNDING_OPERATORS,
    LINT_TRAILING_WHITESPACE,
    PARSER_SYNTAX_ERROR,
    PARSER_TOKEN_ERROR,
    DiagnosticSpec,
    Severity,
)
from sqlls.diagnostics.diagnostic import (
    DIAGNOSTIC_SOURCE,
    lint_position,
    lint_range,
    make_diagnostic,
    syntax_error_position,
    syntax_error_range,
    to_protocol_severity,
)

__all__ = [
    "DIAGNOSTIC_SOURCE",
    "LINT_RESERVED_WORD_CASE",
    "LINT_SELECT_STAR",
    "LINT_SPACE_SURROUNDING_OPERATORS",
    "LINT_TRAILING_WHITESPACE",
    "PARSER_SYNTAX_ERROR",
    "PARSER_TOKEN_ERROR",
    "DiagnosticSpec",
    "Severity",
    "lint_position",
    "lint_range",
    "make_diagnostic",
    "syntax_error_position",
    "syntax_error_range",
    "to_protocol_severity",
]
