"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str


PARSER_SYNTAX_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_SYNTAX_ERROR",
    message="Syntax error",
)

PARSER_TOKEN_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TOKEN_ERROR",
    message="Could not tokenize SQL source.",
)

LINT_RESERVED_WORD_CASE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="reserved-word-case",
    message="A reserved word must be {case} case",
)

LINT_SPACE_SURROUNDING_OPERATORS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="space-surrounding-operators",
    message="Operator `{operator}` must be surrounded by spaces",
)

LINT_SELECT_STAR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="select-star",
    message="Avoid `SELECT *`; list the columns explicitly",
)

LINT_TRAILING_WHITESPACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="trailing-whitespace",
    message="Trailing whitespace is not allowed",
)
