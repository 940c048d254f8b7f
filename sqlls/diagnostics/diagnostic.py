"""Builders for LSP diagnostics.

Source ranges are 1-based; protocol ranges are 0-based. Lint findings shift
both line and column by one, syntax errors shift only the line.
"""

from typing import Final

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from sqlls.diagnostics.codes import Severity
from sqlls.text import SourcePosition, SourceRange

DIAGNOSTIC_SOURCE: Final[str] = "sql"


def lint_position(position: SourcePosition) -> Position:
    return Position(line=position.line - 1, character=position.column - 1)


def syntax_error_position(position: SourcePosition) -> Position:
    # Column is not decremented for parser errors; downstream clients rely on it.
    return Position(line=position.line - 1, character=position.column)


def lint_range(location: SourceRange) -> Range:
    return Range(start=lint_position(location.start), end=lint_position(location.end))


def syntax_error_range(location: SourceRange) -> Range:
    return Range(start=syntax_error_position(location.start), end=syntax_error_position(location.end))


def to_protocol_severity(severity: Severity) -> DiagnosticSeverity:
    if severity == "error":
        return DiagnosticSeverity.Error
    return DiagnosticSeverity.Warning


def make_diagnostic(range: Range, message: str, severity: DiagnosticSeverity) -> Diagnostic:
    """Build a diagnostic tagged with this server as its source."""
    return Diagnostic(
        range=range,
        message=message,
        severity=severity,
        source=DIAGNOSTIC_SOURCE,
        related_information=[],
    )
