"""Lint result carriers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from sqlls.diagnostics import Severity
from sqlls.text import SourceRange


class ErrorLevel(IntEnum):
    """Rule severity as written in lint configuration."""

    OFF = 0
    WARNING = 1
    ERROR = 2

    @property
    def severity(self) -> Severity:
        return "error" if self is ErrorLevel.ERROR else "warning"


@dataclass(frozen=True, slots=True)
class LintFinding:
    """One rule violation; `location` is 1-based with an exclusive end column."""

    message: str
    location: SourceRange
    error_level: ErrorLevel
    rule_name: str


@dataclass(frozen=True, slots=True)
class LintResult:
    """Findings reported for one linted source."""

    file_path: str
    diagnostics: tuple[LintFinding, ...] = ()
