"""Tagged parse outcomes returned by the parser adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from sqlls.text import SourceRange

if TYPE_CHECKING:
    from sqlglot import exp


@dataclass(frozen=True, slots=True)
class Parsed:
    """Source parsed cleanly into one expression per statement."""

    statements: tuple[exp.Expression, ...]


@dataclass(frozen=True, slots=True)
class SyntaxFailure:
    """The parser rejected the source; `location` uses 1-based columns."""

    message: str
    location: SourceRange


@dataclass(frozen=True, slots=True)
class InternalFailure:
    """The parser failed for a reason that is not a problem with the SQL."""

    cause: Exception


ParseOutcome: TypeAlias = Parsed | SyntaxFailure | InternalFailure
