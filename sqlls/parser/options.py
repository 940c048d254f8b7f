"""Parser configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Options forwarded to sqlglot.

    `dialect` is any name sqlglot accepts (`"postgres"`, `"mysql"`, ...);
    `None` selects sqlglot's generic dialect.
    """

    dialect: str | None = None
