"""Lint runner over one sqlglot tokenization."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Final, Protocol

import sqlglot
from sqlglot import exp
from sqlglot.errors import ErrorLevel

from sqlls.lint.config import LintConfig, RawLintConfig, load_lint_config
from sqlls.lint.findings import LintFinding, LintResult
from sqlls.lint.rules import (
    LintContext,
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from sqlls.text import LineIndex

logger = logging.getLogger(__name__)

TEXT_FILE_PATH: Final[str] = "text"


class Linter(Protocol):
    """Anything that turns SQL text plus configuration into lint result groups."""

    def lint(self, text: str, config: LintConfig | RawLintConfig | None = None) -> list[LintResult]: ...


class SqlLinter:
    """Default linter: sqlglot tokens through the configured rule set."""

    def __init__(
        self,
        *,
        dialect: str | None = None,
        config_path: str | Path | None = None,
        rules: Sequence[LintRule] | None = None,
    ) -> None:
        self.dialect = dialect
        self.config_path = config_path
        self.rules = tuple(rules) if rules is not None else default_lint_rules()
        validate_lint_rules(self.rules)

    def lint(self, text: str, config: LintConfig | RawLintConfig | None = None) -> list[LintResult]:
        resolved = load_lint_config(
            config,
            config_path=self.config_path,
            known_rules=frozenset(rule.name for rule in self.rules),
        )
        context = LintContext(
            text=text,
            tokens=tuple(sqlglot.tokenize(text, read=self.dialect)),
            line_index=LineIndex(text),
            identifier_names=self._identifier_names(text),
        )

        findings: list[LintFinding] = []
        for rule in self.rules:
            setting = resolved.setting_for(rule.name)
            if not setting.enabled:
                continue
            findings.extend(rule.run(context, setting))

        logger.debug("lint produced %d findings", len(findings))
        return [LintResult(file_path=TEXT_FILE_PATH, diagnostics=_sort_findings(findings))]

    def _identifier_names(self, text: str) -> frozenset[str]:
        # Partial trees are enough here; syntax errors are reported by the parser adapter.
        statements = sqlglot.parse(text, read=self.dialect, error_level=ErrorLevel.IGNORE)
        return frozenset(
            identifier.name
            for statement in statements
            if statement is not None
            for identifier in statement.find_all(exp.Identifier)
        )


def run_lint(
    text: str,
    config: LintConfig | RawLintConfig | None = None,
    *,
    dialect: str | None = None,
    config_path: str | Path | None = None,
    rules: Sequence[LintRule] | None = None,
) -> list[LintResult]:
    """Lint `text` with a one-off `SqlLinter`."""
    return SqlLinter(dialect=dialect, config_path=config_path, rules=rules).lint(text, config)


def _sort_findings(findings: list[LintFinding]) -> tuple[LintFinding, ...]:
    return tuple(
        sorted(
            findings,
            key=lambda finding: (
                finding.location.start,
                finding.location.end,
                finding.rule_name,
                finding.message,
            ),
        )
    )
