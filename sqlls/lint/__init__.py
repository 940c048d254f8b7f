"""SQL lint rules, configuration and runner."""

from sqlls.lint.config import (
    CONFIG_FILE_NAME,
    DEFAULT_RULE_SETTINGS,
    LintConfig,
    LintConfigError,
    RawLintConfig,
    RuleSetting,
    load_lint_config,
)
from sqlls.lint.findings import ErrorLevel, LintFinding, LintResult
from sqlls.lint.rules import (
    LintContext,
    LintRule,
    ReservedWordCaseRule,
    SelectStarRule,
    SpaceSurroundingOperatorsRule,
    TrailingWhitespaceRule,
    default_lint_rules,
    validate_lint_rules,
)
from sqlls.lint.runner import Linter, SqlLinter, run_lint

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_RULE_SETTINGS",
    "ErrorLevel",
    "LintConfig",
    "LintConfigError",
    "LintContext",
    "LintFinding",
    "LintResult",
    "LintRule",
    "Linter",
    "RawLintConfig",
    "ReservedWordCaseRule",
    "RuleSetting",
    "SelectStarRule",
    "SpaceSurroundingOperatorsRule",
    "SqlLinter",
    "TrailingWhitespaceRule",
    "default_lint_rules",
    "load_lint_config",
    "run_lint",
    "validate_lint_rules",
]
