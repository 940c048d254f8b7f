"""Lint rules and rule contracts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Literal, Protocol, TypeAlias

from sqlglot.tokens import Token, TokenType

from sqlls.diagnostics import (
    LINT_RESERVED_WORD_CASE,
    LINT_SELECT_STAR,
    LINT_SPACE_SURROUNDING_OPERATORS,
    LINT_TRAILING_WHITESPACE,
)
from sqlls.lint.config import LintConfigError, RuleSetting
from sqlls.lint.findings import LintFinding
from sqlls.text import LineIndex, SourceRange, TextRange

LintCategory: TypeAlias = Literal["style", "semantic"]

_RULE_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-z]+(?:-[a-z]+)*")


@dataclass(frozen=True, slots=True)
class LintContext:
    """Tokenized source shared by every rule in one lint run.

    `identifier_names` holds the raw text of every identifier in the parsed
    statements, so keyword-typed tokens used as names (`date`, `first`) can be
    told apart from keywords.
    """

    text: str
    tokens: tuple[Token, ...]
    line_index: LineIndex
    identifier_names: frozenset[str] = frozenset()

    def token_range(self, token: Token) -> SourceRange:
        # sqlglot token ends are inclusive offsets.
        return self.line_index.source_range(TextRange(token.start, token.end + 1))

    def text_range(self, range: TextRange) -> SourceRange:
        return self.line_index.source_range(range)


class LintRule(Protocol):
    """Token-level lint rule contract."""

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> LintCategory: ...

    def run(self, context: LintContext, setting: RuleSetting) -> list[LintFinding]: ...


_NON_KEYWORD_TOKENS: Final[frozenset[TokenType]] = frozenset(
    {
        TokenType.VAR,
        TokenType.IDENTIFIER,
        TokenType.STRING,
        TokenType.NUMBER,
        TokenType.PARAMETER,
        TokenType.NATIONAL_STRING,
        TokenType.BIT_STRING,
        TokenType.HEX_STRING,
        TokenType.BYTE_STRING,
    }
)
_WORD_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_]+(?:\s+[A-Za-z_]+)*")


@dataclass(frozen=True, slots=True)
class ReservedWordCaseRule:
    """Flags keywords not written in the configured case (`upper` or `lower`)."""

    name: str = LINT_RESERVED_WORD_CASE.code
    category: LintCategory = "style"

    def run(self, context: LintContext, setting: RuleSetting) -> list[LintFinding]:
        case = setting.option if setting.option is not None else "upper"
        if case not in ("upper", "lower"):
            raise LintConfigError(f"Rule `{self.name}` option must be `upper` or `lower`, got {case!r}")

        findings: list[LintFinding] = []
        for token in context.tokens:
            if token.token_type in _NON_KEYWORD_TOKENS:
                continue
            if not _WORD_PATTERN.fullmatch(token.text):
                continue
            if token.text in context.identifier_names:
                continue
            expected = token.text.upper() if case == "upper" else token.text.lower()
            if token.text == expected:
                continue
            findings.append(
                LintFinding(
                    message=LINT_RESERVED_WORD_CASE.message.format(case=case),
                    location=context.token_range(token),
                    error_level=setting.level,
                    rule_name=self.name,
                )
            )
        return findings


_SPACED_OPERATORS: Final[frozenset[TokenType]] = frozenset(
    {
        TokenType.EQ,
        TokenType.NEQ,
        TokenType.LT,
        TokenType.LTE,
        TokenType.GT,
        TokenType.GTE,
        TokenType.PLUS,
        TokenType.SLASH,
        TokenType.DPIPE,
    }
)


@dataclass(frozen=True, slots=True)
class SpaceSurroundingOperatorsRule:
    """Flags binary operators without whitespace on both sides."""

    name: str = LINT_SPACE_SURROUNDING_OPERATORS.code
    category: LintCategory = "style"

    def run(self, context: LintContext, setting: RuleSetting) -> list[LintFinding]:
        text = context.text
        findings: list[LintFinding] = []
        for token in context.tokens:
            if token.token_type not in _SPACED_OPERATORS:
                continue
            before = text[token.start - 1] if token.start > 0 else ""
            after = text[token.end + 1] if token.end + 1 < len(text) else ""
            if before.isspace() and after.isspace():
                continue
            findings.append(
                LintFinding(
                    message=LINT_SPACE_SURROUNDING_OPERATORS.message.format(operator=token.text),
                    location=context.token_range(token),
                    error_level=setting.level,
                    rule_name=self.name,
                )
            )
        return findings


_STAR_PROJECTION_PREDECESSORS: Final[frozenset[TokenType]] = frozenset(
    {TokenType.SELECT, TokenType.DISTINCT, TokenType.COMMA, TokenType.DOT}
)


@dataclass(frozen=True, slots=True)
class SelectStarRule:
    """Flags `*` projections (`SELECT *`, `SELECT t.*`)."""

    name: str = LINT_SELECT_STAR.code
    category: LintCategory = "semantic"

    def run(self, context: LintContext, setting: RuleSetting) -> list[LintFinding]:
        findings: list[LintFinding] = []
        previous: Token | None = None
        for token in context.tokens:
            if (
                token.token_type == TokenType.STAR
                and previous is not None
                and previous.token_type in _STAR_PROJECTION_PREDECESSORS
            ):
                findings.append(
                    LintFinding(
                        message=LINT_SELECT_STAR.message,
                        location=context.token_range(token),
                        error_level=setting.level,
                        rule_name=self.name,
                    )
                )
            previous = token
        return findings


@dataclass(frozen=True, slots=True)
class TrailingWhitespaceRule:
    """Flags spaces/tabs at the end of a line."""

    name: str = LINT_TRAILING_WHITESPACE.code
    category: LintCategory = "style"

    _pattern: re.Pattern[str] = re.compile(r"[ \t]+(?=\r?$)", re.MULTILINE)

    def run(self, context: LintContext, setting: RuleSetting) -> list[LintFinding]:
        findings: list[LintFinding] = []
        for match in self._pattern.finditer(context.text):
            findings.append(
                LintFinding(
                    message=LINT_TRAILING_WHITESPACE.message,
                    location=context.text_range(TextRange(match.start(), match.end())),
                    error_level=setting.level,
                    rule_name=self.name,
                )
            )
        return findings


def default_lint_rules() -> tuple[LintRule, ...]:
    rules: list[LintRule] = [
        ReservedWordCaseRule(),
        SpaceSurroundingOperatorsRule(),
        SelectStarRule(),
        TrailingWhitespaceRule(),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.name)))


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    allowed_categories = {"style", "semantic"}
    seen: set[str] = set()
    for rule in rules:
        if not _RULE_NAME_PATTERN.fullmatch(rule.name):
            raise ValueError(f"Lint rule `{rule.name}` has invalid name; expected kebab-case.")
        if rule.category not in allowed_categories:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid category `{rule.category}`; expected style/semantic."
            )
        if rule.name in seen:
            raise ValueError(f"Lint rule `{rule.name}` is registered more than once.")
        seen.add(rule.name)
