"""Lint configuration: normalization of raw `.sqlintrc.json` style mappings."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, TypeAlias

from sqlls.lint.findings import ErrorLevel

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME: Final[str] = ".sqlintrc.json"
USER_CONFIG_DIR: Final[Path] = Path("~/.config/sql-language-server")

RawLintConfig: TypeAlias = Mapping[str, Any]

_LEVEL_NAMES: Final[Mapping[str, ErrorLevel]] = MappingProxyType(
    {
        "off": ErrorLevel.OFF,
        "warn": ErrorLevel.WARNING,
        "warning": ErrorLevel.WARNING,
        "error": ErrorLevel.ERROR,
    }
)


class LintConfigError(ValueError):
    """Raised for lint configuration that cannot be normalized."""


@dataclass(frozen=True, slots=True)
class RuleSetting:
    """Level plus optional rule-specific option."""

    level: ErrorLevel = ErrorLevel.WARNING
    option: Any = None

    @property
    def enabled(self) -> bool:
        return self.level is not ErrorLevel.OFF


DEFAULT_RULE_SETTINGS: Final[Mapping[str, RuleSetting]] = MappingProxyType(
    {
        "reserved-word-case": RuleSetting(ErrorLevel.WARNING, "upper"),
        "space-surrounding-operators": RuleSetting(ErrorLevel.WARNING),
        "select-star": RuleSetting(ErrorLevel.OFF),
        "trailing-whitespace": RuleSetting(ErrorLevel.WARNING),
    }
)


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Resolved per-rule settings.

    Rules missing from `rules` use `DEFAULT_RULE_SETTINGS`, or warning level
    when they have no default.
    """

    rules: Mapping[str, RuleSetting] = field(default_factory=lambda: MappingProxyType({}))

    def setting_for(self, rule_name: str) -> RuleSetting:
        setting = self.rules.get(rule_name)
        if setting is not None:
            return setting
        return DEFAULT_RULE_SETTINGS.get(rule_name, RuleSetting())

    @staticmethod
    def from_mapping(raw: RawLintConfig, *, known_rules: frozenset[str] | None = None) -> "LintConfig":
        if not isinstance(raw, Mapping):
            raise LintConfigError(f"Lint config must be a mapping, got {type(raw).__name__}")
        raw_rules = raw.get("rules", {})
        if raw_rules is None:
            raw_rules = {}
        if not isinstance(raw_rules, Mapping):
            raise LintConfigError(f"`rules` must be a mapping, got {type(raw_rules).__name__}")

        allowed = known_rules if known_rules is not None else frozenset(DEFAULT_RULE_SETTINGS)
        rules: dict[str, RuleSetting] = {}
        for name, value in raw_rules.items():
            if name not in allowed:
                raise LintConfigError(f"Unknown lint rule `{name}`")
            rules[name] = _parse_rule_setting(name, value)
        return LintConfig(rules=MappingProxyType(rules))


def load_lint_config(
    config: LintConfig | RawLintConfig | None = None,
    *,
    config_path: str | Path | None = None,
    known_rules: frozenset[str] | None = None,
) -> LintConfig:
    """Resolve lint configuration.

    Precedence: explicit `config`, then `.sqlintrc.json` in `config_path`,
    then the per-user config file, then the built-in defaults.
    """
    if isinstance(config, LintConfig):
        return config
    if config is not None:
        return LintConfig.from_mapping(config, known_rules=known_rules)

    candidates: list[Path] = []
    if config_path is not None:
        candidates.append(Path(config_path) / CONFIG_FILE_NAME)
    candidates.append(USER_CONFIG_DIR.expanduser() / CONFIG_FILE_NAME)

    for candidate in candidates:
        if candidate.is_file():
            logger.debug("loading lint config from %s", candidate)
            return LintConfig.from_mapping(_read_config_file(candidate), known_rules=known_rules)
    return LintConfig()


def _read_config_file(path: Path) -> RawLintConfig:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise LintConfigError(f"Invalid JSON in lint config {path}: {exc}") from exc


def _parse_rule_setting(name: str, value: Any) -> RuleSetting:
    if isinstance(value, (list, tuple)):
        if len(value) == 0 or len(value) > 2:
            raise LintConfigError(f"Rule `{name}` expects `[level]` or `[level, option]`, got {value!r}")
        option = value[1] if len(value) == 2 else None
        return RuleSetting(level=_parse_level(name, value[0]), option=option)
    return RuleSetting(level=_parse_level(name, value))


def _parse_level(name: str, value: Any) -> ErrorLevel:
    # bool is an int subclass; `true` in JSON is not a level.
    if isinstance(value, bool):
        raise LintConfigError(f"Rule `{name}` has invalid level {value!r}")
    if isinstance(value, int):
        try:
            return ErrorLevel(value)
        except ValueError:
            raise LintConfigError(f"Rule `{name}` has invalid level {value!r}; expected 0, 1 or 2") from None
    if isinstance(value, str):
        level = _LEVEL_NAMES.get(value.lower())
        if level is not None:
            return level
    raise LintConfigError(f"Rule `{name}` has invalid level {value!r}; expected off/warning/error")
