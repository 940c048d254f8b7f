"""Diagnostics entrypoint: parse, then lint or report the syntax error."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from lsprotocol.types import Diagnostic, DiagnosticSeverity, PublishDiagnosticsParams

from sqlls.diagnostics import make_diagnostic, syntax_error_range
from sqlls.lint import LintConfig, Linter, RawLintConfig, SqlLinter
from sqlls.parser import InternalFailure, ParseOutcome, Parsed, ParserOptions, SyntaxFailure, parse_sql
from sqlls.pipeline.cache import LintCache
from sqlls.pipeline.translate import translate_lint

logger = logging.getLogger(__name__)

SqlParser: TypeAlias = Callable[[str, ParserOptions | None], ParseOutcome]


def create_diagnostics(
    uri: str,
    sql: str,
    config: LintConfig | RawLintConfig | None = None,
    *,
    cache: LintCache,
    linter: Linter | None = None,
    options: ParserOptions | None = None,
    parser: SqlParser | None = None,
) -> PublishDiagnosticsParams:
    """Build the diagnostics report for one document.

    Syntax errors become a single error diagnostic. Any other failure clears
    the cached lint entries for `uri` and propagates.
    """
    logger.debug("create_diagnostics %s", uri)
    resolved_options = options if options is not None else ParserOptions()
    resolved_linter = linter if linter is not None else _default_linter(resolved_options)
    resolved_parser = parser if parser is not None else parse_sql

    outcome = resolved_parser(sql, resolved_options)
    if isinstance(outcome, Parsed):
        logger.debug("parsed %d statements", len(outcome.statements))
        try:
            diagnostics = translate_lint(uri, sql, config, cache=cache, linter=resolved_linter)
        except Exception:
            cache.set_entries(uri, ())
            raise
    elif isinstance(outcome, SyntaxFailure):
        logger.debug("syntax error: %s", outcome.message)
        cache.set_entries(uri, ())
        diagnostics = [_syntax_error_diagnostic(outcome)]
    elif isinstance(outcome, InternalFailure):
        logger.debug("parser failed: %r", outcome.cause)
        cache.set_entries(uri, ())
        raise outcome.cause
    else:
        raise TypeError(f"Unexpected parse outcome {type(outcome).__name__}")

    logger.debug("diagnostics: %d", len(diagnostics))
    return PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)


def _default_linter(options: ParserOptions) -> SqlLinter:
    # Project `.sqlintrc.json` is looked up in the working directory.
    return SqlLinter(dialect=options.dialect, config_path=Path.cwd())


def _syntax_error_diagnostic(failure: SyntaxFailure) -> Diagnostic:
    return make_diagnostic(
        range=syntax_error_range(failure.location),
        message=failure.message,
        severity=DiagnosticSeverity.Error,
    )


class DiagnosticsService:
    """Owns the lint cache and collaborators for a server session."""

    def __init__(
        self,
        *,
        cache: LintCache | None = None,
        linter: Linter | None = None,
        options: ParserOptions | None = None,
        parser: SqlParser | None = None,
    ) -> None:
        self.options = options if options is not None else ParserOptions()
        self.cache = cache if cache is not None else LintCache()
        self.linter = linter if linter is not None else _default_linter(self.options)
        self.parser = parser

    def create_diagnostics(
        self,
        uri: str,
        sql: str,
        config: LintConfig | RawLintConfig | None = None,
    ) -> PublishDiagnosticsParams:
        return create_diagnostics(
            uri,
            sql,
            config,
            cache=self.cache,
            linter=self.linter,
            options=self.options,
            parser=self.parser,
        )
