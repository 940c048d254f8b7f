"""Lint findings to LSP diagnostics, recording provenance in the lint cache."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from lsprotocol.types import Diagnostic

from sqlls.diagnostics import lint_range, make_diagnostic, to_protocol_severity
from sqlls.lint import LintConfig, Linter, LintFinding, LintResult, RawLintConfig
from sqlls.pipeline.cache import LintCache, LintCacheEntry

logger = logging.getLogger(__name__)


def translate_lint(
    uri: str,
    sql: str,
    config: LintConfig | RawLintConfig | None = None,
    *,
    cache: LintCache,
    linter: Linter,
) -> list[Diagnostic]:
    """Lint `sql` and replace the cache entries for `uri` with the results.

    Empty `sql` returns no diagnostics and leaves the cache alone.
    """
    if not sql:
        return []

    findings = flatten_results(linter.lint(sql, config))
    entries = [LintCacheEntry(diagnostic=finding_to_diagnostic(finding), lint=finding) for finding in findings]
    cache.set_entries(uri, entries)
    logger.debug("translated %d lint findings for %s", len(entries), uri)
    return [entry.diagnostic for entry in entries]


def flatten_results(results: Iterable[LintResult]) -> list[LintFinding]:
    findings: list[LintFinding] = []
    for result in results:
        findings.extend(result.diagnostics)
    return findings


def finding_to_diagnostic(finding: LintFinding) -> Diagnostic:
    return make_diagnostic(
        range=lint_range(finding.location),
        message=finding.message,
        severity=to_protocol_severity(finding.error_level.severity),
    )
