"""Diagnostics pipeline: lint cache, lint translation and the entrypoint."""

from sqlls.pipeline.cache import LintCache, LintCacheEntry
from sqlls.pipeline.entrypoints import DiagnosticsService, SqlParser, create_diagnostics
from sqlls.pipeline.translate import finding_to_diagnostic, flatten_results, translate_lint

__all__ = [
    "DiagnosticsService",
    "LintCache",
    "LintCacheEntry",
    "SqlParser",
    "create_diagnostics",
    "finding_to_diagnostic",
    "flatten_results",
    "translate_lint",
]
