"""SQL diagnostics for language servers."""

from sqlls.pipeline import DiagnosticsService, LintCache, LintCacheEntry, create_diagnostics

__all__ = [
    "DiagnosticsService",
    "LintCache",
    "LintCacheEntry",
    "create_diagnostics",
]
