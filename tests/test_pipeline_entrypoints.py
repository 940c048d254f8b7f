import json
from pathlib import Path

import pytest
from lsprotocol.types import DiagnosticSeverity, Position, PublishDiagnosticsParams, Range

from sqlls.lint import ErrorLevel, LintConfigError, LintFinding, LintResult, SqlLinter
from sqlls.lint import config as config_module
from sqlls.parser import InternalFailure, Parsed, ParserOptions, SyntaxFailure
from sqlls.pipeline import DiagnosticsService, LintCache, LintCacheEntry, create_diagnostics
from sqlls.text import SourceRange

SELECT_STAR_CONFIG = {"rules": {"select-star": "error"}}


class CountingLinter:
    def __init__(self, results: list[LintResult] | None = None) -> None:
        self.results = results if results is not None else []
        self.calls = 0

    def lint(self, text: str, config: object = None) -> list[LintResult]:
        self.calls += 1
        return self.results


class FailingLinter:
    def lint(self, text: str, config: object = None) -> list[LintResult]:
        raise RuntimeError("linter crashed")


def _syntax_failure_parser(text: str, options: ParserOptions | None) -> SyntaxFailure:
    return SyntaxFailure(
        message="Invalid expression / Unexpected token",
        location=SourceRange.new(1, 10, 1, 14),
    )


def _seeded_cache(uri: str) -> LintCache:
    cache = LintCache()
    finding = LintFinding(
        message="stale",
        location=SourceRange.new(1, 1, 1, 2),
        error_level=ErrorLevel.WARNING,
        rule_name="select-star",
    )
    create_diagnostics(
        uri,
        "SELECT 1",
        cache=cache,
        linter=CountingLinter([LintResult("text", (finding,))]),
    )
    assert len(cache.get_entries(uri)) == 1
    return cache


def test_syntax_error_becomes_single_error_diagnostic_and_clears_cache() -> None:
    cache = _seeded_cache("doc1")
    linter = CountingLinter()

    report = create_diagnostics("doc1", "SELECT * FORM t", cache=cache, linter=linter, parser=_syntax_failure_parser)

    assert report.uri == "doc1"
    assert len(report.diagnostics) == 1
    [diagnostic] = report.diagnostics
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.message == "Invalid expression / Unexpected token"
    assert diagnostic.source == "sql"
    assert diagnostic.related_information == []
    # Only the line is shifted for parser errors.
    assert diagnostic.range == Range(start=Position(line=0, character=10), end=Position(line=0, character=14))
    assert cache.get_entries("doc1") == ()
    assert linter.calls == 0


def test_real_parser_syntax_error() -> None:
    cache = LintCache()

    report = create_diagnostics("doc1", "SELECT (1", cache=cache)

    assert len(report.diagnostics) == 1
    assert report.diagnostics[0].severity == DiagnosticSeverity.Error
    assert "Expecting )" in report.diagnostics[0].message
    assert cache.get_entries("doc1") == ()
    assert "doc1" in cache


def test_select_star_lint_is_reported_and_cached() -> None:
    cache = LintCache()

    report = create_diagnostics("doc2", "SELECT * FROM t", SELECT_STAR_CONFIG, cache=cache)

    [diagnostic] = report.diagnostics
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.range == Range(start=Position(line=0, character=7), end=Position(line=0, character=8))
    [entry] = cache.get_entries("doc2")
    assert entry.diagnostic == diagnostic
    assert entry.lint == LintFinding(
        message=entry.lint.message,
        location=SourceRange.new(1, 8, 1, 9),
        error_level=ErrorLevel.ERROR,
        rule_name="select-star",
    )


def test_diagnostic_count_matches_flattened_findings_and_linter_runs_once() -> None:
    findings = tuple(
        LintFinding(
            message=f"finding {line}",
            location=SourceRange.new(line, 2, line, 5),
            error_level=ErrorLevel.WARNING,
            rule_name="select-star",
        )
        for line in (1, 2, 3)
    )
    linter = CountingLinter([LintResult("a", findings[:2]), LintResult("b", findings[2:])])
    cache = LintCache()

    report = create_diagnostics("doc", "SELECT 1", cache=cache, linter=linter)

    assert linter.calls == 1
    assert len(report.diagnostics) == 3
    for diagnostic, finding in zip(report.diagnostics, findings, strict=True):
        assert diagnostic.range.start.line == finding.location.start.line - 1
        assert diagnostic.range.start.character == finding.location.start.column - 1
        assert diagnostic.range.end.line == finding.location.end.line - 1
        assert diagnostic.range.end.character == finding.location.end.column - 1
    assert [entry.lint for entry in cache.get_entries("doc")] == list(findings)


def test_empty_text_yields_no_diagnostics_and_keeps_cache() -> None:
    cache = _seeded_cache("doc3")
    before = cache.get_entries("doc3")
    linter = CountingLinter()

    report = create_diagnostics("doc3", "", cache=cache, linter=linter)

    assert report == PublishDiagnosticsParams(uri="doc3", diagnostics=[])
    assert cache.get_entries("doc3") == before
    assert linter.calls == 0


def test_empty_text_is_still_parsed() -> None:
    seen: list[str] = []

    def parser(text: str, options: ParserOptions | None) -> Parsed:
        seen.append(text)
        return Parsed(statements=())

    create_diagnostics("doc", "", cache=LintCache(), linter=CountingLinter(), parser=parser)

    assert seen == [""]


def test_repeated_runs_replace_rather_than_accumulate() -> None:
    cache = LintCache()

    first = create_diagnostics("doc", "select * from t", SELECT_STAR_CONFIG, cache=cache)
    first_entries = cache.get_entries("doc")
    second = create_diagnostics("doc", "select * from t", SELECT_STAR_CONFIG, cache=cache)

    assert first == second
    assert cache.get_entries("doc") == first_entries
    assert len(first_entries) == len(first.diagnostics) == 3


def test_internal_parser_failure_propagates_and_clears_cache() -> None:
    cache = _seeded_cache("doc")
    error = RuntimeError("parser bug")

    def parser(text: str, options: ParserOptions | None) -> InternalFailure:
        return InternalFailure(cause=error)

    with pytest.raises(RuntimeError) as exc_info:
        create_diagnostics("doc", "SELECT 1", cache=cache, linter=CountingLinter(), parser=parser)

    assert exc_info.value is error
    assert cache.get_entries("doc") == ()


def test_linter_failure_propagates_and_clears_cache() -> None:
    cache = _seeded_cache("doc")

    with pytest.raises(RuntimeError, match="linter crashed"):
        create_diagnostics("doc", "SELECT 1", cache=cache, linter=FailingLinter())

    assert cache.get_entries("doc") == ()


def test_invalid_lint_config_propagates() -> None:
    cache = LintCache()

    with pytest.raises(LintConfigError):
        create_diagnostics("doc", "SELECT 1", {"rules": {"no-such-rule": "warn"}}, cache=cache)


def test_parser_options_select_dialect_for_parser_and_default_linter() -> None:
    report = create_diagnostics(
        "doc",
        "SELECT `a` FROM t",
        {},
        cache=LintCache(),
        options=ParserOptions(dialect="mysql"),
    )

    assert report.diagnostics == []


def test_service_owns_cache_and_collaborators() -> None:
    service = DiagnosticsService(linter=SqlLinter())

    report = service.create_diagnostics("doc", "SELECT * FROM t", SELECT_STAR_CONFIG)

    assert len(report.diagnostics) == 1
    entries = service.cache.get_entries("doc")
    assert [entry.lint.rule_name for entry in entries] == ["select-star"]
    assert service.cache.find_by_range("doc", report.diagnostics[0].range) == entries[0]
    assert isinstance(entries[0], LintCacheEntry)


def test_service_reports_syntax_errors() -> None:
    service = DiagnosticsService(parser=_syntax_failure_parser)

    report = service.create_diagnostics("doc", "SELECT * FORM t")

    assert [diagnostic.severity for diagnostic in report.diagnostics] == [DiagnosticSeverity.Error]
    assert service.cache.get_entries("doc") == ()


def test_default_linter_reads_project_config_from_working_directory(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config_module, "USER_CONFIG_DIR", tmp_path / "user-config")
    (tmp_path / ".sqlintrc.json").write_text(json.dumps(SELECT_STAR_CONFIG), encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    cache = LintCache()

    report = create_diagnostics("doc", "SELECT * FROM t", cache=cache)
    service_report = DiagnosticsService().create_diagnostics("doc", "SELECT * FROM t")

    assert [diagnostic.severity for diagnostic in report.diagnostics] == [DiagnosticSeverity.Error]
    assert [entry.lint.rule_name for entry in cache.get_entries("doc")] == ["select-star"]
    assert service_report == report
