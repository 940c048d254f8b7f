"""Per-document store binding emitted diagnostics to their lint findings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from lsprotocol.types import Diagnostic, Range

from sqlls.lint import LintFinding


@dataclass(frozen=True, slots=True)
class LintCacheEntry:
    """A published diagnostic and the finding it was translated from."""

    diagnostic: Diagnostic
    lint: LintFinding


class LintCache:
    """Last lint run per document uri.

    Each write swaps in a fresh tuple under the uri, so a reader sees either
    the previous list or the new one, never a mix.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[LintCacheEntry, ...]] = {}

    def set_entries(self, uri: str, entries: Iterable[LintCacheEntry]) -> None:
        self._entries[uri] = tuple(entries)

    def get_entries(self, uri: str) -> tuple[LintCacheEntry, ...]:
        return self._entries.get(uri, ())

    def get_entry(self, uri: str, index: int) -> LintCacheEntry | None:
        entries = self.get_entries(uri)
        if 0 <= index < len(entries):
            return entries[index]
        return None

    def find_by_range(self, uri: str, range: Range) -> LintCacheEntry | None:
        """Return the first entry whose diagnostic covers exactly `range`."""
        for entry in self.get_entries(uri):
            if entry.diagnostic.range == range:
                return entry
        return None

    def clear(self, uri: str) -> None:
        self._entries.pop(uri, None)

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __len__(self) -> int:
        return len(self._entries)
