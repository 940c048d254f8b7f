from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by character offsets.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


@dataclass(frozen=True, slots=True, order=True)
class SourcePosition:
    """1-based line/column position, as reported by the parser and the linter."""

    line: int
    column: int

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError("SourcePosition cannot be negative")

    def __repr__(self) -> str:
        return f"SourcePosition({self.line}:{self.column})"


@dataclass(frozen=True, slots=True, order=True)
class SourceRange:
    """Pair of 1-based positions.

    Whether `end` is inclusive or exclusive is the producer's convention;
    nothing here reinterprets it.
    """

    start: SourcePosition
    end: SourcePosition

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError("SourceRange invariant violated: start > end")

    @staticmethod
    def new(start_line: int, start_column: int, end_line: int, end_column: int) -> "SourceRange":
        return SourceRange(SourcePosition(start_line, start_column), SourcePosition(end_line, end_column))

    def __repr__(self) -> str:
        return f"SourceRange({self.start.line}:{self.start.column}-{self.end.line}:{self.end.column})"


class LineIndex:
    """Maps character offsets to 1-based line/column positions.

    Only `\\n` starts a new line; a `\\r` before it counts as a regular column.
    """

    __slots__ = ("_line_starts", "_length")

    def __init__(self, text: str) -> None:
        starts = [0]
        for offset, char in enumerate(text):
            if char == "\n":
                starts.append(offset + 1)
        self._line_starts = starts
        self._length = len(text)

    def position(self, offset: int) -> SourcePosition:
        """Convert an offset (0 <= offset <= len(text)) into a 1-based position."""
        if offset < 0 or offset > self._length:
            raise ValueError(f"Offset {offset} is outside text of length {self._length}")
        line = bisect_right(self._line_starts, offset) - 1
        return SourcePosition(line + 1, offset - self._line_starts[line] + 1)

    def source_range(self, range: TextRange) -> SourceRange:
        """Convert a half-open offset range into positions with an exclusive end column."""
        return SourceRange(self.position(range.start), self.position(range.end))
