import pytest

from sqlls.text import LineIndex, SourcePosition, SourceRange, TextRange


def test_line_index_maps_offsets_to_one_based_positions() -> None:
    index = LineIndex("SELECT 1\nFROM t")

    assert index.position(0) == SourcePosition(1, 1)
    assert index.position(7) == SourcePosition(1, 8)
    assert index.position(9) == SourcePosition(2, 1)
    assert index.position(15) == SourcePosition(2, 7)


def test_line_index_source_range_uses_exclusive_end_column() -> None:
    index = LineIndex("SELECT * FROM t")

    assert index.source_range(TextRange(7, 8)) == SourceRange.new(1, 8, 1, 9)


def test_line_index_keeps_carriage_return_on_its_line() -> None:
    index = LineIndex("a\r\nb")

    assert index.position(1) == SourcePosition(1, 2)
    assert index.position(3) == SourcePosition(2, 1)


def test_line_index_rejects_offsets_outside_text() -> None:
    index = LineIndex("abc")

    with pytest.raises(ValueError, match="outside text"):
        index.position(4)
    with pytest.raises(ValueError, match="outside text"):
        index.position(-1)


def test_text_range_invariants() -> None:
    with pytest.raises(ValueError, match="negative"):
        TextRange(-1, 2)
    with pytest.raises(ValueError, match="start > end"):
        TextRange(3, 2)


def test_source_range_rejects_start_after_end() -> None:
    with pytest.raises(ValueError, match="start > end"):
        SourceRange.new(2, 1, 1, 5)
