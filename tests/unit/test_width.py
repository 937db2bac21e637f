"""Tests for display width calculation."""

import pytest

from borders import Alignment, CellGrid, InvalidOptionError, column_widths, display_width
from borders.width import char_width, pad, split_lines


class TestDisplayWidth:
    """Tests for display_width()."""

    def test_ascii(self) -> None:
        assert display_width("hello") == 5

    def test_empty(self) -> None:
        assert display_width("") == 0

    def test_wide_characters_count_double(self) -> None:
        """Fullwidth and CJK characters take two columns each."""
        text = "日本語"
        assert len(text) == 3
        assert display_width(text) == 6

    def test_fullwidth_latin(self) -> None:
        assert display_width("ＡＢ") == 4

    def test_mixed_width(self) -> None:
        assert display_width("ab日本") == 6

    def test_combining_marks_are_zero_width(self) -> None:
        """A base letter plus a combining accent occupies one column."""
        text = "e\u0301"
        assert len(text) == 2
        assert display_width(text) == 1

    def test_zero_width_joiner(self) -> None:
        assert char_width("\u200d") == 0

    def test_box_drawing_is_single_width(self) -> None:
        """Box-drawing glyphs are ambiguous-width and measured as one column."""
        assert display_width("┌─┐│╔═╗║") == 8

    def test_multi_line_uses_widest_line(self) -> None:
        assert display_width("ab\nabcd\nx") == 4

    def test_tab_expands_to_next_stop(self) -> None:
        """A tab advances to the next multiple of eight columns."""
        assert display_width("a\tb") == 9
        assert display_width("\t") == 8

    def test_control_characters_are_zero_width(self) -> None:
        assert char_width("\x07") == 0
        assert char_width("\x1b") == 0
        assert display_width("a\x07b") == 2


class TestSplitLines:
    """Tests for split_lines()."""

    def test_empty(self) -> None:
        assert split_lines("") == [""]

    def test_trailing_newline_adds_no_line(self) -> None:
        assert split_lines("a\n") == ["a"]

    @pytest.mark.parametrize(
        "separator", ["\n", "\r\n", "\r", "\x0b", "\x0c", "\x85", "\u2028", "\u2029"]
    )
    def test_separators(self, separator: str) -> None:
        """Every str.splitlines() separator breaks the line and is dropped."""
        assert split_lines(f"a{separator}b") == ["a", "b"]

    def test_tabs_expanded(self) -> None:
        assert split_lines("a\tb\n\tc") == ["a       b", "        c"]


class TestColumnWidths:
    """Tests for column_widths()."""

    def test_includes_header(self) -> None:
        """Header cells count toward the column width."""
        grid = CellGrid.from_rows(
            [("Jon", "38"), ("Jake", "25"), ("Josh", "17")],
            header=("Key", "Value"),
        )
        assert column_widths(grid) == [4, 5]

    def test_body_wider_than_header(self) -> None:
        grid = CellGrid.from_rows([("a", "longer value")], header=("K", "V"))
        assert column_widths(grid) == [1, 12]

    def test_wide_characters(self) -> None:
        """Widths use display width, not character count."""
        grid = CellGrid.from_rows([("日本",), ("abc",)])
        assert column_widths(grid) == [4]

    def test_empty_grid(self) -> None:
        assert column_widths(CellGrid.from_rows([])) == []

    def test_empty_grid_with_columns(self) -> None:
        assert column_widths(CellGrid.from_rows([], columns=1)) == [0]


class TestPad:
    """Tests for pad()."""

    def test_left(self) -> None:
        assert pad("ab", 5) == "ab   "

    def test_right(self) -> None:
        assert pad("ab", 5, Alignment.RIGHT) == "   ab"

    def test_center_extra_space_goes_right(self) -> None:
        assert pad("ab", 5, Alignment.CENTER) == " ab  "

    def test_wide_text_padded_by_display_width(self) -> None:
        assert pad("日本", 6) == "日本  "

    def test_no_truncation(self) -> None:
        """Text wider than the target is returned unchanged."""
        assert pad("abcdef", 3) == "abcdef"


class TestAlignmentParse:
    """Tests for Alignment.parse()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("l", Alignment.LEFT),
            ("r", Alignment.RIGHT),
            ("c", Alignment.CENTER),
            ("Left", Alignment.LEFT),
            (" RIGHT ", Alignment.RIGHT),
            ("center", Alignment.CENTER),
            (Alignment.CENTER, Alignment.CENTER),
        ],
    )
    def test_valid(self, value: str, expected: Alignment) -> None:
        assert Alignment.parse(value) is expected

    def test_invalid(self) -> None:
        with pytest.raises(InvalidOptionError, match="Unknown alignment"):
            Alignment.parse("middle")
