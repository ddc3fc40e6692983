"""
Tests for width-budgeted truncation.

Tests the end, start and middle policies and the shared hard clamp.
"""

import pytest

from cellfit.shaping import cell_width
from cellfit.shaping.truncate import (
    clip_cells,
    truncate_end,
    truncate_middle,
    truncate_start,
)

RED = "\x1b[31m"
BLUE = "\x1b[34m"
RESET = "\x1b[0m"


@pytest.mark.unit
class TestClipCells:
    """Test hard clamping without a marker."""

    def test_fits_unchanged(self):
        """Test text within width is returned as-is."""
        assert clip_cells("hello", 5) == "hello"

    def test_cuts_plain_text(self):
        """Test text is cut at the width."""
        assert clip_cells("hello", 3) == "hel"

    def test_keeps_escapes_after_cut(self):
        """Test trailing reset survives the cut."""
        assert clip_cells(f"{RED}hello{RESET}", 3) == f"{RED}hel{RESET}"

    def test_wide_char_not_split(self):
        """Test a wide char that would straddle the edge is dropped."""
        assert clip_cells("中文", 3) == "中"

    def test_zero_width(self):
        """Test zero width keeps only escape sequences."""
        assert clip_cells("abc", 0) == ""
        assert clip_cells(f"{RED}abc", 0) == RED

    def test_negative_width(self):
        """Test negative width behaves like zero."""
        assert clip_cells("abc", -5) == ""


@pytest.mark.unit
class TestTruncateEnd:
    """Test truncation from the right."""

    def test_fits_unchanged(self):
        """Test text shorter than budget is not modified."""
        assert truncate_end("hello", 10) == "hello"

    def test_exact_fit_unchanged(self):
        """Test text exactly at budget gets no marker."""
        assert truncate_end("hello world", 11) == "hello world"

    def test_truncates_with_marker(self):
        """Test marker is appended and counted against the budget."""
        assert truncate_end("hello world", 8) == "hello..."

    def test_custom_marker(self):
        """Test single-cell ellipsis marker."""
        assert truncate_end("hello world", 6, "…") == "hello…"

    def test_empty_marker(self):
        """Test empty marker gives a plain clamp."""
        assert truncate_end("hello world", 5, "") == "hello"

    def test_wide_characters(self):
        """Test budget is measured in cells, not characters."""
        result = truncate_end("中文字符", 5)
        assert result == "中..."
        assert cell_width(result) == 5

    def test_wide_character_straddling_edge(self):
        """Test wide char that does not fit is dropped whole."""
        result = truncate_end("中文字符", 6)
        assert result == "中..."
        assert cell_width(result) <= 6

    def test_styled_text_fits_unchanged(self):
        """Test escape sequences are not mistaken for visible width."""
        styled = "\x1b[1;32mgreen\x1b[0m"
        assert len(styled) > 5
        assert truncate_end(styled, 5) == styled

    def test_styled_text_truncated(self):
        """Test escapes survive and the marker goes last."""
        result = truncate_end(f"{RED}hello world{RESET}", 8)
        assert result == f"{RED}hello{RESET}..."
        assert cell_width(result) == 8

    def test_budget_equals_marker(self):
        """Test budget holding only the marker."""
        assert truncate_end("hello world", 3) == "..."

    def test_budget_smaller_than_marker(self):
        """Test the marker itself is clipped to the budget."""
        assert truncate_end("hello world", 2) == ".."
        assert truncate_end("hello world", 1) == "."

    def test_zero_and_negative_budget(self):
        """Test non-positive budgets produce empty output."""
        assert truncate_end("hello world", 0) == ""
        assert truncate_end("hello world", -3) == ""

    def test_marker_appears_once_as_suffix(self):
        """Test marker is a suffix and appears exactly once."""
        result = truncate_end("abcdefghijklmnop", 10)
        assert result.endswith("...")
        assert result.count("...") == 1


@pytest.mark.unit
class TestTruncateStart:
    """Test truncation from the left."""

    def test_fits_unchanged(self, long_path):
        """Test path within budget is not modified."""
        assert truncate_start(long_path, 50) == long_path

    def test_keeps_filename(self, long_path):
        """Test the tail of a path is preserved."""
        result = truncate_start(long_path, 15)
        assert result == "...nts/file.txt"
        assert cell_width(result) == 15

    def test_marker_overlays_not_inserts(self, long_path):
        """Test scalar count equals the shortened remainder's."""
        result = truncate_start(long_path, 15)
        assert len(result) == len(long_path[-15:])

    def test_remainder_shorter_than_marker(self):
        """Test remainder fully covered by the marker."""
        assert truncate_start("abcdef", 3) == "..."

    def test_budget_smaller_than_marker(self):
        """Test marker clipped to budget."""
        assert truncate_start("abcdef", 2) == ".."
        assert truncate_start("abcdef", 0) == ""

    def test_wide_characters(self):
        """Test wide chars are dropped whole and result fits."""
        result = truncate_start("中文字符ab", 7)
        assert result == "...b"
        assert cell_width(result) <= 7

    def test_styled_path_keeps_style(self):
        """Test escapes from the dropped head are carried over."""
        styled = f"{BLUE}/very/long/path/name.txt{RESET}"
        result = truncate_start(styled, 12)
        assert result == f"{BLUE}.../name.txt{RESET}"
        assert cell_width(result) == 12

    def test_combining_marks(self):
        """Test zero-width marks never push the result over budget."""
        text = "e\u0301" * 10
        result = truncate_start(text, 5)
        assert result.startswith("...")
        assert cell_width(result) <= 5

    def test_result_starts_with_marker(self):
        """Test marker is a prefix and appears exactly once."""
        result = truncate_start("abcdefghijklmnop", 10)
        assert result == "...jklmnop"
        assert result.count("...") == 1


@pytest.mark.unit
class TestTruncateMiddle:
    """Test truncation in the middle."""

    def test_fits_unchanged(self):
        """Test text within budget is not modified."""
        assert truncate_middle("abcdefghij", 10) == "abcdefghij"

    def test_equal_head_and_tail(self):
        """Test head and tail keep equal scalar counts."""
        result = truncate_middle("abcdefghij", 7, "...")
        assert result == "ab...ij"
        assert len(result) <= 7

    def test_odd_remainder_rounds_down(self):
        """Test half is floored so the result may be shorter than budget."""
        assert truncate_middle("abcdefghij", 8) == "ab...ij"

    def test_counts_scalars_not_cells(self):
        """Test wide text within the scalar budget is left alone."""
        assert truncate_middle("中文字符", 4) == "中文字符"

    def test_budget_too_small_for_halves(self):
        """Test degenerate budgets return the clipped marker."""
        assert truncate_middle("abcdefghij", 4) == "..."
        assert truncate_middle("abcdefghij", 2) == ".."
        assert truncate_middle("abcdefghij", 0) == ""

    def test_styled_text(self):
        """Test escape sequences ride along with head and tail."""
        result = truncate_middle(f"{RED}abcdefghij{RESET}", 7)
        assert result == f"{RED}ab...ij{RESET}"

    def test_dropped_escapes_kept(self):
        """Test escapes from the removed center are preserved."""
        result = truncate_middle(f"abc{RED}def{RESET}ghij", 7)
        assert result == f"ab{RED}{RESET}...ij"

    def test_stray_escape_does_not_swallow_marker(self):
        """Test a bare ESC before the cut never fuses with the marker."""
        result = truncate_middle("a\x1b中bcdefghij", 7)
        assert result == "a...ij"
        assert cell_width(result) == 6


@pytest.mark.unit
class TestStrayEscapeAtCut:
    """Test a bare ESC left at the cut point is dropped."""

    def test_end_with_final_byte_marker(self):
        """Test ESC followed by a one-byte marker does not become ESC ~."""
        result = truncate_end("ab\x1b中cdefgh", 4, marker="~")
        assert result == "ab~"
        assert cell_width(result) == 3

    def test_end_with_default_marker(self):
        """Test ESC followed by dots does not become an nF sequence."""
        result = truncate_end("abcd\x1b中efghij", 8)
        assert result == "abcd..."
        assert cell_width(result) == 7

    def test_stray_escape_before_kept_sequence(self):
        """Test ESC followed by a complete sequence stays one visible cell."""
        result = truncate_end(f"ab\x1b中{RED}cdefgh{RESET}", 4, marker="~")
        assert result == f"ab\x1b{RED}{RESET}~"
        assert cell_width(result) == 4

    def test_start_marker_visible(self):
        """Test the marker always survives start truncation as visible text."""
        result = truncate_start("\x1b中abcdefghij", 6)
        assert result.startswith("...")
        assert cell_width(result) <= 6
