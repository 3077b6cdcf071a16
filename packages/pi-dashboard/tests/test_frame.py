"""Tests for pi.dashboard.frame -- bordered rows, modal frames and panels."""

from __future__ import annotations

import pytest

from pi.dashboard import style
from pi.dashboard.frame import (
    bottom_row,
    build_modal_frame,
    build_panel,
    divider_row,
    format_command_bar,
    frame_row,
    mid_row,
    top_row,
)
from pi.dashboard.utils import strip_ansi, visible_width


# ---------------------------------------------------------------------------
# Border rows
# ---------------------------------------------------------------------------


class TestBorderRows:
    def test_top_row_centers_title(self) -> None:
        assert strip_ansi(top_row("T", 10)) == "┌── T ───┐"

    def test_mid_row_uses_tee_corners(self) -> None:
        assert strip_ansi(mid_row("T", 10)) == "├── T ───┤"

    def test_title_is_bold_cyan(self) -> None:
        assert style.bold_cyan(" Title ") in top_row("Title", 30)

    def test_long_title_is_truncated(self) -> None:
        row = top_row("a very long title indeed", 12)
        assert visible_width(row) == 12
        assert strip_ansi(row).startswith("┌")
        assert strip_ansi(row).endswith("┐")

    def test_divider_and_bottom(self) -> None:
        assert strip_ansi(divider_row(6)) == "├────┤"
        assert strip_ansi(bottom_row(6)) == "└────┘"

    def test_custom_border_style(self) -> None:
        assert bottom_row(4, style.bold) == style.bold("└──┘")


class TestFrameRow:
    def test_pads_short_text(self) -> None:
        assert strip_ansi(frame_row("hi", 10)) == "│ hi     │"

    def test_truncates_long_text(self) -> None:
        row = frame_row("abcdefghijkl", 10)
        assert strip_ansi(row) == "│ abcde… │"

    def test_styled_text_keeps_width(self) -> None:
        row = frame_row(style.bold_cyan("styled"), 12)
        assert visible_width(row) == 12

    def test_wide_characters(self) -> None:
        row = frame_row("日本語テキスト", 10)
        assert visible_width(row) == 10

    def test_emoji_with_variation_selector(self) -> None:
        row = frame_row("\u2764\ufe0f fix " * 10, 30)
        assert visible_width(row) == 30


# ---------------------------------------------------------------------------
# Modal frame
# ---------------------------------------------------------------------------


class TestBuildModalFrame:
    def test_structure(self) -> None:
        lines = build_modal_frame("Pick", ["one", "two"], "Esc Cancel", 20)
        plain = [strip_ansi(line) for line in lines]
        assert len(lines) == 2 + 7
        assert plain[0].startswith("┌") and " Pick " in plain[0]
        assert plain[1] == "│" + " " * 18 + "│"
        assert plain[2].startswith("│ one")
        assert plain[3].startswith("│ two")
        assert plain[4] == plain[1]
        assert plain[5] == "├" + "─" * 18 + "┤"
        assert plain[6].startswith("│ Esc Cancel")
        assert plain[7] == "└" + "─" * 18 + "┘"

    def test_footer_is_dimmed(self) -> None:
        lines = build_modal_frame("T", [], "footer", 20)
        assert style.dim("footer") in lines[-2]

    def test_empty_content(self) -> None:
        assert len(build_modal_frame("T", [], "", 20)) == 6

    @pytest.mark.parametrize("w", [10, 11, 24, 60])
    def test_every_row_is_exactly_w_wide(self, w: int) -> None:
        content = [
            "short",
            "a line that is certainly longer than the narrowest frame",
            style.bold(style.cyan("styled and also quite long enough to be cut")),
            "日本語のテキストは幅が二倍です",
            "\u2600\ufe0f sunny \u2764\ufe0f " * 6,
            "",
        ]
        title = "A title that may not fit"
        for line in build_modal_frame(title, content, "↑↓ Navigate  Enter Select  Esc Cancel", w):
            assert visible_width(line) == w


# ---------------------------------------------------------------------------
# Command bar / panel
# ---------------------------------------------------------------------------


class TestFormatCommandBar:
    def test_single_line(self) -> None:
        lines = format_command_bar([("r", "Refresh"), ("q", "Quit")], 60)
        assert len(lines) == 1
        assert strip_ansi(lines[0]) == " r  Refresh    q  Quit"

    def test_shortcut_is_inverse(self) -> None:
        lines = format_command_bar([("r", "Refresh")], 60)
        assert style.inverse(" r ") in lines[0]

    def test_wraps_when_too_wide(self) -> None:
        actions = [("a", "Alpha"), ("b", "Bravo"), ("c", "Charlie")]
        lines = format_command_bar(actions, 24)
        assert len(lines) > 1
        for line in lines:
            assert visible_width(line) <= 20

    def test_no_actions(self) -> None:
        assert format_command_bar([], 40) == []


class TestBuildPanel:
    def test_sections_and_borders(self) -> None:
        lines = build_panel([("Status", ["ok"]), ("Jobs", ["a", "b"])], 30)
        plain = [strip_ansi(line) for line in lines]
        assert plain[0].startswith("┌") and " Status " in plain[0]
        assert plain[1].startswith("│ ok")
        assert plain[2].startswith("├") and " Jobs " in plain[2]
        assert plain[-1].startswith("└")
        assert len(lines) == 6

    def test_command_bar_and_hint(self) -> None:
        lines = build_panel(
            [("Status", ["ok"])],
            40,
            command_bar=[("r", "Refresh"), ("q", "Quit")],
            hint="Press a key",
        )
        plain = [strip_ansi(line) for line in lines]
        assert plain[2] == "├" + "─" * 38 + "┤"
        assert "Refresh" in plain[3]
        assert "Press a key" in plain[4]
        assert plain[5].startswith("└")

    def test_no_sections(self) -> None:
        lines = build_panel([], 20)
        assert len(lines) == 2

    def test_rows_are_exactly_w_wide(self) -> None:
        lines = build_panel(
            [("Models", ["a model name that is far too long for the panel", "b"])],
            28,
            command_bar=[("s", "Start"), ("x", "Stop"), ("l", "Logs")],
            hint="hint text",
        )
        for line in lines:
            assert visible_width(line) == 28
