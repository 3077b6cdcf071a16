"""Multi-line text input dialog with a movable cursor.

Enter inserts a newline, so submitting uses a separate commit key
(Ctrl+S).  Cursor movement works on the wrapped layout: up/down and
home/end follow visual rows, word jumps follow the whole buffer.
"""

from __future__ import annotations

from typing import Optional, Sequence

from pi.dashboard import style
from pi.dashboard.config import DashboardConfig
from pi.dashboard.dialogs.base import Dialog, DialogStatus
from pi.dashboard.keys import Key, KeyKind, KeyPress
from pi.dashboard.layout import (
    compute_visual_lines,
    cursor_to_visual_position,
    move_end,
    move_home,
    move_vertical,
    move_word_left,
    move_word_right,
)
from pi.dashboard.terminal import Terminal


def build_multiline_input_content(
    label: str,
    value: str,
    cursor_visible: bool,
    max_width: int,
    cursor_pos: int | None = None,
) -> list[str]:
    """Render *value* wrapped to ``max_width - 2`` with an inverse-video cursor."""
    cursor = len(value) if cursor_pos is None else cursor_pos
    lines = [label, ""]
    visual_lines = compute_visual_lines(value, max_width - 2)
    cursor_row, cursor_col = cursor_to_visual_position(visual_lines, cursor)

    for row, visual in enumerate(visual_lines):
        text = visual.text
        if row == cursor_row and cursor_visible:
            under_cursor = text[cursor_col] if cursor_col < len(text) else " "
            text = text[:cursor_col] + style.inverse(under_cursor) + text[cursor_col + 1 :]
        lines.append(style.cyan("  ") + text)

    return lines


class MultilineInputDialog(Dialog[Optional[str]]):
    footer = "Enter Newline  Ctrl+S Submit  Esc Cancel"

    def __init__(
        self,
        title: str,
        label: str,
        background: Sequence[str],
        terminal: Terminal | None = None,
        config: DashboardConfig | None = None,
    ) -> None:
        super().__init__(title, background, terminal, config)
        self.label = label
        self.value = ""
        self.cursor = 0
        self.content_width = self.width - 6

    @property
    def wrap_width(self) -> int:
        return self.content_width - 2

    def build_content(self) -> list[str]:
        return build_multiline_input_content(
            self.label, self.value, True, self.content_width, self.cursor
        )

    def insert(self, text: str) -> None:
        self.value = self.value[: self.cursor] + text + self.value[self.cursor :]
        self.cursor += len(text)

    def handle_key(self, key: KeyPress) -> bool:  # noqa: C901
        match key.name:
            case Key.commit:
                self.submit()
            case Key.escape:
                self.cancel()
            case Key.enter:
                self.insert("\n")
            case Key.backspace:
                if self.cursor > 0:
                    self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
                    self.cursor -= 1
            case Key.delete:
                if self.cursor < len(self.value):
                    self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]
            case Key.left:
                self.cursor = max(0, self.cursor - 1)
            case Key.right:
                self.cursor = min(len(self.value), self.cursor + 1)
            case Key.up:
                self.cursor = move_vertical(self.value, self.cursor, self.wrap_width, -1)
            case Key.down:
                self.cursor = move_vertical(self.value, self.cursor, self.wrap_width, 1)
            case Key.home:
                self.cursor = move_home(self.value, self.cursor, self.wrap_width)
            case Key.end:
                self.cursor = move_end(self.value, self.cursor, self.wrap_width)
            case Key.word_left:
                self.cursor = move_word_left(self.value, self.cursor)
            case Key.word_right:
                self.cursor = move_word_right(self.value, self.cursor)
            case Key.paste:
                if not key.raw:
                    return False
                self.insert(key.raw)
            case _:
                if key.kind is not KeyKind.CHAR:
                    return False
                self.insert(key.raw)
        return True

    def result(self) -> str | None:
        if self.status is DialogStatus.SUBMITTED:
            return self.value.strip() or None
        return None


async def show_multiline_input(
    title: str,
    label: str,
    background: Sequence[str],
    *,
    terminal: Terminal | None = None,
    config: DashboardConfig | None = None,
) -> str | None:
    """Prompt for free-form text; Ctrl+S submits, Escape cancels."""
    return await MultilineInputDialog(title, label, background, terminal, config).run()
