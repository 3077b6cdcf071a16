"""Wrapped text layout and cursor mapping.

A logical buffer (which may contain ``\\n``) is laid out as a list of
:class:`VisualLine` rows for a fixed width.  Each row remembers where it
starts in the buffer, which lets a linear cursor offset be mapped to a
``(row, col)`` on screen and back again.

Long lines break at the last space that fits; that space is not drawn but
still occupies one offset in the buffer.  Lines without a usable space are
hard-broken at the width.

Widths count characters, not terminal columns: a row of wide (CJK) text
is up to twice as wide on screen and gets truncated by the frame.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple

_WORD_RE = re.compile(r"\w")


@dataclass(frozen=True)
class VisualLine:
    text: str
    global_offset: int
    length: int


class CursorPosition(NamedTuple):
    row: int
    col: int


def _wrap_line(text: str, width: int) -> list[tuple[str, int]]:
    """Wrap a single logical line into ``(text, offset_in_line)`` segments."""
    if width <= 0 or len(text) <= width:
        return [(text, 0)]

    segments: list[tuple[str, int]] = []
    pos = 0
    remaining = text
    while len(remaining) > width:
        # A space at index 0 would produce an empty row; hard-break instead
        break_at = remaining.rfind(" ", 0, width + 1)
        if break_at <= 0:
            break_at = width
        segments.append((remaining[:break_at], pos))
        pos += break_at
        remaining = remaining[break_at:]
        if remaining.startswith(" "):
            remaining = remaining[1:]
            pos += 1

    # An empty tail after a consumed space still gets a row, so the offset
    # just past that space stays reachable by the cursor
    segments.append((remaining, pos))
    return segments


def compute_visual_lines(text: str, width: int) -> list[VisualLine]:
    """Lay out *text* as visual rows no wider than *width* characters."""
    lines: list[VisualLine] = []
    line_start = 0

    for logical in text.split("\n"):
        for segment, offset in _wrap_line(logical, width):
            lines.append(VisualLine(segment, line_start + offset, len(segment)))
        line_start += len(logical) + 1

    return lines


def cursor_to_visual_position(lines: list[VisualLine], offset: int) -> CursorPosition:
    """Map a buffer *offset* to its visual ``(row, col)``.

    A cursor just past the last character of a row stays on that row.
    """
    for row, line in enumerate(lines):
        if line.global_offset <= offset <= line.global_offset + line.length:
            return CursorPosition(row, offset - line.global_offset)

    if not lines:
        return CursorPosition(0, 0)
    if offset < lines[0].global_offset:
        return CursorPosition(0, 0)
    last = lines[-1]
    return CursorPosition(len(lines) - 1, last.length)


# ---------------------------------------------------------------------------
# Cursor movement
# ---------------------------------------------------------------------------


def move_vertical(text: str, offset: int, width: int, direction: int) -> int:
    """Move the cursor one visual row up (``-1``) or down (``1``).

    The target column is the current column clamped to the target row.  It
    is recomputed on every move rather than remembered, so repeated moves
    across rows of very different lengths can drift left.
    """
    lines = compute_visual_lines(text, width)
    row, col = cursor_to_visual_position(lines, offset)
    target_row = row + direction
    if target_row < 0 or target_row >= len(lines):
        return offset
    target = lines[target_row]
    return target.global_offset + min(col, target.length)


def move_home(text: str, offset: int, width: int) -> int:
    """Start of the current visual row."""
    lines = compute_visual_lines(text, width)
    row, _ = cursor_to_visual_position(lines, offset)
    return lines[row].global_offset


def move_end(text: str, offset: int, width: int) -> int:
    """End of the current visual row."""
    lines = compute_visual_lines(text, width)
    row, _ = cursor_to_visual_position(lines, offset)
    return lines[row].global_offset + lines[row].length


def _is_word(ch: str) -> bool:
    return _WORD_RE.match(ch) is not None


def move_word_left(text: str, offset: int) -> int:
    if offset <= 0:
        return 0
    pos = min(offset, len(text)) - 1
    while pos > 0 and not _is_word(text[pos]):
        pos -= 1
    while pos > 0 and _is_word(text[pos - 1]):
        pos -= 1
    return pos


def move_word_right(text: str, offset: int) -> int:
    if offset >= len(text):
        return len(text)
    pos = max(offset, 0)
    while pos < len(text) and _is_word(text[pos]):
        pos += 1
    while pos < len(text) and not _is_word(text[pos]):
        pos += 1
    return pos
