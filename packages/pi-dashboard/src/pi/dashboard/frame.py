"""Fixed-width bordered frames.

Every row built here is exactly ``w`` visible columns wide, however much
styling it carries.  The overlay relies on this to line a modal up with the
character grid of the background.
"""

from __future__ import annotations

from typing import Callable, Sequence

from pi.dashboard import style
from pi.dashboard.utils import pad_visible, truncate_ansi, visible_width

Styler = Callable[[str], str]

_H = "─"
_V = "│"


# ---------------------------------------------------------------------------
# Border rows
# ---------------------------------------------------------------------------


def _titled_border(title: str, w: int, left: str, right: str, border: Styler) -> str:
    inner = max(0, w - 2)
    label = f" {title} "
    if visible_width(label) > inner:
        label = truncate_ansi(label, inner)
    fill = inner - visible_width(label)
    before = fill // 2
    after = fill - before
    return (
        border(left + _H * before)
        + style.bold_cyan(label)
        + border(_H * after + right)
    )


def top_row(title: str, w: int, border: Styler = style.dim) -> str:
    return _titled_border(title, w, "┌", "┐", border)


def mid_row(title: str, w: int, border: Styler = style.dim) -> str:
    return _titled_border(title, w, "├", "┤", border)


def divider_row(w: int, border: Styler = style.dim) -> str:
    return border("├" + _H * max(0, w - 2) + "┤")


def bottom_row(w: int, border: Styler = style.dim) -> str:
    return border("└" + _H * max(0, w - 2) + "┘")


def frame_row(text: str, w: int, border: Styler = style.dim) -> str:
    """Content row: ``│ text │`` with *text* truncated or padded to fit."""
    inner = max(0, w - 4)
    fitted = pad_visible(truncate_ansi(text, inner), inner)
    return border(_V) + " " + fitted + " " + border(_V)


# ---------------------------------------------------------------------------
# Modal frame
# ---------------------------------------------------------------------------


def build_modal_frame(
    title: str,
    content_lines: Sequence[str],
    footer: str,
    w: int,
) -> list[str]:
    """Build the lines of a modal: title, padded content, divider, footer."""
    border = style.bold
    lines = [top_row(title, w, border), frame_row("", w, border)]
    lines.extend(frame_row(line, w, border) for line in content_lines)
    lines.append(frame_row("", w, border))
    lines.append(divider_row(w, border))
    lines.append(frame_row(style.dim(footer), w, border))
    lines.append(bottom_row(w, border))
    return lines


# ---------------------------------------------------------------------------
# Dashboard panel
# ---------------------------------------------------------------------------


def format_command_bar(actions: Sequence[tuple[str, str]], w: int) -> list[str]:
    """Lay out ``(shortcut, label)`` pairs as badges wrapped to the row width."""
    inner = max(0, w - 4)
    lines: list[str] = []
    current = ""
    for shortcut, label in actions:
        part = style.inverse(f" {shortcut} ") + " " + style.dim(label)
        candidate = current + "   " + part if current else part
        if current and visible_width(candidate) > inner:
            lines.append(current)
            current = part
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def build_panel(
    sections: Sequence[tuple[str, Sequence[str]]],
    w: int,
    command_bar: Sequence[tuple[str, str]] | None = None,
    hint: str | None = None,
) -> list[str]:
    """Render titled sections stacked in one box.

    The first section opens the box; later ones are separated by titled
    borders.  An optional command bar and hint sit below a divider.
    """
    lines: list[str] = []
    for index, (title, rows) in enumerate(sections):
        lines.append(top_row(title, w) if index == 0 else mid_row(title, w))
        lines.extend(frame_row(row, w) for row in rows)

    if not sections:
        lines.append(top_row("", w))

    if command_bar or hint:
        lines.append(divider_row(w))
        if command_bar:
            lines.extend(frame_row(row, w) for row in format_command_bar(command_bar, w))
        if hint:
            lines.append(frame_row(style.dim(hint), w))

    lines.append(bottom_row(w))
    return lines
