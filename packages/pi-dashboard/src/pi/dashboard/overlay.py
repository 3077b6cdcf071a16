"""Modal overlay compositing.

A paint clears the screen, redraws the caller's background dimmed, and
draws the modal frame centered on top of it.  The cursor is hidden for the
paint and is only shown again by a dialog once it resolves.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from pi.dashboard import style
from pi.dashboard.config import DashboardConfig, get_config
from pi.dashboard.frame import build_modal_frame
from pi.dashboard.terminal import Terminal
from pi.dashboard.utils import strip_ansi

logger = logging.getLogger(__name__)

SPINNER_FRAMES = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]
_MIN_MODAL_WIDTH = 10


def modal_width(terminal: Terminal, config: DashboardConfig | None = None) -> int:
    config = config or get_config()
    return max(_MIN_MODAL_WIDTH, min(config.max_modal_width, terminal.columns - 4))


def modal_origin(
    columns: int,
    rows: int,
    modal_height: int,
    modal_w: int,
) -> tuple[int, int]:
    """1-based ``(row, col)`` that centers the modal, never above/left of 1."""
    return (
        max(1, (rows - modal_height) // 2),
        max(1, (columns - modal_w) // 2),
    )


def render_overlay(
    terminal: Terminal,
    background: Sequence[str],
    modal_lines: Sequence[str],
    modal_w: int,
) -> None:
    """Paint *background* dimmed with *modal_lines* centered over it."""
    columns = terminal.columns
    rows = terminal.rows

    terminal.clear_screen()
    terminal.hide_cursor()

    # Original colors are dropped so the modal is the only thing in focus
    for index, line in enumerate(background[:rows]):
        terminal.move_to(index + 1, 1)
        terminal.write(style.dim(strip_ansi(line)))

    start_row, start_col = modal_origin(columns, rows, len(modal_lines), modal_w)
    for index, line in enumerate(modal_lines):
        terminal.move_to(start_row + index, start_col)
        terminal.write(line)

    # Park the cursor below the modal so stray output does not overwrite it
    terminal.move_to(start_row + len(modal_lines) + 1, 1)


# ---------------------------------------------------------------------------
# Status overlays
# ---------------------------------------------------------------------------


def show_status(
    terminal: Terminal,
    title: str,
    message: str,
    background: Sequence[str],
) -> None:
    """Paint a one-line message modal; the caller repaints when done."""
    w = modal_width(terminal)
    render_overlay(terminal, background, build_modal_frame(title, [message], "", w), w)


class StatusSpinner:
    """Animated status modal driven by an event-loop timer.

    The timer keeps repainting until :meth:`stop` is called; use the
    instance as a context manager to make sure it is released.
    """

    def __init__(
        self,
        terminal: Terminal,
        title: str,
        message: str,
        background: Sequence[str],
        interval: float | None = None,
    ) -> None:
        self._terminal = terminal
        self._title = title
        self._message = message
        self._background = list(background)
        self._interval = interval if interval is not None else get_config().spinner_interval
        self._width = modal_width(terminal)
        self._frame_index = 0
        self._timer_handle: asyncio.TimerHandle | None = None
        self._stopped = True

    @property
    def stopped(self) -> bool:
        return self._stopped

    def start(self) -> None:
        self._stopped = False
        logger.debug("Status spinner started: %s", self._title)
        self._render()
        self._schedule_next()

    def set_message(self, message: str) -> None:
        self._message = message

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        if self._timer_handle is not None:
            self._timer_handle.cancel()
            self._timer_handle = None
        logger.debug("Status spinner stopped: %s", self._title)

    def __enter__(self) -> StatusSpinner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _schedule_next(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Without a loop only the first frame is painted
            return
        self._timer_handle = loop.call_later(self._interval, self._tick)

    def _tick(self) -> None:
        if self._stopped:
            return
        self._render()
        self._schedule_next()

    def _render(self) -> None:
        spinner = style.cyan(SPINNER_FRAMES[self._frame_index])
        lines = build_modal_frame(self._title, [f"{spinner} {self._message}"], "", self._width)
        render_overlay(self._terminal, self._background, lines, self._width)
        self._frame_index = (self._frame_index + 1) % len(SPINNER_FRAMES)


def show_status_with_spinner(
    terminal: Terminal,
    title: str,
    message: str,
    background: Sequence[str],
) -> StatusSpinner:
    """Start an animated status modal and return its handle."""
    spinner = StatusSpinner(terminal, title, message, background)
    spinner.start()
    return spinner
