"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that manages raw mode, bracketed paste, cursor visibility,
absolute cursor positioning, and screen clearing via ANSI escape sequences.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import sys
import termios
import tty
from typing import ContextManager, Iterator, Protocol

from pi.dashboard.config import DashboardConfig, get_config

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

BRACKETED_PASTE_ENABLE = "\x1b[?2004h"
BRACKETED_PASTE_DISABLE = "\x1b[?2004l"

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J\x1b[0f"
_MOVE_TO_FMT = "\x1b[{};{}H"

_READ_SIZE = 4096


def move_to(row: int, col: int) -> str:
    """Escape sequence placing the cursor at 1-based *row*, *col*."""
    return _MOVE_TO_FMT.format(row, col)


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def input_mode(self) -> ContextManager[None]: ...

    async def read(self) -> str: ...

    def write(self, data: str) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def clear_screen(self) -> None: ...

    def move_to(self, row: int, col: int) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``.

    Raw mode is never left on between reads: :meth:`input_mode` saves the
    current termios attributes, switches to raw mode with bracketed paste,
    and puts back exactly what it found when the block exits.
    """

    def __init__(self, config: DashboardConfig | None = None) -> None:
        self._config = config or get_config()
        self._write_log_path: str = self._config.write_log_path

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            columns = os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            columns = 0
        return columns or self._config.fallback_columns

    @property
    def rows(self) -> int:
        try:
            rows = os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            rows = 0
        return rows or self._config.fallback_rows

    # -- input --------------------------------------------------------------

    @contextlib.contextmanager
    def input_mode(self) -> Iterator[None]:
        """Enable raw mode and bracketed paste for the duration of the block."""
        fd = sys.stdin.fileno()
        saved: list | None = None
        try:
            saved = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (termios.error, OSError) as exc:
            logger.debug("Raw mode unavailable on fd %d: %s", fd, exc)
            saved = None

        self.write(BRACKETED_PASTE_ENABLE)
        try:
            yield
        finally:
            self.write(BRACKETED_PASTE_DISABLE)
            if saved is not None:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    async def read(self) -> str:
        """Wait for stdin to become readable and return one decoded chunk."""
        loop = asyncio.get_running_loop()
        fd = sys.stdin.fileno()
        chunk: asyncio.Future[bytes] = loop.create_future()

        def _on_readable() -> None:
            if chunk.done():
                return
            try:
                chunk.set_result(os.read(fd, _READ_SIZE))
            except OSError as exc:
                chunk.set_exception(exc)

        loop.add_reader(fd, _on_readable)
        try:
            raw = await chunk
        finally:
            loop.remove_reader(fd)

        return raw.decode("utf-8", errors="replace")

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        self._raw_write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                pass

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN)

    def move_to(self, row: int, col: int) -> None:
        self.write(move_to(row, col))

    # -- private: raw write ------------------------------------------------

    def _raw_write(self, data: str) -> None:
        """Write directly to stdout, bypassing buffering."""
        try:
            sys.stdout.write(data)
            sys.stdout.flush()
        except OSError:
            pass
