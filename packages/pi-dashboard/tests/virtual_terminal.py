"""Virtual terminal for testing -- implements the Terminal protocol in-memory.

This module provides a ``VirtualTerminal`` class that satisfies the
``pi.dashboard.terminal.Terminal`` protocol without performing any real I/O.
Input is fed from a queue of raw chunks and all output is captured in a
buffer for assertions.
"""

from __future__ import annotations

import contextlib
from typing import Iterable, Iterator

from pi.dashboard.utils import strip_ansi


class InputExhausted(RuntimeError):
    """Raised when a dialog asks for more input than the test supplied."""


class VirtualTerminal:
    """In-memory terminal that records all writes for test inspection.

    Parameters
    ----------
    rows:
        Number of terminal rows (height).
    columns:
        Number of terminal columns (width).
    chunks:
        Raw input chunks returned one per :meth:`read` call.
    """

    def __init__(
        self,
        rows: int = 24,
        columns: int = 80,
        chunks: Iterable[str] = (),
    ) -> None:
        self._rows = rows
        self._columns = columns
        self._buffer: list[str] = []
        self._pending: list[str] = list(chunks)
        self._cursor_visible = True
        self.raw_mode = False
        self.paste_mode = False
        self.input_mode_entries = 0
        self.reads = 0
        # Raw-mode state observed at each read
        self.raw_during_reads: list[bool] = []

    # -- Terminal protocol: properties --------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @rows.setter
    def rows(self, value: int) -> None:
        self._rows = value

    @property
    def columns(self) -> int:
        return self._columns

    @columns.setter
    def columns(self, value: int) -> None:
        self._columns = value

    @property
    def cursor_visible(self) -> bool:
        return self._cursor_visible

    # -- Terminal protocol: input -------------------------------------------

    @contextlib.contextmanager
    def input_mode(self) -> Iterator[None]:
        was_raw = self.raw_mode
        self.input_mode_entries += 1
        self.raw_mode = True
        self.paste_mode = True
        self.write("\x1b[?2004h")
        try:
            yield
        finally:
            self.write("\x1b[?2004l")
            self.paste_mode = False
            self.raw_mode = was_raw

    async def read(self) -> str:
        self.reads += 1
        self.raw_during_reads.append(self.raw_mode)
        if not self._pending:
            raise InputExhausted("no more input queued")
        return self._pending.pop(0)

    # -- Terminal protocol: output ------------------------------------------

    def write(self, data: str) -> None:
        """Append *data* to the internal buffer."""
        self._buffer.append(data)

    def hide_cursor(self) -> None:
        self._cursor_visible = False
        self.write("\x1b[?25l")

    def show_cursor(self) -> None:
        self._cursor_visible = True
        self.write("\x1b[?25h")

    def clear_screen(self) -> None:
        self.write("\x1b[2J\x1b[0f")

    def move_to(self, row: int, col: int) -> None:
        self.write(f"\x1b[{row};{col}H")

    # -- Test helpers -------------------------------------------------------

    def feed(self, *chunks: str) -> None:
        """Queue more raw input chunks."""
        self._pending.extend(chunks)

    @property
    def pending(self) -> list[str]:
        return list(self._pending)

    @property
    def output(self) -> str:
        """Return everything written to the terminal as a single string."""
        return "".join(self._buffer)

    @property
    def plain_output(self) -> str:
        """Output with escape sequences removed."""
        return strip_ansi(self.output)

    def clear_buffer(self) -> None:
        """Discard all recorded output."""
        self._buffer.clear()

    def last_frame(self) -> str:
        """Output written since the most recent screen clear."""
        output = self.output
        index = output.rfind("\x1b[2J")
        return output if index == -1 else output[index:]
