"""Shared driving loop for modal dialogs."""

from __future__ import annotations

import enum
import logging
from typing import Generic, Sequence, TypeVar

from pi.dashboard.config import DashboardConfig, get_config
from pi.dashboard.frame import build_modal_frame
from pi.dashboard.keys import KeyPress, read_key
from pi.dashboard.overlay import modal_width, render_overlay
from pi.dashboard.terminal import ProcessTerminal, Terminal

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DialogStatus(enum.Enum):
    ACTIVE = "active"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


class Dialog(Generic[T]):
    """A modal painted over a dimmed background that resolves to a value.

    Subclasses provide the modal body (:meth:`build_content`), a key handler
    that mutates their state and may move :attr:`status` out of
    ``ACTIVE``, and :meth:`result`, which maps the final status and state to
    the value returned to the caller.
    """

    footer = ""

    def __init__(
        self,
        title: str,
        background: Sequence[str],
        terminal: Terminal | None = None,
        config: DashboardConfig | None = None,
    ) -> None:
        self.title = title
        self.background = list(background)
        self.terminal: Terminal = terminal if terminal is not None else ProcessTerminal(config)
        self.config = config or get_config()
        self.width = modal_width(self.terminal, self.config)
        self.status = DialogStatus.ACTIVE

    def build_content(self) -> list[str]:
        raise NotImplementedError

    def handle_key(self, key: KeyPress) -> bool:
        """Apply *key*; return ``True`` if the modal needs repainting."""
        raise NotImplementedError

    def result(self) -> T:
        raise NotImplementedError

    def submit(self) -> None:
        self.status = DialogStatus.SUBMITTED

    def cancel(self) -> None:
        self.status = DialogStatus.CANCELLED

    def render(self) -> None:
        lines = build_modal_frame(self.title, self.build_content(), self.footer, self.width)
        render_overlay(self.terminal, self.background, lines, self.width)

    async def run(self) -> T:
        self.render()
        try:
            while self.status is DialogStatus.ACTIVE:
                key = await read_key(self.terminal, self.config.key_timeout)
                if self.handle_key(key) and self.status is DialogStatus.ACTIVE:
                    self.render()
        finally:
            self.terminal.show_cursor()

        logger.debug("Dialog %r resolved: %s", self.title, self.status.value)
        return self.result()
