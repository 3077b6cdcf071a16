"""Yes/no confirmation dialog."""

from __future__ import annotations

from typing import Sequence

from pi.dashboard import style
from pi.dashboard.config import DashboardConfig
from pi.dashboard.dialogs.base import Dialog, DialogStatus
from pi.dashboard.keys import Key, KeyPress
from pi.dashboard.terminal import Terminal


def build_confirm_content(message: str, selected_yes: bool) -> list[str]:
    yes = style.bold_cyan("> Yes") if selected_yes else style.dim("  Yes")
    no = style.dim("  No") if selected_yes else style.bold_cyan("> No")
    return [message, "", yes, no]


class ConfirmDialog(Dialog[bool]):
    footer = "↑↓ Select  Enter Confirm  Esc Cancel"

    def __init__(
        self,
        title: str,
        message: str,
        background: Sequence[str],
        terminal: Terminal | None = None,
        config: DashboardConfig | None = None,
    ) -> None:
        super().__init__(title, background, terminal, config)
        self.message = message
        self.selected_yes = True

    def build_content(self) -> list[str]:
        return build_confirm_content(self.message, self.selected_yes)

    def handle_key(self, key: KeyPress) -> bool:
        match key.name:
            case Key.up | Key.down | Key.tab:
                self.selected_yes = not self.selected_yes
            case Key.enter:
                self.submit()
            case "y":
                self.selected_yes = True
                self.submit()
            case "n":
                self.selected_yes = False
                self.submit()
            case Key.escape:
                self.cancel()
            case _:
                return False
        return True

    def result(self) -> bool:
        # Cancelling answers "no"; there is no separate cancel value
        return self.status is DialogStatus.SUBMITTED and self.selected_yes


async def show_confirm(
    title: str,
    message: str,
    background: Sequence[str],
    *,
    terminal: Terminal | None = None,
    config: DashboardConfig | None = None,
) -> bool:
    """Ask a yes/no question; Escape counts as no."""
    return await ConfirmDialog(title, message, background, terminal, config).run()
