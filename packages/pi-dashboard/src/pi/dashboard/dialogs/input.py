"""Single-line text input dialog."""

from __future__ import annotations

from typing import Optional, Sequence

from pi.dashboard import style
from pi.dashboard.config import DashboardConfig
from pi.dashboard.dialogs.base import Dialog, DialogStatus
from pi.dashboard.keys import Key, KeyKind, KeyPress
from pi.dashboard.terminal import Terminal
from pi.dashboard.utils import tail_to_width


def build_input_content(label: str, value: str, cursor_visible: bool) -> list[str]:
    cursor = style.inverse(" ") if cursor_visible else ""
    return [label, "", style.cyan("> ") + value + cursor]


class InputDialog(Dialog[Optional[str]]):
    """Append-only text entry; the cursor always sits at the end."""

    footer = "Enter Submit  Esc Cancel"

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

    def visible_value(self) -> str:
        """Tail of the value that fits, so the latest typing stays in view."""
        return tail_to_width(self.value, self.width - 10)

    def build_content(self) -> list[str]:
        return build_input_content(self.label, self.visible_value(), True)

    def handle_key(self, key: KeyPress) -> bool:
        match key.name:
            case Key.enter:
                self.submit()
            case Key.escape:
                self.cancel()
            case Key.backspace:
                self.value = self.value[:-1]
            case Key.paste:
                flat = key.raw.replace("\n", "")
                if not flat:
                    return False
                self.value += flat
            case _:
                if key.kind is not KeyKind.CHAR:
                    return False
                self.value += key.raw
        return True

    def result(self) -> str | None:
        if self.status is DialogStatus.SUBMITTED:
            return self.value.strip() or None
        return None


async def show_input(
    title: str,
    label: str,
    background: Sequence[str],
    *,
    terminal: Terminal | None = None,
    config: DashboardConfig | None = None,
) -> str | None:
    """Prompt for one line of text; ``None`` if cancelled or left blank."""
    return await InputDialog(title, label, background, terminal, config).run()
