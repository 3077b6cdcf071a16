"""Single-choice list dialog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from pi.dashboard import style
from pi.dashboard.config import DashboardConfig
from pi.dashboard.dialogs.base import Dialog, DialogStatus
from pi.dashboard.keys import Key, KeyPress
from pi.dashboard.terminal import Terminal
from pi.dashboard.utils import truncate_ansi


@dataclass
class SelectItem:
    name: str
    value: str


@dataclass
class SelectSeparator:
    separator: str


SelectEntry = Union[SelectItem, SelectSeparator]


def build_select_content(
    items: Sequence[SelectEntry],
    selected_index: int,
    max_width: int,
    current_index: int | None = None,
) -> list[str]:
    """One row per entry; indexes count selectable items only."""
    lines: list[str] = []
    selectable_index = 0

    for item in items:
        if isinstance(item, SelectSeparator):
            lines.append(style.dim(item.separator))
            continue

        is_selected = selectable_index == selected_index
        is_current = current_index is not None and selectable_index == current_index
        prefix = style.bold_cyan("> ") if is_selected else "  "
        label = truncate_ansi(item.name, max_width - 4)
        if is_selected:
            label = style.bold(label)
        elif is_current:
            label = style.cyan(label)
        lines.append(prefix + style.dim("· ") + label)
        selectable_index += 1

    return lines


class SelectDialog(Dialog[Optional[str]]):
    footer = "↑↓ Navigate  Enter Select  Esc Cancel"

    def __init__(
        self,
        title: str,
        items: Sequence[SelectEntry],
        background: Sequence[str],
        initial_index: int = 0,
        current_index: int | None = None,
        terminal: Terminal | None = None,
        config: DashboardConfig | None = None,
    ) -> None:
        super().__init__(title, background, terminal, config)
        self.items = list(items)
        self.choices = [item for item in self.items if isinstance(item, SelectItem)]
        self.current_index = current_index
        self.selected_index = max(0, min(initial_index, len(self.choices) - 1))

    def build_content(self) -> list[str]:
        return build_select_content(
            self.items, self.selected_index, self.width - 6, self.current_index
        )

    def handle_key(self, key: KeyPress) -> bool:
        match key.name:
            case Key.up:
                # Clamped at both ends rather than wrapping
                self.selected_index = max(0, self.selected_index - 1)
            case Key.down:
                self.selected_index = min(len(self.choices) - 1, self.selected_index + 1)
            case Key.enter:
                self.submit()
            case Key.escape:
                self.cancel()
            case _:
                return False
        return True

    def result(self) -> str | None:
        if self.status is DialogStatus.SUBMITTED:
            return self.choices[self.selected_index].value
        return None


async def show_select(
    title: str,
    items: Sequence[SelectEntry],
    background: Sequence[str],
    *,
    initial_index: int = 0,
    current_index: int | None = None,
    terminal: Terminal | None = None,
    config: DashboardConfig | None = None,
) -> str | None:
    """Let the user pick one item; returns its value or ``None`` on cancel."""
    dialog = SelectDialog(
        title, items, background, initial_index, current_index, terminal, config
    )
    if not dialog.choices:
        return None
    return await dialog.run()
