"""Modal dialogs."""

from pi.dashboard.dialogs.base import Dialog, DialogStatus
from pi.dashboard.dialogs.confirm import ConfirmDialog, build_confirm_content, show_confirm
from pi.dashboard.dialogs.input import InputDialog, build_input_content, show_input
from pi.dashboard.dialogs.multiline_input import (
    MultilineInputDialog,
    build_multiline_input_content,
    show_multiline_input,
)
from pi.dashboard.dialogs.select import (
    SelectDialog,
    SelectEntry,
    SelectItem,
    SelectSeparator,
    build_select_content,
    show_select,
)

__all__ = [
    "ConfirmDialog",
    "Dialog",
    "DialogStatus",
    "InputDialog",
    "MultilineInputDialog",
    "SelectDialog",
    "SelectEntry",
    "SelectItem",
    "SelectSeparator",
    "build_confirm_content",
    "build_input_content",
    "build_multiline_input_content",
    "build_select_content",
    "show_confirm",
    "show_input",
    "show_multiline_input",
    "show_select",
]
