"""pi-dashboard: modal dialogs and overlays for a full-screen terminal dashboard."""

# Configuration
from pi.dashboard.config import DashboardConfig, get_config, set_config

# Dialogs
from pi.dashboard.dialogs import (
    SelectEntry,
    SelectItem,
    SelectSeparator,
    build_confirm_content,
    build_input_content,
    build_multiline_input_content,
    build_select_content,
    show_confirm,
    show_input,
    show_multiline_input,
    show_select,
)

# Frames
from pi.dashboard.frame import (
    bottom_row,
    build_modal_frame,
    build_panel,
    divider_row,
    format_command_bar,
    frame_row,
    mid_row,
    top_row,
)

# Keyboard input
from pi.dashboard.keys import (
    Key,
    KeyKind,
    KeyPress,
    KeyReadTimeout,
    decode_key,
    read_key,
    wait_for_key,
)

# Text layout
from pi.dashboard.layout import (
    CursorPosition,
    VisualLine,
    compute_visual_lines,
    cursor_to_visual_position,
    move_end,
    move_home,
    move_vertical,
    move_word_left,
    move_word_right,
)

# Overlay
from pi.dashboard.overlay import (
    StatusSpinner,
    modal_width,
    render_overlay,
    show_status,
    show_status_with_spinner,
)

# Terminal
from pi.dashboard.terminal import ProcessTerminal, Terminal

# Utilities
from pi.dashboard.utils import pad_visible, strip_ansi, truncate_ansi, visible_width

__all__ = [
    # Config
    "DashboardConfig",
    "get_config",
    "set_config",
    # Dialogs
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
    # Frames
    "bottom_row",
    "build_modal_frame",
    "build_panel",
    "divider_row",
    "format_command_bar",
    "frame_row",
    "mid_row",
    "top_row",
    # Keys
    "Key",
    "KeyKind",
    "KeyPress",
    "KeyReadTimeout",
    "decode_key",
    "read_key",
    "wait_for_key",
    # Layout
    "CursorPosition",
    "VisualLine",
    "compute_visual_lines",
    "cursor_to_visual_position",
    "move_end",
    "move_home",
    "move_vertical",
    "move_word_left",
    "move_word_right",
    # Overlay
    "StatusSpinner",
    "modal_width",
    "render_overlay",
    "show_status",
    "show_status_with_spinner",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Utilities
    "pad_visible",
    "strip_ansi",
    "truncate_ansi",
    "visible_width",
]
