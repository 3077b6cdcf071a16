"""Keyboard input decoding for the dashboard dialogs.

A raw chunk read from the terminal is classified into exactly one
:class:`KeyPress`: a named special key, a literal printable character, or a
paste.  Pastes arrive either wrapped in bracketed-paste markers or as a
burst of several characters in one read; both surface as ``"paste"`` events
so consumers only handle one shape.

Chunks that match nothing are ignored and :func:`read_key` waits for the
next one, keeping the terminal in raw/paste mode the whole time.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from pi.dashboard.terminal import Terminal

logger = logging.getLogger(__name__)

ESC = "\x1b"
BRACKETED_PASTE_START = "\x1b[200~"
BRACKETED_PASTE_END = "\x1b[201~"


class KeyReadTimeout(TimeoutError):
    """No recognised key arrived within the requested timeout."""


# ---------------------------------------------------------------------------
# Key event
# ---------------------------------------------------------------------------


class KeyKind(enum.Enum):
    SPECIAL = "special"
    CHAR = "char"
    PASTE = "paste"


@dataclass(frozen=True)
class KeyPress:
    """One decoded input event.

    ``name`` is a symbolic key name (``"up"``, ``"enter"``, ...), the
    character itself for printable keys, or ``"paste"``.  ``raw`` holds the
    original input, or the normalised pasted text for pastes.
    """

    name: str
    raw: str
    kind: KeyKind = KeyKind.SPECIAL

    @property
    def is_printable(self) -> bool:
        return self.kind is KeyKind.CHAR


class Key:
    """Symbolic names produced by :func:`decode_key`."""

    up = "up"
    down = "down"
    left = "left"
    right = "right"
    home = "home"
    end = "end"
    delete = "delete"
    word_left = "ctrl-left"
    word_right = "ctrl-right"
    tab = "tab"
    enter = "enter"
    backspace = "backspace"
    commit = "ctrl-s"
    escape = "escape"
    paste = "paste"


# Escape and Ctrl+C share a name: telling a user cancel apart from an
# interrupt is up to the caller.
_SEQUENCES: dict[str, str] = {
    "\x03": Key.escape,
    ESC: Key.escape,
    ESC + ESC: Key.escape,
    "\x1b[A": Key.up,
    "\x1b[B": Key.down,
    "\x1b[C": Key.right,
    "\x1b[D": Key.left,
    "\x1b[1;5C": Key.word_right,
    "\x1b[5C": Key.word_right,
    "\x1b[1;5D": Key.word_left,
    "\x1b[5D": Key.word_left,
    "\x1b[3~": Key.delete,
    "\x1b[H": Key.home,
    "\x1b[1~": Key.home,
    "\x01": Key.home,  # Ctrl+A
    "\x1b[F": Key.end,
    "\x1b[4~": Key.end,
    "\x05": Key.end,  # Ctrl+E
    "\r": Key.enter,
    "\n": Key.enter,
    "\x7f": Key.backspace,
    "\x08": Key.backspace,
    "\t": Key.tab,
    "\x13": Key.commit,  # Ctrl+S
}


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _is_printable_char(ch: str) -> bool:
    return ord(ch) >= 32 and ord(ch) != 0x7F


def decode_key(data: str) -> KeyPress | None:
    """Classify one raw input chunk, or return ``None`` if unrecognised."""
    if data.startswith(BRACKETED_PASTE_START):
        content = data[len(BRACKETED_PASTE_START) :]
        # A paste split across reads is taken as complete at the chunk end
        end_index = content.find(BRACKETED_PASTE_END)
        if end_index != -1:
            content = content[:end_index]
        return KeyPress(Key.paste, normalize_newlines(content), KeyKind.PASTE)

    name = _SEQUENCES.get(data)
    if name is not None:
        return KeyPress(name, data, KeyKind.SPECIAL)

    if len(data) == 1 and ord(data) >= 32:
        return KeyPress(data, data, KeyKind.CHAR)

    if len(data) > 1 and not data.startswith(ESC):
        text = "".join(
            ch for ch in normalize_newlines(data) if ch == "\n" or _is_printable_char(ch)
        )
        if text:
            return KeyPress(Key.paste, text, KeyKind.PASTE)

    return None


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


async def read_key(terminal: Terminal, timeout: float | None = None) -> KeyPress:
    """Read chunks from *terminal* until one decodes to a key.

    Raw mode and bracketed paste stay enabled across ignored chunks and are
    restored before this returns or raises.  With a *timeout* (seconds),
    :class:`KeyReadTimeout` is raised if no recognised key arrives in time.
    """
    with terminal.input_mode():
        if timeout is None:
            return await _read_until_key(terminal)
        try:
            return await asyncio.wait_for(_read_until_key(terminal), timeout)
        except asyncio.TimeoutError:
            raise KeyReadTimeout(f"no key received within {timeout:g}s") from None


async def _read_until_key(terminal: Terminal) -> KeyPress:
    while True:
        data = await terminal.read()
        key = decode_key(data)
        if key is not None:
            return key
        logger.debug("Ignoring unrecognised input %r", data)


async def wait_for_key(terminal: Terminal, valid_keys: Iterable[str]) -> str:
    """Wait until one of *valid_keys* is pressed and return its name.

    Escape and Ctrl+C always resolve to ``"q"`` so a dashboard loop can be
    left from any state.
    """
    valid = set(valid_keys)
    while True:
        key = await read_key(terminal)
        if key.name == Key.escape:
            return "q"
        if key.name in valid:
            return key.name
