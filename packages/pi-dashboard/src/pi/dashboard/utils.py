"""Terminal text utilities: ANSI handling, width measurement, truncation.

Every frame the dashboard paints is built from fixed-width rows, so widths
are always measured on the *visible* text: escape sequences are skipped and
wide graphemes (CJK, emoji) count as two columns.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

from pi.dashboard.style import RESET

ELLIPSIS = "…"

# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;?]*[\x40-\x7e]"          # CSI
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (multi-codepoint, contains VS16 U+FE0F, ZWJ sequences, etc.) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


# ---------------------------------------------------------------------------
# strip_ansi / visible_width
# ---------------------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove every escape sequence from *text*."""
    return _STRIP_RE.sub("", text)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Strips ANSI escape sequences.
    * Treats tabs as 3 spaces.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    stripped = stripped.replace("\t", "   ")

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += _grapheme_width(g)

    return _cache_width(stripped, total)


# ---------------------------------------------------------------------------
# extract_ansi_code
# ---------------------------------------------------------------------------

def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """Extract an ANSI escape sequence starting at *pos* in *text*.

    Returns ``(code, length)`` where *code* is the full escape sequence string
    and *length* is the number of characters consumed, or ``None`` if there is
    no complete escape sequence at *pos*.

    Handles:
    * CSI sequences: ``ESC[`` <params> <final byte>
    * OSC sequences: ``ESC]`` ... ``BEL`` / ``ST``
    * APC sequences: ``ESC_`` ... ``BEL`` / ``ST``
    """
    if pos >= len(text) or text[pos] != "\x1b":
        return None

    if pos + 1 >= len(text):
        return None

    next_ch = text[pos + 1]

    if next_ch == "[":
        i = pos + 2
        while i < len(text):
            ch = text[i]
            if ch.isdigit() or ch in ";?":
                i += 1
                continue
            if "\x40" <= ch <= "\x7e":
                code = text[pos : i + 1]
                return (code, len(code))
            break
        return None

    if next_ch in "]_":
        i = pos + 2
        while i < len(text):
            ch = text[i]
            if ch == "\x07":
                code = text[pos : i + 1]
                return (code, len(code))
            if ch == "\x1b" and i + 1 < len(text) and text[i + 1] == "\\":
                code = text[pos : i + 2]
                return (code, len(code))
            i += 1
        return None

    return None


# ---------------------------------------------------------------------------
# truncate_ansi / tail_to_width / pad_visible
# ---------------------------------------------------------------------------

def truncate_ansi(text: str, max_width: int) -> str:
    """Truncate *text* to at most *max_width* visible columns.

    Text that already fits is returned unchanged.  Otherwise the text is cut
    after ``max_width - 1`` visible columns, a reset is appended so no style
    leaks past the cut, and an ellipsis fills the final column.  Escape
    sequences are copied whole, never split.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    limit = max_width - 1
    result: list[str] = []
    cols = 0
    i = 0

    while i < len(text):
        extracted = extract_ansi_code(text, i)
        if extracted is not None:
            code, length = extracted
            result.append(code)
            i += length
            continue

        # Measure whole clusters so emoji with VS16/ZWJ are never split
        end = text.find("\x1b", i + 1)
        if end == -1:
            end = len(text)
        for g in grapheme.graphemes(text[i:end]):
            w = 3 if g == "\t" else _grapheme_width(g)
            if cols + w > limit:
                return "".join(result) + RESET + ELLIPSIS
            result.append(g)
            cols += w
        i = end

    return "".join(result) + RESET + ELLIPSIS


def tail_to_width(text: str, max_width: int) -> str:
    """Longest suffix of *text* (escape-free) fitting in *max_width* columns."""
    if visible_width(text) <= max_width:
        return text
    tail: list[str] = []
    cols = 0
    for g in reversed(list(grapheme.graphemes(text))):
        w = 3 if g == "\t" else _grapheme_width(g)
        if cols + w > max_width:
            break
        tail.append(g)
        cols += w
    return "".join(reversed(tail))


def pad_visible(text: str, width: int) -> str:
    """Right-pad *text* with spaces to *width* visible columns."""
    return text + " " * max(0, width - visible_width(text))
