"""Tests for the single-line input dialog."""

from __future__ import annotations

import asyncio

import pytest

from pi.dashboard import style
from pi.dashboard.config import DashboardConfig
from pi.dashboard.dialogs import InputDialog, build_input_content, show_input
from pi.dashboard.keys import KeyReadTimeout, decode_key
from pi.dashboard.utils import strip_ansi, visible_width

from .virtual_terminal import VirtualTerminal


class TestBuildInputContent:
    def test_with_cursor(self) -> None:
        assert build_input_content("Name:", "abc", True) == [
            "Name:",
            "",
            style.cyan("> ") + "abc" + style.inverse(" "),
        ]

    def test_without_cursor(self) -> None:
        assert build_input_content("Name:", "abc", False)[2] == style.cyan("> ") + "abc"


class TestInputDialog:
    @pytest.mark.asyncio
    async def test_typed_characters(self) -> None:
        term = VirtualTerminal(chunks=["h", "i", "\r"])
        assert await show_input("Rename", "Name:", [], terminal=term) == "hi"

    @pytest.mark.asyncio
    async def test_result_is_stripped(self) -> None:
        term = VirtualTerminal(chunks=[" ", "a", " ", "\r"])
        assert await show_input("Rename", "Name:", [], terminal=term) == "a"

    @pytest.mark.asyncio
    async def test_blank_submission_is_none(self) -> None:
        term = VirtualTerminal(chunks=[" ", " ", "\r"])
        assert await show_input("Rename", "Name:", [], terminal=term) is None

    @pytest.mark.asyncio
    async def test_escape_discards_text(self) -> None:
        term = VirtualTerminal(chunks=["a", "b", "\x1b"])
        assert await show_input("Rename", "Name:", [], terminal=term) is None

    @pytest.mark.asyncio
    async def test_backspace(self) -> None:
        term = VirtualTerminal(chunks=["a", "b", "\x7f", "c", "\r"])
        assert await show_input("Rename", "Name:", [], terminal=term) == "ac"

    @pytest.mark.asyncio
    async def test_backspace_on_empty_value(self) -> None:
        term = VirtualTerminal(chunks=["\x7f", "x", "\r"])
        assert await show_input("Rename", "Name:", [], terminal=term) == "x"

    @pytest.mark.asyncio
    async def test_paste_drops_newlines(self) -> None:
        term = VirtualTerminal(chunks=["\x1b[200~one\r\ntwo\x1b[201~", "\r"])
        assert await show_input("Rename", "Name:", [], terminal=term) == "onetwo"

    @pytest.mark.asyncio
    async def test_burst_input_is_appended(self) -> None:
        term = VirtualTerminal(chunks=["hello", "\r"])
        assert await show_input("Rename", "Name:", [], terminal=term) == "hello"

    @pytest.mark.asyncio
    async def test_arrow_keys_ignored(self) -> None:
        term = VirtualTerminal(chunks=["a", "\x1b[D", "b", "\r"])
        assert await show_input("Rename", "Name:", [], terminal=term) == "ab"

    @pytest.mark.asyncio
    async def test_latest_wide_input_stays_on_screen(self) -> None:
        term = VirtualTerminal(chunks=["漢字" * 15, "Z", "\r"])
        await show_input("Rename", "Name:", [], terminal=term)
        painted = strip_ansi(term.last_frame())
        assert "> " + "漢字" * 12 + "Z" in painted
        assert "…" not in painted

    @pytest.mark.asyncio
    async def test_typed_text_is_painted(self) -> None:
        term = VirtualTerminal(chunks=["q", "\r"])
        await show_input("Rename", "Name:", [], terminal=term)
        assert "> q" in term.plain_output
        assert "Name:" in term.plain_output

    @pytest.mark.asyncio
    async def test_timeout_propagates_and_restores_cursor(self) -> None:
        class Silent(VirtualTerminal):
            async def read(self) -> str:
                await asyncio.Event().wait()
                return ""

        term = Silent()
        config = DashboardConfig(key_timeout=0.01)
        with pytest.raises(KeyReadTimeout):
            await show_input("Rename", "Name:", [], terminal=term, config=config)
        assert term.cursor_visible is True
        assert term.raw_mode is False


class TestVisibleValue:
    def test_short_value_shown_whole(self) -> None:
        dialog = InputDialog("Rename", "Name:", [], terminal=VirtualTerminal(columns=80))
        dialog.value = "abc"
        assert dialog.visible_value() == "abc"

    def test_long_value_shows_tail(self) -> None:
        dialog = InputDialog("Rename", "Name:", [], terminal=VirtualTerminal(columns=80))
        assert dialog.width == 60
        dialog.value = "a" * 10 + "b" * 50
        assert dialog.visible_value() == "b" * 50

    def test_wide_tail_is_measured_in_columns(self) -> None:
        dialog = InputDialog("Rename", "Name:", [], terminal=VirtualTerminal(columns=80))
        dialog.value = "漢字" * 15 + "Z"
        shown = dialog.visible_value()
        assert shown.endswith("Z")
        assert visible_width(shown) <= 50
        assert shown == "漢字" * 12 + "Z"

    def test_paste_of_only_newlines_is_not_handled(self) -> None:
        dialog = InputDialog("Rename", "Name:", [], terminal=VirtualTerminal())
        assert dialog.handle_key(decode_key("\x1b[200~\n\n\x1b[201~")) is False
        assert dialog.value == ""
