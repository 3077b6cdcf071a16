"""SGR styling helpers.

Each helper wraps text in an attribute's open code and its matching close
code, so nested styles do not reset each other.
"""

from __future__ import annotations

from typing import Callable

RESET = "\x1b[0m"


def _sgr(open_code: int, close_code: int) -> Callable[[str], str]:
    start = f"\x1b[{open_code}m"
    end = f"\x1b[{close_code}m"

    def apply(text: str) -> str:
        if not text:
            return text
        return f"{start}{text}{end}"

    return apply


bold = _sgr(1, 22)
dim = _sgr(2, 22)
inverse = _sgr(7, 27)

cyan = _sgr(36, 39)


def bold_cyan(text: str) -> str:
    return bold(cyan(text))
