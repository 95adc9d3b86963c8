"""Terminal styles, for producing the escape sequences that :class:`AlignedWriter`
knows to measure as zero width.

>>> from tabalign.style import Style
>>> (Style.BOLD | Style.RED).code()
'\\x1b[1;31m'

Whether styling is applied at all is a process-wide setting, read once from the
environment at import: `NO_COLOR` disables it, `FORCE_COLOR` enables it, and
otherwise it is enabled when stdout is a terminal. Use :func:`set_enabled` or
:func:`enabled_context` to override.
"""

from __future__ import annotations

import contextlib
import enum
import os
import sys
from typing import IO, Dict, Iterator

ESCAPE_PREFIX = "\x1b["
RESET = "\x1b[0m"


class Style(enum.IntFlag):
    """A combination of terminal attributes and colors. Combine with `|`."""

    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINE = enum.auto()
    BLINK_SLOW = enum.auto()
    BLINK_FAST = enum.auto()
    REVERSE = enum.auto()
    HIDDEN = enum.auto()
    STRIKETHROUGH = enum.auto()
    BLACK = enum.auto()
    RED = enum.auto()
    GREEN = enum.auto()
    YELLOW = enum.auto()
    BLUE = enum.auto()
    MAGENTA = enum.auto()
    CYAN = enum.auto()
    WHITE = enum.auto()
    BLACK_BACKGROUND = enum.auto()
    RED_BACKGROUND = enum.auto()
    GREEN_BACKGROUND = enum.auto()
    YELLOW_BACKGROUND = enum.auto()
    BLUE_BACKGROUND = enum.auto()
    MAGENTA_BACKGROUND = enum.auto()
    CYAN_BACKGROUND = enum.auto()
    WHITE_BACKGROUND = enum.auto()
    BRIGHT_BLACK = enum.auto()
    BRIGHT_RED = enum.auto()
    BRIGHT_GREEN = enum.auto()
    BRIGHT_YELLOW = enum.auto()
    BRIGHT_BLUE = enum.auto()
    BRIGHT_MAGENTA = enum.auto()
    BRIGHT_CYAN = enum.auto()
    BRIGHT_WHITE = enum.auto()
    BRIGHT_BLACK_BACKGROUND = enum.auto()
    BRIGHT_RED_BACKGROUND = enum.auto()
    BRIGHT_GREEN_BACKGROUND = enum.auto()
    BRIGHT_YELLOW_BACKGROUND = enum.auto()
    BRIGHT_BLUE_BACKGROUND = enum.auto()
    BRIGHT_MAGENTA_BACKGROUND = enum.auto()
    BRIGHT_CYAN_BACKGROUND = enum.auto()
    BRIGHT_WHITE_BACKGROUND = enum.auto()

    def codes(self) -> list[str]:
        """SGR parameters of this style, in declaration order."""
        return [_code_from_style[member] for member in Style if member in self]

    def code(self) -> str:
        """Escape sequence that switches the terminal to this style."""
        return ESCAPE_PREFIX + ";".join(self.codes()) + "m"

    def sprint(self, *values: object, sep: str = " ") -> str:
        """Join `values` like `print()` does, and wrap the result in this style if
        styling is enabled."""
        text = sep.join(map(str, values))
        if not _enabled or self == 0:
            return text
        return self.code() + text + RESET

    def fprint(
        self, file: IO[str], *values: object, sep: str = " ", end: str = "\n"
    ) -> None:
        """Write styled `values` to `file`. `end` is written after the reset code,
        so a trailing newline is never styled."""
        file.write(self.sprint(*values, sep=sep) + end)

    def print(self, *values: object, sep: str = " ", end: str = "\n") -> None:
        """Like :meth:`fprint`, writing to stdout."""
        self.fprint(sys.stdout, *values, sep=sep, end=end)


_code_from_style: Dict[Style, str] = {
    Style.BOLD: "1",
    Style.DIM: "2",
    Style.ITALIC: "3",
    Style.UNDERLINE: "4",
    Style.BLINK_SLOW: "5",
    Style.BLINK_FAST: "6",
    Style.REVERSE: "7",
    Style.HIDDEN: "8",
    Style.STRIKETHROUGH: "9",
    Style.BLACK: "30",
    Style.RED: "31",
    Style.GREEN: "32",
    Style.YELLOW: "33",
    Style.BLUE: "34",
    Style.MAGENTA: "35",
    Style.CYAN: "36",
    Style.WHITE: "37",
    Style.BLACK_BACKGROUND: "40",
    Style.RED_BACKGROUND: "41",
    Style.GREEN_BACKGROUND: "42",
    Style.YELLOW_BACKGROUND: "43",
    Style.BLUE_BACKGROUND: "44",
    Style.MAGENTA_BACKGROUND: "45",
    Style.CYAN_BACKGROUND: "46",
    Style.WHITE_BACKGROUND: "47",
    Style.BRIGHT_BLACK: "90",
    Style.BRIGHT_RED: "91",
    Style.BRIGHT_GREEN: "92",
    Style.BRIGHT_YELLOW: "93",
    Style.BRIGHT_BLUE: "94",
    Style.BRIGHT_MAGENTA: "95",
    Style.BRIGHT_CYAN: "96",
    Style.BRIGHT_WHITE: "97",
    Style.BRIGHT_BLACK_BACKGROUND: "100",
    Style.BRIGHT_RED_BACKGROUND: "101",
    Style.BRIGHT_GREEN_BACKGROUND: "102",
    Style.BRIGHT_YELLOW_BACKGROUND: "103",
    Style.BRIGHT_BLUE_BACKGROUND: "104",
    Style.BRIGHT_MAGENTA_BACKGROUND: "105",
    Style.BRIGHT_CYAN_BACKGROUND: "106",
    Style.BRIGHT_WHITE_BACKGROUND: "107",
}


def _detect_enabled() -> bool:
    # https://no-color.org/
    if os.environ.get("NO_COLOR", "") != "":
        return False
    if os.environ.get("FORCE_COLOR", "") != "":
        return True
    return (
        sys.stdout is not None
        and sys.stdout.isatty()
        and os.environ.get("TERM") not in (None, "dumb")
    )


# A single flag, only flipped by `set_enabled()`; readers don't need a lock.
_enabled: bool = _detect_enabled()


def enabled() -> bool:
    """Whether :meth:`Style.sprint` applies styles."""
    return _enabled


def set_enabled(value: bool) -> None:
    """Turn styling on or off for the whole process."""
    global _enabled
    _enabled = value


@contextlib.contextmanager
def enabled_context(value: bool) -> Iterator[None]:
    """Context for temporarily turning styling on or off. Not thread-safe."""
    global _enabled
    restore = _enabled
    _enabled = value
    try:
        yield
    finally:
        _enabled = restore
