"""Measuring buffered text, and recognizing the spans of it that take up no columns.

Three kinds of byte span are copied to the output but not measured:

- terminal control sequences, `ESC [ ... final` where the final byte is in `@`-`~`,
  and the two-byte `ESC x` forms where `x` is in `@`-`_`. Always recognized.
- escaped text, bracketed by `\\xff` bytes. Always recognized.
- HTML tags `<...>` and entities `&...;`, when HTML filtering is enabled. An entity
  is measured as a single column.

Spans never nest, and terminators inside a span are plain content. A span that is
still open when the input ends is measured as literal text.
"""

from __future__ import annotations

import enum

import wcwidth

ESC = 0x1B
ESCAPE = 0xFF


class Span(enum.Enum):
    NONE = enum.auto()
    ESCAPE_START = enum.auto()
    """An `ESC` byte was seen; the next byte decides what follows."""
    CONTROL = enum.auto()
    ESCAPED = enum.auto()
    TAG = enum.auto()
    ENTITY = enum.auto()

    @staticmethod
    def opened_by(ch: int, filter_html: bool) -> Span:
        """Span started by byte `ch`, or `Span.NONE`."""
        if ch == ESC:
            return Span.ESCAPE_START
        if ch == ESCAPE:
            return Span.ESCAPED
        if filter_html:
            if ch == 0x3C:  # <
                return Span.TAG
            if ch == 0x26:  # &
                return Span.ENTITY
        return Span.NONE

    def closed_by(self, ch: int) -> bool:
        if self is Span.CONTROL:
            return 0x40 <= ch <= 0x7E
        if self is Span.ESCAPED:
            return ch == ESCAPE
        if self is Span.TAG:
            return ch == 0x3E  # >
        if self is Span.ENTITY:
            return ch == 0x3B  # ;
        return False

    @property
    def width(self) -> int:
        """Columns occupied by a span of this kind once it is properly closed."""
        return 1 if self is Span.ENTITY else 0


def char_width(char: str) -> int:
    # wcwidth() is -1 for control characters, which don't advance the cursor.
    return max(wcwidth.wcwidth(char), 0)


def text_width(data: bytes) -> int:
    """Display width of UTF-8 text that contains no open span.

    Wide East-Asian characters count as two columns. Invalid UTF-8 is measured as
    the replacement characters it decodes to, one column each."""
    if data.isascii():
        # Fast path: every printable ASCII byte is one column.
        return sum(1 for ch in data if 0x20 <= ch < 0x7F)
    return sum(map(char_width, data.decode("utf-8", errors="replace")))
