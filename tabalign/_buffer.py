"""Incremental parsing of a byte stream into cells and lines."""

from __future__ import annotations

import dataclasses
import enum
from typing import Dict, Iterator, List, Optional

from ._settings import Flags
from ._width import Span, text_width


class Terminator(enum.Enum):
    HTAB = b"\t"
    VTAB = b"\v"
    NEWLINE = b"\n"
    FORMFEED = b"\f"

    @property
    def ends_line(self) -> bool:
        return self is Terminator.NEWLINE or self is Terminator.FORMFEED


_terminator_from_byte: Dict[int, Terminator] = {t.value[0]: t for t in Terminator}


@dataclasses.dataclass(frozen=True)
class Cell:
    size: int
    """Number of content bytes, as kept in the buffer."""
    width: int
    """Display width in columns."""
    terminator: Optional[Terminator]
    """None for text that was still unterminated when the buffer was finished."""

    @property
    def htab(self) -> bool:
        return self.terminator is Terminator.HTAB


class LineBuffer:
    """Buffers written bytes as cells and lines until they are laid out.

    Content bytes are kept in `data`; terminators are not, and the cell boundaries
    live in `lines`. The last entry of `lines` is the line currently being written.
    """

    def __init__(self, flags: Flags) -> None:
        self._filter_html = Flags.FILTER_HTML in flags
        self._strip_escape = Flags.STRIP_ESCAPE in flags
        self.data = bytearray()
        self.lines: List[List[Cell]] = [[]]
        # Start of the current cell in `data`.
        self._cell_start = 0
        # Width of the current cell, measured up to `data[self._pos]`.
        self._cell_width = 0
        self._pos = 0
        self._span = Span.NONE

    def reset(self) -> None:
        self.data.clear()
        self.lines = [[]]
        self._cell_start = 0
        self._cell_width = 0
        self._pos = 0
        self._span = Span.NONE

    def feed(self, data: bytes) -> Iterator[Terminator]:
        """Consume `data`, splitting it into cells.

        Yields the terminator of each line after which the buffered lines should be
        laid out. That is every form feed, plus every newline that ends a line made
        of a single cell: such a line doesn't contribute to any column, so lines
        before it can't be affected by lines after it. The caller is expected to lay
        out and `reset()` the buffer before resuming iteration.
        """
        n = 0  # Start of text that hasn't been copied into the buffer yet.
        i = 0
        while i < len(data):
            ch = data[i]
            span = self._span

            if span is Span.NONE:
                terminator = _terminator_from_byte.get(ch)
                if terminator is not None:
                    self._append(data[n:i])
                    self._update_width()
                    n = i + 1
                    cell_count = self._terminate_cell(terminator)
                    if terminator.ends_line:
                        self.lines.append([])
                        if terminator is Terminator.FORMFEED or cell_count == 1:
                            yield terminator
                else:
                    opened = Span.opened_by(ch, self._filter_html)
                    if opened is not Span.NONE:
                        self._append(data[n:i])
                        self._update_width()
                        n = i
                        if opened is Span.ESCAPED and self._strip_escape:
                            n += 1
                        self._span = opened

            elif span is Span.ESCAPE_START:
                if ch == 0x5B:  # [
                    self._span = Span.CONTROL
                elif 0x40 <= ch <= 0x5F:
                    # Two-byte sequence.
                    self._append(data[n : i + 1])
                    n = i + 1
                    self._end_span()
                else:
                    # A lone ESC. Re-examine this byte outside of any span.
                    self._append(data[n:i])
                    n = i
                    self._end_span()
                    continue

            elif span.closed_by(ch):
                end = i if span is Span.ESCAPED and self._strip_escape else i + 1
                self._append(data[n:end])
                n = i + 1
                self._end_span()

            i += 1

        self._append(data[n:])

    def finish(self) -> List[List[Cell]]:
        """Terminate any trailing text as a cell and return all buffered lines."""
        if len(self.data) > self._cell_start:
            if self._span is not Span.NONE:
                # Unterminated span: measure it as plain text.
                self._span = Span.NONE
                self._update_width()
            self._terminate_cell(None)
        return self.lines

    def _append(self, text: bytes) -> None:
        self.data += text

    def _update_width(self) -> None:
        self._cell_width += text_width(bytes(self.data[self._pos :]))
        self._pos = len(self.data)

    def _end_span(self) -> None:
        self._cell_width += self._span.width
        self._pos = len(self.data)
        self._span = Span.NONE

    def _terminate_cell(self, terminator: Optional[Terminator]) -> int:
        line = self.lines[-1]
        line.append(
            Cell(
                size=len(self.data) - self._cell_start,
                width=self._cell_width,
                terminator=terminator,
            )
        )
        self._cell_start = len(self.data)
        self._cell_width = 0
        return len(line)

