"""Column layout: compute column widths for buffered lines and render them padded.

A column block is a run of consecutive lines that all have a cell in column `i`,
not counting each line's last cell. The last cell of a line is the text before the
line break, so it never belongs to a column. Column blocks nest: a block for column
`i + 1` always lies inside a block for column `i`. Widths are found left to right,
and each block is rendered once the widths of all of its columns are known.

    aaaa|bbb|d
    aa  |b  |dd
    a   |
    aa  |cccc|eee

All four lines form one block for column 0. The first two lines also form a block
for column 1; the third line has no column 1, so the last line starts a new one.
"""

from __future__ import annotations

from typing import List, Sequence

from ._buffer import Cell
from ._settings import Flags, WriterConfig

_DEBUG_SEPARATOR = b"|"
BLOCK_DIVIDER = b"---\n"


class _BlockLayout:
    def __init__(
        self, lines: Sequence[Sequence[Cell]], data: bytes, config: WriterConfig
    ) -> None:
        self._lines = lines
        self._data = data
        self._config = config
        self._widths: List[int] = []
        self._out = bytearray()
        # Offset of the next unwritten cell text in `data`.
        self._pos = 0

    def render(self) -> bytes:
        self._format()
        assert self._pos == len(self._data), "not all buffered text was written"
        return bytes(self._out)

    def _format(self) -> None:
        # Each entry is `[line0, this, line1]` for a block whose column widths are
        # `self._widths`; the top entry's column is `len(self._widths)`. Lines
        # `line0` up to `this` are not yet written.
        # Not recursive: a line may have more cells than the recursion limit.
        stack: List[List[int]] = [[0, 0, len(self._lines)]]
        while len(stack) > 0:
            frame = stack[-1]
            line0, this, line1 = frame
            column = len(self._widths)
            while this < line1 and column >= len(self._lines[this]) - 1:
                this += 1

            if this == line1:
                self._write_lines(line0, line1)
                stack.pop()
                if len(stack) > 0:
                    self._widths.pop()
                continue

            # This line starts a block for `column`. Everything before it only
            # depends on columns whose widths we already know.
            self._write_lines(line0, this)
            start = this

            width = self._config.minwidth
            discardable = True
            while this < line1:
                line = self._lines[this]
                if column >= len(line) - 1:
                    break
                cell = line[column]
                width = max(width, cell.width + self._config.padding)
                if cell.width > 0 or cell.htab:
                    discardable = False
                this += 1

            if discardable and Flags.DISCARD_EMPTY_COLUMNS in self._config.flags:
                width = 0

            # Render the block next, now that its column widths are known. Lines after it
            # resume in this entry.
            frame[0] = frame[1] = this
            self._widths.append(width)
            stack.append([start, start, this])

    def _write_lines(self, line0: int, line1: int) -> None:
        flags = self._config.flags
        align_right = Flags.ALIGN_RIGHT in flags
        for i in range(line0, line1):
            # Leading empty cells are indented with tabs if requested.
            use_tabs = Flags.TAB_INDENT in flags

            for j, cell in enumerate(self._lines[i]):
                if j > 0 and Flags.DEBUG in flags:
                    self._out += _DEBUG_SEPARATOR

                has_width = j < len(self._widths)
                if cell.size == 0:
                    if has_width:
                        self._write_padding(cell.width, self._widths[j], use_tabs)
                    continue

                use_tabs = False
                text = self._data[self._pos : self._pos + cell.size]
                self._pos += cell.size
                if align_right:
                    if has_width:
                        self._write_padding(cell.width, self._widths[j], False)
                    self._out += text
                else:
                    self._out += text
                    if has_width:
                        self._write_padding(cell.width, self._widths[j], False)

            # The last buffered line is still open; only completed lines get a
            # line break.
            if i + 1 < len(self._lines):
                self._out += b"\n"

    def _write_padding(self, text_width: int, cell_width: int, use_tabs: bool) -> None:
        config = self._config
        if config.pads_with_tabs or use_tabs:
            if config.tabwidth == 0:
                # Tabs have no width, so no padding is possible.
                return
            # Round the cell width up to the next tab stop.
            cell_width = -(-cell_width // config.tabwidth) * config.tabwidth
            n = cell_width - text_width
            assert n >= 0, "cell is wider than its column"
            self._out += b"\t" * -(-n // config.tabwidth)
            return

        self._out += config.padchar * (cell_width - text_width)


def layout(
    lines: Sequence[Sequence[Cell]], data: bytes, config: WriterConfig
) -> bytes:
    """Render buffered lines with their columns aligned.

    Args:
        lines: Lines of cells, as produced by :class:`tabalign._buffer.LineBuffer`.
            The last line is the one that was being written when the buffer was
            flushed, and is not followed by a line break.
        data: Content bytes of all cells, back to back.
        config: Writer settings.

    Returns:
        The padded text.
    """
    return _BlockLayout(lines, data, config).render()
