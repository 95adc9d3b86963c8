"""The column-aligned writer."""

from __future__ import annotations

import io
from types import TracebackType
from typing import Optional, Type, Union

from typing_extensions import Literal, Protocol, final

from ._buffer import LineBuffer, Terminator
from ._errors import SinkError
from ._layout import BLOCK_DIVIDER, layout
from ._settings import Flags, WriterConfig


class Sink(Protocol):
    """Destination for aligned output. Anything with a binary `write()` method, such
    as `sys.stdout.buffer` or an `io.BytesIO`.

    `write()` may return the number of bytes written; a count smaller than the data
    is treated as a failure. Returning None means everything was written."""

    def write(self, data: bytes, /) -> Optional[int]: ...


@final
class AlignedWriter:
    """A filter that aligns tab-separated columns of text written to it.

    Text is split into cells by `\\t` (a hard column boundary) and `\\v` (a column
    boundary that may be discarded when the column is empty). `\\n` ends a line and
    `\\f` ends a line and forces everything buffered so far to be written out.
    Consecutive lines that share a column are padded so that the column lines up.

    Terminal control sequences, text escaped between `\\xff` bytes, and, with
    :attr:`Flags.FILTER_HTML`, HTML tags are copied through without counting towards
    a cell's width.

    Output only reaches the sink when a block of lines is complete; call
    :meth:`flush` once done writing. Not safe for concurrent use.

    Args:
        sink: Destination for the aligned output.
        minwidth: Minimal cell width, including any padding.
        tabwidth: Width of a tab character, used when padding with tabs.
        padding: Added to a cell's width before computing the column width.
        padchar: Byte used for padding. A tab pads with tab characters and forces
            left alignment.
        flags: Formatting flags.
    """

    def __init__(
        self,
        sink: Sink,
        minwidth: int,
        tabwidth: int,
        padding: int,
        padchar: Union[bytes, str],
        flags: Flags,
    ) -> None:
        self._sink = sink
        self._config = WriterConfig(
            minwidth=minwidth,
            tabwidth=tabwidth,
            padding=padding,
            padchar=padchar,  # type: ignore
            flags=flags,
        )
        self._buffer = LineBuffer(self._config.flags)

    @classmethod
    def from_config(cls, sink: Sink, config: WriterConfig) -> AlignedWriter:
        return cls(
            sink,
            config.minwidth,
            config.tabwidth,
            config.padding,
            config.padchar,
            config.flags,
        )

    @property
    def config(self) -> WriterConfig:
        return self._config

    def write(self, data: Union[bytes, bytearray, memoryview]) -> int:
        """Buffer `data`, writing out any blocks of lines it completes.

        Returns:
            The number of bytes accepted, which is always `len(data)`.

        Raises:
            SinkError: If the sink failed. The writer should be discarded.
        """
        data = bytes(data)
        for terminator in self._buffer.feed(data):
            self._flush_buffered("write")
            if terminator is Terminator.FORMFEED and Flags.DEBUG in self._config.flags:
                self._emit(BLOCK_DIVIDER, "write")
        return len(data)

    def flush(self) -> None:
        """Write out everything buffered, including a final line that has no line
        break. Does nothing if nothing is buffered.

        Raises:
            SinkError: If the sink failed. The writer should be discarded.
        """
        self._buffer.finish()
        self._flush_buffered("flush")

    def _flush_buffered(self, op: Literal["write", "flush"]) -> None:
        try:
            out = layout(self._buffer.lines, bytes(self._buffer.data), self._config)
        finally:
            self._buffer.reset()
        self._emit(out, op)

    def _emit(self, data: bytes, op: Literal["write", "flush"]) -> None:
        if len(data) == 0:
            return
        try:
            written = self._sink.write(data)
        except Exception as e:
            raise SinkError(f"tabalign: sink failed during {op} ({e})") from e
        if written is not None and written < len(data):
            raise SinkError(
                f"tabalign: short write during {op} ({written} of {len(data)} bytes)"
            )

    def __enter__(self) -> AlignedWriter:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        # Leave partial output alone if the body raised.
        if exc_type is None:
            self.flush()


def align(
    text: str,
    minwidth: int = 0,
    tabwidth: int = 8,
    padding: int = 1,
    padchar: Union[bytes, str] = " ",
    flags: Flags = Flags(0),
) -> str:
    """Align the tab-separated columns of a string. Convenience wrapper around
    :class:`AlignedWriter` for text that is already fully in memory.

    >>> align("a\\tb\\nccc\\td\\n")
    'a   b\\nccc d\\n'
    """
    out = io.BytesIO()
    writer = AlignedWriter(out, minwidth, tabwidth, padding, padchar, flags)
    writer.write(text.encode("utf-8"))
    writer.flush()
    return out.getvalue().decode("utf-8")
