"""Exceptions raised by tabalign.

Malformed markup never raises. An unterminated escape sequence, HTML tag or entity
is emitted as literal text.
"""


class TabalignError(Exception):
    """Base class for all tabalign exceptions."""


class ConfigurationError(TabalignError, ValueError):
    """Raised when a writer is constructed with an invalid setting, such as a
    negative width or a padding character that is not a single byte."""


class SinkError(TabalignError, OSError):
    """Raised when the underlying sink fails while buffered output is being
    written. The original failure is available as `__cause__`.

    A writer that raised this has discarded its buffered state and should not be
    used again."""
