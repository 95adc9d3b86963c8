"""Writer configuration: formatting flags and the immutable settings bundle."""

from __future__ import annotations

import dataclasses
import enum
import warnings
from typing import IO, Any, Dict, List, Union

from ._errors import ConfigurationError
from ._warnings import TabalignWarning

CONFIG_YAML_HEADER = "# tabalign writer config.\n"


class Flags(enum.IntFlag):
    """Formatting flags. Combine with `|`."""

    FILTER_HTML = 1
    """Treat HTML tags as zero width and HTML entities as width one."""
    STRIP_ESCAPE = 2
    """Drop the `\\xff` bytes bracketing escaped text segments from the output."""
    ALIGN_RIGHT = 4
    """Pad cells on the left instead of the right."""
    DISCARD_EMPTY_COLUMNS = 8
    """Collapse columns made only of empty, `\\v`-terminated cells."""
    TAB_INDENT = 16
    """Pad leading empty cells with tabs, independent of the padding character."""
    DEBUG = 32
    """Print `|` between columns and `---` after each form feed."""

    @classmethod
    def from_names(cls, names: List[str]) -> Flags:
        out = cls(0)
        for name in names:
            try:
                out |= cls[name.upper()]
            except KeyError:
                raise ConfigurationError(
                    f"Unknown flag {name!r}; expected one of"
                    f" {[member.name for member in cls]}"
                ) from None
        return out

    def names(self) -> List[str]:
        # Iterate the class: iterating a composite flag value needs Python 3.11.
        return [member.name for member in type(self) if member in self]  # type: ignore


@dataclasses.dataclass(frozen=True)
class WriterConfig:
    """Settings for an :class:`tabalign.AlignedWriter`. Validated on construction."""

    minwidth: int
    """Minimal cell width, including any padding."""
    tabwidth: int
    """Width of a tab character. Only used when padding is done with tabs."""
    padding: int
    """Extra columns added to a cell's width before computing the column width."""
    padchar: bytes
    """Byte used for padding. `b"\\t"` pads with tabs and forces left alignment."""
    flags: Flags = Flags(0)

    def __post_init__(self) -> None:
        for name in ("minwidth", "tabwidth", "padding"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {value}")

        # A str padchar must be a single UTF-8 byte. Raw high bytes need `bytes`.
        padchar = self.padchar
        if isinstance(padchar, str):
            try:
                padchar = padchar.encode("utf-8")
            except UnicodeEncodeError:
                raise ConfigurationError(
                    f"padchar must be a single byte, got {self.padchar!r}"
                ) from None
        if not isinstance(padchar, (bytes, bytearray)) or len(padchar) != 1:
            raise ConfigurationError(
                f"padchar must be a single byte, got {self.padchar!r}"
            )
        object.__setattr__(self, "padchar", bytes(padchar))

        flags = Flags(self.flags)
        if padchar == b"\t" and Flags.ALIGN_RIGHT in flags:
            warnings.warn(
                "ALIGN_RIGHT is ignored when padding with tabs.",
                category=TabalignWarning,
                stacklevel=3,
            )
            flags &= ~Flags.ALIGN_RIGHT
        object.__setattr__(self, "flags", flags)

    @property
    def pads_with_tabs(self) -> bool:
        return self.padchar == b"\t"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "minwidth": self.minwidth,
            "tabwidth": self.tabwidth,
            "padding": self.padding,
            # Non-ASCII bytes are dumped as `!!binary` and load back as bytes.
            "padchar": (
                self.padchar.decode("ascii") if self.padchar.isascii() else self.padchar
            ),
            "flags": self.flags.names(),
        }

    def to_yaml(self) -> str:
        """Serialize to a human-readable YAML string, which can be read back with
        :meth:`WriterConfig.from_yaml`."""
        import yaml

        return CONFIG_YAML_HEADER + yaml.safe_dump(self.as_dict(), sort_keys=False)

    @classmethod
    def from_yaml(cls, stream: Union[str, bytes, IO[str], IO[bytes]]) -> WriterConfig:
        """Construct a config from YAML produced by :meth:`WriterConfig.to_yaml`.

        Args:
            stream: YAML to read from.

        Returns:
            Validated config.
        """
        import yaml

        raw = yaml.safe_load(stream)
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Expected a mapping of writer settings, got {type(raw).__name__}"
            )

        fields = {field.name for field in dataclasses.fields(cls)}
        unknown = set(raw.keys()) - fields
        if len(unknown) > 0:
            raise ConfigurationError(f"Unknown writer settings: {sorted(unknown)}")

        flags = raw.get("flags")
        if flags is None:
            flags = []
        elif isinstance(flags, str):
            flags = [flags]
        if not isinstance(flags, list) or not all(isinstance(f, str) for f in flags):
            raise ConfigurationError(
                "Expected flags to be a flag name or a list of flag names, got"
                f" {flags!r}"
            )
        try:
            return cls(
                minwidth=raw["minwidth"],
                tabwidth=raw["tabwidth"],
                padding=raw["padding"],
                padchar=raw["padchar"],
                flags=Flags.from_names(flags),
            )
        except KeyError as e:
            raise ConfigurationError(f"Missing writer setting {e.args[0]!r}") from None
