import io
import warnings

import pytest

from tabalign import (
    AlignedWriter,
    ConfigurationError,
    Flags,
    TabalignWarning,
    WriterConfig,
)


@pytest.mark.parametrize(
    "minwidth,tabwidth,padding", [(-1, 0, 0), (0, -1, 0), (0, 0, -1)]
)
def test_negative_settings(minwidth: int, tabwidth: int, padding: int) -> None:
    with pytest.raises(ConfigurationError):
        AlignedWriter(io.BytesIO(), minwidth, tabwidth, padding, " ", Flags(0))


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        WriterConfig(minwidth=-1, tabwidth=0, padding=0, padchar=b" ")


def test_non_int_setting() -> None:
    with pytest.raises(ConfigurationError):
        WriterConfig(minwidth=1.5, tabwidth=0, padding=0, padchar=b" ")  # type: ignore


@pytest.mark.parametrize("padchar", ["", "..", b"", b"ab", "本", "é", "·"])
def test_bad_padchar(padchar) -> None:
    with pytest.raises(ConfigurationError):
        WriterConfig(minwidth=0, tabwidth=0, padding=0, padchar=padchar)


def test_padchar_normalized_to_bytes() -> None:
    config = WriterConfig(minwidth=0, tabwidth=0, padding=0, padchar=".")  # type: ignore
    assert config.padchar == b"."
    assert not config.pads_with_tabs
    assert WriterConfig(0, 8, 0, b"\t").pads_with_tabs


def test_high_byte_padchar() -> None:
    config = WriterConfig(0, 0, 1, b"\xe9")
    assert config.padchar == b"\xe9"
    assert WriterConfig.from_yaml(config.to_yaml()) == config

    out = io.BytesIO()
    writer = AlignedWriter.from_config(out, config)
    writer.write(b"a\tb\n")
    writer.flush()
    assert out.getvalue() == b"a\xe9b\n"


def test_flags_accept_ints() -> None:
    config = WriterConfig(0, 0, 0, b" ", 1 | 32)  # type: ignore
    assert config.flags == Flags.FILTER_HTML | Flags.DEBUG
    assert isinstance(config.flags, Flags)


def test_tab_padding_forces_left_alignment() -> None:
    with pytest.warns(TabalignWarning, match="ALIGN_RIGHT is ignored"):
        config = WriterConfig(0, 8, 1, b"\t", Flags.ALIGN_RIGHT | Flags.DEBUG)
    assert config.flags == Flags.DEBUG


def test_no_warning_for_tab_padding_alone() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        WriterConfig(0, 8, 1, b"\t", Flags.DEBUG)


def test_yaml_round_trip() -> None:
    config = WriterConfig(
        minwidth=8,
        tabwidth=4,
        padding=1,
        padchar=b"\t",
        flags=Flags.FILTER_HTML | Flags.DISCARD_EMPTY_COLUMNS,
    )
    yaml_str = config.to_yaml()
    assert yaml_str.startswith("# tabalign writer config.\n")
    assert WriterConfig.from_yaml(yaml_str) == config


def test_from_yaml() -> None:
    config = WriterConfig.from_yaml(
        "minwidth: 1\n"
        "tabwidth: 0\n"
        "padding: 2\n"
        "padchar: '.'\n"
        "flags: [debug, ALIGN_RIGHT]\n"
    )
    assert config == WriterConfig(1, 0, 2, b".", Flags.DEBUG | Flags.ALIGN_RIGHT)

    writer = AlignedWriter.from_config(io.BytesIO(), config)
    assert writer.config == config


def test_from_yaml_single_flag() -> None:
    config = WriterConfig.from_yaml(
        "minwidth: 0\ntabwidth: 0\npadding: 0\npadchar: ' '\nflags: DEBUG\n"
    )
    assert config.flags == Flags.DEBUG


def test_from_yaml_errors() -> None:
    with pytest.raises(ConfigurationError, match="Unknown flag"):
        WriterConfig.from_yaml(
            "minwidth: 0\ntabwidth: 0\npadding: 0\npadchar: ' '\nflags: [BLINK]\n"
        )
    with pytest.raises(ConfigurationError, match="Missing"):
        WriterConfig.from_yaml("minwidth: 0\ntabwidth: 0\npadchar: ' '\n")
    with pytest.raises(ConfigurationError, match="Unknown writer settings"):
        WriterConfig.from_yaml(
            "minwidth: 0\ntabwidth: 0\npadding: 0\npadchar: ' '\ncolor: red\n"
        )
    with pytest.raises(ConfigurationError, match="mapping"):
        WriterConfig.from_yaml("- 1\n- 2\n")
    with pytest.raises(ConfigurationError):
        WriterConfig.from_yaml(
            "minwidth: -3\ntabwidth: 0\npadding: 0\npadchar: ' '\n"
        )


def test_flag_names() -> None:
    assert (Flags.DEBUG | Flags.FILTER_HTML).names() == ["FILTER_HTML", "DEBUG"]
    assert Flags(0).names() == []


@pytest.mark.parametrize("flags", ["3", "[1]", "[DEBUG, 2]", "{DEBUG: true}"])
def test_from_yaml_bad_flags(flags: str) -> None:
    with pytest.raises(ConfigurationError, match="flag name"):
        WriterConfig.from_yaml(
            f"minwidth: 0\ntabwidth: 0\npadding: 0\npadchar: ' '\nflags: {flags}\n"
        )


def test_from_yaml_empty_flags() -> None:
    config = WriterConfig.from_yaml(
        "minwidth: 0\ntabwidth: 0\npadding: 0\npadchar: ' '\nflags:\n"
    )
    assert config.flags == Flags(0)
