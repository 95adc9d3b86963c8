from typing import Iterator, List

import pytest

from writer_utils import Chunker


def _once(src: bytes) -> Iterator[bytes]:
    yield src


def _byte_by_byte(src: bytes) -> Iterator[bytes]:
    for i in range(len(src)):
        yield src[i : i + 1]


def _fibonacci(src: bytes) -> Iterator[bytes]:
    """Slices of growing size: 0, 1, 2, 3, ... bytes."""
    i, d = 0, 0
    while i < len(src):
        yield src[i : i + d]
        i, d = i + d, d + 1
        if i + d > len(src):
            d = len(src) - i


_chunkers = {"once": _once, "bytes": _byte_by_byte, "fibonacci": _fibonacci}


def pytest_addoption(parser):
    """Add command-line option to select how test input is split across writes."""
    parser.addoption(
        "--chunking",
        action="store",
        default="all",
        choices=["once", "bytes", "fibonacci", "all"],
        help="How tests write their input: all at once, byte-by-byte, in slices of"
        " growing size, or all three (default)",
    )


def pytest_generate_tests(metafunc):
    """Parametrize tests that use the `chunking` fixture by write strategy."""
    if "chunking" not in metafunc.fixturenames:
        return
    option = metafunc.config.getoption("--chunking")
    names: List[str] = list(_chunkers.keys()) if option == "all" else [option]
    metafunc.parametrize("chunking", names, scope="function", indirect=True)


@pytest.fixture(scope="function")
def chunking(request) -> Chunker:
    """Function that splits test input into the chunks passed to `write()`."""
    return _chunkers[getattr(request, "param", "once")]
