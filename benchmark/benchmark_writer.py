import io
import time

from tabalign import AlignedWriter, Flags


def _writer() -> AlignedWriter:
    return AlignedWriter(io.BytesIO(), 4, 4, 1, " ", Flags(0))


def table(width: int, height: int) -> None:
    line = b"a\t" * width + b"\n"
    writer = _writer()
    for _ in range(height):
        writer.write(line)
    writer.flush()


def pyramid(width: int) -> None:
    line = b"a\t" * width
    writer = _writer()
    for j in range(width):
        writer.write(line[: j * 2])
        writer.write(b"\n")
    writer.flush()


def ragged(height: int) -> None:
    lines = [b"a\t" * w for w in (6, 2, 9, 5, 5, 7, 3, 8)]
    writer = _writer()
    for j in range(height):
        writer.write(lines[j % len(lines)])
        writer.write(b"\n")
    writer.flush()


def main() -> None:
    cases = []
    for w in (1, 10, 100):
        for h in (10, 1000, 10000):
            cases.append((f"table {w}x{h}", lambda w=w, h=h: table(w, h)))
    for x in (10, 100, 1000):
        cases.append((f"pyramid {x}", lambda x=x: pyramid(x)))
    for h in (10, 100, 1000):
        cases.append((f"ragged {h}", lambda h=h: ragged(h)))
    for name, run in cases:
        start = time.perf_counter()
        run()
        print(f"{name}: {time.perf_counter() - start:.4f} seconds")


if __name__ == "__main__":
    main()
