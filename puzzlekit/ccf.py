"""Solvers for three certification-contest problems.

* repeated board positions (count how often each position has occurred),
* a linearised attention-style matrix product,
* a decompressor for a byte-oriented LZ77-style format given as hex text.
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice

BOARD_ROWS = 8
HEX_CHARS_PER_LINE = 16


def repeated_position_counts(positions: Iterable[str]) -> list[int]:
    """For each position, return how many times it has been seen so far (inclusive)."""
    seen: Counter[str] = Counter()
    counts = []
    for position in positions:
        seen[position] += 1
        counts.append(seen[position])
    return counts


def attention(
    q: Sequence[Sequence[int]],
    k: Sequence[Sequence[int]],
    v: Sequence[Sequence[int]],
    w: Sequence[int],
) -> list[list[int]]:
    """Compute ``diag(w) · q · (kᵀ · v)`` using the cheap association order."""
    n = len(q)
    if not (len(k) == len(v) == len(w) == n):
        raise ValueError("q, k, v and w must have the same number of rows")
    d = len(q[0]) if n else 0
    if any(len(row) != d for matrix in (q, k, v) for row in matrix):
        raise ValueError("all rows of q, k and v must have the same length")

    kv = [
        [sum(k_row[i] * v_row[j] for k_row, v_row in zip(k, v)) for j in range(d)]
        for i in range(d)
    ]
    kv_columns = list(zip(*kv))
    return [
        [weight * sum(a * b for a, b in zip(q_row, column)) for column in kv_columns]
        for q_row, weight in zip(q, w)
    ]


def _take(stream: Iterator[int], count: int) -> bytes:
    chunk = bytes(islice(stream, count))
    if len(chunk) < count:
        raise ValueError("compressed data is truncated")
    return chunk


def _copy_back(out: bytearray, offset: int, length: int) -> None:
    if offset <= 0 or offset > len(out):
        raise ValueError(f"invalid back-reference offset {offset}")
    start = len(out) - offset
    for i in range(length):
        out.append(out[start + i % offset])


def decompress(data: bytes) -> bytes:
    """Decompress ``data``: a length varint followed by literal and back-reference elements."""
    stream = iter(data)
    for byte in stream:
        if byte < 128:
            break

    out = bytearray()
    for tag in stream:
        kind = tag & 3
        if kind == 0:
            value = tag >> 2
            if value < 60:
                length = value + 1
            else:
                length = int.from_bytes(_take(stream, value - 59), "little") + 1
            out += _take(stream, length)
        elif kind == 1:
            length = ((tag >> 2) & 7) + 4
            offset = (((tag >> 5) & 7) << 8) + _take(stream, 1)[0]
            _copy_back(out, offset, length)
        else:
            length = (tag >> 2) + 1
            offset = int.from_bytes(_take(stream, 2), "little")
            _copy_back(out, offset, length)
    return bytes(out)


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    values = [int(token) for token in islice(tokens, count)]
    if len(values) < count:
        raise ValueError("input ended early")
    return values


def solve_repeated(text: str) -> str:
    """Read ``n`` boards of eight rows each and print each board's running count."""
    tokens = iter(text.split())
    try:
        n = int(next(tokens))
    except StopIteration:
        raise ValueError("missing board count") from None
    boards = []
    for _ in range(n):
        rows = list(islice(tokens, BOARD_ROWS))
        if len(rows) < BOARD_ROWS:
            raise ValueError("input ended early")
        boards.append("".join(rows))
    return "".join(f"{count}\n" for count in repeated_position_counts(boards))


def solve_attention(text: str) -> str:
    """Read ``n d``, matrices q, k, v and vector w; print the product matrix."""
    tokens = iter(text.split())
    n, d = _ints(tokens, 2)

    def matrix() -> list[list[int]]:
        return [_ints(tokens, d) for _ in range(n)]

    q, k, v = matrix(), matrix(), matrix()
    w = _ints(tokens, n)
    result = attention(q, k, v, w)
    return "".join(" ".join(map(str, row)) + "\n" for row in result)


def solve_decompress(text: str) -> str:
    """Read ``n`` and the hex dump of the input; print the output 8 bytes per line."""
    tokens = iter(text.split())
    try:
        n = int(next(tokens))
    except StopIteration:
        raise ValueError("missing byte count") from None
    hex_text = "".join(islice(tokens, (n + 7) // 8))
    output = decompress(bytes.fromhex(hex_text)).hex()
    return "".join(
        output[i : i + HEX_CHARS_PER_LINE] + "\n"
        for i in range(0, len(output), HEX_CHARS_PER_LINE)
    )


_SOLVERS = {
    "repeated": solve_repeated,
    "attention": solve_attention,
    "decompress": solve_decompress,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from stdin and write its answer to stdout."""
    parser = argparse.ArgumentParser(description="Solve a contest problem from stdin.")
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    try:
        answer = _SOLVERS[args.problem](sys.stdin.read())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())