"""Minimum, maximum, sum and average of integer sequences, with a small command."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


def _non_empty(values: Iterable[int], what: str) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError(f"{what} of an empty sequence")
    return items


def minimum(values: Iterable[int]) -> int:
    """Return the smallest value; raise ValueError if there is none."""
    return min(_non_empty(values, "minimum"))


def maximum(values: Iterable[int]) -> int:
    """Return the largest value; raise ValueError if there is none."""
    return max(_non_empty(values, "maximum"))


def total(values: Iterable[int]) -> int:
    """Return the sum of the values (0 for none)."""
    return sum(values)


def average(values: Iterable[int]) -> float:
    """Return the arithmetic mean; raise ValueError if there are no values."""
    items = _non_empty(values, "average")
    return total(items) / len(items)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers from standard input and print their minimum, maximum, sum and average."""
    parser = argparse.ArgumentParser(
        prog="pardemos-stats",
        description="Summarise integers read from standard input.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)
    try:
        out.write("Enter the number of elements: ")
        out.flush()
        count = _read_int(tokens)
        if count < 0:
            raise ValueError(f"number of elements must not be negative: {count}")
        out.write("Enter the elements: ")
        out.flush()
        values = [_read_int(tokens) for _ in range(count)]

        out.write(f"Minimum value: {minimum(values)}\n")
        out.write(f"Maximum value: {maximum(values)}\n")
        out.write(f"Sum of values: {total(values)}\n")
        out.write(f"Average of values: {average(values):g}\n")
    except ValueError as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())