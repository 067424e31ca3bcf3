"""Bubble sort and merge sort, with a small interactive timing command."""

from __future__ import annotations

import argparse
import heapq
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` in ascending order, by bubble sort."""
    items = list(values)
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(items) - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
    return items


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` in ascending order, by merge sort.

    The sort is stable: of two equal items, the earlier one comes first.
    """
    items = list(values)
    return _merge_sorted(items)


def _merge_sorted(items: Sequence[int]) -> list[int]:
    if len(items) <= 1:
        return list(items)
    middle = (len(items) - 1) // 2 + 1
    left = _merge_sorted(items[:middle])
    right = _merge_sorted(items[middle:])
    # heapq.merge takes from the left run first on ties, keeping the sort stable.
    return list(heapq.merge(left, right))


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


def _format_values(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers from standard input, sort them both ways and report timings."""
    parser = argparse.ArgumentParser(
        prog="pardemos-sort",
        description="Sort integers read from standard input with bubble and merge sort.",
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
    except ValueError as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1

    bubble_start = time.process_time()
    values = bubble_sort(values)
    bubble_end = time.process_time()
    out.write(f"Sorted array using Bubble Sort: {_format_values(values)}\n")

    merge_start = time.process_time()
    values = merge_sort(values)
    merge_end = time.process_time()
    out.write(f"Sorted array using Merge Sort: {_format_values(values)}\n")

    out.write(f"Bubble sort time in seconds: {bubble_end - bubble_start:g}\n")
    out.write(f"Merge sort time in seconds: {merge_end - merge_start:g}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())