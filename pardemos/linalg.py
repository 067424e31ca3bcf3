"""Vector addition and matrix multiplication on small integer data, with a demo command."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

Vector = list[int]
Matrix = list[list[int]]


def add_vectors(a: Sequence[int], b: Sequence[int]) -> Vector:
    """Return the element-wise sum of two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError(f"vector lengths differ: {len(a)} and {len(b)}")
    return [x + y for x, y in zip(a, b)]


def _shape(matrix: Sequence[Sequence[int]], name: str) -> tuple[int, int]:
    rows = len(matrix)
    columns = len(matrix[0]) if rows else 0
    if any(len(row) != columns for row in matrix):
        raise ValueError(f"matrix {name} has rows of different lengths")
    return rows, columns


def multiply_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product ``a @ b``."""
    _, inner_a = _shape(a, "a")
    inner_b, columns = _shape(b, "b")
    if inner_a != inner_b:
        raise ValueError(
            f"cannot multiply: a has {inner_a} columns but b has {inner_b} rows"
        )
    b_columns = list(zip(*b)) if b else []
    if not b_columns:
        return [[] for _ in a] if columns == 0 else [[0] * columns for _ in a]
    return [[sum(x * y for x, y in zip(row, column)) for column in b_columns] for row in a]


def random_vector(size: int, rng: random.Random) -> Vector:
    """Return ``size`` random digits 0..9 drawn from ``rng``."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return [rng.randrange(10) for _ in range(size)]


def random_matrix(size: int, rng: random.Random) -> Matrix:
    """Return a ``size`` x ``size`` matrix of random digits 0..9, filled row by row."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return [random_vector(size, rng) for _ in range(size)]


def format_vector(vector: Sequence[int]) -> str:
    """Render a vector as its values, each followed by a space."""
    return "".join(f"{value} " for value in vector)


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix one row per line, each line ending in a newline."""
    return "".join(f"{format_vector(row)}\n" for row in matrix)


def main(argv: Sequence[str] | None = None) -> int:
    """Add two random vectors and multiply two random matrices, printing everything."""
    parser = argparse.ArgumentParser(
        prog="pardemos-linalg",
        description="Demonstrate vector addition and matrix multiplication on random digits.",
    )
    parser.add_argument("--size", type=int, default=4, help="vector length and matrix order")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random digits")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("--size must not be negative")

    rng = random.Random(args.seed)
    out = sys.stdout

    a = random_vector(args.size, rng)
    b = random_vector(args.size, rng)
    out.write(f"Vector A: {format_vector(a)}\n")
    out.write(f"Vector B: {format_vector(b)}\n")
    out.write(f"Addition: {format_vector(add_vectors(a, b))}\n")

    d = random_matrix(args.size, rng)
    e = random_matrix(args.size, rng)
    out.write(f"\nMatrix D: \n{format_matrix(d)}\n")
    out.write(f"Matrix E: \n{format_matrix(e)}\n")
    out.write(f"Multiplication: \n{format_matrix(multiply_matrices(d, e))}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())