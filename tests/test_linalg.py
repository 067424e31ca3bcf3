import random

import pytest

from pardemos.linalg import (
    add_vectors,
    format_matrix,
    format_vector,
    main,
    multiply_matrices,
    random_matrix,
    random_vector,
)


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def _transpose(m):
    return [list(column) for column in zip(*m)]


def test_add_vectors_worked_example():
    assert add_vectors([1, 2, 3], [4, 5, 6]) == [5, 7, 9]


def test_add_vectors_is_commutative_and_zero_is_neutral():
    rng = random.Random(1)
    a = random_vector(8, rng)
    b = random_vector(8, rng)
    assert add_vectors(a, b) == add_vectors(b, a)
    assert add_vectors(a, [0] * 8) == a


def test_add_vectors_length_mismatch_raises():
    with pytest.raises(ValueError):
        add_vectors([1, 2], [1])


def test_multiply_by_identity_returns_same_matrix():
    m = random_matrix(4, random.Random(2))
    assert multiply_matrices(m, _identity(4)) == m
    assert multiply_matrices(_identity(4), m) == m


def test_multiply_transpose_rule():
    rng = random.Random(3)
    a = random_matrix(3, rng)
    b = random_matrix(3, rng)
    assert _transpose(multiply_matrices(a, b)) == multiply_matrices(
        _transpose(b), _transpose(a)
    )


def test_multiply_worked_example():
    assert multiply_matrices([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_by_zero_matrix():
    m = random_matrix(3, random.Random(4))
    zero = [[0] * 3 for _ in range(3)]
    assert multiply_matrices(m, zero) == zero


def test_multiply_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        multiply_matrices([[1, 2]], [[1, 2]])


def test_multiply_ragged_matrix_raises():
    with pytest.raises(ValueError):
        multiply_matrices([[1, 2], [3]], [[1], [2]])


def test_random_vector_digits_and_determinism():
    first = random_vector(50, random.Random(7))
    second = random_vector(50, random.Random(7))
    assert first == second
    assert len(first) == 50
    assert all(0 <= value <= 9 for value in first)


def test_random_matrix_is_square_of_digits():
    m = random_matrix(5, random.Random(8))
    assert len(m) == 5
    assert all(len(row) == 5 for row in m)
    assert all(0 <= value <= 9 for row in m for value in row)


def test_random_negative_size_raises():
    with pytest.raises(ValueError):
        random_vector(-1, random.Random(0))
    with pytest.raises(ValueError):
        random_matrix(-2, random.Random(0))


def test_format_vector_round_trips():
    vector = random_vector(6, random.Random(9))
    text = format_vector(vector)
    assert text.endswith(" ")
    assert [int(token) for token in text.split()] == vector


def test_format_matrix_worked_example():
    assert format_matrix([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"


def test_format_matrix_round_trips():
    matrix = random_matrix(4, random.Random(10))
    lines = format_matrix(matrix).splitlines()
    assert [[int(token) for token in line.split()] for line in lines] == matrix


def test_main_output_is_consistent(capsys):
    assert main(["--seed", "11", "--size", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()

    def values(prefix):
        line = next(line for line in lines if line.startswith(prefix))
        return [int(token) for token in line[len(prefix):].split()]

    a = values("Vector A: ")
    b = values("Vector B: ")
    assert len(a) == len(b) == 3
    assert values("Addition: ") == add_vectors(a, b)

    def matrix_after(header):
        start = lines.index(header) + 1
        return [[int(token) for token in line.split()] for line in lines[start:start + 3]]

    d = matrix_after("Matrix D: ")
    e = matrix_after("Matrix E: ")
    assert matrix_after("Multiplication: ") == multiply_matrices(d, e)


def test_main_is_deterministic_with_seed(capsys):
    main(["--seed", "5"])
    first = capsys.readouterr().out
    main(["--seed", "5"])
    second = capsys.readouterr().out
    assert first == second
    assert "Vector A: " in first