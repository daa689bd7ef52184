import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.recursion import (
    Move,
    factorial,
    fibonacci,
    gcd,
    sum_natural,
    tower_of_hanoi,
)


@given(st.integers(0, 10**6), st.integers(0, 10**6))
def test_gcd_matches_math_gcd(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@given(st.integers(-(10**6), 10**6), st.integers(-(10**6), 10**6))
def test_gcd_magnitude_for_signed_inputs(a, b):
    assert abs(gcd(a, b)) == math.gcd(a, b)


def test_gcd_with_zero_second_argument():
    assert gcd(17, 0) == 17


def test_sum_natural_base():
    assert sum_natural(1) == 1


@given(st.integers(2, 500))
def test_sum_natural_step(n):
    assert sum_natural(n) - sum_natural(n - 1) == n


def test_sum_natural_rejects_zero():
    with pytest.raises(ValueError):
        sum_natural(0)


@given(st.integers(1, 200))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_rejects_zero():
    with pytest.raises(ValueError):
        factorial(0)


def test_fibonacci_base_cases():
    assert fibonacci(1) == 1
    assert fibonacci(2) == 1


@given(st.integers(3, 300))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_rejects_non_positive():
    with pytest.raises(ValueError):
        fibonacci(0)


def test_move_string():
    assert str(Move(1, "A", "C")) == "Move disc 1 from A to C"


def test_hanoi_single_disc():
    assert list(tower_of_hanoi(1)) == [Move(1, "A", "C")]


def test_hanoi_two_discs_order():
    assert list(tower_of_hanoi(2)) == [
        Move(1, "A", "B"),
        Move(2, "A", "C"),
        Move(1, "C", "B"),
    ]


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_hanoi_move_count_and_disc_order(n):
    moves = list(tower_of_hanoi(n))
    assert len(moves) == 2**n - 1
    assert [m.disk for m in moves] == [(i & -i).bit_length() for i in range(1, 2**n)]
    assert moves[2 ** (n - 1) - 1] == Move(n, "A", "C")


def test_hanoi_custom_pegs():
    moves = list(tower_of_hanoi(3, "X", "Z", "Y"))
    assert {m.source for m in moves} | {m.target for m in moves} <= {"X", "Y", "Z"}
    assert moves[3] == Move(3, "X", "Z")


def test_hanoi_rejects_zero():
    with pytest.raises(ValueError):
        tower_of_hanoi(0)