import math

import numpy as np
import pytest

from grade_normalizer.exceptions import (
    EmptyInputError,
    InsufficientDataError,
    NonFiniteValueError,
)
from grade_normalizer.utils import clamp, mean, sample_std, z_score


def test_mean():
    assert mean([1, 2, 3, 4, 5]) == 3
    assert mean([10, 20, 30]) == 20
    assert mean([5]) == 5


def test_mean_symmetric_around_center():
    assert mean([7 - 3, 7 - 1, 7, 7 + 1, 7 + 3]) == pytest.approx(7)


def test_mean_empty():
    with pytest.raises(EmptyInputError):
        mean([])


def test_mean_accepts_numpy_array():
    assert mean(np.array([2.0, 4.0])) == 3.0


def test_sample_std_known_values():
    # [25, 30, 35, 40, 45]: sum of squares 250 / 4 -> sqrt(62.5)
    assert sample_std([25, 30, 35, 40, 45]) == pytest.approx(7.906, abs=1e-3)
    # [25, 28, 30, 32, 35]: 58 / 4 -> sqrt(14.5)
    assert sample_std([25, 28, 30, 32, 35]) == pytest.approx(3.808, abs=1e-3)


def test_sample_std_uses_bessel_correction():
    values = [2, 4, 4, 4, 5, 5, 7, 9]
    assert sample_std(values) == pytest.approx(np.std(values, ddof=1))
    assert sample_std(values) != pytest.approx(np.std(values))


def test_sample_std_identical_values_is_zero():
    assert sample_std([50, 50, 50]) == 0


def test_sample_std_needs_two_values():
    with pytest.raises(InsufficientDataError):
        sample_std([5])
    with pytest.raises(InsufficientDataError):
        sample_std([])


def test_non_finite_values_rejected():
    with pytest.raises(NonFiniteValueError):
        mean([1, float("nan")])
    with pytest.raises(NonFiniteValueError):
        sample_std([1, 2, math.inf])


def test_z_score():
    assert z_score(34, 30, 5) == pytest.approx(0.8)
    assert z_score(30, 30, 5) == 0
    assert z_score(25, 30, 5) == -1


def test_z_score_zero_sigma():
    assert z_score(100, 50, 0) == 0


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10


def test_clamp_boundaries_inclusive():
    assert clamp(0, 0, 10) == 0
    assert clamp(10, 0, 10) == 10


@pytest.mark.parametrize("value", [7.3, 6.7, 0.1])
def test_identical_decimal_grades_have_exact_zero_sigma(value):
    assert sample_std([value] * 7) == 0.0
    assert mean([value] * 7) == value
