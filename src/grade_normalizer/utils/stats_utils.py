"""
Descriptive Statistics

Mean, Bessel-corrected sample standard deviation, z-score and clamping
for a dataset of class grades.
"""
import numpy as np
from typing import Sequence

from grade_normalizer.exceptions import (
    EmptyInputError,
    InsufficientDataError,
    NonFiniteValueError,
)


def as_grade_array(values: Sequence[float]) -> np.ndarray:
    """
    Convert a grade sequence to a float array, rejecting NaN and infinity.

    Parameters:
        values: Sequence of raw grades

    Returns:
        1-D float64 array (a copy; the caller's sequence is never touched)
    """
    arr = np.array(values, dtype=float).ravel()
    if arr.size and not np.isfinite(arr).all():
        raise NonFiniteValueError("Grades must be finite numbers (no NaN or infinity)")
    return arr


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean. Raises EmptyInputError on an empty dataset."""
    arr = as_grade_array(values)
    if arr.size == 0:
        raise EmptyInputError("Cannot calculate mean of empty array")
    if np.ptp(arr) == 0:
        # identical grades: the pairwise sum can drift by one ulp
        return float(arr[0])
    return float(arr.mean())


def sample_std(values: Sequence[float]) -> float:
    """
    Sample standard deviation with Bessel's correction.

    sigma = sqrt(sum((x - mu)^2) / (n - 1))

    Exactly 0.0 when all values are equal, so the zero-variance shortcut
    also fires for decimal grades such as 7.3.

    Raises:
        InsufficientDataError: fewer than 2 values
    """
    arr = as_grade_array(values)
    if arr.size < 2:
        raise InsufficientDataError(
            "Need at least 2 values to calculate sample standard deviation"
        )
    if np.ptp(arr) == 0:
        return 0.0
    return float(arr.std(ddof=1))


def z_score(x: float, mu: float, sigma: float) -> float:
    """Standardized deviation (x - mu) / sigma; exactly 0 when sigma is 0."""
    if sigma == 0:
        return 0.0
    return (x - mu) / sigma


def clamp(value: float, lo: float, hi: float) -> float:
    """Restrict value to the closed interval [lo, hi]."""
    return max(lo, min(hi, value))
