import numpy as np
from typing import Sequence

from grade_normalizer.config import PercentileConfig
from grade_normalizer.exceptions import EmptyInputError
from grade_normalizer.utils.stats_utils import clamp


def percentile_ecdf(x: float, sorted_grades: Sequence[float]) -> float:
    """
    Empirical percentile (ECDF) with mid-rank for ties.

    Formula (x present):  p = (C_below + (C_equal + 1) / 2 - 0.5) / N
    x absent:             0.5 / N below all, (N - 0.5) / N above all,
                          (C_below + 0.5) / N in between

    The result always lies strictly inside (0, 1).

    Parameters:
        x: Score to rank
        sorted_grades: Reference grades in ascending order

    Returns:
        Percentile as a fraction
    """
    arr = np.asarray(sorted_grades, dtype=float)
    n = arr.size
    if n == 0:
        raise EmptyInputError("Cannot calculate percentile of empty array")

    count_less = int(np.searchsorted(arr, x, side='left'))
    count_equal = int(np.searchsorted(arr, x, side='right')) - count_less

    if count_equal == 0:
        if count_less == 0:
            return 0.5 / n
        if count_less == n:
            return (n - 0.5) / n
        return (count_less + 0.5) / n

    avg_rank = count_less + (count_equal + 1) / 2
    return (avg_rank - 0.5) / n


def safe_percentile(p: float) -> float:
    """Clamp p to [eps, 1 - eps] so the normal quantile stays finite."""
    eps = PercentileConfig.epsilon
    return clamp(p, eps, 1 - eps)
