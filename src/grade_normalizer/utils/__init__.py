from .stats_utils import as_grade_array, mean, sample_std, z_score, clamp
from .distribution_utils import erf, normal_cdf, normal_inv_cdf
from .percentile_utils import percentile_ecdf, safe_percentile


__all__ = [
    "as_grade_array",
    "mean",
    "sample_std",
    "z_score",
    "clamp",
    "erf",
    "normal_cdf",
    "normal_inv_cdf",
    "percentile_ecdf",
    "safe_percentile",
]
