from .strategy_service import (
    ReferenceDistribution,
    STRATEGIES,
    apply_strategy,
    collapse_to_midpoint,
)
from .normalization_service import (
    NormalizationService,
    normalize_one,
    normalize_bulk,
    compute_stats,
)


__all__ = [
    "ReferenceDistribution",
    "STRATEGIES",
    "apply_strategy",
    "collapse_to_midpoint",
    "NormalizationService",
    "normalize_one",
    "normalize_bulk",
    "compute_stats",
]
