"""
Grade Normalizer

Maps raw class scores onto a target grading scale with one of three
statistical methods: percentile_gaussian, z_linear or z_tanh.

Services log to a JSON file under GRADE_NORMALIZER_LOG_DIR (default
"logs" in the working directory), created when the services are imported.
"""
from .exceptions import (
    NormalizationError,
    EmptyInputError,
    InsufficientDataError,
    NonFiniteValueError,
    DomainError,
    InvalidRangeError,
    UnsupportedMethodError,
)
from .models import (
    NormalizationMethod,
    PercentileMode,
    GradeRange,
    MethodParameters,
    NormalizationResult,
    BulkResult,
    DatasetStats,
)
from .services import NormalizationService, normalize_one, normalize_bulk, compute_stats

__version__ = "0.1.0"

__all__ = [
    "NormalizationError",
    "EmptyInputError",
    "InsufficientDataError",
    "NonFiniteValueError",
    "DomainError",
    "InvalidRangeError",
    "UnsupportedMethodError",
    "NormalizationMethod",
    "PercentileMode",
    "GradeRange",
    "MethodParameters",
    "NormalizationResult",
    "BulkResult",
    "DatasetStats",
    "NormalizationService",
    "normalize_one",
    "normalize_bulk",
    "compute_stats",
]
