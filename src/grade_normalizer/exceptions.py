"""
Normalization engine errors.

Every failure is raised synchronously to the immediate caller. A dataset
with zero variance is not an error; it collapses to the range midpoint.
"""


class NormalizationError(Exception):
    """Base class for all grade normalization failures."""


class EmptyInputError(NormalizationError, ValueError):
    """Raised when statistics are requested on zero elements."""


class InsufficientDataError(NormalizationError, ValueError):
    """Raised when variance is requested with fewer than 2 elements."""


class NonFiniteValueError(NormalizationError, ValueError):
    """Raised when a dataset or score contains NaN or infinity."""


class DomainError(NormalizationError, ValueError):
    """Raised when the inverse normal CDF gets p outside (0, 1)."""


class InvalidRangeError(NormalizationError, ValueError):
    """Raised when a grade range has min >= max."""


class UnsupportedMethodError(NormalizationError, ValueError):
    """Raised for an unrecognized normalization method tag."""
