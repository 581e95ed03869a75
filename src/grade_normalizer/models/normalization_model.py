"""
Normalization Models

Value objects passed into and returned from the normalization engine.
All of them are immutable and built fresh for each computation.
"""
import math
from enum import Enum
from dataclasses import dataclass, field, asdict
from typing import ClassVar, List, Optional, Union

import pandas as pd

from grade_normalizer.config import MethodParameterBounds
from grade_normalizer.exceptions import InvalidRangeError, UnsupportedMethodError


class NormalizationMethod(str, Enum):
    PERCENTILE_GAUSSIAN = "percentile_gaussian"
    Z_LINEAR = "z_linear"
    Z_TANH = "z_tanh"

    @classmethod
    def parse(cls, value: Union[str, "NormalizationMethod"]) -> "NormalizationMethod":
        """Resolve a method tag, raising UnsupportedMethodError for unknown tags."""
        try:
            return cls(value)
        except ValueError as err:
            raise UnsupportedMethodError(f"Unknown normalization method: {value}") from err


class PercentileMode(str, Enum):
    EMPIRICAL = "empirical"
    GAUSSIAN_ASSUMED = "gaussian_assumed"

    @classmethod
    def parse(cls, value: Union[str, "PercentileMode"]) -> "PercentileMode":
        """Resolve a percentile mode, raising UnsupportedMethodError for unknown modes."""
        try:
            return cls(value)
        except ValueError as err:
            raise UnsupportedMethodError(f"Unknown percentile mode: {value}") from err


@dataclass(frozen=True)
class GradeRange:
    """Target grading scale [min_grade, max_grade], min_grade < max_grade"""
    min_grade: float
    max_grade: float

    def __post_init__(self):
        if not (math.isfinite(self.min_grade) and math.isfinite(self.max_grade)):
            raise InvalidRangeError("Grade range bounds must be finite")
        if self.min_grade >= self.max_grade:
            raise InvalidRangeError(
                f"min_grade ({self.min_grade}) must be less than max_grade ({self.max_grade})"
            )

    @property
    def span(self) -> float:
        return self.max_grade - self.min_grade

    @property
    def midpoint(self) -> float:
        return self.min_grade + self.span / 2


@dataclass(frozen=True)
class MethodParameters:
    """
    Strategy parameters.

    Attributes:
        k: Sigma span for z_linear (z = -k -> min, z = +k -> max)
        alpha: Steepness of the tanh squash for z_tanh
        percentile_mode: How percentile_gaussian obtains p
    """
    k: float = MethodParameterBounds.k_default
    alpha: float = MethodParameterBounds.alpha_default
    percentile_mode: PercentileMode = PercentileMode.EMPIRICAL

    def __post_init__(self):
        object.__setattr__(self, "percentile_mode", PercentileMode.parse(self.percentile_mode))

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "MethodParameters":
        """Build from a loaded request payload, falling back to defaults."""
        data = data or {}
        return cls(
            k=data.get("k", MethodParameterBounds.k_default),
            alpha=data.get("alpha", MethodParameterBounds.alpha_default),
            percentile_mode=data.get("percentile_mode", PercentileMode.EMPIRICAL),
        )


# ============= DIAGNOSTICS (one case per method) =============

@dataclass(frozen=True)
class Diagnostics:
    """Fields shared by every diagnostics case"""
    kind: ClassVar[str] = ""

    mu: float
    sigma: float
    n: int

    def as_dict(self) -> dict:
        details = {k: v for k, v in asdict(self).items() if v is not None}
        details["kind"] = self.kind
        return details


@dataclass(frozen=True)
class ZeroVarianceDiagnostics(Diagnostics):
    """All grades identical; every method collapses to the midpoint"""
    kind: ClassVar[str] = "zero_variance"

    g_raw: float
    z: float = 0.0
    p: float = 0.5


@dataclass(frozen=True)
class PercentileGaussianDiagnostics(Diagnostics):
    """z is only set in gaussian_assumed mode"""
    kind: ClassVar[str] = NormalizationMethod.PERCENTILE_GAUSSIAN.value

    p: float
    q: float
    g_raw: float
    z: Optional[float] = None


@dataclass(frozen=True)
class ZLinearDiagnostics(Diagnostics):
    kind: ClassVar[str] = NormalizationMethod.Z_LINEAR.value

    z: float
    g_raw: float


@dataclass(frozen=True)
class ZTanhDiagnostics(Diagnostics):
    kind: ClassVar[str] = NormalizationMethod.Z_TANH.value

    z: float
    s: float
    g_raw: float


DiagnosticsVariant = Union[
    ZeroVarianceDiagnostics,
    PercentileGaussianDiagnostics,
    ZLinearDiagnostics,
    ZTanhDiagnostics,
]


# ============= RESULTS =============

@dataclass(frozen=True)
class NormalizationResult:
    """Outcome of normalizing one score"""
    normalized: float
    clamped: bool
    diagnostics: DiagnosticsVariant
    explanation: str

    def as_dict(self) -> dict:
        return {
            "normalized": self.normalized,
            "clamped": self.clamped,
            "details": self.diagnostics.as_dict(),
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class NormalizedGrade:
    original: float
    normalized: float
    clamped: bool


@dataclass(frozen=True)
class BulkStats:
    mu: float
    sigma: float
    n: int


@dataclass(frozen=True)
class BulkResult:
    """Per-grade results of a bulk run plus the dataset's aggregate stats"""
    per_element: List[NormalizedGrade] = field(default_factory=list)
    aggregate: Optional[BulkStats] = None

    def to_dataframe(self) -> pd.DataFrame:
        """One row per grade with columns original, normalized, clamped"""
        return pd.DataFrame(
            [asdict(row) for row in self.per_element],
            columns=["original", "normalized", "clamped"],
        )

    def as_dict(self) -> dict:
        return {
            "results": [asdict(row) for row in self.per_element],
            "stats": asdict(self.aggregate) if self.aggregate else None,
        }


@dataclass(frozen=True)
class DatasetStats:
    """Descriptive statistics; sigma is None when n < 2"""
    mu: float
    sigma: Optional[float]
    n: int
    sorted: List[float]
    min: float
    max: float

    def as_dict(self) -> dict:
        return asdict(self)
