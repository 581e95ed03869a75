"""
Normalization Strategies

Three independent mappings from a raw score onto a grade range:
    percentile_gaussian - percentile -> normal quantile -> linear on [-3, +3]
    z_linear            - z-score linear on [-k, +k]
    z_tanh              - z-score squashed by tanh(alpha * z)

Each one computes g_raw, clamps it into the range and reports per-method
diagnostics plus a readable trace of the computation.
"""
import math
from dataclasses import dataclass
from typing import Callable, Dict, Sequence

import numpy as np

from grade_normalizer.config import DatasetLimits, PercentileConfig
from grade_normalizer.exceptions import InsufficientDataError, UnsupportedMethodError
from grade_normalizer.models import (
    GradeRange,
    MethodParameters,
    NormalizationMethod,
    NormalizationResult,
    PercentileGaussianDiagnostics,
    PercentileMode,
    ZeroVarianceDiagnostics,
    ZLinearDiagnostics,
    ZTanhDiagnostics,
)
from grade_normalizer.utils import (
    as_grade_array,
    clamp,
    mean,
    normal_cdf,
    normal_inv_cdf,
    percentile_ecdf,
    safe_percentile,
    sample_std,
    z_score,
)


@dataclass(frozen=True)
class ReferenceDistribution:
    """
    Class grades every score is measured against.

    Built once per request so bulk runs sort the dataset and compute
    mu/sigma a single time.
    """
    sorted_grades: np.ndarray
    mu: float
    sigma: float
    n: int

    @classmethod
    def from_grades(cls, grades: Sequence[float]) -> "ReferenceDistribution":
        arr = as_grade_array(grades)
        if arr.size < DatasetLimits.min_for_normalization:
            raise InsufficientDataError(
                f"Normalization needs at least {DatasetLimits.min_for_normalization} grades, "
                f"got {arr.size}"
            )
        return cls(
            sorted_grades=np.sort(arr),
            mu=mean(arr),
            sigma=sample_std(arr),
            n=int(arr.size),
        )


def _fmt(value: float) -> str:
    """Render a raw input number the way it was typed (30, not 30.0)."""
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _clamp_to_range(g_raw: float, grade_range: GradeRange):
    normalized = clamp(g_raw, grade_range.min_grade, grade_range.max_grade)
    return normalized, normalized != g_raw


def _explain(x: float, ref: ReferenceDistribution, steps: Sequence[str],
             g_raw: float, normalized: float, clamped: bool) -> str:
    parts = [
        f"Your score is {_fmt(x)}.",
        f"Class mean: μ = {ref.mu:.2f}, std: σ = {ref.sigma:.2f}.",
        *steps,
    ]
    if clamped:
        parts.append(f"Grade was clamped from {g_raw:.2f} to {normalized:.2f}.")
    else:
        parts.append(f"Final grade: {normalized:.2f}.")
    return " ".join(parts)


def collapse_to_midpoint(ref: ReferenceDistribution, grade_range: GradeRange) -> NormalizationResult:
    """Zero-variance shortcut: identical grades map to the middle of the range."""
    midpoint = grade_range.midpoint
    return NormalizationResult(
        normalized=midpoint,
        clamped=False,
        diagnostics=ZeroVarianceDiagnostics(mu=ref.mu, sigma=0.0, n=ref.n, g_raw=midpoint),
        explanation=(
            f"All class grades are identical ({_fmt(ref.mu)}). "
            f"Normalization collapses to the midpoint grade ({midpoint:.2f})."
        ),
    )


def percentile_gaussian(x: float, ref: ReferenceDistribution, grade_range: GradeRange,
                        params: MethodParameters) -> NormalizationResult:
    """
    Percentile + Gaussian mapping.

    p comes from the empirical mid-rank ECDF or from Phi(z) depending on
    percentile_mode; q = Phi^-1(p) is then mapped linearly from [-3, +3].
    """
    z = None
    if params.percentile_mode == PercentileMode.EMPIRICAL:
        p = percentile_ecdf(x, ref.sorted_grades)
        mode_label = "empirical (ECDF)"
    else:
        z = z_score(x, ref.mu, ref.sigma)
        p = normal_cdf(z)
        mode_label = "Gaussian-assumed"

    q = normal_inv_cdf(safe_percentile(p))

    span = PercentileConfig.quantile_span
    g_raw = grade_range.min_grade + grade_range.span * ((q + span) / (2 * span))
    normalized, clamped = _clamp_to_range(g_raw, grade_range)

    steps = [
        f"Using {mode_label} percentile: p = {p * 100:.1f}%.",
        f"Standard normal quantile: q = {q:.3f}.",
        f"Mapped q ∈ [-{_fmt(span)}, +{_fmt(span)}] to grade range "
        f"[{_fmt(grade_range.min_grade)}, {_fmt(grade_range.max_grade)}].",
    ]
    return NormalizationResult(
        normalized=normalized,
        clamped=clamped,
        diagnostics=PercentileGaussianDiagnostics(
            mu=ref.mu, sigma=ref.sigma, n=ref.n, p=p, q=q, g_raw=g_raw, z=z,
        ),
        explanation=_explain(x, ref, steps, g_raw, normalized, clamped),
    )


def z_linear(x: float, ref: ReferenceDistribution, grade_range: GradeRange,
             params: MethodParameters) -> NormalizationResult:
    """Linear z-score mapping: z = -k -> min, z = 0 -> midpoint, z = +k -> max."""
    k = params.k
    z = z_score(x, ref.mu, ref.sigma)
    g_raw = grade_range.min_grade + grade_range.span * ((z + k) / (2 * k))
    normalized, clamped = _clamp_to_range(g_raw, grade_range)

    steps = [
        f"Z-score: z = ({_fmt(x)} - {ref.mu:.2f}) / {ref.sigma:.2f} = {z:.3f}.",
        f"Linear mapping with k = {_fmt(k)}: z ∈ [-{_fmt(k)}, +{_fmt(k)}] → grade ∈ "
        f"[{_fmt(grade_range.min_grade)}, {_fmt(grade_range.max_grade)}].",
    ]
    return NormalizationResult(
        normalized=normalized,
        clamped=clamped,
        diagnostics=ZLinearDiagnostics(mu=ref.mu, sigma=ref.sigma, n=ref.n, z=z, g_raw=g_raw),
        explanation=_explain(x, ref, steps, g_raw, normalized, clamped),
    )


def z_tanh(x: float, ref: ReferenceDistribution, grade_range: GradeRange,
           params: MethodParameters) -> NormalizationResult:
    """
    Squashed z-score: s = tanh(alpha * z) mapped from (-1, 1).

    s never leaves (-1, 1) in exact arithmetic; the clamp still runs for
    floating point safety.
    """
    alpha = params.alpha
    z = z_score(x, ref.mu, ref.sigma)
    s = math.tanh(alpha * z)
    g_raw = grade_range.min_grade + grade_range.span * ((s + 1) / 2)
    normalized, clamped = _clamp_to_range(g_raw, grade_range)

    steps = [
        f"Z-score: z = {z:.3f}.",
        f"Tanh squash with α = {_fmt(alpha)}: s = tanh({_fmt(alpha)} × {z:.3f}) = {s:.3f}.",
        f"Mapped s ∈ (-1, +1) to grade ∈ "
        f"[{_fmt(grade_range.min_grade)}, {_fmt(grade_range.max_grade)}].",
    ]
    return NormalizationResult(
        normalized=normalized,
        clamped=clamped,
        diagnostics=ZTanhDiagnostics(mu=ref.mu, sigma=ref.sigma, n=ref.n, z=z, s=s, g_raw=g_raw),
        explanation=_explain(x, ref, steps, g_raw, normalized, clamped),
    )


Strategy = Callable[[float, ReferenceDistribution, GradeRange, MethodParameters], NormalizationResult]

STRATEGIES: Dict[NormalizationMethod, Strategy] = {
    NormalizationMethod.PERCENTILE_GAUSSIAN: percentile_gaussian,
    NormalizationMethod.Z_LINEAR: z_linear,
    NormalizationMethod.Z_TANH: z_tanh,
}


def apply_strategy(method: NormalizationMethod, x: float, ref: ReferenceDistribution,
                   grade_range: GradeRange, params: MethodParameters) -> NormalizationResult:
    """Run the zero-variance check, then dispatch to the method's strategy."""
    strategy = STRATEGIES.get(method)
    if strategy is None:
        raise UnsupportedMethodError(f"Unknown normalization method: {method}")

    if ref.sigma == 0:
        return collapse_to_midpoint(ref, grade_range)

    return strategy(x, ref, grade_range, params)
