"""
Normal Distribution Functions

Closed-form rational approximations of the standard normal CDF and its
inverse. The coefficient tables are fixed: downstream fixtures assert
values to 3-5 decimal places, so they must not be tuned.
"""
import math

from grade_normalizer.exceptions import DomainError


# Abramowitz & Stegun 7.1.26, |error| <= 1.5e-7
ERF_A = (0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429)
ERF_P = 0.3275911

# Acklam's inverse normal CDF, relative error <= 1.15e-9
ACKLAM_A = (
    -3.969683028665376e+01,
    2.209460984245205e+02,
    -2.759285104469687e+02,
    1.383577518672690e+02,
    -3.066479806614716e+01,
    2.506628277459239e+00,
)
ACKLAM_B = (
    -5.447609879822406e+01,
    1.615858368580409e+02,
    -1.556989798598866e+02,
    6.680131188771972e+01,
    -1.328068155288572e+01,
)
ACKLAM_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e+00,
    -2.549732539343734e+00,
    4.374664141464968e+00,
    2.938163982698783e+00,
)
ACKLAM_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e+00,
    3.754408661907416e+00,
)

P_LOW = 0.02425
P_HIGH = 1 - P_LOW


def erf(x: float) -> float:
    """Error function via the Abramowitz-Stegun rational approximation."""
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)

    a1, a2, a3, a4, a5 = ERF_A
    t = 1.0 / (1.0 + ERF_P * x)
    y = 1.0 - ((((a5 * t + a4) * t + a3) * t + a2) * t + a1) * t * math.exp(-x * x)

    return sign * y


def normal_cdf(z: float) -> float:
    """
    Standard normal CDF.

    Phi(z) = 0.5 * (1 + erf(z / sqrt(2)))
    """
    return 0.5 * (1.0 + erf(z / math.sqrt(2)))


def _tail_quantile(q: float) -> float:
    c, d = ACKLAM_C, ACKLAM_D
    return (
        (((((c[0] * q + c[1]) * q + c[2]) * q + c[3]) * q + c[4]) * q + c[5]) /
        ((((d[0] * q + d[1]) * q + d[2]) * q + d[3]) * q + 1)
    )


def normal_inv_cdf(p: float) -> float:
    """
    Inverse standard normal CDF (Acklam's approximation).

    Returns z such that Phi(z) = p. Three regions: lower tail
    (p < 0.02425), central, and upper tail (p > 0.97575).

    Raises:
        DomainError: p outside the open interval (0, 1)
    """
    if not 0 < p < 1:
        raise DomainError(f"p must be in (0, 1), got {p}")

    if p < P_LOW:
        return _tail_quantile(math.sqrt(-2 * math.log(p)))

    if p <= P_HIGH:
        a, b = ACKLAM_A, ACKLAM_B
        q = p - 0.5
        r = q * q
        return (
            (((((a[0] * r + a[1]) * r + a[2]) * r + a[3]) * r + a[4]) * r + a[5]) * q /
            (((((b[0] * r + b[1]) * r + b[2]) * r + b[3]) * r + b[4]) * r + 1)
        )

    return -_tail_quantile(math.sqrt(-2 * math.log(1 - p)))
