import numpy as np
import pytest
from scipy.stats import norm

from grade_normalizer.exceptions import DomainError
from grade_normalizer.utils import normal_cdf, normal_inv_cdf
from grade_normalizer.utils.distribution_utils import P_HIGH, P_LOW


def test_normal_cdf_at_zero():
    assert normal_cdf(0) == pytest.approx(0.5, abs=1e-7)


@pytest.mark.parametrize("z, expected", [
    (1, 0.8413),
    (-1, 0.1587),
    (2, 0.9772),
    (-2, 0.0228),
    (3, 0.9987),
])
def test_normal_cdf_known_values(z, expected):
    assert normal_cdf(z) == pytest.approx(expected, abs=1e-3)


def test_normal_cdf_matches_scipy():
    # A&S erf is good to 1.5e-7, so Phi is good to half of that
    for z in np.linspace(-4, 4, 81):
        assert normal_cdf(z) == pytest.approx(norm.cdf(z), abs=1e-6)


def test_normal_cdf_is_symmetric():
    for z in (0.3, 1.7, 2.9):
        assert normal_cdf(z) + normal_cdf(-z) == pytest.approx(1.0, abs=1e-7)


def test_normal_inv_cdf_at_half():
    assert normal_inv_cdf(0.5) == 0


@pytest.mark.parametrize("p, expected", [
    (0.8413, 1),
    (0.1587, -1),
    (0.9772, 2),
    (0.0228, -2),
])
def test_normal_inv_cdf_known_values(p, expected):
    assert normal_inv_cdf(p) == pytest.approx(expected, abs=1e-2)


@pytest.mark.parametrize("p", [1e-6, 0.001, P_LOW / 2, P_LOW, 0.3, 0.5, 0.7, P_HIGH, 0.99, 1 - 1e-6])
def test_normal_inv_cdf_matches_scipy_in_every_region(p):
    assert normal_inv_cdf(p) == pytest.approx(norm.ppf(p), rel=1e-7, abs=1e-9)


@pytest.mark.parametrize("z", [-2, -1, 0, 1, 2])
def test_round_trip(z):
    assert normal_inv_cdf(normal_cdf(z)) == pytest.approx(z, abs=1e-3)


def test_round_trip_across_practical_range():
    for z in np.linspace(-3, 3, 61):
        assert normal_inv_cdf(normal_cdf(z)) == pytest.approx(z, abs=1e-3)


@pytest.mark.parametrize("p", [0, 1, -0.1, 1.1])
def test_normal_inv_cdf_domain(p):
    with pytest.raises(DomainError):
        normal_inv_cdf(p)
