import pytest

from grade_normalizer import GradeRange, MethodParameters, NormalizationMethod, normalize_bulk, normalize_one
from grade_normalizer.exceptions import InsufficientDataError, UnsupportedMethodError


@pytest.mark.parametrize("method", list(NormalizationMethod))
def test_bulk_matches_single_value_results(method):
    grades = [12, 15, 15, 18, 22, 25, 31, 31, 31, 40]
    grade_range = GradeRange(1, 9)
    params = MethodParameters(k=1.5, alpha=0.8)

    bulk = normalize_bulk(grades, grade_range, method, params)

    assert [row.original for row in bulk.per_element] == grades
    for row in bulk.per_element:
        single = normalize_one(grades, row.original, grade_range, method, params)
        assert row.normalized == single.normalized
        assert row.clamped == single.clamped


def test_bulk_aggregate_stats(class_grades, range_2_10, default_params):
    bulk = normalize_bulk(class_grades, range_2_10, "z_linear", default_params)

    assert bulk.aggregate.mu == pytest.approx(30)
    assert bulk.aggregate.sigma == pytest.approx(7.906, abs=1e-3)
    assert bulk.aggregate.n == 5


def test_bulk_z_linear_is_symmetric(class_grades, range_2_10, default_params):
    bulk = normalize_bulk(class_grades, range_2_10, "z_linear", default_params)
    normalized = [row.normalized for row in bulk.per_element]

    assert normalized[2] == pytest.approx(6)
    assert normalized[0] + normalized[4] == pytest.approx(12)
    assert normalized == sorted(normalized)


def test_bulk_identical_grades(identical_grades, range_2_10, default_params):
    bulk = normalize_bulk(identical_grades, range_2_10, "z_tanh", default_params)

    assert all(row.normalized == 6 for row in bulk.per_element)
    assert bulk.aggregate.sigma == 0


def test_bulk_to_dataframe(class_grades, range_2_10, default_params):
    df = normalize_bulk(class_grades, range_2_10, "percentile_gaussian", default_params).to_dataframe()

    assert list(df.columns) == ["original", "normalized", "clamped"]
    assert len(df) == 5
    assert df["normalized"].between(2, 10).all()
    assert not df["clamped"].any()


def test_bulk_as_dict(class_grades, range_2_10, default_params):
    payload = normalize_bulk(class_grades, range_2_10, "z_linear", default_params).as_dict()

    assert set(payload) == {"results", "stats"}
    assert payload["results"][2] == {"original": 30.0, "normalized": 6.0, "clamped": False}
    assert payload["stats"]["n"] == 5


def test_bulk_errors(range_2_10, default_params):
    with pytest.raises(InsufficientDataError):
        normalize_bulk([1], range_2_10, "z_linear", default_params)
    with pytest.raises(UnsupportedMethodError):
        normalize_bulk([1, 2], range_2_10, "median", default_params)


@pytest.mark.parametrize("method", list(NormalizationMethod))
def test_bulk_identical_decimal_grades(range_2_10, default_params, method):
    bulk = normalize_bulk([7.3] * 7, range_2_10, method, default_params)

    assert all(row.normalized == 6 for row in bulk.per_element)
    assert not any(row.clamped for row in bulk.per_element)
    assert bulk.aggregate.sigma == 0
    assert bulk.aggregate.mu == 7.3
