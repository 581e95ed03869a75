"""
Normalization Service - Entry point of the grade normalization engine

Validates inputs once per call, builds the reference distribution and
runs the selected strategy for one score or for every score of the
dataset. Pure computation: nothing is cached between calls.
"""
import math
from typing import Optional, Sequence, Union

import numpy as np

from grade_normalizer.config import DatasetLimits, setup_logger
from grade_normalizer.exceptions import EmptyInputError, NonFiniteValueError, NormalizationError
from grade_normalizer.models import (
    BulkResult,
    BulkStats,
    DatasetStats,
    GradeRange,
    MethodParameters,
    NormalizationMethod,
    NormalizationResult,
    NormalizedGrade,
)
from grade_normalizer.services.strategy_service import ReferenceDistribution, apply_strategy
from grade_normalizer.utils import as_grade_array, mean, sample_std


logger = setup_logger(name="NormalizationService")

MethodLike = Union[str, NormalizationMethod]


class NormalizationService:
    """Normalizes raw class scores onto a target grading scale"""

    def __init__(self, params: Optional[MethodParameters] = None):
        self.default_params = params or MethodParameters()

    def _resolve(self, method: MethodLike, params: Optional[MethodParameters]):
        return NormalizationMethod.parse(method), params or self.default_params

    def normalize_one(self, grades: Sequence[float], x: float, grade_range: GradeRange,
                      method: MethodLike,
                      params: Optional[MethodParameters] = None) -> NormalizationResult:
        """
        Normalize a single score against the class dataset.

        Parameters:
            grades: Class dataset (at least 2 finite values)
            x: Score to normalize (need not be part of grades)
            grade_range: Target scale
            method: One of NormalizationMethod or its string tag
            params: Strategy parameters, service defaults when omitted

        Returns:
            NormalizationResult with per-method diagnostics and explanation
        """
        method, params = self._resolve(method, params)
        if not math.isfinite(x):
            logger.warning(f"Rejected non-finite score {x}")
            raise NonFiniteValueError(f"Score must be a finite number, got {x}")

        try:
            ref = ReferenceDistribution.from_grades(grades)
        except NormalizationError as err:
            logger.warning(f"Rejected dataset: {err}")
            raise

        result = apply_strategy(method, float(x), ref, grade_range, params)
        logger.info(f"Normalized score {x} with {method.value} (n={ref.n}, clamped={result.clamped})")
        return result

    def normalize_bulk(self, grades: Sequence[float], grade_range: GradeRange,
                       method: MethodLike,
                       params: Optional[MethodParameters] = None) -> BulkResult:
        """
        Normalize every grade of the dataset against the dataset itself.

        The sorted reference and mu/sigma are computed once; results are
        identical to calling normalize_one for each grade.

        Returns:
            BulkResult with one row per grade (input order) and aggregate stats
        """
        method, params = self._resolve(method, params)
        try:
            ref = ReferenceDistribution.from_grades(grades)
        except NormalizationError as err:
            logger.warning(f"Rejected dataset: {err}")
            raise

        per_element = []
        for original in as_grade_array(grades):
            result = apply_strategy(method, float(original), ref, grade_range, params)
            per_element.append(NormalizedGrade(
                original=float(original),
                normalized=result.normalized,
                clamped=result.clamped,
            ))

        clamped_count = sum(row.clamped for row in per_element)
        logger.info(
            f"Bulk normalized {ref.n} grades with {method.value} ({clamped_count} clamped)"
        )
        return BulkResult(
            per_element=per_element,
            aggregate=BulkStats(mu=ref.mu, sigma=ref.sigma, n=ref.n),
        )

    def compute_stats(self, grades: Sequence[float]) -> DatasetStats:
        """
        Descriptive statistics for a dataset of at least one grade.

        sigma is None when fewer than 2 grades are given.
        """
        arr = as_grade_array(grades)
        if arr.size < DatasetLimits.min_for_stats:
            logger.warning("Rejected empty dataset for stats")
            raise EmptyInputError("Cannot calculate stats of empty array")

        sorted_grades = np.sort(arr)
        return DatasetStats(
            mu=mean(arr),
            sigma=sample_std(arr) if arr.size >= 2 else None,
            n=int(arr.size),
            sorted=sorted_grades.tolist(),
            min=float(sorted_grades[0]),
            max=float(sorted_grades[-1]),
        )


_default_service = NormalizationService()


def normalize_one(grades, x, grade_range, method, params=None) -> NormalizationResult:
    return _default_service.normalize_one(grades, x, grade_range, method, params)


def normalize_bulk(grades, grade_range, method, params=None) -> BulkResult:
    return _default_service.normalize_bulk(grades, grade_range, method, params)


def compute_stats(grades) -> DatasetStats:
    return _default_service.compute_stats(grades)
