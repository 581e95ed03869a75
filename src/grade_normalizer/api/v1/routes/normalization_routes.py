"""
Normalization API Routes

Thin HTTP wrapper over NormalizationService. Request validation happens in
the schemas; engine errors that slip past it come back as 422.
"""
from flask.views import MethodView
from flask_smorest import Blueprint, abort

from grade_normalizer.config import setup_logger
from grade_normalizer.exceptions import NormalizationError
from grade_normalizer.models import GradeRange, MethodParameters
from grade_normalizer.schemas import (
    NormalizeRequestSchema,
    NormalizeResponseSchema,
    NormalizeBulkRequestSchema,
    NormalizeBulkResponseSchema,
    StatsRequestSchema,
    StatsResponseSchema,
)
from grade_normalizer.services import NormalizationService

logger = setup_logger(name="NormalizationAPI")

blp = Blueprint(
    "Normalization",
    __name__,
    url_prefix="/api/v1",
    description="Grade normalization and dataset statistics",
)
normalization_service = NormalizationService()


@blp.route("/normalize")
class Normalize(MethodView):
    @blp.doc(tags=["Normalization"])
    @blp.arguments(NormalizeRequestSchema)
    @blp.response(200, NormalizeResponseSchema)
    def post(self, payload):
        """Normalize one score against the class grades"""
        try:
            result = normalization_service.normalize_one(
                payload["grades"],
                payload["x"],
                GradeRange(payload["min_grade"], payload["max_grade"]),
                payload["method"],
                MethodParameters.from_dict(payload["params"]),
            )
        except NormalizationError as err:
            logger.error(f"Normalization failed: {err}")
            abort(422, message=str(err))
        return result.as_dict()


@blp.route("/normalize-bulk")
class NormalizeBulk(MethodView):
    @blp.doc(tags=["Normalization"])
    @blp.arguments(NormalizeBulkRequestSchema)
    @blp.response(200, NormalizeBulkResponseSchema)
    def post(self, payload):
        """Normalize every grade of the class against the class itself"""
        try:
            result = normalization_service.normalize_bulk(
                payload["grades"],
                GradeRange(payload["min_grade"], payload["max_grade"]),
                payload["method"],
                MethodParameters.from_dict(payload["params"]),
            )
        except NormalizationError as err:
            logger.error(f"Bulk normalization failed: {err}")
            abort(422, message=str(err))
        return result.as_dict()


@blp.route("/stats")
class Stats(MethodView):
    @blp.doc(tags=["Statistics"])
    @blp.arguments(StatsRequestSchema)
    @blp.response(200, StatsResponseSchema)
    def post(self, payload):
        """Mean, sample std, sorted grades and extremes"""
        try:
            stats = normalization_service.compute_stats(payload["grades"])
        except NormalizationError as err:
            abort(422, message=str(err))
        return stats.as_dict()
