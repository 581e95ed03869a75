from marshmallow import Schema, fields, validate, validates_schema, ValidationError

from grade_normalizer.config import DatasetLimits, MethodParameterBounds
from grade_normalizer.models import NormalizationMethod, PercentileMode


def _default_params():
    return {
        "k": MethodParameterBounds.k_default,
        "alpha": MethodParameterBounds.alpha_default,
        "percentile_mode": PercentileMode.EMPIRICAL,
    }


class MethodParamsSchema(Schema):
    """Strategy parameters; omitted fields take their defaults"""
    k = fields.Float(
        load_default=MethodParameterBounds.k_default,
        validate=validate.Range(min=MethodParameterBounds.k_min, max=MethodParameterBounds.k_max),
        metadata={"description": "Sigma span for z_linear", "example": 2.0},
    )
    alpha = fields.Float(
        load_default=MethodParameterBounds.alpha_default,
        validate=validate.Range(
            min=MethodParameterBounds.alpha_min, max=MethodParameterBounds.alpha_max
        ),
        metadata={"description": "tanh steepness for z_tanh", "example": 1.0},
    )
    percentile_mode = fields.Enum(
        PercentileMode,
        by_value=True,
        data_key="percentileMode",
        load_default=PercentileMode.EMPIRICAL,
        metadata={"description": "How percentile_gaussian obtains p"},
    )


class NormalizeBulkRequestSchema(Schema):
    """Schema for normalizing every grade of a class"""
    grades = fields.List(
        fields.Float(),
        required=True,
        validate=validate.Length(
            min=DatasetLimits.min_for_normalization, max=DatasetLimits.max_size
        ),
        metadata={"description": "Raw class grades", "example": [20, 25, 30, 35, 40]},
    )
    min_grade = fields.Float(required=True, data_key="minGrade", metadata={"example": 2})
    max_grade = fields.Float(required=True, data_key="maxGrade", metadata={"example": 10})
    method = fields.Enum(NormalizationMethod, by_value=True, required=True)
    params = fields.Nested(MethodParamsSchema, load_default=_default_params)

    @validates_schema
    def validate_grade_range(self, data, **kwargs):
        if data["min_grade"] >= data["max_grade"]:
            raise ValidationError("minGrade must be less than maxGrade", field_name="minGrade")


class NormalizeRequestSchema(NormalizeBulkRequestSchema):
    """Schema for normalizing a single score"""
    x = fields.Float(required=True, metadata={"description": "Score to normalize", "example": 34})


class StatsRequestSchema(Schema):
    grades = fields.List(
        fields.Float(),
        required=True,
        validate=validate.Length(min=DatasetLimits.min_for_stats, max=DatasetLimits.max_size),
    )


# ============= RESPONSES =============

class NormalizeDetailsSchema(Schema):
    kind = fields.Str(metadata={"description": "Diagnostics case: method name or zero_variance"})
    mu = fields.Float()
    sigma = fields.Float()
    n = fields.Int()
    z = fields.Float(allow_none=True)
    p = fields.Float(allow_none=True)
    q = fields.Float(allow_none=True)
    s = fields.Float(allow_none=True)
    g_raw = fields.Float()


class NormalizeResponseSchema(Schema):
    normalized = fields.Float()
    clamped = fields.Bool()
    details = fields.Nested(NormalizeDetailsSchema)
    explanation = fields.Str()


class NormalizedGradeSchema(Schema):
    original = fields.Float()
    normalized = fields.Float()
    clamped = fields.Bool()


class BulkStatsSchema(Schema):
    mu = fields.Float()
    sigma = fields.Float()
    n = fields.Int()


class NormalizeBulkResponseSchema(Schema):
    results = fields.List(fields.Nested(NormalizedGradeSchema))
    stats = fields.Nested(BulkStatsSchema)


class StatsResponseSchema(Schema):
    mu = fields.Float()
    sigma = fields.Float(allow_none=True)
    n = fields.Int()
    sorted = fields.List(fields.Float())
    min = fields.Float()
    max = fields.Float()
