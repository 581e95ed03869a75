from .app_schema import HealthSchema, GradePresetSchema
from .normalization_schema import (
    MethodParamsSchema,
    NormalizeRequestSchema,
    NormalizeBulkRequestSchema,
    StatsRequestSchema,
    NormalizeDetailsSchema,
    NormalizeResponseSchema,
    NormalizedGradeSchema,
    BulkStatsSchema,
    NormalizeBulkResponseSchema,
    StatsResponseSchema,
)

__all__ = [
    "HealthSchema",
    "GradePresetSchema",
    "MethodParamsSchema",
    "NormalizeRequestSchema",
    "NormalizeBulkRequestSchema",
    "StatsRequestSchema",
    "NormalizeDetailsSchema",
    "NormalizeResponseSchema",
    "NormalizedGradeSchema",
    "BulkStatsSchema",
    "NormalizeBulkResponseSchema",
    "StatsResponseSchema",
]
