from .normalization_model import (
    NormalizationMethod,
    PercentileMode,
    GradeRange,
    MethodParameters,
    Diagnostics,
    ZeroVarianceDiagnostics,
    PercentileGaussianDiagnostics,
    ZLinearDiagnostics,
    ZTanhDiagnostics,
    DiagnosticsVariant,
    NormalizationResult,
    NormalizedGrade,
    BulkStats,
    BulkResult,
    DatasetStats,
)


__all__ = [
    "NormalizationMethod",
    "PercentileMode",
    "GradeRange",
    "MethodParameters",
    "Diagnostics",
    "ZeroVarianceDiagnostics",
    "PercentileGaussianDiagnostics",
    "ZLinearDiagnostics",
    "ZTanhDiagnostics",
    "DiagnosticsVariant",
    "NormalizationResult",
    "NormalizedGrade",
    "BulkStats",
    "BulkResult",
    "DatasetStats",
]
