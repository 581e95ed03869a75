class MethodParameterBounds:
    """Allowed ranges and defaults for the strategy parameters"""
    k_min: float = 0.5
    k_max: float = 5.0
    k_default: float = 2.0  # sigma span for linear mapping

    alpha_min: float = 0.2
    alpha_max: float = 3.0
    alpha_default: float = 1.0  # tanh steepness


class PercentileConfig:
    """Tail guards for percentile -> quantile conversion"""
    epsilon: float = 1e-6  # p is clamped to [eps, 1 - eps] before inversion
    quantile_span: float = 3.0  # q in [-3, +3] maps onto the full grade range


class DatasetLimits:
    """Dataset size limits for the engine and the request schemas"""
    min_for_normalization: int = 2
    min_for_stats: int = 1
    max_size: int = 10000
