from .app_config import LOG_DIR, LOG_LEVEL, GRADE_PRESETS
from .flask_config import Config
from .logger_config import setup_logger
from .normalization_config import MethodParameterBounds, PercentileConfig, DatasetLimits


__all__ = [
    #AppConfig
    "LOG_DIR",
    "LOG_LEVEL",
    "GRADE_PRESETS",

    #FlaskConfig
    "Config",

    #Logger Config
    "setup_logger",

    #Normalization Config
    "MethodParameterBounds",
    "PercentileConfig",
    "DatasetLimits",
]
