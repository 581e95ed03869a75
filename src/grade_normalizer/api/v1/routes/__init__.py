"""
API v1 Routes

Blueprints organized by category for Swagger UI navigation.
"""

# SYSTEM
from .app_routes import blp as app_bp

# NORMALIZATION
from .normalization_routes import blp as normalization_bp

__all__ = [
    "app_bp",
    "normalization_bp",
]
