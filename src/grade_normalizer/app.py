from flask import Flask
from flask_smorest import Api

from grade_normalizer.config import Config
from grade_normalizer.api.v1.routes import app_bp, normalization_bp


def create_app(config_class=Config):
    """Application factory"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    api = Api(app)
    api.register_blueprint(app_bp)
    api.register_blueprint(normalization_bp)
    return app
