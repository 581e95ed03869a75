from flask.views import MethodView
from flask_smorest import Blueprint

from grade_normalizer.config import GRADE_PRESETS
from grade_normalizer.schemas import HealthSchema, GradePresetSchema


blp = Blueprint(
    "System",
    __name__,
    url_prefix="/api/v1",
    description="Health and grade range presets",
)


@blp.route("/health")
class Health(MethodView):
    @blp.doc(tags=["System"])
    @blp.response(200, HealthSchema)
    def get(self):
        """Liveness check"""
        return {"status": "ok"}


@blp.route("/presets")
class GradePresets(MethodView):
    @blp.doc(tags=["System"])
    @blp.response(200, GradePresetSchema(many=True))
    def get(self):
        """Common grading scales"""
        return list(GRADE_PRESETS)
