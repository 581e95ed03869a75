from marshmallow import Schema, fields


class HealthSchema(Schema):
    status = fields.Str(metadata={"example": "ok"})


class GradePresetSchema(Schema):
    """Common grading scales offered to clients"""
    label = fields.Str(metadata={"example": "2-10"})
    min_grade = fields.Float(data_key="minGrade")
    max_grade = fields.Float(data_key="maxGrade")
