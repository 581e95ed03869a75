import os

# --- LOGGING ---
LOG_DIR = os.getenv("GRADE_NORMALIZER_LOG_DIR", "logs")
LOG_LEVEL = os.getenv("GRADE_NORMALIZER_LOG_LEVEL", "INFO")

# --- GRADE BOUNDARY PRESETS ---
GRADE_PRESETS = (
    {"label": "2-10", "min_grade": 2, "max_grade": 10},
    {"label": "1-9", "min_grade": 1, "max_grade": 9},
    {"label": "0-100", "min_grade": 0, "max_grade": 100},
    {"label": "0-30", "min_grade": 0, "max_grade": 30},
)
