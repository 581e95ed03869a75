import os
import tempfile

# Keep test log files out of the working tree
os.environ.setdefault("GRADE_NORMALIZER_LOG_DIR", tempfile.mkdtemp(prefix="grade_normalizer_logs_"))

import pytest

from grade_normalizer.app import create_app
from grade_normalizer.models import GradeRange, MethodParameters


@pytest.fixture
def class_grades():
    """mu=30, sigma~7.906"""
    return [20, 25, 30, 35, 40]


@pytest.fixture
def identical_grades():
    return [50, 50, 50, 50, 50]


@pytest.fixture
def range_2_10():
    return GradeRange(2, 10)


@pytest.fixture
def default_params():
    return MethodParameters()


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()
