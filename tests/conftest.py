"""
Pytest fixtures shared by the analysis tests.
"""

import pytest

from backend.settings import Settings
from domain.models import PeriodizationType, ProgressionSettings
from tests.factories import make_instance, make_program


# Environment variables that would leak into Settings defaults
SETTINGS_ENV_VARS = ["ENVIRONMENT", "PREFERRED_LOAD_UNIT"]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear environment variables to test true defaults."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def test_settings(clean_env) -> Settings:
    """Isolated settings that ignore any local .env file."""
    return Settings(_env_file=None, environment="test")


@pytest.fixture
def three_week_program():
    """
    Squat in weeks 1-3, bench only in weeks 1 and 3.

    Week 1 and 3 are logged; week 2 was never performed.
    """
    squat_w1 = make_instance(1, "Back Squat", planned=[(5, "100"), (5, "100")], actual=[(5, "100"), (5, "100")])
    squat_w2 = make_instance(1, "Back Squat", planned=[(5, "110"), (5, "110")])
    squat_w3 = make_instance(1, "Back Squat", planned=[(5, "120"), (5, "120")], actual=[(5, "120"), (4, "120")])
    bench_w1 = make_instance(2, "Bench Press", planned=[(8, "60", "kg")], actual=[(8, "60", "kg")])
    bench_w3 = make_instance(2, "Bench Press", planned=[(8, "65", "kg")], actual=[(6, "65", "kg")])

    return make_program(
        {
            1: [squat_w1, bench_w1],
            2: [squat_w2],
            3: [squat_w3, bench_w3],
        },
        total_weeks=3,
        periodization_type=PeriodizationType.LINEAR,
        settings=ProgressionSettings(volume_increment_pct=10),
    )
