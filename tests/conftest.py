"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

from forge_levels.config import get_settings
from forge_levels.models.assessment import Assessment, BodyProfile
from forge_levels.models.exercises import Exercise
from forge_levels.models.patterns import (
    DifficultyTier,
    MovementPattern,
    SkillLevel,
    UnitPreference,
)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the developer's environment and cached settings."""
    for name in (
        "FORGE_LEVELS_THRESHOLDS_FILE",
        "FORGE_LEVELS_LOG_LEVEL",
        "FORGE_LEVELS_JSON_LOGS",
        "FORGE_LEVELS_DEFAULT_UNIT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def imperial_profile():
    """A 180 lb user."""
    return BodyProfile(weight=180, unit_preference=UnitPreference.IMPERIAL)


@pytest.fixture
def metric_profile():
    """An 80 kg user."""
    return BodyProfile(weight=80, unit_preference=UnitPreference.METRIC)


@pytest.fixture
def sample_assessment():
    """A typical mixed bodyweight and load assessment."""
    return Assessment(
        pushups=15,
        pike_pushups=5,
        pullups=3,
        squats=20,
        walking_lunges=10,
        single_leg_rdl=8,
        plank_hold_seconds=45,
        mile_time_minutes=8.5,
        squat_1rm=300,
        experience_level=SkillLevel.BEGINNER,
    )


@pytest.fixture
def sample_exercises():
    """Exercises spanning patterns and tiers, in catalog order."""
    return [
        Exercise("Goblet Squat", MovementPattern.SQUAT, DifficultyTier.BEGINNER),
        Exercise("Pistol Squat", MovementPattern.SQUAT, DifficultyTier.ADVANCED),
        Exercise("Back Squat", MovementPattern.SQUAT, DifficultyTier.INTERMEDIATE),
        Exercise("Front Squat", MovementPattern.SQUAT, DifficultyTier.INTERMEDIATE),
        Exercise("Push Up", MovementPattern.HORIZONTAL_PUSH, DifficultyTier.INTERMEDIATE),
        Exercise("Archer Push Up", MovementPattern.HORIZONTAL_PUSH, DifficultyTier.ADVANCED),
    ]


@pytest.fixture
def write_json(temp_dir):
    """Write a JSON document into the temp directory and return its path."""

    def _write(name: str, data) -> Path:
        path = temp_dir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
