"""Level classification, progression targets and difficulty resolution."""

from .classifier import compute_levels, level_changes, next_level, resolve_override
from .difficulty import (
    build_allowed_map,
    filter_allowed_exercises,
    get_allowed_difficulties,
    is_exercise_allowed,
    sort_exercises_by_difficulty_priority,
)
from .targets import get_progression_targets
from .thresholds import (
    DEFAULT_THRESHOLDS,
    ThresholdConfigError,
    ThresholdTable,
    build_thresholds,
    load_thresholds,
)

__all__ = [
    "DEFAULT_THRESHOLDS",
    "ThresholdConfigError",
    "ThresholdTable",
    "build_allowed_map",
    "build_thresholds",
    "compute_levels",
    "filter_allowed_exercises",
    "get_allowed_difficulties",
    "get_progression_targets",
    "is_exercise_allowed",
    "level_changes",
    "load_thresholds",
    "next_level",
    "resolve_override",
    "sort_exercises_by_difficulty_priority",
]
