"""forge-levels: per-pattern skill levels and exercise difficulty gating."""

from .engine import (
    DEFAULT_THRESHOLDS,
    build_allowed_map,
    compute_levels,
    filter_allowed_exercises,
    get_allowed_difficulties,
    get_progression_targets,
    sort_exercises_by_difficulty_priority,
)
from .log import configure_library_defaults
from .models import Assessment, BodyProfile, DifficultyTier, MovementPattern, SkillLevel

configure_library_defaults()

__version__ = "0.1.0"

__all__ = [
    "Assessment",
    "BodyProfile",
    "DEFAULT_THRESHOLDS",
    "DifficultyTier",
    "MovementPattern",
    "SkillLevel",
    "build_allowed_map",
    "compute_levels",
    "filter_allowed_exercises",
    "get_allowed_difficulties",
    "get_progression_targets",
    "sort_exercises_by_difficulty_priority",
]
