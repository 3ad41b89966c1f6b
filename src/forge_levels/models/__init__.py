"""Data models for forge-levels."""

from .assessment import Assessment, BodyProfile
from .exercises import COMMON_EXERCISES, Exercise
from .patterns import DifficultyTier, MovementPattern, SkillLevel, UnitPreference
from .progression import ProgressionTarget

PatternLevels = dict[MovementPattern, SkillLevel]
AllowedDifficultyMap = dict[MovementPattern, frozenset[DifficultyTier]]

__all__ = [
    "AllowedDifficultyMap",
    "Assessment",
    "BodyProfile",
    "COMMON_EXERCISES",
    "DifficultyTier",
    "Exercise",
    "MovementPattern",
    "PatternLevels",
    "ProgressionTarget",
    "SkillLevel",
    "UnitPreference",
]
