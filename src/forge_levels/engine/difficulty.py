"""Exercise difficulty gating and prioritization."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

import structlog

from ..models.exercises import Exercise
from ..models.patterns import DifficultyTier, MovementPattern, SkillLevel

logger = structlog.get_logger()

# Beginners get one tier of headroom for variety; only an advanced
# classification unlocks advanced exercises.
ALLOWED_DIFFICULTIES: Mapping[SkillLevel, frozenset[DifficultyTier]] = MappingProxyType({
    SkillLevel.BEGINNER: frozenset({DifficultyTier.BEGINNER, DifficultyTier.INTERMEDIATE}),
    SkillLevel.INTERMEDIATE: frozenset({DifficultyTier.BEGINNER, DifficultyTier.INTERMEDIATE}),
    SkillLevel.ADVANCED: frozenset(
        {DifficultyTier.BEGINNER, DifficultyTier.INTERMEDIATE, DifficultyTier.ADVANCED}
    ),
})


def get_allowed_difficulties(level: SkillLevel) -> frozenset[DifficultyTier]:
    """Difficulty tiers that may be offered at ``level``."""
    return ALLOWED_DIFFICULTIES[level]


def build_allowed_map(
    levels: Mapping[MovementPattern, SkillLevel],
) -> dict[MovementPattern, frozenset[DifficultyTier]]:
    """Map each classified pattern to its allowed difficulty tiers."""
    return {pattern: get_allowed_difficulties(level) for pattern, level in levels.items()}


def is_exercise_allowed(
    exercise: Exercise,
    allowed_map: Mapping[MovementPattern, frozenset[DifficultyTier]],
    fallback_level: SkillLevel = SkillLevel.BEGINNER,
) -> bool:
    """Whether the exercise's difficulty is unlocked for its pattern.

    Exercises with no pattern, or a pattern missing from ``allowed_map``,
    are judged against ``fallback_level``.
    """
    fallback = get_allowed_difficulties(fallback_level)
    if exercise.movement_pattern is None:
        return exercise.difficulty in fallback
    return exercise.difficulty in allowed_map.get(exercise.movement_pattern, fallback)


def sort_exercises_by_difficulty_priority(
    exercises: Iterable[Exercise],
    allowed_map: Mapping[MovementPattern, frozenset[DifficultyTier]],
    fallback_level: SkillLevel = SkillLevel.BEGINNER,
) -> list[Exercise]:
    """Order exercises so the hardest allowed tier comes first.

    Exercises whose difficulty is not allowed for their pattern are kept
    but moved behind every allowed one. The sort is stable, so callers'
    catalog order is preserved among exercises of equal standing.

    Args:
        exercises: Candidates, pre-ordered by catalog priority
        allowed_map: Allowed tiers per pattern
        fallback_level: Level used for patterns missing from ``allowed_map``

    Returns:
        A new list in priority order
    """
    def priority(exercise: Exercise) -> tuple[int, int]:
        if is_exercise_allowed(exercise, allowed_map, fallback_level):
            return (0, -exercise.difficulty.rank)
        return (1, 0)

    ordered = sorted(exercises, key=priority)
    logger.debug(
        "exercises_prioritized",
        count=len(ordered),
        fallback_level=fallback_level.value,
    )
    return ordered


def filter_allowed_exercises(
    exercises: Iterable[Exercise],
    allowed_map: Mapping[MovementPattern, frozenset[DifficultyTier]],
    fallback_level: SkillLevel = SkillLevel.BEGINNER,
) -> list[Exercise]:
    """Keep only exercises whose difficulty is allowed, in priority order."""
    return [
        exercise
        for exercise in sort_exercises_by_difficulty_priority(
            exercises, allowed_map, fallback_level
        )
        if is_exercise_allowed(exercise, allowed_map, fallback_level)
    ]
