"""Exercise name matching and catalog grouping."""

import re
from dataclasses import replace
from difflib import get_close_matches

from ..models.exercises import COMMON_EXERCISES, Exercise
from ..models.patterns import MovementPattern

# Gym shorthand expanded word by word
_ABBREVIATIONS = {
    "bb": "barbell",
    "db": "dumbbell",
    "kb": "kettlebell",
    "ohp": "overhead press",
    "rdl": "romanian deadlift",
    "bss": "bulgarian split squat",
    "hspu": "handstand push up",
}


def normalize_exercise_name(name: str) -> str:
    """Lowercase a name, split hyphenated words and expand shorthand.

    ``"DB Push-up"`` and ``"dumbbell push up"`` normalize to the same key.
    """
    words = re.sub(r"[-_\s]+", " ", name.lower()).split()
    return " ".join(_ABBREVIATIONS.get(word, word) for word in words)


def find_matching_exercise(
    name: str,
    exercises: list[Exercise] | None = None,
    threshold: float = 0.8,
) -> Exercise | None:
    """Find the catalog exercise a free-text name refers to.

    Args:
        name: The exercise name to look up
        exercises: Catalog to search (defaults to COMMON_EXERCISES)
        threshold: Minimum similarity ratio (0-1) for a fuzzy match

    Returns:
        The exercise whose name or alias matches, or None
    """
    index: dict[str, Exercise] = {}
    for exercise in COMMON_EXERCISES if exercises is None else exercises:
        for candidate in (exercise.name, *exercise.aliases):
            index.setdefault(normalize_exercise_name(candidate), exercise)

    key = normalize_exercise_name(name)
    if key in index:
        return index[key]

    close = get_close_matches(key, index, n=1, cutoff=threshold)
    return index[close[0]] if close else None


def with_reference_pattern(exercise: Exercise) -> Exercise:
    """Fill in a missing movement pattern from the reference catalog.

    Exercises that already carry a pattern, or that match nothing, are
    returned unchanged.
    """
    if exercise.movement_pattern is not None:
        return exercise
    match = find_matching_exercise(exercise.name)
    if match is None:
        return exercise
    return replace(exercise, movement_pattern=match.movement_pattern)


def categorize_exercises_by_pattern(
    exercises: list[Exercise],
) -> dict[MovementPattern | None, list[Exercise]]:
    """Group exercises by movement pattern, keeping catalog order.

    Exercises without an assessed pattern are grouped under ``None``.
    """
    groups: dict[MovementPattern | None, list[Exercise]] = {
        pattern: [] for pattern in MovementPattern
    }
    for exercise in exercises:
        groups.setdefault(exercise.movement_pattern, []).append(exercise)
    return groups
