"""Per-pattern skill level classification."""

from collections.abc import Mapping

import structlog

from ..models.assessment import Assessment, BodyProfile
from ..models.patterns import MovementPattern, SkillLevel
from ..utils.units import to_kg
from .thresholds import DEFAULT_THRESHOLDS, RepThreshold, ThresholdTable

logger = structlog.get_logger()

# Patterns with no test of their own, seeded from the self-reported level
SELF_REPORTED_PATTERNS = frozenset({MovementPattern.ROTATION})


def resolve_override(level: SkillLevel, override: SkillLevel | None) -> SkillLevel:
    """Apply a manual override, which can raise a level but never lower it."""
    if override is None:
        return level
    return max(level, override)


def next_level(level: SkillLevel) -> SkillLevel | None:
    """The level above ``level``, or None at the top."""
    if level is SkillLevel.BEGINNER:
        return SkillLevel.INTERMEDIATE
    if level is SkillLevel.INTERMEDIATE:
        return SkillLevel.ADVANCED
    return None


def _test_level(assessment: Assessment, test: RepThreshold) -> SkillLevel:
    value = assessment.value_of(test.metric)
    if test.lower_is_better:
        # A missing or zero time is no result, not a perfect one
        if value is None or value <= 0:
            return SkillLevel.BEGINNER
        return test.level_for(value)
    return test.level_for(value if value is not None else 0)


def _bodyweight_level(assessment: Assessment, tests: tuple[RepThreshold, ...]) -> SkillLevel:
    # Every listed test counts; the best result decides
    return max(
        (_test_level(assessment, test) for test in tests),
        default=SkillLevel.BEGINNER,
    )


def compute_levels(
    assessment: Assessment,
    profile: BodyProfile,
    *,
    thresholds: ThresholdTable = DEFAULT_THRESHOLDS,
) -> dict[MovementPattern, SkillLevel]:
    """Compute the skill level for every movement pattern.

    Each pattern is classified from the best of its bodyweight tests first.
    A load test, when present and body weight is known, replaces that result
    with a level derived from the load-to-bodyweight ratio in kilograms.
    Manual overrides are applied last and only ever raise a level.

    Args:
        assessment: The fitness test snapshot to classify
        profile: Body weight and unit preference
        thresholds: Threshold table to classify against

    Returns:
        A level for each of the movement patterns
    """
    weight_kg = profile.weight_kg
    levels: dict[MovementPattern, SkillLevel] = {}

    for pattern in MovementPattern:
        pattern_thresholds = thresholds.for_pattern(pattern)

        if pattern in SELF_REPORTED_PATTERNS:
            level = assessment.experience_level or SkillLevel.BEGINNER
        else:
            level = _bodyweight_level(assessment, pattern_thresholds.bodyweight)

        load_test = pattern_thresholds.load
        if load_test is not None and weight_kg is not None:
            load = assessment.value_of(load_test.metric)
            if load is not None and load > 0:
                # kg conversion can leave an exact multiple a hair under its cut-off
                ratio = round(to_kg(load, profile.unit_preference) / weight_kg, 9)
                load_level = load_test.level_for(ratio)
                logger.debug(
                    "load_pass_applied",
                    pattern=pattern.value,
                    ratio=round(ratio, 3),
                    bodyweight_level=level.value,
                    load_level=load_level.value,
                )
                level = load_level

        override = assessment.override_for(pattern)
        final = resolve_override(level, override)
        if final is not level:
            logger.debug(
                "override_applied",
                pattern=pattern.value,
                computed=level.value,
                override=override.value,
            )
        levels[pattern] = final

    logger.debug(
        "levels_computed",
        assessment_id=assessment.id,
        levels={p.value: lvl.value for p, lvl in levels.items()},
    )
    return levels


def level_changes(
    previous: Mapping[MovementPattern, SkillLevel] | None,
    current: Mapping[MovementPattern, SkillLevel],
) -> dict[MovementPattern, tuple[SkillLevel, SkillLevel]]:
    """Find patterns whose level increased between two snapshots.

    Returns (previous, current) pairs for patterns that leveled up. A
    missing previous snapshot means nothing has leveled up yet.
    """
    if not previous:
        return {}

    changes = {}
    for pattern, level in current.items():
        before = previous.get(pattern)
        if before is not None and level > before:
            changes[pattern] = (before, level)
    return changes
