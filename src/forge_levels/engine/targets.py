"""Progression targets: what it takes to reach the next level."""

from ..models.patterns import MovementPattern, UnitPreference
from ..models.progression import NOT_APPLICABLE, ProgressionTarget
from ..utils.units import format_weight
from .classifier import SELF_REPORTED_PATTERNS
from .thresholds import DEFAULT_THRESHOLDS, RepThreshold, ThresholdTable


def _format_count(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _bodyweight_text(test: RepThreshold, value: float, advanced: bool) -> str:
    if test.lower_is_better:
        comparison = "under" if advanced else "in"
        suffix = "" if advanced else " or less"
        return f"{test.label} {comparison} {_format_count(value)} {test.unit}{suffix}"
    if test.unit == "seconds":
        return f"{_format_count(value)}s {test.label.lower()}"
    return f"{_format_count(value)} {test.unit}"


def get_progression_targets(
    body_weight: float | None,
    unit_preference: UnitPreference,
    *,
    thresholds: ThresholdTable = DEFAULT_THRESHOLDS,
) -> dict[MovementPattern, ProgressionTarget]:
    """Build the intermediate and advanced targets for every pattern.

    Weighted targets are ``body_weight`` times the same multipliers the
    classifier enforces, rounded to a whole unit. An unknown body weight
    yields zero targets rather than an error.
    """
    weight = body_weight or 0
    targets: dict[MovementPattern, ProgressionTarget] = {}

    for pattern in MovementPattern:
        pattern_thresholds = thresholds.for_pattern(pattern)

        if pattern_thresholds.bodyweight:
            # The primary test is the one users are asked to perform
            test = pattern_thresholds.bodyweight[0]
            bodyweight = {
                "bodyweight_test": test.label,
                "bodyweight_intermediate": _bodyweight_text(test, test.intermediate, False),
                "bodyweight_advanced": _bodyweight_text(test, test.advanced, True),
            }
        elif pattern in SELF_REPORTED_PATTERNS:
            bodyweight = {
                "bodyweight_test": "Self-reported experience",
                "bodyweight_intermediate": "Report intermediate experience",
                "bodyweight_advanced": "Report advanced experience",
            }
        else:
            bodyweight = {
                "bodyweight_test": NOT_APPLICABLE,
                "bodyweight_intermediate": NOT_APPLICABLE,
                "bodyweight_advanced": NOT_APPLICABLE,
            }

        load_test = pattern_thresholds.load
        if load_test is None:
            targets[pattern] = ProgressionTarget(**bodyweight)
            continue

        intermediate_load = weight * load_test.intermediate
        advanced_load = weight * load_test.advanced
        targets[pattern] = ProgressionTarget(
            **bodyweight,
            weighted_test=load_test.label,
            weighted_intermediate=format_weight(intermediate_load, unit_preference),
            weighted_advanced=format_weight(advanced_load, unit_preference),
            intermediate_load=intermediate_load,
            advanced_load=advanced_load,
        )

    return targets
