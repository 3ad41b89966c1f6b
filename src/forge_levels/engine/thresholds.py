"""Shared threshold table for level classification and progression targets.

The classifier and the target calculator read the same table, so the
targets shown to a user are exactly the thresholds that get enforced.
Tables are immutable; loading a file produces a new snapshot.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import structlog
import yaml

from ..models.patterns import MovementPattern, SkillLevel

logger = structlog.get_logger()


class ThresholdConfigError(ValueError):
    """Raised when a threshold file cannot be turned into a table."""


@dataclass(frozen=True)
class RepThreshold:
    """Bodyweight test cut-offs (reps, seconds or minutes)."""

    metric: str  # Assessment field name
    label: str
    unit: str
    intermediate: float
    advanced: float
    lower_is_better: bool = False

    def level_for(self, value: float) -> SkillLevel:
        if self.lower_is_better:
            # Advanced is strictly faster than the cut-off
            if value < self.advanced:
                return SkillLevel.ADVANCED
            if value <= self.intermediate:
                return SkillLevel.INTERMEDIATE
            return SkillLevel.BEGINNER
        if value >= self.advanced:
            return SkillLevel.ADVANCED
        if value >= self.intermediate:
            return SkillLevel.INTERMEDIATE
        return SkillLevel.BEGINNER


@dataclass(frozen=True)
class LoadThreshold:
    """Load test cut-offs as multiples of body weight.

    ``beginner_below`` is the published floor under which a lift is
    considered untrained; anything under ``intermediate`` classifies as
    beginner.
    """

    metric: str  # Assessment field name
    label: str
    intermediate: float
    advanced: float
    beginner_below: float

    def level_for(self, ratio: float) -> SkillLevel:
        if ratio >= self.advanced:
            return SkillLevel.ADVANCED
        if ratio >= self.intermediate:
            return SkillLevel.INTERMEDIATE
        return SkillLevel.BEGINNER


@dataclass(frozen=True)
class PatternThresholds:
    """Every test that can classify one movement pattern.

    ``bodyweight`` lists every test that counts toward the pattern, primary
    test first; the best of them decides.
    """

    bodyweight: tuple[RepThreshold, ...] = ()
    load: LoadThreshold | None = None


@dataclass(frozen=True)
class ThresholdTable:
    patterns: Mapping[MovementPattern, PatternThresholds]

    def for_pattern(self, pattern: MovementPattern) -> PatternThresholds:
        return self.patterns.get(pattern, PatternThresholds())


_PUSHUPS = RepThreshold("pushups", "Push-ups", "push-ups", 10, 20)
_PIKE_PUSHUPS = RepThreshold("pike_pushups", "Pike Push-ups", "pike push-ups", 8, 15)
_PULLUPS = RepThreshold("pullups", "Pull-ups", "pull-ups", 5, 10)
_SQUATS = RepThreshold("squats", "Bodyweight Squats", "squats", 25, 40)
_WALKING_LUNGES = RepThreshold("walking_lunges", "Walking Lunges", "lunges", 20, 30)
_SINGLE_LEG_RDL = RepThreshold("single_leg_rdl", "Single-Leg RDL", "reps per leg", 10, 15)
_PLANK = RepThreshold("plank_hold_seconds", "Plank Hold", "seconds", 60, 90)
_MILE = RepThreshold(
    "mile_time_minutes", "Mile Run", "minutes", 9, 7, lower_is_better=True
)

DEFAULT_THRESHOLDS = ThresholdTable(
    patterns=MappingProxyType({
        MovementPattern.HORIZONTAL_PUSH: PatternThresholds(
            bodyweight=(_PUSHUPS,),
            load=LoadThreshold("bench_press_1rm", "Bench Press 1RM", 1.0, 1.5, 0.75),
        ),
        MovementPattern.VERTICAL_PUSH: PatternThresholds(
            bodyweight=(_PIKE_PUSHUPS,),
            load=LoadThreshold("overhead_press_1rm", "Overhead Press 1RM", 0.6, 0.9, 0.5),
        ),
        MovementPattern.VERTICAL_PULL: PatternThresholds(bodyweight=(_PULLUPS,)),
        MovementPattern.HORIZONTAL_PULL: PatternThresholds(
            load=LoadThreshold("barbell_row_1rm", "Barbell Row 1RM", 1.0, 1.5, 0.75),
        ),
        MovementPattern.SQUAT: PatternThresholds(
            bodyweight=(_SQUATS,),
            load=LoadThreshold("squat_1rm", "Squat 1RM", 1.5, 2.0, 1.0),
        ),
        MovementPattern.LUNGE: PatternThresholds(
            bodyweight=(_WALKING_LUNGES, _SQUATS),
            load=LoadThreshold("dumbbell_lunge_1rm", "Dumbbell Lunge 1RM", 1.0, 1.5, 0.75),
        ),
        MovementPattern.HINGE: PatternThresholds(
            bodyweight=(_SINGLE_LEG_RDL, _SQUATS),
            load=LoadThreshold("deadlift_1rm", "Deadlift 1RM", 1.75, 2.5, 1.25),
        ),
        MovementPattern.CORE: PatternThresholds(bodyweight=(_PLANK,)),
        MovementPattern.ROTATION: PatternThresholds(),
        MovementPattern.CARRY: PatternThresholds(
            load=LoadThreshold("farmers_carry_1rm", "Farmer's Carry", 1.5, 2.0, 1.0),
        ),
        MovementPattern.CARDIO: PatternThresholds(bodyweight=(_MILE,)),
    })
)


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ThresholdConfigError(f"{where}: expected a number, got {value!r}")
    return float(value)


def _apply_overrides(item, data: Mapping, where: str, allowed: tuple[str, ...]):
    if not isinstance(data, Mapping):
        raise ThresholdConfigError(f"{where}: expected a mapping")
    changes = {}
    for key, value in data.items():
        if key not in allowed:
            raise ThresholdConfigError(f"{where}: unknown key '{key}'")
        changes[key] = _number(value, f"{where}.{key}")
    return replace(item, **changes)


def build_thresholds(
    data: Mapping[str, Any], base: ThresholdTable = DEFAULT_THRESHOLDS
) -> ThresholdTable:
    """Build a new table from ``base`` with the numbers in ``data`` replaced.

    ``data`` is keyed by pattern value, e.g.::

        squat:
          load: {intermediate: 1.25, advanced: 1.75}
          bodyweight:
            squats: {intermediate: 20}
    """
    patterns = dict(base.patterns)
    for key, section in data.items():
        try:
            pattern = MovementPattern(key)
        except ValueError:
            raise ThresholdConfigError(f"Unknown movement pattern '{key}'") from None
        if not isinstance(section, Mapping):
            raise ThresholdConfigError(f"{key}: expected a mapping")

        current = patterns[pattern]
        load = current.load
        if "load" in section:
            if load is None:
                raise ThresholdConfigError(f"{key}: pattern has no load test")
            load = _apply_overrides(
                load,
                section["load"],
                f"{key}.load",
                ("intermediate", "advanced", "beginner_below"),
            )

        overrides = section.get("bodyweight") or {}
        if not isinstance(overrides, Mapping):
            raise ThresholdConfigError(f"{key}.bodyweight: expected a mapping")
        bodyweight = list(current.bodyweight)
        for metric, values in overrides.items():
            index = next(
                (i for i, t in enumerate(bodyweight) if t.metric == metric), None
            )
            if index is None:
                raise ThresholdConfigError(f"{key}: no bodyweight test '{metric}'")
            bodyweight[index] = _apply_overrides(
                bodyweight[index],
                values,
                f"{key}.bodyweight.{metric}",
                ("intermediate", "advanced"),
            )

        patterns[pattern] = PatternThresholds(bodyweight=tuple(bodyweight), load=load)

    return ThresholdTable(patterns=MappingProxyType(patterns))


def load_thresholds(path: Path) -> ThresholdTable:
    """Load a threshold override file into a new immutable table."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ThresholdConfigError(f"Cannot read threshold file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ThresholdConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, Mapping):
        raise ThresholdConfigError(f"{path}: top level must be a mapping of patterns")

    sections = data.get("thresholds", data)
    if not isinstance(sections, Mapping):
        raise ThresholdConfigError(f"{path}: 'thresholds' must be a mapping of patterns")
    table = build_thresholds(sections)
    logger.info("thresholds_loaded", path=str(path), patterns=sorted(sections))
    return table
