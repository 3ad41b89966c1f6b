"""Fitness assessment and body profile models."""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime

from ..utils.units import to_kg
from .patterns import MovementPattern, SkillLevel, UnitPreference

# Keys used by the storage layer's assessment records, mapped to field names
STORED_FIELD_NAMES: dict[str, str] = {
    "pushups": "pushups",
    "pikePushups": "pike_pushups",
    "pullups": "pullups",
    "squats": "squats",
    "walkingLunges": "walking_lunges",
    "singleLegRdl": "single_leg_rdl",
    "plankHold": "plank_hold_seconds",
    "mileTime": "mile_time_minutes",
    "squat1rm": "squat_1rm",
    "deadlift1rm": "deadlift_1rm",
    "benchPress1rm": "bench_press_1rm",
    "overheadPress1rm": "overhead_press_1rm",
    "barbellRow1rm": "barbell_row_1rm",
    "dumbbellLunge1rm": "dumbbell_lunge_1rm",
    "farmersCarry1rm": "farmers_carry_1rm",
    "experienceLevel": "experience_level",
    "testDate": "tested_at",
}

# Override columns in stored records; lowerBody covers both leg patterns
STORED_OVERRIDE_FIELDS: dict[str, tuple[MovementPattern, ...]] = {
    "horizontalPushOverride": (MovementPattern.HORIZONTAL_PUSH,),
    "verticalPushOverride": (MovementPattern.VERTICAL_PUSH,),
    "verticalPullOverride": (MovementPattern.VERTICAL_PULL,),
    "horizontalPullOverride": (MovementPattern.HORIZONTAL_PULL,),
    "squatOverride": (MovementPattern.SQUAT,),
    "lungeOverride": (MovementPattern.LUNGE,),
    "lowerBodyOverride": (MovementPattern.SQUAT, MovementPattern.LUNGE),
    "hingeOverride": (MovementPattern.HINGE,),
    "coreOverride": (MovementPattern.CORE,),
    "rotationOverride": (MovementPattern.ROTATION,),
    "carryOverride": (MovementPattern.CARRY,),
    "cardioOverride": (MovementPattern.CARDIO,),
}


@dataclass(frozen=True)
class BodyProfile:
    """Body weight and the unit it (and every load test) is entered in."""

    weight: float | None = None
    unit_preference: UnitPreference = UnitPreference.IMPERIAL

    @property
    def weight_kg(self) -> float | None:
        """Body weight in kg, or None when unknown."""
        if self.weight is None or self.weight <= 0:
            return None
        return to_kg(self.weight, self.unit_preference)


@dataclass(frozen=True)
class Assessment:
    """A point-in-time fitness test snapshot.

    ``None`` on a test field means the test was not attempted. Load tests
    are in the user's preferred unit. Assessments are never edited; a new
    override produces a superseding snapshot via :meth:`with_override`.
    """

    # Bodyweight tests
    pushups: int | None = None
    pike_pushups: int | None = None
    pullups: int | None = None
    squats: int | None = None
    walking_lunges: int | None = None
    single_leg_rdl: int | None = None
    plank_hold_seconds: float | None = None
    mile_time_minutes: float | None = None
    # Load tests
    squat_1rm: float | None = None
    deadlift_1rm: float | None = None
    bench_press_1rm: float | None = None
    overhead_press_1rm: float | None = None
    barbell_row_1rm: float | None = None
    dumbbell_lunge_1rm: float | None = None
    farmers_carry_1rm: float | None = None
    experience_level: SkillLevel | None = None  # self-reported
    overrides: dict[MovementPattern, SkillLevel] = field(default_factory=dict)
    tested_at: datetime | None = None
    id: str | None = None

    def value_of(self, field_name: str) -> float | None:
        """Look up a test result by field name."""
        return getattr(self, field_name)

    def override_for(self, pattern: MovementPattern) -> SkillLevel | None:
        return self.overrides.get(pattern)

    def with_override(self, pattern: MovementPattern, level: SkillLevel) -> "Assessment":
        """Return a new assessment carrying a manual override for ``pattern``.

        The value is stored as given; raising-only semantics are applied
        when levels are computed.
        """
        overrides = dict(self.overrides)
        overrides[pattern] = level
        return replace(self, overrides=overrides, id=None)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        data = {}
        for f in fields(self):
            if f.name in ("overrides", "experience_level", "tested_at", "id"):
                continue
            data[f.name] = getattr(self, f.name)
        data["experience_level"] = (
            self.experience_level.value if self.experience_level else None
        )
        data["overrides"] = {p.value: lvl.value for p, lvl in self.overrides.items()}
        data["tested_at"] = self.tested_at.isoformat() if self.tested_at else None
        return data

    @classmethod
    def from_dict(cls, data: dict, id: str | None = None) -> "Assessment":
        """Create from dictionary.

        Accepts both the snake_case keys written by :meth:`to_dict` and the
        camelCase keys of stored assessment records.
        """
        known = {f.name for f in fields(cls)}
        values: dict = {}
        overrides: dict[MovementPattern, SkillLevel] = {}

        for key, value in data.items():
            if key in STORED_OVERRIDE_FIELDS:
                level = SkillLevel.parse(value)
                if level is not None:
                    for pattern in STORED_OVERRIDE_FIELDS[key]:
                        overrides[pattern] = level
                continue
            name = STORED_FIELD_NAMES.get(key, key)
            if name in known and name not in ("overrides", "id"):
                values[name] = value

        for key, value in (data.get("overrides") or {}).items():
            level = SkillLevel.parse(value)
            if level is not None:
                overrides[MovementPattern(key)] = level

        values["experience_level"] = SkillLevel.parse(values.get("experience_level"))

        tested_at = values.get("tested_at")
        if isinstance(tested_at, str):
            values["tested_at"] = datetime.fromisoformat(tested_at)

        return cls(id=id if id is not None else data.get("id"), overrides=overrides, **values)
