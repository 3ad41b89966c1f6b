"""Movement patterns, skill levels and difficulty tiers."""

from enum import Enum


class MovementPattern(str, Enum):
    """Fundamental movement patterns, each assessed independently."""

    HORIZONTAL_PUSH = "horizontal_push"
    VERTICAL_PUSH = "vertical_push"
    VERTICAL_PULL = "vertical_pull"
    HORIZONTAL_PULL = "horizontal_pull"
    SQUAT = "squat"
    LUNGE = "lunge"
    HINGE = "hinge"
    CORE = "core"
    ROTATION = "rotation"
    CARRY = "carry"
    CARDIO = "cardio"

    @property
    def label(self) -> str:
        """Human-readable pattern name."""
        return self.value.replace("_", " ").title()


class SkillLevel(str, Enum):
    """Per-pattern skill level.

    Ordering operators compare by rank, so ``max()`` and ``<`` follow
    beginner < intermediate < advanced rather than alphabetical order.
    """

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        return _LEVEL_RANKS[self.value]

    def __lt__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: "str | SkillLevel | None") -> "SkillLevel | None":
        """Parse a stored level value, returning None for anything unrecognized."""
        if value is None:
            return None
        if isinstance(value, SkillLevel):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class DifficultyTier(str, Enum):
    """Difficulty tier declared on a catalog exercise."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        return _LEVEL_RANKS[self.value]

    @classmethod
    def _missing_(cls, value):
        # Older catalog rows use "basic" for the entry tier
        if isinstance(value, str) and value.strip().lower() == "basic":
            return cls.BEGINNER
        return None


class UnitPreference(str, Enum):
    """Unit system a user enters weights in."""

    IMPERIAL = "imperial"  # lbs
    METRIC = "metric"  # kg

    @property
    def weight_label(self) -> str:
        return "lbs" if self is UnitPreference.IMPERIAL else "kg"


_LEVEL_RANKS = {
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
}
