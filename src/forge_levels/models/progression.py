"""Progression target model."""

from dataclasses import dataclass

from .patterns import SkillLevel

NOT_APPLICABLE = "N/A"


@dataclass(frozen=True)
class ProgressionTarget:
    """What it takes to reach each level of one movement pattern.

    Text fields are ready for display; the load values are the unrounded
    targets in the user's unit (0 when body weight is unknown).
    """

    bodyweight_test: str
    bodyweight_intermediate: str
    bodyweight_advanced: str
    weighted_test: str = NOT_APPLICABLE
    weighted_intermediate: str = NOT_APPLICABLE
    weighted_advanced: str = NOT_APPLICABLE
    intermediate_load: float | None = None
    advanced_load: float | None = None

    @property
    def has_weighted_test(self) -> bool:
        return self.weighted_test != NOT_APPLICABLE

    def requirements_for(self, level: SkillLevel) -> tuple[str, str | None]:
        """Return the (bodyweight, weighted) targets to reach ``level``."""
        if level is SkillLevel.ADVANCED:
            weighted = self.weighted_advanced
            bodyweight = self.bodyweight_advanced
        else:
            weighted = self.weighted_intermediate
            bodyweight = self.bodyweight_intermediate
        return bodyweight, weighted if self.has_weighted_test else None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "bodyweight_test": self.bodyweight_test,
            "bodyweight_intermediate": self.bodyweight_intermediate,
            "bodyweight_advanced": self.bodyweight_advanced,
            "weighted_test": self.weighted_test,
            "weighted_intermediate": self.weighted_intermediate,
            "weighted_advanced": self.weighted_advanced,
        }
