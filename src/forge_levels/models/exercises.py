"""Exercise candidates surfaced to the program generator."""

from dataclasses import dataclass, field

from .patterns import DifficultyTier, MovementPattern


@dataclass
class Exercise:
    """A catalog exercise with its pattern and declared difficulty."""

    name: str
    movement_pattern: MovementPattern | None
    difficulty: DifficultyTier = DifficultyTier.BEGINNER
    equipment: list[str] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "movement_pattern": self.movement_pattern.value if self.movement_pattern else None,
            "difficulty": self.difficulty.value,
            "equipment": self.equipment,
            "aliases": self.aliases,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary.

        Patterns outside the assessed set (e.g. isolation work) load with no
        pattern; a missing difficulty is treated as the entry tier.
        """
        pattern = data.get("movement_pattern", data.get("movementPattern"))
        try:
            movement_pattern = MovementPattern(pattern) if pattern else None
        except ValueError:
            movement_pattern = None

        difficulty = data.get("difficulty")
        return cls(
            id=id if id is not None else data.get("id"),
            name=data["name"],
            movement_pattern=movement_pattern,
            difficulty=DifficultyTier(difficulty) if difficulty else DifficultyTier.BEGINNER,
            equipment=data.get("equipment") or [],
            aliases=data.get("aliases") or [],
        )


# Reference catalog used by the CLI demo and tests
COMMON_EXERCISES: list[Exercise] = [
    # Horizontal push
    Exercise(
        name="Incline Push Up",
        movement_pattern=MovementPattern.HORIZONTAL_PUSH,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["bodyweight"],
        aliases=["Incline Pushup", "Elevated Push-up"],
    ),
    Exercise(
        name="Push Up",
        movement_pattern=MovementPattern.HORIZONTAL_PUSH,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["bodyweight"],
        aliases=["Pushup", "Press-up", "Push-up"],
    ),
    Exercise(
        name="Bench Press",
        movement_pattern=MovementPattern.HORIZONTAL_PUSH,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["barbell"],
        aliases=["Flat Bench Press", "Barbell Bench Press", "BB Bench"],
    ),
    Exercise(
        name="Archer Push Up",
        movement_pattern=MovementPattern.HORIZONTAL_PUSH,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["bodyweight"],
        aliases=["Archer Pushup"],
    ),
    # Vertical push
    Exercise(
        name="Pike Push Up",
        movement_pattern=MovementPattern.VERTICAL_PUSH,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["bodyweight"],
        aliases=["Pike Pushup"],
    ),
    Exercise(
        name="Overhead Press",
        movement_pattern=MovementPattern.VERTICAL_PUSH,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["barbell"],
        aliases=["OHP", "Military Press", "Standing Press"],
    ),
    Exercise(
        name="Handstand Push Up",
        movement_pattern=MovementPattern.VERTICAL_PUSH,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["bodyweight"],
        aliases=["HSPU"],
    ),
    # Vertical pull
    Exercise(
        name="Lat Pulldown",
        movement_pattern=MovementPattern.VERTICAL_PULL,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["cable"],
        aliases=["Cable Pulldown"],
    ),
    Exercise(
        name="Pull Up",
        movement_pattern=MovementPattern.VERTICAL_PULL,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["bodyweight"],
        aliases=["Pullup", "Pull-up"],
    ),
    Exercise(
        name="Weighted Pull Up",
        movement_pattern=MovementPattern.VERTICAL_PULL,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["bodyweight", "dumbbells"],
    ),
    # Horizontal pull
    Exercise(
        name="Inverted Row",
        movement_pattern=MovementPattern.HORIZONTAL_PULL,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["bodyweight"],
        aliases=["Australian Pull-up", "Body Row"],
    ),
    Exercise(
        name="Barbell Row",
        movement_pattern=MovementPattern.HORIZONTAL_PULL,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["barbell"],
        aliases=["Bent Over Row", "BB Row"],
    ),
    Exercise(
        name="Pendlay Row",
        movement_pattern=MovementPattern.HORIZONTAL_PULL,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["barbell"],
    ),
    # Squat
    Exercise(
        name="Goblet Squat",
        movement_pattern=MovementPattern.SQUAT,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["dumbbells"],
        aliases=["DB Goblet Squat"],
    ),
    Exercise(
        name="Back Squat",
        movement_pattern=MovementPattern.SQUAT,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["barbell"],
        aliases=["Barbell Squat", "BB Squat", "Squat"],
    ),
    Exercise(
        name="Pistol Squat",
        movement_pattern=MovementPattern.SQUAT,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["bodyweight"],
    ),
    # Lunge
    Exercise(
        name="Reverse Lunge",
        movement_pattern=MovementPattern.LUNGE,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["bodyweight"],
    ),
    Exercise(
        name="Walking Lunge",
        movement_pattern=MovementPattern.LUNGE,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["dumbbells"],
        aliases=["DB Lunge", "Dumbbell Lunge"],
    ),
    Exercise(
        name="Bulgarian Split Squat",
        movement_pattern=MovementPattern.LUNGE,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["dumbbells"],
        aliases=["BSS", "RFESS", "Rear Foot Elevated Split Squat"],
    ),
    # Hinge
    Exercise(
        name="Glute Bridge",
        movement_pattern=MovementPattern.HINGE,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["bodyweight"],
    ),
    Exercise(
        name="Romanian Deadlift",
        movement_pattern=MovementPattern.HINGE,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["barbell"],
        aliases=["RDL", "Romanian DL"],
    ),
    Exercise(
        name="Deadlift",
        movement_pattern=MovementPattern.HINGE,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["barbell"],
        aliases=["Conventional Deadlift", "BB Deadlift"],
    ),
    # Core
    Exercise(
        name="Dead Bug",
        movement_pattern=MovementPattern.CORE,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["bodyweight"],
    ),
    Exercise(
        name="Plank",
        movement_pattern=MovementPattern.CORE,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["bodyweight"],
        aliases=["Front Plank", "Forearm Plank"],
    ),
    Exercise(
        name="Ab Wheel Rollout",
        movement_pattern=MovementPattern.CORE,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["bodyweight"],
        aliases=["Ab Rollout", "Ab Wheel"],
    ),
    # Rotation
    Exercise(
        name="Pallof Press",
        movement_pattern=MovementPattern.ROTATION,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["cable"],
    ),
    Exercise(
        name="Russian Twist",
        movement_pattern=MovementPattern.ROTATION,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["bodyweight"],
    ),
    Exercise(
        name="Landmine Rotation",
        movement_pattern=MovementPattern.ROTATION,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["barbell"],
    ),
    # Carry
    Exercise(
        name="Suitcase Carry",
        movement_pattern=MovementPattern.CARRY,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["dumbbells"],
    ),
    Exercise(
        name="Farmer's Carry",
        movement_pattern=MovementPattern.CARRY,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["dumbbells"],
        aliases=["Farmers Walk", "Farmer Carry"],
    ),
    Exercise(
        name="Overhead Carry",
        movement_pattern=MovementPattern.CARRY,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["kettlebell"],
    ),
    # Cardio
    Exercise(
        name="Brisk Walk",
        movement_pattern=MovementPattern.CARDIO,
        difficulty=DifficultyTier.BEGINNER,
        equipment=["bodyweight"],
    ),
    Exercise(
        name="Jump Rope",
        movement_pattern=MovementPattern.CARDIO,
        difficulty=DifficultyTier.INTERMEDIATE,
        equipment=["jump_rope"],
    ),
    Exercise(
        name="Burpee",
        movement_pattern=MovementPattern.CARDIO,
        difficulty=DifficultyTier.ADVANCED,
        equipment=["bodyweight"],
    ),
]
