"""Exercise prioritization commands."""

from pathlib import Path

import click

from ..engine.classifier import compute_levels
from ..engine.difficulty import (
    build_allowed_map,
    is_exercise_allowed,
    sort_exercises_by_difficulty_priority,
)
from ..models.exercises import COMMON_EXERCISES, Exercise
from ..models.patterns import SkillLevel
from ..utils.exercise_utils import categorize_exercises_by_pattern, with_reference_pattern
from .base import (
    build_profile,
    echo_error,
    echo_info,
    format_table,
    load_assessment,
    load_json_file,
    profile_options,
    resolve_thresholds,
)


def _load_catalog(ctx: click.Context, path: Path | None) -> list[Exercise]:
    if path is None:
        return list(COMMON_EXERCISES)

    data = load_json_file(ctx, path)
    if isinstance(data, dict):
        data = data.get("exercises", [])
    if not isinstance(data, list):
        echo_error(f"{path}: expected a list of exercises")
        ctx.exit(1)

    try:
        exercises = [Exercise.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError) as e:
        echo_error(f"{path}: invalid exercise entry: {e}")
        ctx.exit(1)

    return [with_reference_pattern(exercise) for exercise in exercises]


@click.command(name="sort")
@click.argument("assessment_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--catalog",
    "catalog_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON list of exercises (defaults to the built-in catalog)",
)
@click.option(
    "--fallback-level",
    type=click.Choice([lvl.value for lvl in SkillLevel]),
    default=None,
    help="Level for exercises outside the assessed patterns",
)
@click.option("--by-pattern", is_flag=True, help="Group output by movement pattern")
@profile_options
@click.pass_context
def sort_exercises(
    ctx: click.Context,
    assessment_file: Path,
    catalog_file: Path | None,
    fallback_level: str | None,
    by_pattern: bool,
    weight: float | None,
    unit: str | None,
    thresholds_file: Path | None,
):
    """Order a catalog by difficulty priority for an assessment.

    Exercises the user has not unlocked are listed last and marked as
    locked. Without --fallback-level, the self-reported experience level
    from the assessment is used for unassessed patterns.

    Catalog entries without a movement pattern take the pattern of the
    matching built-in exercise.
    """
    profile = build_profile(weight, unit)
    thresholds = resolve_thresholds(ctx, thresholds_file)
    assessment = load_assessment(ctx, assessment_file)
    catalog = _load_catalog(ctx, catalog_file)

    if fallback_level:
        fallback = SkillLevel(fallback_level)
    else:
        fallback = assessment.experience_level or SkillLevel.BEGINNER

    allowed_map = build_allowed_map(
        compute_levels(assessment, profile, thresholds=thresholds)
    )
    ordered = sort_exercises_by_difficulty_priority(catalog, allowed_map, fallback)

    if not ordered:
        echo_info("No exercises to sort.")
        return

    def row(exercise: Exercise) -> list[str]:
        unlocked = is_exercise_allowed(exercise, allowed_map, fallback)
        return [
            exercise.name,
            exercise.movement_pattern.value if exercise.movement_pattern else "-",
            exercise.difficulty.value,
            "" if unlocked else "locked",
        ]

    headers = ["Exercise", "Pattern", "Difficulty", ""]
    click.echo()
    if by_pattern:
        for pattern, exercises in categorize_exercises_by_pattern(ordered).items():
            if not exercises:
                continue
            click.echo(click.style(pattern.label if pattern else "Other", bold=True))
            click.echo(format_table(headers, [row(e) for e in exercises]))
            click.echo()
    else:
        click.echo(format_table(headers, [row(e) for e in ordered]))
