"""Manual level override command."""

import json
from pathlib import Path

import click

from ..engine.classifier import compute_levels, next_level
from ..engine.targets import get_progression_targets
from ..models.patterns import MovementPattern, SkillLevel
from .base import (
    build_profile,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    load_assessment,
    profile_options,
    resolve_thresholds,
)


@click.command()
@click.argument("assessment_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("pattern_value", metavar="PATTERN", type=click.Choice([p.value for p in MovementPattern]))
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the new assessment here instead of stdout",
)
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@profile_options
@click.pass_context
def override(
    ctx: click.Context,
    assessment_file: Path,
    pattern_value: str,
    output_file: Path | None,
    yes: bool,
    weight: float | None,
    unit: str | None,
    thresholds_file: Path | None,
):
    """Raise one pattern to the next level by manual override.

    Shows the targets normally required for the next level, then writes a
    new assessment record carrying the override. The original file is left
    untouched.
    """
    pattern = MovementPattern(pattern_value)
    profile = build_profile(weight, unit)
    thresholds = resolve_thresholds(ctx, thresholds_file)
    assessment = load_assessment(ctx, assessment_file)

    current = compute_levels(assessment, profile, thresholds=thresholds)[pattern]
    target_level = next_level(current)
    if target_level is None:
        echo_error(f"{pattern.label} is already {SkillLevel.ADVANCED.value}.")
        ctx.exit(1)

    target = get_progression_targets(
        profile.weight, profile.unit_preference, thresholds=thresholds
    )[pattern]
    bodyweight, weighted = target.requirements_for(target_level)

    echo_warning(
        f"Overriding {pattern.label} from {current.value} to {target_level.value} "
        "skips the usual test requirements:"
    )
    click.echo(f"  {target.bodyweight_test}: {bodyweight}", err=True)
    if weighted is not None:
        click.echo(f"  {target.weighted_test}: {weighted}", err=True)

    if not yes and not click.confirm("Apply override?", default=False, err=True):
        echo_info("Override cancelled.")
        return

    updated = assessment.with_override(pattern, target_level)
    payload = json.dumps(updated.to_dict(), indent=2)

    if output_file is None:
        click.echo(payload)
        return

    output_file.write_text(payload + "\n", encoding="utf-8")
    echo_success(f"Wrote overridden assessment to {output_file}")
